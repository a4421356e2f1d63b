# Global configuration for the threshold secret sharing library and demo


class Config:
    # Shamir field: Mersenne prime M521, fits 64-byte secrets
    SHAMIR_PRIME = 2**521 - 1
    # secp256k1 field prime, 256-bit alternative
    P256_PRIME = 2**256 - 2**32 - 977

    # Feldman group: RFC 3526 2048-bit MODP safe prime, q = (p-1)/2
    FELDMAN_P = int(
        "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
        "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
        "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
        "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
        "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D"
        "C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
        "83655D23DCA3AD961C62F356208552BB9ED529077096966D"
        "670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
        "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9"
        "DE2BCBF6955817183995497CEA956AE515D2261898FA0510"
        "15728E5A8AACAA68FFFFFFFFFFFFFFFF",
        16,
    )
    FELDMAN_Q = (FELDMAN_P - 1) // 2
    FELDMAN_G = 4  # a square mod p, so its order is q

    # Demo parameters
    DEFAULT_THRESHOLD = 3
    DEFAULT_TOTAL_SHARES = 5
    DEMO_SHAMIR_SECRET = 22773311
    DEMO_FELDMAN_SECRET = 123456789

    # Logging
    LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Research parameters
    PERFORMANCE_SAMPLES = 100  # For benchmarking

    @classmethod
    def feldman_group(cls):
        return cls.FELDMAN_P, cls.FELDMAN_Q, cls.FELDMAN_G
