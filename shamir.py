import logging

import config
from sharing import polynomial
from sharing.entities import Share
from sharing.errors import InvalidParameters
from sharing.interpolation import interpolate_at_zero

logger = logging.getLogger(__name__)


def check_threshold(threshold: int, total_shares: int, modulus: int):
    if threshold < 1:
        raise InvalidParameters(f"Threshold must be at least 1, got {threshold}")
    if threshold > total_shares:
        raise InvalidParameters(
            f"Threshold {threshold} cannot be greater than the number of shares {total_shares}"
        )
    # index == modulus would evaluate to f(0), the secret itself
    if total_shares >= modulus:
        raise InvalidParameters(
            f"Number of shares {total_shares} must be smaller than the modulus {modulus}"
        )


class ShamirSecretSharing:
    """Implementation of Shamir's Secret Sharing scheme

    Shares are points (i, f(i)) for i = 1..total_shares on a random polynomial
    of degree threshold-1 over GF(prime) whose constant term is the secret.
    """

    def __init__(self, threshold: int, total_shares: int, prime: int = None, rng=None):
        self._prime = prime if prime is not None else config.Config.SHAMIR_PRIME
        if self._prime < 2:
            raise InvalidParameters(f"Prime must be at least 2, got {self._prime}")
        check_threshold(threshold, total_shares, self._prime)
        self._threshold = threshold
        self._total_shares = total_shares
        self._rng = rng

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def total_shares(self) -> int:
        return self._total_shares

    @property
    def prime(self) -> int:
        return self._prime

    def split_secret(self, secret: int) -> list:
        """Split secret into total_shares shares"""
        if not 0 <= secret < self._prime:
            raise InvalidParameters("Secret is too large for the chosen prime")

        coefficients = polynomial.generate(secret, self._threshold, self._prime, self._rng)
        shares = [
            Share(x, polynomial.evaluate(coefficients, x, self._prime))
            for x in range(1, self._total_shares + 1)
        ]
        logger.debug("Split secret into %d shares, threshold %d", len(shares), self._threshold)
        return shares

    def reconstruct_secret(self, shares) -> int:
        """Recover secret from at least threshold distinct shares"""
        shares = list(shares)
        secret = interpolate_at_zero(shares, self._threshold, self._prime)
        logger.debug("Reconstructed secret from %d shares", len(shares))
        return secret
