# ----- main.py -----
import argparse
import logging
import sys

from tabulate import tabulate

import config
from feldman import FeldmanVSS
from shamir import ShamirSecretSharing
from sharing.entities import Share
from sharing.errors import SecretSharingError

logger = logging.getLogger("main")


# --- Helper Functions ---
def print_header(title):
    print("\n" + "=" * 50)
    print(f"{title}")
    print("=" * 50)


def print_shares(shares, verdicts=None):
    rows = []
    for share in shares:
        row = [share.index, str(share.value)]
        if verdicts is not None:
            row.append("Valid" if verdicts[share.index] else "Invalid")
        rows.append(row)
    headers = ["Index", "Value"] + (["Verification"] if verdicts is not None else [])
    print(tabulate(rows, headers=headers, disable_numparse=True))


def setup_logging(verbose=False):
    level = logging.DEBUG if verbose else config.Config.LOG_LEVEL
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.Config.LOG_FORMAT))
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)


# --- Demos ---
def demo_shamir_secret_sharing(threshold, total_shares, secret):
    print_header("Demonstrating Shamir's Secret Sharing")
    print(f"Original Secret: {secret}")

    sharer = ShamirSecretSharing(threshold, total_shares)
    shares = sharer.split_secret(secret)
    print(f"\nGenerated {len(shares)} shares:")
    print_shares(shares)

    reconstructed = sharer.reconstruct_secret(shares[:threshold])
    print(f"\nReconstructed secret from {threshold} shares: {reconstructed}")
    if reconstructed != secret:
        raise RuntimeError("Reconstruction failed!")
    return reconstructed


def demo_verifiable_secret_sharing(threshold, total_shares, secret):
    print_header("Demonstrating Verifiable Secret Sharing")
    print(f"Original Secret: {secret}")

    p, q, g = config.Config.feldman_group()
    vss = FeldmanVSS(p, q, g, threshold, total_shares)
    shares, commitments = vss.split_secret(secret)
    print(f"\nCommitment fingerprint: {commitments.fingerprint()}")

    verdicts = {share.index: vss.verify_share(share, commitments) for share in shares}
    print("\nGenerated shares:")
    print_shares(shares, verdicts)

    received = list(shares)
    if total_shares > threshold:
        # Corrupt the first share to show that verification catches it
        tampered = Share(shares[0].index, (shares[0].value + 1) % q)
        print(f"\nTampered share {tampered.index} verification: "
              f"{'Valid' if vss.verify_share(tampered, commitments) else 'Invalid'}")
        received[0] = tampered

    verified = [share for share in received if vss.verify_share(share, commitments)]
    print(f"Shares passing verification: {[share.index for share in verified]}")

    reconstructed = vss.reconstruct_secret(verified)
    print(f"\nReconstructed secret from {len(verified)} verified shares: {reconstructed}")
    if reconstructed != secret:
        raise RuntimeError("Reconstruction failed!")
    return reconstructed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Threshold secret sharing demo")
    parser.add_argument("scheme", nargs="?", choices=["shamir", "feldman", "all"], default="all",
                        help="Which scheme to demonstrate (default: all)")
    parser.add_argument("-t", "--threshold", type=int, default=config.Config.DEFAULT_THRESHOLD,
                        help=f"Shares needed to reconstruct (default: {config.Config.DEFAULT_THRESHOLD})")
    parser.add_argument("-n", "--num-shares", type=int, default=config.Config.DEFAULT_TOTAL_SHARES,
                        help=f"Number of shares to generate (default: {config.Config.DEFAULT_TOTAL_SHARES})")
    parser.add_argument("--secret", type=int, default=None,
                        help="Secret to share (default: a fixed demo value per scheme)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args(argv)

    if args.threshold < 1:
        parser.error("Threshold must be at least 1.")
    if args.threshold > args.num_shares:
        parser.error("Threshold cannot be greater than the number of shares.")
    setup_logging(args.verbose)

    if args.threshold == 1 and args.num_shares > 1:
        # Legal, but the polynomial is constant: every share is the secret
        logger.warning("Threshold 1 hands the secret itself to every participant")

    try:
        if args.scheme in ("shamir", "all"):
            secret = config.Config.DEMO_SHAMIR_SECRET if args.secret is None else args.secret
            demo_shamir_secret_sharing(args.threshold, args.num_shares, secret)
        if args.scheme in ("feldman", "all"):
            secret = config.Config.DEMO_FELDMAN_SECRET if args.secret is None else args.secret
            demo_verifiable_secret_sharing(args.threshold, args.num_shares, secret)
    except SecretSharingError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
