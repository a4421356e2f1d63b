"""Feldman verifiable secret sharing.

The dealer splits a secret in Z_q exactly like Shamir and publishes
``C_k = g^a_k mod p`` for every coefficient ``a_k``. A share ``(i, y)`` is
consistent with the commitments iff::

    g^y == prod_k C_k^(i^k)   (mod p)

Reconstruction does not re-check anything. Callers must run every share
through :meth:`FeldmanVSS.verify_share` and drop the failures first; a
tampered share passed straight to :meth:`FeldmanVSS.reconstruct_secret`
produces a wrong secret with no error.
"""
import logging

from shamir import check_threshold
from sharing import polynomial
from sharing.entities import CommitmentSet, Share
from sharing.errors import InvalidParameters, MalformedCommitmentSetError
from sharing.field import mod_mul, mod_pow
from sharing.interpolation import interpolate_at_zero

logger = logging.getLogger(__name__)


def check_group(p: int, q: int, g: int):
    """Reject (p, q, g) unless g generates a subgroup of order q modulo p"""
    if p < 3:
        raise InvalidParameters(f"p must be an odd prime, got {p}")
    if q < 2:
        raise InvalidParameters(f"q must be a prime greater than 1, got {q}")
    if (p - 1) % q:
        raise InvalidParameters("q must divide p - 1")
    if not 1 < g < p:
        raise InvalidParameters("Generator must lie in (1, p)")
    if mod_pow(g, q, p) != 1:
        raise InvalidParameters("Generator does not have order q modulo p")


class FeldmanVSS:
    def __init__(self, p: int, q: int, g: int, threshold: int, total_shares: int, rng=None):
        check_group(p, q, g)
        check_threshold(threshold, total_shares, q)
        self._p = p
        self._q = q
        self._g = g
        self._threshold = threshold
        self._total_shares = total_shares
        self._rng = rng

    @property
    def p(self) -> int:
        return self._p

    @property
    def q(self) -> int:
        return self._q

    @property
    def g(self) -> int:
        return self._g

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def total_shares(self) -> int:
        return self._total_shares

    def split_secret(self, secret: int):
        """Split secret into shares mod q plus the commitment set

        Returns:
            (shares, commitments)
        """
        if not 0 <= secret < self._q:
            raise InvalidParameters("Secret must be less than q")

        coefficients = polynomial.generate(secret, self._threshold, self._q, self._rng)
        commitments = CommitmentSet(mod_pow(self._g, a, self._p) for a in coefficients)
        shares = [
            Share(i, polynomial.evaluate(coefficients, i, self._q))
            for i in range(1, self._total_shares + 1)
        ]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Dealt %d shares, threshold %d, commitments %s",
                len(shares), self._threshold, commitments.fingerprint()[:16],
            )
        return shares, commitments

    def verify_share(self, share, commitments) -> bool:
        """Check a share against the dealer's commitments.

        Returns False when the share is not on the committed polynomial.
        Raises MalformedCommitmentSetError when the commitment count is not
        the threshold.
        """
        if len(commitments) != self._threshold:
            raise MalformedCommitmentSetError(self._threshold, len(commitments))
        try:
            index, value = Share.coerce(share)
        except (TypeError, ValueError) as e:
            raise InvalidParameters(f"Not a share: {share!r}") from e

        if not 0 <= value < self._q:
            logger.warning("Share %d rejected: value outside [0, q)", index)
            return False

        expected = 1
        for k, commitment in enumerate(commitments):
            if not 0 < commitment < self._p:
                logger.warning("Share %d rejected: commitment %d outside (0, p)", index, k)
                return False
            # exponent arithmetic lives in Z_q since g has order q
            exponent = mod_pow(index, k, self._q)
            expected = mod_mul(expected, mod_pow(commitment, exponent, self._p), self._p)

        valid = mod_pow(self._g, value, self._p) == expected
        if not valid:
            logger.warning("Share %d failed commitment check", index)
        return valid

    def reconstruct_secret(self, shares) -> int:
        """Recover secret from at least threshold distinct, already verified shares"""
        shares = list(shares)
        secret = interpolate_at_zero(shares, self._threshold, self._q)
        logger.debug("Reconstructed secret from %d shares", len(shares))
        return secret
