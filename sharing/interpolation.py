import logging

from .entities import Share
from .errors import DuplicateShareError, InsufficientShares
from .field import mod_add, mod_inverse, mod_mul, mod_sub

logger = logging.getLogger(__name__)


def check_shares(shares, threshold: int, modulus: int) -> list:
    """Normalise shares and reject short or duplicated input.

    Indices are compared modulo the field, so 1 and 1 + modulus count as the
    same point. Runs before any arithmetic, so a repeated index surfaces as
    DuplicateShareError instead of a zero denominator.
    """
    points = [Share.coerce(share) for share in shares]
    if len(points) < threshold:
        raise InsufficientShares(threshold, len(points))

    seen = set()
    for share in points:
        x = share.index % modulus
        if x in seen:
            raise DuplicateShareError(share.index)
        seen.add(x)
    return points


def interpolate_at_zero(shares, threshold: int, modulus: int) -> int:
    """Recover f(0) from at least threshold distinct points using Lagrange interpolation"""
    points = check_shares(shares, threshold, modulus)
    logger.debug("Interpolating at zero from indices %s", [p.index for p in points])

    secret = 0
    for j, (x_j, y_j) in enumerate(points):
        # Lagrange basis polynomial evaluated at 0
        numerator = 1
        denominator = 1
        for m, (x_m, _) in enumerate(points):
            if m == j:
                continue
            numerator = mod_mul(numerator, mod_sub(0, x_m, modulus), modulus)
            denominator = mod_mul(denominator, mod_sub(x_j, x_m, modulus), modulus)
        basis = mod_mul(numerator, mod_inverse(denominator, modulus), modulus)
        secret = mod_add(secret, mod_mul(y_j, basis, modulus), modulus)
    return secret
