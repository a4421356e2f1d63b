"""Secret-embedding polynomials over a prime field.

A polynomial is a plain list of coefficients ``[a_0, a_1, ..., a_{t-1}]`` with
the secret as ``a_0``. The random source is injected: anything exposing
``randrange(stop)`` works. The default is ``secrets.SystemRandom()``; passing a
seeded ``random.Random`` makes splits reproducible in tests but gives no
security, and nothing here can detect that.
"""
import secrets

from .errors import InvalidParameters


def default_rng():
    return secrets.SystemRandom()


def generate(secret: int, threshold: int, modulus: int, rng=None) -> list:
    """Random polynomial of degree threshold-1 with the secret as constant term"""
    if threshold < 1:
        raise InvalidParameters(f"Threshold must be at least 1, got {threshold}")
    if not 0 <= secret < modulus:
        raise InvalidParameters("Secret must lie in [0, modulus)")
    rng = rng or default_rng()
    return [secret] + [rng.randrange(modulus) for _ in range(threshold - 1)]


def evaluate(coefficients: list, x: int, modulus: int) -> int:
    """Evaluate polynomial at x (Horner's method)"""
    result = 0
    for coefficient in reversed(coefficients):
        result = (result * x + coefficient) % modulus
    return result
