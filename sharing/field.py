"""Modular arithmetic over an explicit modulus.

Every function takes the modulus as its last argument and returns a value
normalised into ``[0, modulus)``.
"""
from .errors import InvalidParameters, NonInvertibleElementError


def _check_modulus(modulus: int):
    if modulus < 2:
        raise InvalidParameters(f"Modulus must be at least 2, got {modulus}")


def mod_add(a: int, b: int, modulus: int) -> int:
    _check_modulus(modulus)
    return (a + b) % modulus


def mod_sub(a: int, b: int, modulus: int) -> int:
    _check_modulus(modulus)
    return (a - b) % modulus


def mod_mul(a: int, b: int, modulus: int) -> int:
    _check_modulus(modulus)
    return (a * b) % modulus


def mod_inverse(a: int, modulus: int) -> int:
    """Modular inverse using the extended Euclidean algorithm"""
    _check_modulus(modulus)
    value = a % modulus
    old_r, r = value, modulus
    old_s, s = 1, 0
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
    # old_r is gcd(a, modulus); zero input leaves it at modulus
    if old_r != 1:
        raise NonInvertibleElementError(a, modulus)
    return old_s % modulus


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """base**exponent mod modulus; negative exponents go through the inverse"""
    _check_modulus(modulus)
    if exponent < 0:
        return pow(mod_inverse(base, modulus), -exponent, modulus)
    return pow(base, exponent, modulus)
