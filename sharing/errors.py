class SecretSharingError(Exception):
    """Base class for every error raised by the sharing layers"""


class InvalidParameters(SecretSharingError, ValueError):
    """Threshold, share count, field parameters or secret are out of range"""


class InsufficientShares(SecretSharingError, ValueError):
    """Fewer shares than the threshold were supplied for reconstruction"""

    def __init__(self, needed: int, got: int):
        super().__init__(f"Not enough shares. Need {needed}, got {got}")
        self.needed = needed
        self.got = got


class DuplicateShareError(SecretSharingError, ValueError):
    """Two supplied shares carry the same index"""

    def __init__(self, index: int):
        super().__init__(f"Duplicate share index {index}")
        self.index = index


class MalformedCommitmentSetError(SecretSharingError, ValueError):
    """Commitment count does not match the threshold"""

    def __init__(self, expected: int, got: int):
        super().__init__(f"Expected {expected} commitments, got {got}")
        self.expected = expected
        self.got = got


class NonInvertibleElementError(SecretSharingError, ArithmeticError):
    """Modular inverse requested for an element sharing a factor with the modulus"""

    def __init__(self, value: int, modulus: int):
        super().__init__(f"{value} has no inverse modulo {modulus}")
        self.value = value
        self.modulus = modulus
