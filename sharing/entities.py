from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend

from .errors import InvalidParameters


def _require_int(value, what):
    # bool is an int subclass but never a field element
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidParameters(f"{what} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Share:
    """One participant's point (index, value) on the sharing polynomial"""
    index: int
    value: int

    def __post_init__(self):
        _require_int(self.index, "Share index")
        _require_int(self.value, "Share value")

    def __iter__(self):
        # Unpacks like the (x, y) tuples used elsewhere
        yield self.index
        yield self.value

    @classmethod
    def coerce(cls, share):
        if isinstance(share, cls):
            return share
        index, value = share
        return cls(index, value)


class CommitmentSet:
    """Public Feldman commitments g^a_k mod p, ordered by coefficient k"""

    def __init__(self, values):
        self._values = tuple(_require_int(v, "Commitment") for v in values)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __getitem__(self, k):
        return self._values[k]

    def __eq__(self, other):
        if isinstance(other, CommitmentSet):
            return self._values == other._values
        return NotImplemented

    def __hash__(self):
        return hash(self._values)

    def __repr__(self):
        return f"CommitmentSet({list(self._values)!r})"

    def replace(self, k: int, value: int) -> "CommitmentSet":
        """Copy with commitment k swapped out"""
        values = list(self._values)
        values[k] = value
        return CommitmentSet(values)

    def fingerprint(self) -> str:
        """SHA-256 over the fixed-width big-endian commitments, as hex"""
        if any(v < 0 for v in self._values):
            raise InvalidParameters("Cannot fingerprint negative commitments")
        width = max((v.bit_length() + 7) // 8 for v in self._values) if self._values else 0
        digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
        digest.update(len(self._values).to_bytes(4, 'big'))
        digest.update(width.to_bytes(4, 'big'))
        for value in self._values:
            digest.update(value.to_bytes(width, 'big'))
        return digest.finalize().hex()
