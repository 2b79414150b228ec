from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidParameter


class HMACHashFunction(Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @classmethod
    def parse(cls, value: HMACHashFunction | str) -> HMACHashFunction:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidParameter(
            f"Unsupported HMAC hash function: {value!r} "
            f"(expected one of {', '.join(m.name for m in cls)})."
        )


def _require_positive_int(name: str, value: object) -> None:
    # bool is an int subclass; True must not pass as 1 iteration.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(f"{name} must be an integer.")
    if value < 1:
        raise InvalidParameter(f"{name} must be >= 1 (got {value}).")


@dataclass(frozen=True)
class DerivationParameters:
    """
    One fully specified password derivation request.

    Validation runs at construction, so an instance that exists is always
    safe to hand to the engine. `prf` also accepts the algorithm name as a
    string ("sha256", "SHA512", ...) and is stored as an HMACHashFunction.
    """

    master_secret: str
    password_hint: str
    prf: HMACHashFunction = HMACHashFunction.SHA256
    iterations: int = 500_000
    output_length: int = 9  # raw bytes, not Base64 characters

    def __post_init__(self) -> None:
        if not isinstance(self.master_secret, str) or len(self.master_secret) == 0:
            raise InvalidParameter("Master secret must be a non-empty string.")
        if not isinstance(self.password_hint, str) or len(self.password_hint) == 0:
            raise InvalidParameter("Password hint must be a non-empty string.")
        _require_positive_int("Iterations", self.iterations)
        _require_positive_int("Output length", self.output_length)
        object.__setattr__(self, "prf", HMACHashFunction.parse(self.prf))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(master_secret='***', password_hint='***', "
            f"prf={self.prf.name}, iterations={self.iterations}, "
            f"output_length={self.output_length})"
        )
