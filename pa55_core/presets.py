from __future__ import annotations
from dataclasses import dataclass

from .errors import InvalidParameter
from .params import HMACHashFunction


# Display length in Base64 characters -> raw bytes. All are multiples of 3 bytes,
# so the encoded password never carries "=" padding.
LENGTH_PRESETS = {chars: chars * 3 // 4 for chars in (8, 12, 16, 20, 24, 28, 32)}

ITERATION_PRESETS = (10_000, 250_000, 500_000, 750_000, 1_000_000, 1_250_000, 1_500_000)

ALGORITHM_PRESETS = tuple(HMACHashFunction)


@dataclass(frozen=True)
class Defaults:
    algorithm: HMACHashFunction = HMACHashFunction.SHA256
    iterations: int = 500_000
    length: int = 12  # characters


def bytes_for_length(chars: int) -> int:
    try:
        return LENGTH_PRESETS[chars]
    except KeyError:
        raise InvalidParameter(
            f"Unsupported password length {chars} "
            f"(choose one of {', '.join(str(c) for c in LENGTH_PRESETS)})."
        ) from None


def encoded_length(output_length: int) -> int:
    """Length of the Base64 text for `output_length` raw bytes, padding included."""
    return -(-output_length // 3) * 4
