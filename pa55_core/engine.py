from __future__ import annotations
import base64
from dataclasses import dataclass

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .errors import AlgorithmFailure, UnsupportedEncoding
from .params import DerivationParameters, HMACHashFunction


CHAR_ENCODING = "utf-8"

_HASHES = {
    HMACHashFunction.SHA1: hashes.SHA1,      # 20-byte blocks
    HMACHashFunction.SHA256: hashes.SHA256,  # 32-byte blocks
    HMACHashFunction.SHA512: hashes.SHA512,  # 64-byte blocks
}


@dataclass(frozen=True)
class DerivationResult:
    raw_bytes: bytes
    encoded_password: str

    def __repr__(self) -> str:
        return f"{type(self).__name__}(raw_bytes=<{len(self.raw_bytes)} bytes>, encoded_password='***')"


def hash_algorithm(prf: HMACHashFunction) -> hashes.HashAlgorithm:
    return _HASHES[prf]()


def _encode(value: str, what: str) -> bytearray:
    try:
        return bytearray(value.encode(CHAR_ENCODING))
    except UnicodeEncodeError as e:
        # The message must not echo the secret itself.
        raise UnsupportedEncoding(f"{what} cannot be encoded as {CHAR_ENCODING.upper()}.") from e


def _wipe(buf: bytearray) -> None:
    for i in range(len(buf)):
        buf[i] = 0


def derive(params: DerivationParameters) -> DerivationResult:
    """
    Run PBKDF2 (PKCS#5 v2 / RFC 8018) over the request and Base64 the output.

    The master secret is the HMAC key, the password hint is the salt. The
    result is fully determined by the five fields of `params`; cost grows
    linearly with `params.iterations`.

    Raises:
        UnsupportedEncoding: a secret is not representable as UTF-8.
        AlgorithmFailure: the backend does not support the selected hash.
    """
    secret = _encode(params.master_secret, "Master secret")
    hint = bytearray()
    try:
        hint = _encode(params.password_hint, "Password hint")
        kdf = PBKDF2HMAC(
            algorithm=hash_algorithm(params.prf),
            length=params.output_length,
            salt=bytes(hint),
            iterations=params.iterations,
        )
        raw = kdf.derive(secret)
    except UnsupportedAlgorithm as e:
        raise AlgorithmFailure(f"HMAC-{params.prf.name} is not available: {e}") from e
    finally:
        # Best-effort zeroization (Python may still hold other copies)
        _wipe(secret)
        _wipe(hint)

    return DerivationResult(
        raw_bytes=raw,
        encoded_password=base64.b64encode(raw).decode("ascii"),
    )


def generate_password(
    master_secret: str,
    password_hint: str,
    prf: HMACHashFunction | str = HMACHashFunction.SHA256,
    iterations: int = 500_000,
    output_length: int = 9,
) -> str:
    params = DerivationParameters(
        master_secret=master_secret,
        password_hint=password_hint,
        prf=prf,
        iterations=iterations,
        output_length=output_length,
    )
    return derive(params).encoded_password
