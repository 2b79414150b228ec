from __future__ import annotations


class Pa55Error(Exception):
    """Base class for every error raised by the derivation core."""


class InvalidParameter(Pa55Error, ValueError):
    """A derivation request was built from empty, non-positive or unknown values."""


class UnsupportedEncoding(Pa55Error, ValueError):
    """A secret could not be encoded as UTF-8."""


class AlgorithmFailure(Pa55Error, RuntimeError):
    """The cryptography backend cannot provide the selected HMAC hash."""
