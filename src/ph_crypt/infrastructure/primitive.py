"""bcrypt primitive adapter.

Uses the ``bcrypt`` library directly (>=4.0) for the Eksblowfish work.
This module only adapts types and errors:
  - str passwords are UTF-8 encoded (surrogatepass); inputs are cut to 72 bytes, which is
    all bcrypt ever reads (newer bcrypt releases raise instead of cutting)
  - ``ValueError`` from ``bcrypt.hashpw`` becomes InvalidSettingsError

bcrypt's salt alphabet is ``./A-Za-z0-9`` without padding, i.e. standard
base64 with a different symbol order.
"""

import base64

import bcrypt

from src.ph_common.errors import InvalidSettingsError

BCRYPT_MAX_PASSWORD_BYTES = 72

_STD_B64_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_BCRYPT_B64_ALPHABET = b"./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
_TO_BCRYPT_B64 = bytes.maketrans(_STD_B64_ALPHABET, _BCRYPT_B64_ALPHABET)


def _to_bytes(password: str | bytes) -> bytes:
    if isinstance(password, str):
        # lone surrogates are hashed as their UTF-8-style bytes, not rejected
        return password.encode("utf-8", "surrogatepass")
    return bytes(password)


class BcryptPrimitive:
    """Stateless — instantiate once, share across threads."""

    def hash(self, password: str | bytes, settings: str) -> str:
        raw_password = _to_bytes(password)[:BCRYPT_MAX_PASSWORD_BYTES]
        try:
            raw_settings = settings.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidSettingsError(settings) from exc

        try:
            hashed: bytes = bcrypt.hashpw(raw_password, raw_settings)
        except ValueError as exc:
            raise InvalidSettingsError(settings) from exc
        return hashed.decode("ascii")

    def encode_base64ish(self, raw: bytes) -> str:
        encoded = base64.b64encode(raw).rstrip(b"=")
        return encoded.translate(_TO_BCRYPT_B64).decode("ascii")
