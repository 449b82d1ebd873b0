"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Password hashing
  9xxx: System

An InvalidSettingsError or EntropySourceError is an operational failure and
must never be reported to a caller as a password mismatch.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Password hashing ---

class InvalidSettingsError(AppError):
    """bcrypt rejected the settings string (malformed salt, cost out of range)."""

    def __init__(self, settings: str) -> None:
        # Only the settings prefix is echoed back; the digest part of a stored
        # hash is cut off.
        self.settings = settings[:29]
        super().__init__(1001, f"Invalid bcrypt settings: {self.settings!r}", 422)


class EntropySourceError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1002, f"Entropy source failure: {detail}", 503)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
