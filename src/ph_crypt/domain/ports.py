"""Collaborator Protocols — dependency inversion for testability.

Unit tests inject mocks that conform to these Protocols.
The infrastructure layer provides the real implementations.
"""

from typing import Protocol


class EntropySourceProtocol(Protocol):
    def get_weak(self, n: int) -> bytes: ...

    def get_strong(self, n: int) -> bytes: ...


class BcryptPrimitiveProtocol(Protocol):
    def hash(self, password: str | bytes, settings: str) -> str: ...

    def encode_base64ish(self, raw: bytes) -> str: ...
