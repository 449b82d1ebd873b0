"""Random byte sources for salt generation.

- strong: ``secrets.token_bytes`` (OS CSPRNG)
- weak:   a Mersenne Twister seeded once from the OS; fast, not cryptographic

Both are good enough to make bcrypt salts unique in practice. A failure of
the underlying source is fatal and surfaces as EntropySourceError.
"""

import random
import secrets

from src.ph_common.errors import EntropySourceError


class SystemEntropySource:
    def __init__(self, weak_rng: random.Random | None = None) -> None:
        self._weak_rng = weak_rng if weak_rng is not None else random.Random()

    def get_weak(self, n: int) -> bytes:
        return self._weak_rng.randbytes(n)

    def get_strong(self, n: int) -> bytes:
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceError(f"strong source unavailable: {exc}") from exc
