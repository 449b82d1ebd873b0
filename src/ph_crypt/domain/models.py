"""Hashing domain model — pure dataclasses, no bcrypt dependency."""

import re
from dataclasses import dataclass

BCRYPT_VERSION = "2a"
SALT_RAW_BYTES = 16
SALT_ENCODED_LENGTH = 22

DEFAULT_COST = 6

# Reuse-vs-regenerate is decided on this prefix alone; the salt is left for
# the primitive to reject.
SETTINGS_PREFIX_RE = re.compile(r"^\$2a\$[0-9]{2}\$")


def looks_like_settings(value: str | None) -> bool:
    """True when ``value`` starts with ``$2a$NN$`` and may be handed to bcrypt verbatim."""
    return value is not None and SETTINGS_PREFIX_RE.match(value) is not None


@dataclass(frozen=True)
class BcryptConfig:
    """Hashing configuration, fixed at application startup."""

    cost: int = DEFAULT_COST
    strong: bool = False

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it so cost=True is not read as 1
        if isinstance(self.cost, bool) or not isinstance(self.cost, int):
            raise ValueError(f"cost must be an integer, got {self.cost!r}")
        if self.cost < 0:
            raise ValueError(f"cost must be non-negative, got {self.cost}")

    @classmethod
    def from_settings(cls, settings: object) -> "BcryptConfig":
        """Build from an object exposing BCRYPT_COST / BCRYPT_STRONG (config.settings.Settings)."""
        return cls(
            cost=getattr(settings, "BCRYPT_COST", DEFAULT_COST),
            strong=bool(getattr(settings, "BCRYPT_STRONG", False)),
        )


@dataclass(frozen=True)
class HashSettings:
    """The ``$<version>$<cost>$<salt>`` prefix that fixes a bcrypt computation.

    Cost is carried as given; range checking belongs to bcrypt itself.
    """

    cost: int
    salt: str
    version: str = BCRYPT_VERSION

    def encode(self) -> str:
        return f"${self.version}${self.cost:02d}${self.salt}"

    def __str__(self) -> str:
        return self.encode()
