"""Password hashing services: settings builder, hasher, validator.

All three are synchronous and CPU-bound. They hold only the immutable
BcryptConfig and their collaborators, so one instance of each can be shared
across threads without locking. Nothing here retries or swallows errors:
InvalidSettingsError and EntropySourceError reach the caller as raised.
"""

import hmac
import logging

from src.ph_common.errors import EntropySourceError
from src.ph_crypt.domain.models import (
    SALT_RAW_BYTES,
    BcryptConfig,
    HashSettings,
    looks_like_settings,
)
from src.ph_crypt.domain.ports import BcryptPrimitiveProtocol, EntropySourceProtocol
from src.ph_crypt.infrastructure.entropy import SystemEntropySource
from src.ph_crypt.infrastructure.primitive import BcryptPrimitive

logger = logging.getLogger(__name__)


class SettingsBuilder:
    def __init__(
        self,
        config: BcryptConfig,
        entropy: EntropySourceProtocol,
        primitive: BcryptPrimitiveProtocol,
    ) -> None:
        self._config = config
        self._entropy = entropy
        self._primitive = primitive

    def build(self, cost: int | None = None, strong: bool | None = None) -> HashSettings:
        """Produce fresh settings with a new random salt.

        ``cost`` and ``strong`` default to the configured values. The cost is
        embedded as given; bcrypt rejects an unsupported one when it is used.
        """
        if cost is None:
            cost = self._config.cost
        if strong is None:
            strong = self._config.strong

        raw = (
            self._entropy.get_strong(SALT_RAW_BYTES)
            if strong
            else self._entropy.get_weak(SALT_RAW_BYTES)
        )
        if len(raw) != SALT_RAW_BYTES:
            raise EntropySourceError(
                f"expected {SALT_RAW_BYTES} bytes, got {len(raw)}"
            )

        logger.debug("Generated bcrypt settings: cost=%d strong=%s", cost, strong)
        return HashSettings(cost=cost, salt=self._primitive.encode_base64ish(raw))


class Hasher:
    def __init__(
        self,
        builder: SettingsBuilder,
        primitive: BcryptPrimitiveProtocol,
    ) -> None:
        self._builder = builder
        self._primitive = primitive

    def hash(self, password: str | bytes, settings: str | None = None) -> str:
        """Hash ``password`` with bcrypt.

        ``settings`` starting with ``$2a$NN$`` (including a complete stored
        hash) is used verbatim; anything else is ignored and fresh settings
        are generated.
        """
        if not looks_like_settings(settings):
            settings = self._builder.build().encode()
        return self._primitive.hash(password, settings)


class Validator:
    def __init__(self, hasher: Hasher) -> None:
        self._hasher = hasher

    def validate(self, password: str | bytes, stored_hash: str) -> bool:
        """Re-hash with the stored hash's own settings and compare.

        A stored hash bcrypt cannot process raises InvalidSettingsError; it
        is not reported as a mismatch.
        """
        computed = self._hasher.hash(password, stored_hash)
        # bcrypt output is always ASCII; anything else cannot match
        if not stored_hash.isascii():
            return False
        return hmac.compare_digest(computed.encode("ascii"), stored_hash.encode("ascii"))


class Bcrypt:
    """Facade exposing the two host operations: ``hash`` and ``validate``.

    Build once at startup and share::

        crypt = Bcrypt(BcryptConfig(cost=4, strong=False))
        stored = crypt.hash("s3cret")
        crypt.validate("s3cret", stored)  # True
    """

    def __init__(
        self,
        config: BcryptConfig | None = None,
        entropy: EntropySourceProtocol | None = None,
        primitive: BcryptPrimitiveProtocol | None = None,
    ) -> None:
        self.config = config if config is not None else BcryptConfig()
        primitive = primitive if primitive is not None else BcryptPrimitive()
        entropy = entropy if entropy is not None else SystemEntropySource()

        self.settings_builder = SettingsBuilder(self.config, entropy, primitive)
        self.hasher = Hasher(self.settings_builder, primitive)
        self.validator = Validator(self.hasher)

    def hash(self, password: str | bytes, settings: str | None = None) -> str:
        return self.hasher.hash(password, settings)

    def validate(self, password: str | bytes, stored_hash: str) -> bool:
        return self.validator.validate(password, stored_hash)

    def gen_settings(self, cost: int | None = None, strong: bool | None = None) -> str:
        return self.settings_builder.build(cost, strong).encode()
