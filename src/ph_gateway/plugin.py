"""FastAPI integration: attach one shared Bcrypt instance to an application.

    app = FastAPI()
    register_bcrypt(app, BcryptConfig(cost=4, strong=False))

    @app.post("/signup")
    async def signup(crypt: Bcrypt = Depends(get_bcrypt)) -> ...:
        ...

Configuration is read once here; handlers only ever see the frozen config.
"""

import logging

from fastapi import FastAPI, Request

from config.settings import Settings
from src.ph_common.errors import InternalError
from src.ph_crypt.application.service import Bcrypt
from src.ph_crypt.domain.models import BcryptConfig

logger = logging.getLogger(__name__)


def register_bcrypt(
    app: FastAPI,
    config: BcryptConfig | None = None,
    settings: Settings | None = None,
) -> Bcrypt:
    """Create the app's Bcrypt instance and store it on ``app.state.bcrypt``.

    An explicit ``config`` wins; otherwise it is built from ``settings``
    (or a fresh Settings read from the environment).
    """
    if config is None:
        config = BcryptConfig.from_settings(settings if settings is not None else Settings())

    crypt = Bcrypt(config)
    app.state.bcrypt = crypt
    logger.info("bcrypt registered: cost=%d strong=%s", config.cost, config.strong)
    return crypt


def get_bcrypt(request: Request) -> Bcrypt:
    """FastAPI dependency returning the instance installed by register_bcrypt."""
    crypt = getattr(request.app.state, "bcrypt", None)
    if crypt is None:
        raise InternalError("bcrypt plugin is not registered")
    return crypt
