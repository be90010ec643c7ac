from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container_from_settings
from .overrides.controller import register as register_overrides
from .patterns.controller import register as register_patterns
from .schedule.controller import register as register_schedule
from .suggestions.controller import register as register_suggestions

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = container or build_container_from_settings(settings)
    logger.info(
        "[escalaflex] settings=%s storage=%s ai=%s",
        settings_module,
        type(container.store).__name__,
        "on" if getattr(settings, "OPENAI_API_KEY", None) else "off",
    )

    register_patterns(app, container)
    register_overrides(app, container)
    register_schedule(app, container)
    register_suggestions(app, container)

    return app
