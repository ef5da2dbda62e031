from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .auth.controller import register as register_auth
from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_PORT
from .database.bootstrap import ensure_indexes
from .payments.controller import register as register_payments
from .salaries.controller import register as register_salaries
from .staff.controller import register as register_staff
from .tasks.controller import register as register_tasks

logger = logging.getLogger("worksync")


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))

    logging.basicConfig(
        level=getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    )

    origins = str(getattr(settings, "CORS_ORIGINS", "*"))
    CORS(app, origins=origins if origins == "*" else [o.strip() for o in origins.split(",") if o.strip()])

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, db_config.get("database"))

        container = build_container(
            db_config=db_config,
            token_secret=getattr(settings, "ACCESS_TOKEN_KEY"),
            token_expire_seconds=int(getattr(settings, "ACCESS_TOKEN_EXPIRE_SECONDS", 3600)),
            stripe_secret_key=getattr(settings, "STRIPE_SECRET_KEY", ""),
            currency=getattr(settings, "PAYMENT_CURRENCY", "usd"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_indexes(container.conn.db())

    app.extensions["worksync"] = container
    register_error_handlers(app)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return f"Server is running on {app.config['PORT']}"

    register_auth(app, container)
    register_staff(app, container)
    register_tasks(app, container)
    register_salaries(app, container)
    register_payments(app, container)

    return app
