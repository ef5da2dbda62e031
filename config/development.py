import os

from .config import build_mongo_uri, env_flag

ACCESS_TOKEN_KEY = os.getenv("ACCESS_TOKEN_KEY", "dev-access-token-key")
ACCESS_TOKEN_EXPIRE_SECONDS = int(os.getenv("ACCESS_TOKEN_EXPIRE_SECONDS", "3600"))

DB_CONFIG = {
    "uri": build_mongo_uri(),
    "database": os.getenv("DB_NAME", "WorkSync"),
}

STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY", "")
PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "usd")

PORT = int(os.getenv("PORT", "8080"))
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Creates the unique/lookup indexes on startup (idempotent)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
