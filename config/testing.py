import os

ACCESS_TOKEN_KEY = "test-access-token-key"
ACCESS_TOKEN_EXPIRE_SECONDS = 3600

DB_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017/"),
    "database": os.getenv("DB_NAME", "WorkSync_test"),
}

STRIPE_SECRET_KEY = ""
PAYMENT_CURRENCY = "usd"

PORT = 8080
CORS_ORIGINS = "*"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
