import os
import urllib.parse


def build_mongo_uri(default_host: str = "localhost:27017") -> str:
    """Connection string from MONGO_URI, or from DB_USER/DB_PASS for an Atlas cluster."""
    uri = os.environ.get("MONGO_URI")
    if uri:
        return uri

    db_user = os.environ.get("DB_USER")
    db_pass = os.environ.get("DB_PASS")
    db_host = os.environ.get("DB_HOST", default_host)
    if db_user and db_pass:
        # quote_plus keeps '@' and ':' in passwords from breaking the URI
        user = urllib.parse.quote_plus(db_user)
        password = urllib.parse.quote_plus(db_pass)
        return f"mongodb+srv://{user}:{password}@{db_host}/?retryWrites=true&w=majority"

    return f"mongodb://{db_host}/"


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))
