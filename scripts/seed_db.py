from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from dotenv import load_dotenv

from config import get_settings_module

from worksync.database.bootstrap import ensure_admin, ensure_indexes
from worksync.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    uid = os.environ.get("SEED_ADMIN_UID")
    email = os.environ.get("SEED_ADMIN_EMAIL")
    if not uid or not email:
        raise SystemExit("SEED_ADMIN_UID and SEED_ADMIN_EMAIL must be set")

    conn = DatabaseConnection(DBConfig(uri=db_config["uri"], database=db_config["database"]))
    try:
        ensure_indexes(conn.db())
        created = ensure_admin(conn.db(), uid=uid, email=email, name=os.environ.get("SEED_ADMIN_NAME", "Admin"))
    finally:
        conn.close()

    print(f"OK: admin {uid} {'created' if created else 'already present'} in {db_config['database']}")


if __name__ == "__main__":
    main()
