from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.server_api import ServerApi


@dataclass
class DBConfig:
    uri: str
    database: str


class DatabaseConnection:
    """Singleton-like MongoDB client holder.

    Note: MongoClient pools connections and is thread-safe, so one client serves the whole app.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig, *, client: Optional[MongoClient] = None):
        self._config = config
        self._client = client

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def client(self) -> MongoClient:
        if self._client is None:
            # connect=False defers the first round trip until a query runs
            self._client = MongoClient(self._config.uri, server_api=ServerApi("1"), tz_aware=True, connect=False)
        return self._client

    def db(self) -> Database:
        return self.client()[self._config.database]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
