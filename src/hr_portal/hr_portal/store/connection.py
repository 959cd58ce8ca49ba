from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import Any, Optional

import mysql.connector

from ..core.exceptions import ConfigurationError

SUPABASE_SCHEMES = {"http", "https"}
MYSQL_SCHEMES = {"mysql", "mysql+mysqlconnector"}


@dataclass(frozen=True)
class StoreConfig:
    """The two required connection parameters: store endpoint and access key."""

    endpoint: str
    access_key: str

    @classmethod
    def from_settings(cls, settings: Any) -> "StoreConfig":
        endpoint = (getattr(settings, "RECORD_STORE_URL", None) or "").strip()
        access_key = (getattr(settings, "RECORD_STORE_KEY", None) or "").strip()
        if not endpoint:
            raise ConfigurationError("RECORD_STORE_URL is not set")
        if not access_key:
            raise ConfigurationError("RECORD_STORE_KEY is not set")
        config = cls(endpoint=endpoint, access_key=access_key)
        if config.backend == "mysql":
            config.mysql_config()
        return config

    @property
    def scheme(self) -> str:
        return urllib.parse.urlsplit(self.endpoint).scheme.lower()

    @property
    def backend(self) -> str:
        if self.scheme in SUPABASE_SCHEMES:
            return "supabase"
        if self.scheme in MYSQL_SCHEMES:
            return "mysql"
        raise ConfigurationError(f"Unsupported RECORD_STORE_URL scheme: {self.scheme or '-'}")

    def mysql_config(self) -> "DBConfig":
        """mysql://user@host:port/database; the access key is the password."""
        parts = urllib.parse.urlsplit(self.endpoint)
        database = parts.path.lstrip("/")
        if not parts.hostname or not database:
            raise ConfigurationError("RECORD_STORE_URL must look like mysql://user@host:3306/database")
        return DBConfig(
            host=parts.hostname,
            port=int(parts.port or 3306),
            user=urllib.parse.unquote(parts.username or "root"),
            password=self.access_key,
            database=database,
        )


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


class DatabaseConnection:
    """Connection factory for the MySQL backend.

    Note: We create short-lived connections per operation.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self, *, with_database: bool = True):
        kwargs = dict(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
        )
        if with_database:
            kwargs["database"] = self._config.database
        return mysql.connector.connect(**kwargs)
