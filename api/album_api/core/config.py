"""
Environment-driven settings.

Database credentials come from `DBUSER` / `DBPASS`; everything else has a
default suitable for a local PostgreSQL holding the `recordings` database.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_NETWORK = "tcp"
DEFAULT_ADDRESS = "127.0.0.1:5432"
DEFAULT_DATABASE = "recordings"
DEFAULT_COMMAND_TIMEOUT = 30

NETWORKS = ("tcp", "unix")


class ConfigError(RuntimeError):
    pass


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def listen_host() -> str:
    return _env_str("APP_HOST", "localhost")


def listen_port() -> int:
    return _env_int("APP_PORT", 8080)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class DatabaseConfig:
    user: str = ""
    password: str = ""
    network: str = DEFAULT_NETWORK
    address: str = DEFAULT_ADDRESS
    database: str = DEFAULT_DATABASE
    command_timeout: int = DEFAULT_COMMAND_TIMEOUT

    @classmethod
    def from_env(cls) -> DatabaseConfig:
        return cls(
            user=os.environ.get("DBUSER", ""),
            password=os.environ.get("DBPASS", ""),
            network=_env_str("DBNET", DEFAULT_NETWORK).lower(),
            address=_env_str("DBADDR", DEFAULT_ADDRESS),
            database=_env_str("DBNAME", DEFAULT_DATABASE),
            command_timeout=_env_int("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT),
        )

    def connect_kwargs(self) -> dict:
        """
        Keyword arguments for `asyncpg.create_pool`.

        `tcp` addresses are `host:port`; `unix` addresses name the directory
        holding the server socket (asyncpg treats a path-like host that way).
        """
        if self.network not in NETWORKS:
            raise ConfigError(f"Unsupported network {self.network!r}; expected one of {NETWORKS}.")

        kwargs: dict = {
            "user": self.user or None,
            "password": self.password or None,
            "database": self.database,
        }
        if self.command_timeout > 0:
            kwargs["command_timeout"] = self.command_timeout

        if self.network == "unix":
            kwargs["host"] = self.address
            return kwargs

        host, sep, port = self.address.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise ConfigError(f"Invalid tcp address {self.address!r}; expected host:port.")
        kwargs["host"] = host
        kwargs["port"] = int(port)
        return kwargs
