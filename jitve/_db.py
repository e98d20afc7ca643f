"""
jitve/_db.py — połączenie z bazą faktów PostgreSQL.

Kolejność źródeł:
  1. JITVE_DATABASE_URL — pełny DSN/URL libpq, używany bez zmian
  2. PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD — składane w DSN

JITVE_DB_CONNECT_TIMEOUT (sekundy, domyślnie 10) ogranicza czas łączenia,
żeby `jitve estimate --db` nie wisiało na niedostępnym serwerze.
"""

from __future__ import annotations

import os

import psycopg2
import psycopg2.extensions

_DEFAULTS = {
    "host":     ("PGHOST",     "localhost"),
    "port":     ("PGPORT",     "5432"),
    "dbname":   ("PGDATABASE", "jitve"),
    "user":     ("PGUSER",     "jitve"),
    "password": ("PGPASSWORD", "jitve"),
}


def connection_dsn() -> str:
    """DSN dla psycopg2.connect; podnosi ValueError przy błędnym porcie lub timeoucie."""
    url = os.getenv("JITVE_DATABASE_URL", "").strip()
    if url:
        return url

    params = {key: os.getenv(env, default) for key, (env, default) in _DEFAULTS.items()}
    if not params["port"].isdigit():
        raise ValueError(f"PGPORT nie jest numerem portu: '{params['port']}'")

    timeout = os.getenv("JITVE_DB_CONNECT_TIMEOUT", "10")
    if not timeout.isdigit():
        raise ValueError(f"JITVE_DB_CONNECT_TIMEOUT nie jest liczbą sekund: '{timeout}'")
    params["connect_timeout"] = timeout

    return psycopg2.extensions.make_dsn(**params)


def get_connection() -> psycopg2.extensions.connection:
    return psycopg2.connect(connection_dsn())
