import os

IS_DEBUG = os.environ.get("SCHEMAGEN_DEBUG", "0") == "1"
LOG_LEVEL = os.environ.get("SCHEMAGEN_LOG_LEVEL", "DEBUG" if IS_DEBUG else "INFO")

APP_TITLE = "Schema Editor"
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800

DEFAULT_SCHEMAS = ["public", "application"]
DEFAULT_DATA_TYPES = [
    "bigint",
    "boolean",
    "char",
    "date",
    "decimal",
    "float",
    "integer",
    "json",
    "jsonb",
    "numeric",
    "real",
    "smallint",
    "text",
    "time",
    "timestamp",
    "timestamptz",
    "uuid",
    "varchar",
]


def _split_env(key: str, default: list[str]) -> list[str]:
    raw = os.environ.get(key)
    if not raw:
        return list(default)

    return [v.strip() for v in raw.split(",") if v.strip()]


SCHEMAS = _split_env("SCHEMAGEN_SCHEMAS", DEFAULT_SCHEMAS)
DATA_TYPES = _split_env("SCHEMAGEN_DATA_TYPES", DEFAULT_DATA_TYPES)
