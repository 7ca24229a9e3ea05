import os
from pathlib import Path

from .constants import DATA_DIR, ENV_LOG_LEVEL, ENV_REFERENCE_TABLES, REFERENCE_TABLES_FILE

BASE_DIR = Path(__file__).resolve().parent
DATA_PATH = BASE_DIR / DATA_DIR


def _reference_tables_path() -> Path | None:
    """
    JSON file overriding the shipped packing/rate tables.

    An explicit env path wins; otherwise data/reference_tables.json is used
    when present. None means "use the tables in reference_data.py".
    """
    env = os.getenv(ENV_REFERENCE_TABLES)
    if env:
        return Path(env).expanduser()
    candidate = DATA_PATH / REFERENCE_TABLES_FILE
    return candidate if candidate.exists() else None


REFERENCE_TABLES_PATH = _reference_tables_path()
LOG_LEVEL = os.getenv(ENV_LOG_LEVEL, "INFO").upper()
