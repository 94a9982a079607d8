"""
Runtime settings, read once from the environment (and a .env file if present).

    ADVISING_COURSES_FILE         file loaded at API startup / menu default
    ADVISING_DATA_DIR             the only directory POST /load may read from
    ADVISING_DELIMITER            field delimiter, default ","
    ADVISING_PRESERVE_ON_FAILURE  keep the previous catalog when a load fails
    ADVISING_LOG_DIR              directory for the rotating log file
    ADVISING_API_URL              base URL the Streamlit page talks to
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ROOT_DIR = Path(__file__).parent.parent
DATA_DIR = ROOT_DIR / "data"
LOG_DIR  = ROOT_DIR / "logs"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    courses_file: Path
    data_dir: Path = DATA_DIR
    delimiter: str = ","
    preserve_on_failure: bool = False
    log_dir: Path = LOG_DIR
    api_url: str = "http://localhost:8000"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            courses_file=Path(os.getenv("ADVISING_COURSES_FILE", DATA_DIR / "courses.csv")),
            data_dir=Path(os.getenv("ADVISING_DATA_DIR", DATA_DIR)),
            delimiter=os.getenv("ADVISING_DELIMITER") or ",",
            preserve_on_failure=_env_flag("ADVISING_PRESERVE_ON_FAILURE"),
            log_dir=Path(os.getenv("ADVISING_LOG_DIR", LOG_DIR)),
            api_url=os.getenv("ADVISING_API_URL", "http://localhost:8000").rstrip("/"),
        )


SETTINGS = Settings.from_env()
