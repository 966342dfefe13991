import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TRUTHY = {"1", "true", "yes", "on"}


def load_env() -> None:
    """Load .env from the current directory if present.

    Variables already set in the environment win over the file.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    log_console: bool = True


def get_settings() -> Settings:
    """Read logging settings from CSB_* environment variables."""
    log_dir = os.getenv("CSB_LOG_DIR", "").strip()
    console = os.getenv("CSB_LOG_CONSOLE", "true").strip().lower()
    return Settings(
        log_level=os.getenv("CSB_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        log_dir=Path(log_dir) if log_dir else None,
        log_console=console in TRUTHY,
    )
