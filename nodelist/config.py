"""Configuration management for the nodelist parser."""

import os
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Parser settings with environment variable support."""

    def __init__(self):
        self.nodelist_file: Optional[str] = os.getenv("NODELIST_FILE") or None
        self.encoding: str = os.getenv("NODELIST_ENCODING", "cp437")
        self.strict: bool = _env_flag("NODELIST_STRICT")
        self.progress_interval: int = int(os.getenv("NODELIST_PROGRESS_INTERVAL", "10000"))

    def __repr__(self) -> str:
        return (
            f"Settings(nodelist_file={self.nodelist_file}, encoding={self.encoding}, "
            f"strict={self.strict}, progress_interval={self.progress_interval})"
        )


settings = Settings()
