from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_ENV = "local"
DEFAULT_PORT = "8080"
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"
DEFAULT_STATIC_DIR = PACKAGE_DIR / "static"


@dataclass(frozen=True)
class Settings:
    env: str = DEFAULT_ENV
    port: str = DEFAULT_PORT
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    static_dir: Path = DEFAULT_STATIC_DIR

    @property
    def is_local(self) -> bool:
        return self.env == DEFAULT_ENV


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    Absent and empty variables both fall back to the defaults. The port is
    kept as the raw string; it is only parsed when the server binds.
    """
    env = os.environ if environ is None else environ
    templates_dir = env.get("TEMPLATES_DIR")
    static_dir = env.get("STATIC_DIR")
    return Settings(
        env=env.get("ENV") or DEFAULT_ENV,
        port=env.get("PORT") or DEFAULT_PORT,
        templates_dir=Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR,
        static_dir=Path(static_dir) if static_dir else DEFAULT_STATIC_DIR,
    )
