from __future__ import annotations

from dataclasses import dataclass, field, asdict, fields
from typing import List, Dict, Any
import logging
import os
import json

from .version import CONFIG_SCHEMA_VERSION

logger = logging.getLogger(__name__)

#: Static desktop-browser string; many retailers serve reduced markup to library defaults.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_ENGINE = "wishlist_scraper.engines.simple_engine:SimpleScrapeEngine"


@dataclass
class ScrapeConfig:
    """
    Canonical configuration object passed throughout the pipeline.
    Keep it dataclass-only (no heavy deps) to stay upgrade-friendly.
    """
    schema_version: int = CONFIG_SCHEMA_VERSION
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    # Dotted path for the engine to allow runtime swapping without code changes.
    engine: str = DEFAULT_ENGINE
    # Extra adapters (dotted class paths) to register at startup
    extra_adapters: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    # ---------- Loaders ----------

    @classmethod
    def from_env(cls) -> "ScrapeConfig":
        """
        Build config from environment variables (all optional).
        """
        def _get(name: str, default: str) -> str:
            return os.getenv(name, default)

        return cls(
            request_timeout=float(_get("SCRAPER_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))),
            user_agent=_get("SCRAPER_USER_AGENT", DEFAULT_USER_AGENT),
            engine=_get("SCRAPER_ENGINE", DEFAULT_ENGINE),
            extra_adapters=[a.strip() for a in _get("SCRAPER_EXTRA_ADAPTERS", "").split(",") if a.strip()],
        )

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "ScrapeConfig":
        """
        Load configuration from a JSON file. Supports schema migration for future versions.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")
        data = migrate_config(data)
        return cls(**data)

    # ---------- Validation ----------

    def validate(self) -> None:
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be > 0")
        if not self.user_agent.strip():
            raise ValueError("user_agent cannot be empty")
        if not self.engine:
            raise ValueError("engine must be a dotted path (module:ClassName)")


def migrate_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Migrate config dict to the latest schema version.
    Keep this pure and additive. Add migrations here as you bump schema.
    """
    known = {f.name for f in fields(ScrapeConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

    migrated = {k: v for k, v in raw.items() if k in known}
    # Ensure a schema_version is present
    migrated.setdefault("schema_version", CONFIG_SCHEMA_VERSION)
    return migrated
