from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import os
import yaml


PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ENV_VAR = "ALGOEVO_CONFIG_PATH"
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "system.yml"


@dataclass
class ApiConfig:
    title: str = "AlgoEvo Knowledge Base API"
    version: str = "0.1.0"
    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ApiConfig":
        data = data or {}
        return cls(
            title=str(data.get("title", cls.title)),
            version=str(data.get("version", cls.version)),
            host=str(data.get("host", cls.host)),
            port=int(data.get("port", cls.port)),
            cors_origins=[str(o) for o in data.get("cors_origins", []) or []],
        )


@dataclass
class StorageConfig:
    """Locations of the file-backed state (imported cases, raw import pipeline)."""
    imported_cases_path: str = "outputs/imported_cases.json"
    import_raw_dir: str = "data/import/raw"
    import_processed_dir: str = "data/import/processed"
    import_log_path: str = "data/import/logs/errors.log"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "StorageConfig":
        data = data or {}
        return cls(
            imported_cases_path=data.get("imported_cases_path", cls.imported_cases_path),
            import_raw_dir=data.get("import_raw_dir", cls.import_raw_dir),
            import_processed_dir=data.get("import_processed_dir", cls.import_processed_dir),
            import_log_path=data.get("import_log_path", cls.import_log_path),
        )


@dataclass
class EnrichmentConfig:
    enabled: bool = True
    timeout_seconds: float = 10.0
    wiki_base_url: str = "https://en.wikipedia.org/api/rest_v1/page/summary/"
    github_search_url: str = "https://api.github.com/search/repositories"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "EnrichmentConfig":
        data = data or {}
        return cls(
            enabled=bool(data.get("enabled", cls.enabled)),
            timeout_seconds=float(data.get("timeout_seconds", cls.timeout_seconds)),
            wiki_base_url=data.get("wiki_base_url", cls.wiki_base_url),
            github_search_url=data.get("github_search_url", cls.github_search_url),
        )


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_dir: str = "outputs/logs"
    to_file: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "LoggingConfig":
        data = data or {}
        return cls(
            level=str(data.get("level", cls.level)).upper(),
            log_dir=data.get("log_dir", cls.log_dir),
            to_file=bool(data.get("to_file", cls.to_file)),
        )


DEFAULT_SYSTEM_CONFIG: Dict[str, Any] = {
    "environment": "development",
    "api": {
        "title": ApiConfig.title,
        "version": ApiConfig.version,
        "host": ApiConfig.host,
        "port": ApiConfig.port,
        "cors_origins": [],
    },
    "storage": {
        "imported_cases_path": StorageConfig.imported_cases_path,
        "import_raw_dir": StorageConfig.import_raw_dir,
        "import_processed_dir": StorageConfig.import_processed_dir,
        "import_log_path": StorageConfig.import_log_path,
    },
    "enrichment": {
        "enabled": EnrichmentConfig.enabled,
        "timeout_seconds": EnrichmentConfig.timeout_seconds,
        "wiki_base_url": EnrichmentConfig.wiki_base_url,
        "github_search_url": EnrichmentConfig.github_search_url,
    },
    "logging": {
        "level": LoggingConfig.level,
        "log_dir": LoggingConfig.log_dir,
        "to_file": LoggingConfig.to_file,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = deepcopy(base)
    for key, val in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(val, dict)
        ):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = deepcopy(val)
    return result


def build_system_config(user_cfg: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge a raw config mapping over the defaults and attach the typed sections.

    Used by load_system_config and directly by tests that need an in-memory config.
    """
    merged = _deep_merge(DEFAULT_SYSTEM_CONFIG, user_cfg or {})
    merged["environment"] = str(merged.get("environment") or "development").lower()

    merged["api_cfg"] = ApiConfig.from_dict(merged.get("api"))
    merged["storage_cfg"] = StorageConfig.from_dict(merged.get("storage"))
    merged["enrichment_cfg"] = EnrichmentConfig.from_dict(merged.get("enrichment"))
    merged["logging_cfg"] = LoggingConfig.from_dict(merged.get("logging"))
    return merged


def load_system_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the project-level system configuration.

    Args:
        path: Config file path. If None, reads from ALGOEVO_CONFIG_PATH env var,
              defaults to "<project root>/config/system.yml"

    Returns:
        Merged config dictionary with typed sections (api_cfg, storage_cfg,
        enrichment_cfg, logging_cfg)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH

    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(f"System config not found at {cfg_path}")

    with cfg_path.open("r", encoding="utf-8") as f:
        user_cfg = yaml.safe_load(f) or {}

    merged = build_system_config(user_cfg)
    merged["_config_meta"] = {
        "config_path": str(cfg_path),
        "environment": merged["environment"],
    }
    return merged


def is_production(cfg: Dict[str, Any]) -> bool:
    return str(cfg.get("environment", "")).lower() == "production"


__all__ = [
    "load_system_config",
    "build_system_config",
    "is_production",
    "ApiConfig",
    "StorageConfig",
    "EnrichmentConfig",
    "LoggingConfig",
    "DEFAULT_SYSTEM_CONFIG",
]
