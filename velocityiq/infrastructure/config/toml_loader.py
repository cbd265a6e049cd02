"""TOML configuration loader with env overrides."""

import logging
import os
import tomllib
from pathlib import Path

from velocityiq.domain.ports.config import (
    AppConfig,
    DependenciesConfig,
    GitHubConfig,
    SecurityConfig,
    ServerConfig,
    SonarQubeConfig,
)

logger = logging.getLogger(__name__)

# env var -> (section, key); blank values clear the setting
_STRING_OVERRIDES = {
    "SONARQUBE_URL": ("sonarqube", "url"),
    "SONARQUBE_TOKEN": ("sonarqube", "token"),
    "SONARQUBE_PROJECT_KEY": ("sonarqube", "project_key"),
    "SONARQUBE_ORGANIZATION": ("sonarqube", "organization"),
    "GITHUB_TOKEN": ("github", "token"),
    "GITHUB_REPO_OWNER": ("github", "owner"),
    "GITHUB_REPO_NAME": ("github", "repo"),
}


def _load_toml(path: Path) -> dict:
    """Load TOML file."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _set_int(config: dict, section: str, key: str, env_name: str, raw: str) -> None:
    try:
        config.setdefault(section, {})[key] = int(raw)
    except ValueError:
        logger.warning("Invalid %s env value: %r, ignoring", env_name, raw)


def _apply_env_overrides(config: dict) -> dict:
    """Apply environment variable overrides."""
    for env_name, (section, key) in _STRING_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None:
            config.setdefault(section, {})[key] = value.strip() or None
    if api_url := os.getenv("GITHUB_API_URL"):
        config.setdefault("github", {})["api_url"] = api_url.strip()
    if timeout := os.getenv("SONARQUBE_TIMEOUT"):
        try:
            config.setdefault("sonarqube", {})["timeout"] = float(timeout)
        except ValueError:
            logger.warning("Invalid SONARQUBE_TIMEOUT env value: %r, ignoring", timeout)
    if source := os.getenv("DEPENDENCY_FILE_SOURCE"):
        config.setdefault("dependencies", {})["file_source"] = source.strip().lower()
    if seed := os.getenv("DEPENDENCY_CONFIDENCE_SEED"):
        _set_int(config, "dependencies", "confidence_seed", "DEPENDENCY_CONFIDENCE_SEED", seed)
    if port := os.getenv("PORT"):
        _set_int(config, "server", "port", "PORT", port)
    if level := os.getenv("LOG_LEVEL"):
        config.setdefault("logging", {})["level"] = level.upper()
    if path := os.getenv("LOG_FILE"):
        config.setdefault("logging", {})["file"] = path.strip()
    if origins := os.getenv("CORS_ORIGINS"):
        config.setdefault("security", {})["cors_origins"] = [o.strip() for o in origins.split(",")]
    if rate := os.getenv("RATE_LIMIT_PER_MINUTE"):
        _set_int(config, "security", "rate_limit_requests_per_minute", "RATE_LIMIT_PER_MINUTE", rate)
    return config


def load_config(config_dir: Path | None = None) -> AppConfig:
    """Load configuration from TOML files with env overrides.

    Loads default.toml, then development.toml if exists.
    """
    if config_dir is None:
        config_dir = Path(__file__).resolve().parent.parent.parent.parent / "config"

    config: dict = {}

    default_path = config_dir / "default.toml"
    if default_path.exists():
        config = _load_toml(default_path)

    dev_path = config_dir / "development.toml"
    if dev_path.exists():
        dev_config = _load_toml(dev_path)
        for key, value in dev_config.items():
            if isinstance(value, dict) and key in config and isinstance(config[key], dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value

    config = _apply_env_overrides(config)

    logging_raw = config.get("logging") or {}
    return AppConfig(
        server=ServerConfig(**(config.get("server") or {})),
        sonarqube=SonarQubeConfig(**(config.get("sonarqube") or {})),
        github=GitHubConfig(**(config.get("github") or {})),
        dependencies=DependenciesConfig(**(config.get("dependencies") or {})),
        security=SecurityConfig(**(config.get("security") or {})),
        log_level=logging_raw.get("level", "INFO"),
        log_file=(logging_raw.get("file") or "").strip(),
        log_rotation_max_mb=int(logging_raw.get("log_rotation_max_mb", 5)),
        log_rotation_backups=int(logging_raw.get("log_rotation_backups", 3)),
    )
