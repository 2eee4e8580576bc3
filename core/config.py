"""Configuration loader for the website generator."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"
EXAMPLE_CONFIG_PATH = Path(__file__).parent.parent / "config.example.yaml"

# Values shipped in templates and .env examples; treated as "no key".
PLACEHOLDER_KEYS = frozenset({
    "default_key",
    "your_openai_api_key_here",
    "your-api-key-here",
})


@dataclass
class ModelConfig:
    provider: str = "openai"
    api_key: str = ""
    model_name: str = "gpt-4o"
    base_url: str = ""
    max_tokens: int = 4096
    temperature: float = 0.7
    # Seconds to wait for the backend before falling back to demo mode
    timeout: float = 60.0

    def get_active_key(self) -> str:
        """Return the configured key, or "" when it is missing or a placeholder."""
        key = (self.api_key or "").strip()
        if key in PLACEHOLDER_KEYS:
            return ""
        return key

    @property
    def has_usable_key(self) -> bool:
        return bool(self.get_active_key())


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "info"


@dataclass
class StorageConfig:
    recent_limit: int = 10


@dataclass
class Config:
    """Application configuration."""

    model: ModelConfig = field(default_factory=ModelConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


def _dict_to_dataclass(cls: type, data: dict[str, Any]) -> Any:
    """Convert a dict to a dataclass, ignoring unknown fields."""
    if not data:
        return cls()
    valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in data.items() if k in valid_fields}
    return cls(**filtered)


def apply_env_overrides(config: Config, environ: dict[str, str] | None = None) -> Config:
    """Let environment variables override the backend credential."""
    env = os.environ if environ is None else environ

    key = env.get("OPENAI_API_KEY") or env.get("OPENAI_API_KEY_ENV_VAR")
    if config.model.provider == "openrouter":
        key = env.get("OPENROUTER_API_KEY") or key
    if key:
        config.model.api_key = key
    return config


def load_config(path: Path | None = None, environ: dict[str, str] | None = None) -> Config:
    """Load configuration from YAML file.

    Falls back to defaults if config file doesn't exist. Environment
    variables are applied on top in both cases.
    """
    config_path = path or CONFIG_PATH

    if not config_path.exists():
        logger.warning(
            "Config file not found at %s. Using defaults. "
            "Copy config.example.yaml to config.yaml to customise.",
            config_path,
        )
        return apply_env_overrides(Config(), environ)

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    config = Config(
        model=_dict_to_dataclass(ModelConfig, raw.get("model", {})),
        server=_dict_to_dataclass(ServerConfig, raw.get("server", {})),
        storage=_dict_to_dataclass(StorageConfig, raw.get("storage", {})),
    )
    return apply_env_overrides(config, environ)


# Singleton config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance, loading it on first access."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config
