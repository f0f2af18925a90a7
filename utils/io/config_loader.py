from pathlib import Path
from typing import Any
from typing import Optional
import json

import yaml

from utils.exceptions import InvalidArgumentError


class ConfigLoader:
    SUPPORTED_EXTENSIONS = {".yaml", ".yml", ".json"}
    
    @classmethod
    def _check_extension(cls, filepath: Path) -> str:
        suffix = filepath.suffix.lower()
        if suffix not in cls.SUPPORTED_EXTENSIONS:
            raise InvalidArgumentError(
                f"Unsupported file extension: {suffix}. "
                f"Supported: {sorted(cls.SUPPORTED_EXTENSIONS)}"
            )
        return suffix
    
    @classmethod
    def load(cls, filepath: Path) -> dict[str, Any]:
        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")
        suffix = cls._check_extension(filepath)
        with open(filepath, "r", encoding="utf-8") as f:
            if suffix in {".yaml", ".yml"}:
                config = yaml.safe_load(f)
            else:
                config = json.load(f)
        # an empty YAML document loads as None
        return config or {}
    
    @classmethod
    def save(cls, config: dict[str, Any], filepath: Path) -> None:
        suffix = cls._check_extension(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            if suffix in {".yaml", ".yml"}:
                yaml.safe_dump(config, f, default_flow_style=False, indent=2)
            else:
                json.dump(config, f, indent=2)
    
    @classmethod
    def load_with_overrides(
        cls,
        filepath: Path,
        overrides: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        config = cls.load(filepath)
        if overrides:
            config = cls.deep_merge(config, overrides)
        return config
    
    @classmethod
    def deep_merge(
        cls,
        base: dict[str, Any],
        override: dict[str, Any],
    ) -> dict[str, Any]:
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = cls.deep_merge(result[key], value)
            else:
                result[key] = value
        return result
    
    @classmethod
    def validate_required_keys(
        cls,
        config: dict[str, Any],
        required_keys: list[str],
    ) -> None:
        missing = [
            key for key in required_keys
            if cls.get_nested(config, key, default=_MISSING) is _MISSING
        ]
        if missing:
            raise KeyError(f"Missing required config keys: {missing}")
    
    @classmethod
    def get_nested(
        cls,
        config: dict[str, Any],
        key_path: str,
        default: Optional[Any] = None,
    ) -> Any:
        current = config
        for part in key_path.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
    
    @classmethod
    def set_nested(
        cls,
        config: dict[str, Any],
        key_path: str,
        value: Any,
    ) -> dict[str, Any]:
        parts = key_path.split(".")
        current = config
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value
        return config


_MISSING = object()
