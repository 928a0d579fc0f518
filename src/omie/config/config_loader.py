"""Builds an OmieConfig from a JSON file, the environment and explicit values"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from omie.config.omie_config import OmieConfig, ENV_VAR_MAPPING
from omie.exceptions import ConfigError


class ConfigLoader:
    """Reads configuration sources; later sources win"""

    def from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Read a JSON object from path

        Raises ConfigError when the file is missing or does not hold an object.
        """
        file_path = Path(path).resolve()
        if not file_path.exists():
            raise ConfigError(
                f"Configuration file not found: {file_path}",
                code="CONFIG_FILE_NOT_FOUND"
            )

        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {file_path}",
                code="CONFIG_PARSE_ERROR"
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration file must hold a JSON object: {file_path}",
                code="CONFIG_PARSE_ERROR"
            )
        return data

    def from_environment(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for env_var, key in ENV_VAR_MAPPING.items():
            raw = os.environ.get(env_var)
            if raw:
                values[key] = self._parse_env_value(key, raw)
        return values

    def merge(self, *sources: Dict[str, Any]) -> Dict[str, Any]:
        """Combine sources left to right, skipping None values"""
        merged: Dict[str, Any] = {}
        for source in sources:
            merged.update({k: v for k, v in source.items() if v is not None})
        return merged

    def resolve(self, config: Dict[str, Any]) -> OmieConfig:
        try:
            return OmieConfig(**config)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigError(
                f"Configuration validation failed: {problems}",
                code="CONFIG_INVALID",
                details={"errors": e.errors(include_url=False)}
            ) from e

    def load(
        self,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
    ) -> OmieConfig:
        """File, then environment, then explicit config"""
        sources = []
        if file is not None:
            sources.append(self.from_file(file))
        if env:
            sources.append(self.from_environment())
        if config is not None:
            sources.append(config)
        return self.resolve(self.merge(*sources))

    def create_template(self, path: Union[str, Path]) -> None:
        template = {
            "app_key": "YOUR_APP_KEY",
            "app_secret": "YOUR_APP_SECRET",
            "base_url": OmieConfig().base_url,
            "timeout": 30000,
            "enable_audit_log": False,
        }
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(template, indent=2), encoding="utf-8")

    @staticmethod
    def _parse_env_value(key: str, value: str) -> Any:
        if key == "enable_audit_log":
            return value.lower() in ("true", "1", "yes")
        if key == "timeout":
            try:
                return int(value)
            except ValueError:
                # left for OmieConfig to reject
                return value
        return value
