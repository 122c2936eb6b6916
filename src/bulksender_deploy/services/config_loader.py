"""Configuration loader for bulksender-deploy."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from bulksender_deploy.errors import DeployError


class ConfigLoader:
    """Loads YAML configuration files for CLI defaults."""

    SUPPORTED_KEYS = {
        "network",
        "credentials_dir",
        "build_command",
        "wasm_path",
        "migrate_gas",
        "set_oracle_gas",
        "migrate_deposit",
        "verbose",
        "log_file",
        "dry_run",
    }

    BOOLEAN_KEYS = ("verbose", "dry_run")

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.exists():
            raise DeployError(f"Config file not found: {config_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise DeployError(f"Invalid config file '{config_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise DeployError("Config file must contain a YAML mapping at the root.")

        unknown = sorted(set(parsed.keys()) - self.SUPPORTED_KEYS)
        if unknown:
            unknown_list = ", ".join(unknown)
            raise DeployError(f"Unknown configuration keys: {unknown_list}")

        build_command = parsed.get("build_command")
        if build_command is not None and not (
            isinstance(build_command, str)
            or (isinstance(build_command, list) and all(isinstance(part, str) for part in build_command))
        ):
            raise DeployError("build_command must be a string or a list of strings.")

        for key in self.BOOLEAN_KEYS:
            if key in parsed and not isinstance(parsed[key], bool):
                raise DeployError(f"{key} must be true or false.")

        return parsed
