"""
Configuration management module.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from pydantic import ValidationError

from ..models.config import AppConfig
from ..models.script import ExecutionMode


class ConfigManager:
    """TOML configuration manager.

    A missing file gives the defaults; a broken one is reported on stderr
    and also falls back to the defaults.
    """

    def __init__(self, config_path: str = "config.toml"):
        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self) -> AppConfig:
        """Load main configuration from TOML file."""
        if not self.config_path.exists():
            return self._create_default_config()

        try:
            with open(self.config_path, 'r') as f:
                config_data = toml.load(f)
            return AppConfig(**config_data)

        except (toml.TomlDecodeError, OSError) as e:
            print(f"Error loading config file: {e}", file=sys.stderr)
            return self._create_default_config()
        except ValidationError as e:
            print(f"Invalid config file {self.config_path}: {e}", file=sys.stderr)
            return self._create_default_config()

    def _create_default_config(self) -> AppConfig:
        """Create default configuration."""
        return AppConfig()

    def apply_overrides(self, mode: Optional[str] = None, home_dir: Optional[str] = None,
                        log_level: Optional[str] = None) -> None:
        """Apply command line values on top of the loaded file."""
        scripts = self.config.scripts
        if mode:
            scripts = scripts.model_copy(update={'mode': ExecutionMode.from_string(mode)})
        if home_dir:
            scripts = scripts.model_copy(update={'home_dir': home_dir})
        self.config = self.config.model_copy(update={'scripts': scripts})

        if log_level:
            logging_config = self.config.logging.model_copy(update={'level': log_level.upper()})
            self.config = self.config.model_copy(update={'logging': logging_config})

    def get_mode(self) -> ExecutionMode:
        return self.config.scripts.mode

    def get_home_dir(self) -> Optional[str]:
        return self.config.scripts.home_dir

    def get_log_level(self) -> str:
        return self.config.logging.level

    def get_scripts_config(self) -> Dict[str, Any]:
        """Keyword arguments for init_scripts."""
        scripts = self.config.scripts
        return {
            'home_dir': scripts.home_dir,
            'scripts_dir': scripts.scripts_dir,
            'config_file': scripts.config_file,
        }
