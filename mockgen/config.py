"""
Configuration Management Module

Handles loading, validation, and merging of configuration files
with support for presets and user-defined overrides.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, asdict
from copy import deepcopy
import logging

from .models import MockDataRequest
from .utils import FileHandler

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class GenerationConfig:
    """Configuration for record generation"""
    entity_type: str = "user"
    count: int = 10
    format: str = "json"  # json, csv
    seed: str = ""  # informational only
    locale: str = "en-US"  # informational only


@dataclass
class OutputConfig:
    """Configuration for rendered output"""
    pretty: bool = False
    output_dir: Optional[str] = None


@dataclass
class LoggingConfig:
    """Configuration for logging"""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class combining all sub-configurations"""
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    def merge(self, other: 'Config') -> 'Config':
        """Merge another configuration into this one (other takes precedence)"""
        merged = deepcopy(self)

        for key in ['generation', 'output', 'logging']:
            other_config = getattr(other, key)
            merged_config = getattr(merged, key)

            # Update non-None values
            for field_name, field_value in asdict(other_config).items():
                if field_value is not None:
                    setattr(merged_config, field_name, field_value)

        return merged

    def to_request(self) -> MockDataRequest:
        """Build a generation request from the generation settings"""
        return MockDataRequest(
            type=self.generation.entity_type,
            count=self.generation.count,
            format=self.generation.format,
            seed=self.generation.seed,
            locale=self.generation.locale,
        )


class ConfigLoader:
    """Loads and manages configuration from various sources"""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the configuration loader

        Args:
            config_dir: Directory containing preset files
        """
        if config_dir is None:
            self.config_dir = Path(__file__).parent / "presets"
        else:
            self.config_dir = Path(config_dir)

        self.presets = self._load_presets()

    def _load_presets(self) -> Dict[str, Config]:
        """Load all available preset configurations"""
        presets = {}

        if not self.config_dir.exists():
            logger.warning(f"Config directory not found: {self.config_dir}")
            return presets

        for preset_file in sorted(self.config_dir.glob("*.yaml")):
            preset_name = preset_file.stem
            try:
                presets[preset_name] = self.load_from_file(preset_file)
                logger.debug(f"Loaded preset: {preset_name}")
            except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
                logger.error(f"Failed to load preset {preset_name}: {e}")

        return presets

    def load_from_file(self, filepath: Union[str, Path]) -> Config:
        """
        Load configuration from a YAML or JSON file

        Args:
            filepath: Path to the configuration file

        Returns:
            Config object
        """
        return self._dict_to_config(FileHandler.read_config(filepath))

    def load_preset(self, preset_name: str) -> Config:
        """
        Load a preset configuration by name

        Args:
            preset_name: Name of the preset (e.g., 'default', 'csv_export')

        Returns:
            Config object
        """
        if preset_name not in self.presets:
            available = ", ".join(self.presets.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available: {available}")

        return deepcopy(self.presets[preset_name])

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> Config:
        """Convert dictionary to Config object"""
        config = Config()

        config_mapping = {
            'generation': GenerationConfig,
            'output': OutputConfig,
            'logging': LoggingConfig,
        }

        for key, config_class in config_mapping.items():
            if config_dict.get(key):
                setattr(config, key, config_class(**config_dict[key]))

        return config

    def merge_configs(self, base: Config, override: Union[Config, Dict[str, Any], str]) -> Config:
        """
        Merge configurations with override taking precedence

        Args:
            base: Base configuration
            override: Override configuration (Config object, dict, or preset name)

        Returns:
            Merged Config object
        """
        if isinstance(override, str):
            override = self.load_preset(override)
        elif isinstance(override, dict):
            return self._apply_dict(base, override)

        return base.merge(override)

    def _apply_dict(self, base: Config, overrides: Dict[str, Any]) -> Config:
        """Apply only the keys present in ``overrides`` on top of ``base``"""
        merged = deepcopy(base)

        for key, values in overrides.items():
            if key not in ('generation', 'output', 'logging'):
                raise ValueError(f"Unknown configuration section: {key}")
            if not values:
                continue

            current = getattr(merged, key)
            # Unknown field names raise TypeError here
            setattr(merged, key, type(current)(**{**asdict(current), **values}))

        return merged

    def save_config(self, config: Config, filepath: Union[str, Path]):
        """
        Save configuration to a YAML file

        Args:
            config: Configuration to save
            filepath: Path to save the file
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to: {filepath}")

    def list_presets(self) -> List[str]:
        """Get list of available preset names"""
        return list(self.presets.keys())


class ConfigValidator:
    """Validates configuration parameters"""

    @staticmethod
    def validate(config: Config) -> tuple[bool, List[str]]:
        """
        Validate configuration parameters

        Unknown output formats are not errors (they render as JSON) and
        are only logged as warnings.

        Args:
            config: Configuration to validate

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        if config.generation.count < 0:
            errors.append("generation.count must not be negative")

        if not config.generation.entity_type:
            errors.append("generation.entity_type must not be empty")

        if config.logging.level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"logging.level must be one of {VALID_LOG_LEVELS}")

        if config.generation.format.lower() not in ("json", "csv"):
            logger.warning(f"Unknown format '{config.generation.format}' will be rendered as json")

        return len(errors) == 0, errors


def get_default_config() -> Config:
    """Get the default configuration"""
    return Config()
