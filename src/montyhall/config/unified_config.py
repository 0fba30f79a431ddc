"""
Unified Configuration System
Simulation settings come from JSON: either one file, or a directory of
base files plus an optional per-environment override file.

Directory layout:
    config/base.json              general and logging sections
    config/simulation.json        rounds and worker pool
    config/reporting.json         decimal places, confidence level, chart path
    config/environments/<env>.json
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional, List
import logging

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a required setting is absent or unusable"""
    def __init__(self, message: str, config_section: str = None):
        super().__init__(message)
        self.config_section = config_section


class UnifiedConfig:
    """
    Merged view of the simulation settings

    Later files win over earlier ones key by key, nested sections are merged
    rather than replaced.
    """

    CONFIG_FILES = ["base.json", "simulation.json", "reporting.json"]
    REQUIRED_SECTIONS = ['general', 'simulation', 'reporting', 'logging']

    def __init__(self, config_path: Optional[str] = None, environment: str = "prod"):
        """
        Args:
            config_path: JSON file or config directory; searched for when None
            environment: Name of the override file under environments/
        """
        self.environment = environment
        self.config_path = config_path or self._locate_config()
        self.multi_file_mode = not os.path.isfile(self.config_path)

        if self.multi_file_mode:
            self.config = self._merge_directory(Path(self.config_path))
        else:
            self.config = _read_json(Path(self.config_path))
            logger.info(f"Loaded single-file configuration from: {self.config_path}")

        self._cache_config_sections()

    @staticmethod
    def _locate_config() -> str:
        """Look for config/base.json (or config/default.json) in cwd and above this module"""
        candidates = [Path.cwd()] + list(Path(__file__).resolve().parents)

        for root in candidates:
            if (root / "config" / "base.json").is_file():
                return str(root / "config")
            if (root / "config" / "default.json").is_file():
                return str(root / "config" / "default.json")

        raise FileNotFoundError(
            "No simulation configuration found: expected config/base.json "
            "or config/default.json in the working directory or a parent of the package"
        )

    def _merge_directory(self, config_dir: Path) -> Dict[str, Any]:
        merged = {}

        for name in self.CONFIG_FILES:
            file_path = config_dir / name
            if not file_path.exists():
                logger.debug(f"Skipping absent config file: {file_path}")
                continue
            _deep_update(merged, _read_json(file_path))
            logger.debug(f"Merged config from: {file_path}")

        override = config_dir / "environments" / f"{self.environment}.json"
        if override.exists():
            _deep_update(merged, _read_json(override))
            logger.info(f"Applied {self.environment} overrides from: {override}")
        else:
            logger.info(f"No overrides for environment: {self.environment}")

        if not merged:
            raise FileNotFoundError(f"No configuration files found in directory: {config_dir}")

        logger.info(f"Loaded configuration from {config_dir} ({len(merged)} sections)")
        return merged

    def _cache_config_sections(self):
        self.general = self.config.get('general', {})
        self.simulation = self.config.get('simulation', {})
        self.reporting = self.config.get('reporting', {})
        self.logging = self.config.get('logging', {})

    # ========================================
    # SECTION ACCESS METHODS
    # ========================================

    def get_section(self, section_name: str, default: Any = None) -> Any:
        return self.config.get(section_name, default)

    def get_required(self, section_name: str, key: str) -> Any:
        """
        Value of section_name.key

        Raises:
            ConfigurationError: if the section or the key is missing
        """
        section = self.config.get(section_name)
        if section is None:
            raise ConfigurationError(f"Missing required section: '{section_name}'", section_name)
        if key not in section:
            raise ConfigurationError(f"Missing required key: '{section_name}.{key}'", section_name)
        return section[key]

    def update_config(self, updates: Dict[str, Any]):
        """Merge updates into the loaded settings, e.g. command line overrides"""
        _deep_update(self.config, updates)
        self._cache_config_sections()

    def get_config_info(self) -> Dict[str, Any]:
        return {
            'config_path': self.config_path,
            'multi_file_mode': self.multi_file_mode,
            'environment': self.environment,
            'sections_loaded': list(self.config.keys())
        }

    def validate_config(self) -> Dict[str, List[str]]:
        """
        Check the settings the simulator depends on

        Returns:
            Dict with missing_sections, invalid_values and warnings lists;
            all empty means the configuration is usable
        """
        issues = {'missing_sections': [], 'invalid_values': [], 'warnings': []}

        issues['missing_sections'] = [s for s in self.REQUIRED_SECTIONS if s not in self.config]

        if self.general.get('random_seed') is None:
            issues['warnings'].append("No random_seed set - results may not be reproducible")

        for key in ('default_rounds', 'max_workers'):
            value = self.simulation.get(key)
            if not _is_positive_int(value):
                issues['invalid_values'].append(f"simulation.{key} must be a positive integer, got {value!r}")

        decimal_places = self.reporting.get('decimal_places')
        if not (_is_positive_int(decimal_places) or decimal_places == 0):
            issues['invalid_values'].append(f"reporting.decimal_places must be >= 0, got {decimal_places!r}")

        confidence_level = self.reporting.get('confidence_level')
        if not isinstance(confidence_level, (int, float)) or not 0 < confidence_level < 1:
            issues['invalid_values'].append(
                f"reporting.confidence_level must lie strictly between 0 and 1, got {confidence_level!r}")

        return issues

    def __repr__(self) -> str:
        mode = "multi-file" if self.multi_file_mode else "single-file"
        return f"UnifiedConfig(config_path='{self.config_path}', mode='{mode}', environment='{self.environment}')"


def _read_json(file_path: Path) -> Dict[str, Any]:
    try:
        with open(file_path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Configuration file not found: {file_path}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {file_path}: {e}")
        raise


def _deep_update(base_dict: Dict, update_dict: Dict):
    for key, value in update_dict.items():
        if isinstance(base_dict.get(key), dict) and isinstance(value, dict):
            _deep_update(base_dict[key], value)
        else:
            base_dict[key] = value


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
