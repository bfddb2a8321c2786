import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, List

import yaml

from certlogic_units.core.exceptions import ConfigError, InvalidTimeUnit
from certlogic_units.core.time_unit import TimeUnit, parse

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


@dataclass
class ValidityWindow:
    name: str
    amount: int
    unit: TimeUnit


class ConfigManager:
    def __init__(self, config_path=None, config=None, validate_structure=True):
        if config_path:
            with open(config_path, 'r') as stream:
                config = yaml.safe_load(stream)

        if config is None or not isinstance(config, dict):
            raise ConfigError("Config must be provided and be a dictionary after loading.")

        self.config: Dict[str, Any] = config

        if validate_structure:
            self.validate_structure(self.config)

    def save(self, config_path):
        try:
            self.validate_structure(self.config)
        except ConfigError as e:
            logging.error(f"Failed to validate config before saving: {e}")
            raise
        with open(config_path, 'w') as f:
            yaml.dump(self.config, f)

    def validate_structure(self, config: dict):
        self._validate_logging(config.get('logging'))

        if 'validity_windows' not in config:
            logging.warning("No validity_windows defined in config.")
            return
        windows = config['validity_windows']
        if not isinstance(windows, list):
            raise ConfigError("'validity_windows' must be a list.")
        for window in windows:
            self._validate_window(window)
        self._validate_unique_window_name(windows)

    def validity_windows(self) -> List[ValidityWindow]:
        return [
            ValidityWindow(name=w['name'], amount=w['amount'], unit=parse(w['unit']))
            for w in self.config.get('validity_windows') or []
        ]

    @staticmethod
    def _validate_logging(section):
        if section is None:
            return
        if not isinstance(section, dict):
            raise ConfigError("'logging' section must be a mapping.")
        level = section.get('logging_level', 'INFO')
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid logging_level '{level}'. Must be one of: {', '.join(LOG_LEVELS)}"
            )

    @staticmethod
    def _validate_unique_window_name(windows):
        names = [window['name'] for window in windows]
        duplicates = {name for i, name in enumerate(names) if name in names[:i]}
        if duplicates:
            raise ConfigError(f"Duplicate validity window names found: {', '.join(sorted(duplicates))}")

    @staticmethod
    def _validate_window(window):
        if not isinstance(window, dict):
            raise ConfigError(f"Validity window must be a mapping, got: {window!r}")
        if 'name' not in window:
            raise ConfigError("Validity window missing 'name'")
        name = window['name']
        if not isinstance(name, str):
            raise ConfigError(f"Validity window 'name' must be a string, got: {name!r}")
        for key in ('amount', 'unit'):
            if key not in window:
                raise ConfigError(f"Missing '{key}' in validity window '{name}'")

        amount = window['amount']
        # bool is an int subclass
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ConfigError(f"'amount' must be an integer in validity window '{name}', got: {amount!r}")

        try:
            unit = parse(window['unit'])
        except InvalidTimeUnit as e:
            raise ConfigError(f"Invalid unit in validity window '{name}': {e}") from e
        logging.debug("Validated validity window '%s': %s %s", name, amount, unit.canonical_name)


def configure_logging(config):
    """
    Set up root logging from the 'logging' section of a config dict.

    Logs go to stdout, and additionally to ``log_file`` when one is set.
    """
    ConfigManager._validate_logging(config.get('logging'))
    section = config.get('logging') or {}
    log_file = section.get('log_file')
    log_level = section.get('logging_level', 'INFO').upper()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        # Ensure log directory exists if a path is provided
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
