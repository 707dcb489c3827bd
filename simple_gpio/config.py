# simple_gpio/config.py
# Version: 1.0.0

import copy
import os
import yaml
from typing import Any, Optional

from .const import ENV_CONFIG, DEFAULT_TOGGLE_HZ, DEFAULT_TOGGLE_DURATION
from .exceptions import ConfigError
from .logging_config import logger, LogCategory

DEFAULT_CONFIG = {
    "logging": {
        "level": "WARNING",
        "debug": False,
    },
    "toggle": {
        "hz": DEFAULT_TOGGLE_HZ,
        "duration": DEFAULT_TOGGLE_DURATION,
    },
    "pins": {},
}

# Singleton-Instanz
config = None


def get_config(config_path: Optional[str] = None) -> 'Config':
    """Gibt die globale Config-Instanz zurück oder erstellt sie, wenn sie nicht existiert."""
    global config
    if config is None or config_path is not None:
        path = config_path or os.environ.get(ENV_CONFIG) or "config.yaml"
        config = Config(path)
    return config


def _merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    def __init__(self, config_path: str = "config.yaml"):
        self.config_path = config_path
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.load_config()

    def load_config(self) -> bool:
        """Lädt die Konfiguration aus der YAML-Datei. Fehlt die Datei, gelten die Standardwerte."""
        if not os.path.exists(self.config_path):
            logger.info(f"Keine Konfiguration unter {self.config_path}, verwende Standardwerte", LogCategory.CONFIG)
            return False

        try:
            with open(self.config_path, 'r') as file:
                loaded = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ConfigError(f"Fehler beim Laden der Konfiguration {self.config_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Konfiguration {self.config_path} enthält kein Mapping")

        self.config = _merge(copy.deepcopy(DEFAULT_CONFIG), loaded)
        logger.info(f"Konfiguration aus {self.config_path} geladen", LogCategory.CONFIG)
        return True

    def get_value(self, path: str, default: Any = None) -> Any:
        """Greift auf einen verschachtelten Wert mit Punktnotation zu.
        Beispiel: get_value("logging.level")
        """
        keys = path.split(".")
        current = self.config

        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def resolve_pin(self, pin: str) -> int:
        """Löst einen Pin-Alias aus 'pins' auf oder interpretiert den Wert als Nummer"""
        aliases = self.get_value("pins", {}) or {}
        if pin in aliases:
            return int(aliases[pin])
        try:
            return int(pin)
        except ValueError:
            raise ConfigError(f"Unbekannter Pin oder Alias: {pin}") from None

    def __getitem__(self, key):
        return self.config[key]

    def __contains__(self, key):
        return key in self.config

    def __iter__(self):
        return iter(self.config)

    def keys(self):
        return self.config.keys()

    def items(self):
        return self.config.items()
