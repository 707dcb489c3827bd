# simple_gpio/logging_config.py
# Version: 1.0.0

import logging
import sys
import os
from enum import Enum
from typing import Dict, Any, Union

from .const import ENV_DEBUG


class LogLevel(Enum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    NONE = logging.CRITICAL + 10


class LogCategory:
    """Log-Kategorien für einheitliches Logging"""
    SYSTEM = "System"
    GPIO = "GPIO"
    CONFIG = "Config"
    ERROR = "Error"


class LogFormatter(logging.Formatter):
    """Einheitlicher Formatter für verschiedene Log-Level"""
    def __init__(self, debug_mode=False):
        self.debug_mode = debug_mode
        self.debug_fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        self.info_fmt = '%(message)s'  # Vereinfachtes Format für INFO-Level
        super().__init__(self.debug_fmt)

    def format(self, record):
        if self.debug_mode:
            self._style._fmt = self.debug_fmt
            return super().format(record)

        if record.levelno == logging.INFO:
            self._style._fmt = self.info_fmt
        else:
            self._style._fmt = self.debug_fmt

        return super().format(record)


class Logger:
    """Zentralisierte Logger-Klasse für einheitliches Logging"""
    _instance = None

    @classmethod
    def get_instance(cls) -> 'Logger':
        """Singleton-Instanz zurückgeben"""
        if cls._instance is None:
            cls._instance = Logger()
        return cls._instance

    def __init__(self):
        self.logger = logging.getLogger('simple_gpio')
        self.logger.setLevel(logging.WARNING)
        self.logger.handlers = []

        self.debug_mode = os.environ.get(ENV_DEBUG, '0') == '1'

        # Log-Ausgaben gehen nach stderr, stdout bleibt der CLI vorbehalten
        self.console_handler = logging.StreamHandler(sys.stderr)
        self.console_handler.setLevel(logging.DEBUG)

        self.formatter = LogFormatter(debug_mode=self.debug_mode)
        self.console_handler.setFormatter(self.formatter)

        self.logger.addHandler(self.console_handler)
        if self.debug_mode:
            self.logger.setLevel(logging.DEBUG)

    def set_level(self, level: Union[str, int, LogLevel]):
        """Log-Level setzen"""
        if isinstance(level, str):
            level = LogLevel[level.upper()].value
        elif isinstance(level, LogLevel):
            level = level.value

        self.logger.setLevel(level)

    def debug(self, message: str, category: str = LogCategory.SYSTEM, entity_id: str = None):
        """Debug-Log mit Kategorie"""
        self._log(logging.DEBUG, message, category, entity_id)

    def info(self, message: str, category: str = LogCategory.SYSTEM, entity_id: str = None):
        """Info-Log mit Kategorie"""
        self._log(logging.INFO, message, category, entity_id)

    def warning(self, message: str, category: str = LogCategory.SYSTEM, entity_id: str = None):
        """Warning-Log mit Kategorie"""
        self._log(logging.WARNING, message, category, entity_id)

    def error(self, message: str, category: str = LogCategory.ERROR, entity_id: str = None,
              exception: Exception = None):
        """Error-Log mit Kategorie und optionaler Exception"""
        if exception:
            self._log(logging.ERROR, f"{message}: {str(exception)}", category, entity_id)
        else:
            self._log(logging.ERROR, message, category, entity_id)

    def _log(self, level: int, message: str, category: str, entity_id: str = None):
        """Internes Logging mit Kategorie und Entity-ID"""
        if not self.logger.isEnabledFor(level):
            return
        prefix = f"[{category}]"
        if entity_id:
            prefix = f"{prefix} {entity_id}"
        self.logger.log(level, f"{prefix} {message}")

    def set_debug_mode(self, enabled: bool = True):
        """Debug-Modus aktivieren/deaktivieren"""
        self.debug_mode = enabled
        os.environ[ENV_DEBUG] = '1' if enabled else '0'

        self.formatter = LogFormatter(debug_mode=self.debug_mode)
        self.console_handler.setFormatter(self.formatter)
        if enabled:
            self.logger.setLevel(logging.DEBUG)

        mode = "aktiviert" if enabled else "deaktiviert"
        self.debug(f"Debug-Modus {mode}", LogCategory.SYSTEM)


# Globale Logger-Instanz
logger = Logger.get_instance()


def set_debug_mode(enabled: bool = False):
    """Debug-Modus einstellen"""
    logger.set_debug_mode(enabled)
    return logger


def set_logging_level_from_config(config: Dict[str, Any], cli_debug_mode: bool = False):
    """Log-Level aus Konfiguration setzen"""
    logging_cfg = config.get("logging", {}) or {}
    raw_level = logging_cfg.get("level", "WARNING")
    level_str = str(raw_level).upper()

    level_map = {
        "DEBUG": LogLevel.DEBUG,
        "INFO": LogLevel.INFO,
        "WARNING": LogLevel.WARNING,
        "ERROR": LogLevel.ERROR,
        "NONE": LogLevel.NONE
    }

    if level_str not in level_map:
        logger.warning(f"Unbekanntes Log-Level '{raw_level}', verwende WARNING", LogCategory.CONFIG)
    logger.set_level(level_map.get(level_str, LogLevel.WARNING))

    debug_mode = bool(logging_cfg.get("debug", False)) or cli_debug_mode
    if debug_mode:
        set_debug_mode(True)
