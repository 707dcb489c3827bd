# simple_gpio/exceptions.py
# Version: 1.0.0


class GPIOError(Exception):
    """Basisklasse für alle Fehler aus simple_gpio"""


class PinValueError(GPIOError, ValueError):
    """Unerwarteter Inhalt in einer direction- oder value-Datei"""

    def __init__(self, path: str, raw: str):
        self.path = path
        self.raw = raw
        super().__init__(f"Unerwarteter Wert in {path}: {raw!r}")


class ConfigError(GPIOError):
    """Konfigurationsdatei konnte nicht ausgewertet werden"""
