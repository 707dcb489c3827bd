# simple_gpio/filesystem.py
# Version: 1.0.0

"""
Zugriff auf das sysfs-Dateisystem.

PinInterface kennt nur die drei Operationen aus FileSystem. Damit lässt sich
der Pin ohne echtes /sys testen, indem ein Mock oder Fake übergeben wird.
"""

from pathlib import Path
from typing import Protocol

from .logging_config import logger, LogCategory


class FileSystem(Protocol):
    """Schnittstelle für Dateizugriffe eines Pins"""

    def exists(self, path: str) -> bool:
        """Prüft, ob der Pfad existiert."""
        ...

    def read(self, path: str) -> str:
        """Liest den kompletten Text einer Datei."""
        ...

    def write(self, path: str, value: str) -> None:
        """Schreibt den Text in eine Datei."""
        ...


class SysFileSystem:
    """Direkter Zugriff auf das Betriebssystem - ohne Cache, ohne Wiederholungen"""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def read(self, path: str) -> str:
        value = Path(path).read_text()
        logger.debug(f"Gelesen: {path} -> {value.strip()!r}", LogCategory.GPIO)
        return value

    def write(self, path: str, value: str) -> None:
        logger.debug(f"Schreibe: {path} <- {value!r}", LogCategory.GPIO)
        Path(path).write_text(value)


__all__ = ["FileSystem", "SysFileSystem"]
