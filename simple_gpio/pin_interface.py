# simple_gpio/pin_interface.py
# Version: 1.0.0

import math
import time
from datetime import timedelta
from typing import Optional, Union

from .const import (
    UNKNOWN, IOMode, Power, DIRECTION_VALUES, POWER_VALUES,
    EXPORT_PATH, PIN_ROOT_TEMPLATE, DIRECTION_TEMPLATE, VALUE_TEMPLATE
)
from .exceptions import PinValueError
from .filesystem import FileSystem
from .logging_config import logger, LogCategory


def _decode(path: str, raw: str, mapping: dict):
    """Wandelt den Rohtext einer sysfs-Datei zurück in den Enum-Wert"""
    text = raw.strip()
    for key, value in mapping.items():
        if value == text:
            return key
    raise PinValueError(path, raw)


class PinInterface:
    """
    Ein einzelner GPIO-Pin über sysfs (/sys/class/gpio).

    Der Zustand (exportiert, Richtung, Pegel) wird zwischengespeichert. Ein
    Eintrag steht auf UNKNOWN, bis er einmal gelesen oder geschrieben wurde;
    danach wird das Dateisystem für diesen Eintrag nicht mehr befragt.

    Der Pin wird beim ersten Zugriff auf Richtung oder Pegel automatisch
    exportiert. Wird ein Pegel gesetzt, schaltet der Pin vorher auf WRITE.
    """

    def __init__(self, id: int, fs: FileSystem):
        """
        :param id: GPIO-Nummer, wird ohne Prüfung in die Pfade eingesetzt
        :param fs: Dateisystem-Zugriff (z.B. SysFileSystem)
        """
        self._id = id
        self._fs = fs

        self._enabled = UNKNOWN
        self._io_mode = UNKNOWN
        self._power = UNKNOWN

        self._pin_root = PIN_ROOT_TEMPLATE.format(id=id)
        self._direction_path = DIRECTION_TEMPLATE.format(id=id)
        self._value_path = VALUE_TEMPLATE.format(id=id)

    def __repr__(self):
        return f"PinInterface(id={self._id})"

    @property
    def id(self) -> int:
        """Gibt die GPIO-Nummer zurück"""
        return self._id

    @property
    def name(self) -> str:
        return f"gpio{self._id}"

    # =========== EXPORT ===========

    @property
    def enabled(self) -> bool:
        """Gibt zurück, ob der Pin exportiert ist (fragt sysfs nur beim ersten Mal)"""
        if self._enabled is UNKNOWN:
            self._enabled = self._fs.exists(self._pin_root)
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        # Nur der Cache - exportiert wird erst beim nächsten Zugriff
        self._enabled = bool(value)

    def enable(self) -> None:
        """Exportiert den Pin, falls noch nicht geschehen"""
        if self.enabled:
            return
        logger.debug(f"Exportiere Pin über {EXPORT_PATH}", LogCategory.GPIO, self.name)
        self._fs.write(EXPORT_PATH, str(self._id))
        self._enabled = True

    def disable(self) -> None:
        """Markiert den Pin als nicht exportiert (kein unexport)"""
        self._enabled = False

    def _ensure_enabled(self) -> None:
        if not self.enabled:
            self.enable()

    # =========== RICHTUNG ===========

    @property
    def io_mode(self) -> IOMode:
        """Gibt die Richtung des Pins zurück"""
        self._ensure_enabled()
        if self._io_mode is UNKNOWN:
            raw = self._fs.read(self._direction_path)
            self._io_mode = _decode(self._direction_path, raw, DIRECTION_VALUES)
        return self._io_mode

    @io_mode.setter
    def io_mode(self, mode: IOMode) -> None:
        self._ensure_enabled()
        mode = IOMode(mode)
        self._fs.write(self._direction_path, DIRECTION_VALUES[mode])
        self._io_mode = mode
        logger.debug(f"Richtung auf {mode.name} gesetzt", LogCategory.GPIO, self.name)

    # =========== PEGEL ===========

    @property
    def power(self) -> Power:
        """Gibt den logischen Pegel des Pins zurück"""
        self._ensure_enabled()
        if self._power is UNKNOWN:
            raw = self._fs.read(self._value_path)
            self._power = _decode(self._value_path, raw, POWER_VALUES)
        return self._power

    @power.setter
    def power(self, power: Power) -> None:
        self._ensure_enabled()
        power = Power(power)
        if self.io_mode != IOMode.WRITE:
            self.io_mode = IOMode.WRITE
        self._fs.write(self._value_path, POWER_VALUES[power])
        self._power = power
        logger.debug(f"Pegel auf {power.name} gesetzt", LogCategory.GPIO, self.name)

    def turn_on(self) -> None:
        self.power = Power.ON

    def turn_off(self) -> None:
        self.power = Power.OFF

    # =========== TOGGLE ===========

    def toggle(
        self,
        hz: Optional[float] = None,
        duration: Union[timedelta, float, None] = None,
        iterations: Optional[int] = None
    ) -> None:
        """
        Schaltet den Pegel um.

        Ohne Argumente wird genau einmal umgeschaltet. Mit Frequenz wird eine
        Rechteckschwingung erzeugt, entweder für eine Dauer oder für eine
        feste Anzahl Perioden. Jede Periode schaltet zweimal um und wartet
        jeweils eine halbe Periode. Der Aufruf blockiert bis zum Ende.

        :param hz: Frequenz der Rechteckschwingung in Hertz
        :param duration: Gesamtdauer als timedelta oder in Sekunden
        :param iterations: Anzahl der Perioden
        """
        if hz is None:
            if duration is not None or iterations is not None:
                raise TypeError("toggle() mit duration/iterations braucht eine Frequenz")
            self.power = Power.OFF if self.power == Power.ON else Power.ON
            return

        if (duration is None) == (iterations is None):
            raise TypeError("toggle() braucht entweder duration oder iterations")

        if iterations is None:
            iterations = self._iterations_for(hz, duration)
        self._toggle_iterations(hz, iterations)

    @staticmethod
    def _check_hz(hz: float) -> None:
        if not math.isfinite(hz) or hz <= 0:
            raise ValueError(f"Frequenz muss positiv und endlich sein: {hz}")

    @staticmethod
    def _iterations_for(hz: float, duration: Union[timedelta, float]) -> int:
        """Anzahl Perioden, die die Dauer bei gegebener Frequenz abdecken"""
        PinInterface._check_hz(hz)
        if isinstance(duration, timedelta):
            seconds = duration.total_seconds()
        else:
            seconds = float(duration)
        if not math.isfinite(seconds) or seconds < 0:
            raise ValueError(f"Dauer muss endlich und nicht negativ sein: {duration}")
        if seconds == 0:
            return 0
        cycles = seconds * hz
        if not math.isfinite(cycles):
            raise ValueError(f"Zu viele Perioden: {hz} Hz für {duration}")
        # Rundung auf 9 Stellen, damit Float-Rauschen keine Periode hinzufügt
        return max(math.ceil(round(cycles, 9)), 1)

    def _toggle_iterations(self, hz: float, iterations: int) -> None:
        self._check_hz(hz)
        if isinstance(iterations, bool) or not float(iterations).is_integer():
            raise ValueError(f"Anzahl Perioden muss ganzzahlig sein: {iterations}")
        if iterations < 0:
            raise ValueError(f"Anzahl Perioden darf nicht negativ sein: {iterations}")

        half_period = 1.0 / hz / 2
        logger.debug(f"Toggle mit {hz} Hz für {iterations} Perioden", LogCategory.GPIO, self.name)
        for _ in range(int(iterations)):
            self.toggle()
            time.sleep(half_period)
            self.toggle()
            time.sleep(half_period)


__all__ = ["PinInterface"]
