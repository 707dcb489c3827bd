# simple_gpio/const.py
# Version: 1.0.0

from enum import Enum

# sysfs-Pfade (fest vorgegeben durch den Kernel)
GPIO_ROOT = "/sys/class/gpio"
EXPORT_PATH = f"{GPIO_ROOT}/export"
PIN_ROOT_TEMPLATE = GPIO_ROOT + "/gpio{id}"
DIRECTION_TEMPLATE = PIN_ROOT_TEMPLATE + "/direction"
VALUE_TEMPLATE = PIN_ROOT_TEMPLATE + "/value"


class _Unknown:
    """Marker für einen noch nicht abgefragten Cache-Eintrag"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNKNOWN"

    def __bool__(self):
        return False


UNKNOWN = _Unknown()


class IOMode(str, Enum):
    """Richtung eines Pins"""
    READ = "read"
    WRITE = "write"


class Power(str, Enum):
    """Logischer Pegel eines Pins (unabhängig von der Polarität der Datei)"""
    ON = "on"
    OFF = "off"


# Rohwerte der direction-Datei
DIRECTION_VALUES = {
    IOMode.READ: "in",
    IOMode.WRITE: "out",
}

# Rohwerte der value-Datei - active-low: "0" bedeutet eingeschaltet
POWER_VALUES = {
    Power.ON: "0",
    Power.OFF: "1",
}

# Standardwerte für die CLI
DEFAULT_TOGGLE_HZ = 2.0
DEFAULT_TOGGLE_DURATION = 1.0

# Umgebungsvariablen
ENV_CONFIG = "SIMPLE_GPIO_CONFIG"
ENV_DEBUG = "SIMPLE_GPIO_DEBUG"
