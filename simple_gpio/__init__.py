# simple_gpio/__init__.py

from simple_gpio.const import IOMode, Power, UNKNOWN
from simple_gpio.exceptions import GPIOError, PinValueError, ConfigError
from simple_gpio.filesystem import FileSystem, SysFileSystem
from simple_gpio.pin_interface import PinInterface

__version__ = "1.0.0"
