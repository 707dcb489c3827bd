import logging
import os
from unittest.mock import Mock

import pytest

from simple_gpio.filesystem import SysFileSystem
from simple_gpio.logging_config import logger

EXPORT = "/sys/class/gpio/export"
PIN_ROOT = "/sys/class/gpio/gpio123"
DIRECTION = "/sys/class/gpio/gpio123/direction"
VALUE = "/sys/class/gpio/gpio123/value"


@pytest.fixture
def files():
    """Inhalte der simulierten sysfs-Dateien, Pfad -> Text"""
    return {}


@pytest.fixture
def fs(files):
    fs = Mock(spec=SysFileSystem)
    fs.exists.return_value = False
    fs.read.side_effect = lambda path: files[path]
    return fs


@pytest.fixture
def no_sleep(monkeypatch):
    sleeps = []
    monkeypatch.setattr("simple_gpio.pin_interface.time.sleep", sleeps.append)
    return sleeps


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.set_debug_mode(False)
    os.environ.pop("SIMPLE_GPIO_DEBUG", None)
    logger.logger.setLevel(logging.WARNING)


def writes_to(fs, path):
    return [c.args[1] for c in fs.write.call_args_list if c.args[0] == path]
