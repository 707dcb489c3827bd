import logging

from simple_gpio import PinInterface, IOMode
from simple_gpio.logging_config import logger, LogCategory, LogLevel, set_logging_level_from_config


def test_messages_carry_category_and_entity(caplog):
    caplog.set_level(logging.DEBUG, logger="simple_gpio")

    logger.info("eingeschaltet", LogCategory.GPIO, "gpio17")

    assert "[GPIO] gpio17 eingeschaltet" in caplog.text


def test_error_appends_exception(caplog):
    logger.error("Befehl fehlgeschlagen", exception=PermissionError("denied"))

    assert "[Error] Befehl fehlgeschlagen: denied" in caplog.text


def test_set_level_accepts_names_and_enum():
    logger.set_level("info")
    assert logger.logger.level == logging.INFO

    logger.set_level(LogLevel.NONE)
    assert logger.logger.level == logging.CRITICAL + 10


def test_level_from_config():
    set_logging_level_from_config({"logging": {"level": "error"}})

    assert logger.logger.level == logging.ERROR


def test_unknown_level_falls_back_to_warning(caplog):
    set_logging_level_from_config({"logging": {"level": "chatty"}})

    assert logger.logger.level == logging.WARNING
    assert "chatty" in caplog.text


def test_debug_flag_enables_debug_level():
    set_logging_level_from_config({"logging": {"level": "ERROR", "debug": True}})

    assert logger.logger.level == logging.DEBUG
    assert logger.debug_mode is True


def test_pin_writes_are_logged(fs, caplog):
    caplog.set_level(logging.DEBUG, logger="simple_gpio")
    pin = PinInterface(123, fs)

    pin.io_mode = IOMode.WRITE

    assert "[GPIO] gpio123 Exportiere Pin" in caplog.text
    assert "[GPIO] gpio123 Richtung auf WRITE gesetzt" in caplog.text


def test_debug_mode_can_be_switched_off():
    logger.set_debug_mode(True)
    assert logger.console_handler.formatter.debug_mode is True

    logger.set_debug_mode(False)

    assert logger.debug_mode is False
    assert logger.console_handler.formatter.debug_mode is False
