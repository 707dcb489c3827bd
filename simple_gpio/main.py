# simple_gpio/main.py
# Version: 1.0.0

import argparse
import sys
from datetime import timedelta
from typing import List, Optional

from termcolor import colored

from .config import get_config
from .exceptions import GPIOError
from .filesystem import FileSystem, SysFileSystem
from .logging_config import logger, LogCategory, set_logging_level_from_config
from .pin_interface import PinInterface
from .const import IOMode, Power

COMMANDS = ["status", "on", "off", "toggle", "blink"]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="simple-gpio", description="Einzelnen GPIO-Pin über sysfs steuern")
    ap.add_argument("--config", default=None, help="Pfad zur config.yaml")
    ap.add_argument("--debug", action="store_true", help="Debug-Ausgaben aktivieren")
    ap.add_argument("pin", help="GPIO-Nummer oder Alias aus 'pins'")
    ap.add_argument("command", choices=COMMANDS)

    # Nur für 'blink'
    ap.add_argument("--hz", type=float, default=None, help="Frequenz in Hertz")
    group = ap.add_mutually_exclusive_group()
    group.add_argument("--duration", type=float, default=None, help="Dauer in Sekunden")
    group.add_argument("--iterations", type=int, default=None, help="Anzahl Perioden")
    return ap


def print_status(pin: PinInterface):
    """Gibt Export-Status, Richtung und Pegel eines Pins aus"""
    name = colored(pin.name, "magenta")
    if not pin.enabled:
        print(f"{name}: " + colored("nicht exportiert", "red"))
        return

    mode = pin.io_mode
    power = pin.power
    mode_str = "Eingang" if mode == IOMode.READ else "Ausgang"
    color = "green" if power == Power.ON else "red"
    print(f"{name}: {mode_str}, Pegel " + colored(power.name, color))


def run_command(pin: PinInterface, args, config) -> None:
    command = args.command
    if command == "status":
        print_status(pin)
    elif command == "on":
        pin.turn_on()
        logger.info(colored(pin.name, "magenta") + " eingeschaltet.", LogCategory.GPIO)
    elif command == "off":
        pin.turn_off()
        logger.info(colored(pin.name, "magenta") + " ausgeschaltet.", LogCategory.GPIO)
    elif command == "toggle":
        pin.toggle()
        logger.info(colored(pin.name, "magenta") + f" umgeschaltet auf {pin.power.name}.", LogCategory.GPIO)
    elif command == "blink":
        hz = args.hz if args.hz is not None else float(config.get_value("toggle.hz"))
        if args.iterations is not None:
            pin.toggle(hz, iterations=args.iterations)
        else:
            seconds = args.duration if args.duration is not None else float(config.get_value("toggle.duration"))
            pin.toggle(hz, timedelta(seconds=seconds))
        logger.info(colored(pin.name, "magenta") + f" mit {hz} Hz geblinkt.", LogCategory.GPIO)


def main(argv: Optional[List[str]] = None, fs: Optional[FileSystem] = None) -> int:
    """Hauptfunktion des Programms"""
    args = build_parser().parse_args(argv)

    try:
        config = get_config(args.config)
        set_logging_level_from_config(config, args.debug)

        pin_id = config.resolve_pin(args.pin)
        pin = PinInterface(pin_id, fs if fs is not None else SysFileSystem())
        run_command(pin, args, config)
    except (GPIOError, OSError, ValueError) as e:
        logger.error(f"Befehl '{args.command}' für Pin {args.pin} fehlgeschlagen", LogCategory.ERROR, exception=e)
        return 1
    except KeyboardInterrupt:
        logger.info("Beende Programm durch Tastendruck...", LogCategory.SYSTEM)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
