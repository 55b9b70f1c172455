import argparse
import sys
from typing import List, Optional

from loguru import logger

from .config import DEFAULT_BACKEND, FT5X06_BUS, Request, Session
from .ft5x06 import FT5X06_ADDR, FT5x06
from .interface import AVAILABLE_DRIVERS, BindError, DeviceOpenError, open_interface

USAGE = (
    "FT5x06 tool usage: %(prog)s [OPTIONS]\nOPTIONS:\n"
    "\t-a, --address\n\t\tI2C address of the FT5x06 controller (hex). "
    "Default is 0x38.\n"
    "\t-b, --bus\n\t\tI2C bus the FT5x06 controller is on. "
    "Default is 3.\n"
    "\t-r, --read\n\t\tAddress to read from.\n"
    "\t-w, --write\n\t\tAddress to write to.\n"
    "\t-v, --value\n\t\tValue to write\n"
    "\t--backend\n\t\tBus library, smbus2 or periphery. "
    "Default is smbus2.\n"
    "\t-d, --debug\n\t\tTrace device access.\n"
    "\t-h, --help\n\t\tShow this help and exit.\n"
)


class _Parser(argparse.ArgumentParser):
    # bad arguments print the usage and exit 1, like --help
    def error(self, message: str):
        self.print_help()
        self.exit(1, f"{self.prog}: error: {message}\n")

    def format_help(self) -> str:
        return USAGE % {"prog": self.prog}


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, **kwargs):
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        parser.exit(1)


def _hex(text: str, limit: int) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex value '{text}'")
    if not 0 <= value <= limit:
        raise argparse.ArgumentTypeError(f"{text} out of range 0x00-{limit:#04x}")
    return value


def hex_byte(text: str) -> int:
    return _hex(text, 0xFF)


def hex_address(text: str) -> int:
    return _hex(text, 0x7F)


def bus_number(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid bus number '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid bus number '{text}'")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="ft5x06-regtool", add_help=False)
    parser.add_argument("-a", "--address", type=hex_address, default=FT5X06_ADDR)
    parser.add_argument("-b", "--bus", type=bus_number, default=FT5X06_BUS)
    parser.add_argument("-r", "--read", type=hex_byte)
    parser.add_argument("-w", "--write", type=hex_byte)
    parser.add_argument("-v", "--value", type=hex_byte)
    parser.add_argument("--backend", choices=AVAILABLE_DRIVERS, default=DEFAULT_BACKEND)
    parser.add_argument("-d", "--debug", action="store_true")
    parser.add_argument("-h", "--help", action=_HelpAction)
    return parser


def setup_logging(debug: bool = False) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        format="[{function}]: {message}",
    )


def run(session: Session, request: Request) -> int:
    """
    Open the bus, run the request and release the bus on every path

    Returns 1 if the bus could not be opened or bound, 0 otherwise.
    Rejected requests and failed transactions are only logged.
    """
    try:
        bus = open_interface(session.backend, session.bus, session.address)
    except (DeviceOpenError, BindError) as e:
        logger.error(str(e))
        return 1

    with bus:
        reason = request.rejection()
        if reason is not None:
            logger.warning(reason)
            return 0

        ts = FT5x06(bus)
        if request.read is not None:
            value = ts.read_register(request.read)
            if value is not None:
                print(f"{value:02x}")
        elif request.write is not None:
            if ts.write_register(request.write, request.value):
                print(f"{request.write:02x} = {request.value:02x}")
        else:
            logger.info("Nothing to do, use -r or -w/-v")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    session = Session(bus=args.bus, address=args.address, backend=args.backend)
    request = Request(read=args.read, write=args.write, value=args.value)
    return run(session, request)
