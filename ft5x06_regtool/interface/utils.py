import os
from fcntl import ioctl

from loguru import logger

from .errortype import BindError

# linux/i2c-dev.h
I2C_SLAVE_FORCE = 0x0706


def i2c_devpath(bus: int) -> str:
    """
    Device node of an i2c-dev bus
    """
    return f"/dev/i2c-{bus:d}"


def force_bind(fd: int, address: int) -> None:
    """
    Address all following transfers on `fd` to `address`, even if a
    kernel driver already claims it
    """
    logger.debug(f"Setting addr to {address:#04x}")
    try:
        ioctl(fd, I2C_SLAVE_FORCE, address)
    except OSError as e:
        raise BindError(address, os.strerror(e.errno) if e.errno else str(e)) from e


def error_code(e: OSError) -> int:
    """
    Negative errno of a failed driver call, -1 if unknown
    """
    return -e.errno if e.errno else -1
