from dataclasses import dataclass
from typing import Optional

from .ft5x06 import FT5X06_ADDR
from .interface.utils import i2c_devpath

FT5X06_BUS = 3  # i2c bus of the touch controller
DEFAULT_BACKEND = "smbus2"


@dataclass(frozen=True)
class Session:
    bus: int = FT5X06_BUS
    address: int = FT5X06_ADDR
    backend: str = DEFAULT_BACKEND

    @property
    def devpath(self) -> str:
        return i2c_devpath(self.bus)


@dataclass(frozen=True)
class Request:
    """
    One register operation asked for on the command line

    At most one of read or write+value may be set.
    """

    read: Optional[int] = None
    write: Optional[int] = None
    value: Optional[int] = None

    def rejection(self) -> Optional[str]:
        """
        Reason the request cannot be executed, None if it is valid
        """
        if self.write is not None and self.read is not None:
            return "Received both read and write"
        if self.write is None and self.value is not None:
            return "Didn't receive write address"
        if self.write is not None and self.value is None:
            return "Didn't receive write value"
        return None
