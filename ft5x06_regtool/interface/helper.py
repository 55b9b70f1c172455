from typing import TYPE_CHECKING, Literal, Tuple, overload

from .errortype import InterfaceNotFoundError
from .templates import I2CTransportTemplate

if TYPE_CHECKING:
    from .if_periphery import Periphery_I2CInterface
    from .if_smbus2 import SMBus2_I2CInterface

AVAILABLE_DRIVERS: Tuple[str, ...] = ("smbus2", "periphery")


@overload
def open_interface(
    driver_name: Literal["smbus2"], bus: int, address: int
) -> "SMBus2_I2CInterface":
    ...


@overload
def open_interface(
    driver_name: Literal["periphery"], bus: int, address: int
) -> "Periphery_I2CInterface":
    ...


def open_interface(driver_name, bus, address) -> I2CTransportTemplate:
    """
    Open the i2c-dev bus `bus` with the given backend and force-bind it to `address`

    Raises DeviceOpenError / BindError, the handle is already released then.
    """
    if driver_name == "smbus2":
        from .if_smbus2 import SMBus2_I2CInterface

        return SMBus2_I2CInterface(bus, address)
    elif driver_name == "periphery":
        from .if_periphery import Periphery_I2CInterface

        return Periphery_I2CInterface(bus, address)
    raise InterfaceNotFoundError(f"Unknown i2c driver '{driver_name}'")
