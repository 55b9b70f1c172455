from typing import List, Optional, Union

from loguru import logger

from .interface import I2CTransportTemplate, Transaction, TransactionError

FT5X06_ADDR = 0x38  # I2C address


def _byte(name: str, value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value!r}")
    return value


class FT5x06:
    """
    Register access for FT5x06 family touch controllers

    Every call is one stateless bus transaction on the bound interface.
    Bus failures are logged and reported through the return value.
    """

    def __init__(self, bus: I2CTransportTemplate) -> None:
        self._bus = bus

    def read(self, prefix: Union[bytes, List[int]], length: int) -> Optional[bytes]:
        # write prefix and read back without releasing the bus
        transaction = Transaction.combined(self._bus.address, prefix, length)
        try:
            return self._bus.execute(transaction)
        except TransactionError as e:
            logger.error(f"Error {e.code}")
            return None

    def read_register(self, register: int) -> Optional[int]:
        data = self.read([_byte("register", register)], 1)
        if data is None:
            return None
        return data[0]

    def write_register(self, register: int, value: int) -> bool:
        transaction = Transaction.single_write(
            self._bus.address,
            [_byte("register", register), _byte("value", value)],
        )
        try:
            self._bus.execute(transaction)
        except TransactionError as e:
            logger.error(f"Error {e.code}")
            return False
        return True
