import os
from typing import List

from loguru import logger
from smbus2 import SMBus, i2c_msg

from .errortype import DeviceOpenError, TransactionError
from .templates import I2CMessage, I2CTransportTemplate, Transaction
from .utils import error_code, force_bind, i2c_devpath


def build_msg(msg: I2CMessage) -> i2c_msg:
    if msg.read:
        return i2c_msg.read(msg.address, msg.length)
    return i2c_msg.write(msg.address, msg.data)


class SMBus2_I2CInterface(I2CTransportTemplate):
    def __init__(self, bus: int, address: int):
        self._bus_num = bus
        self._address = address
        devpath = i2c_devpath(bus)
        logger.debug(f"Opening {devpath}")
        try:
            self._bus_instance = SMBus(bus)
        except OSError as e:
            raise DeviceOpenError(devpath, os.strerror(e.errno) if e.errno else str(e)) from e
        try:
            force_bind(self._bus_instance.fd, address)
        except Exception:
            self._bus_instance.close()
            raise
        return super().__init__()

    @property
    def bus(self) -> int:
        return self._bus_num

    @property
    def address(self) -> int:
        return self._address

    @address.setter
    def address(self, address: int):
        force_bind(self._bus_instance.fd, address)
        self._address = address

    def execute(self, transaction: Transaction) -> bytes:
        assert not self._destroyed, "Interface has been destroyed"
        smbus_msgs: List[i2c_msg] = [build_msg(msg) for msg in transaction]
        try:
            self._bus_instance.i2c_rdwr(*smbus_msgs)
        except OSError as e:
            raise TransactionError(error_code(e), str(e)) from e
        logger.debug(f"Transferred {len(smbus_msgs)} messages on bus {self._bus_num}")
        return b"".join(
            bytes(smbus_msg)
            for msg, smbus_msg in zip(transaction, smbus_msgs)
            if msg.read
        )

    def close(self):
        self._bus_instance.close()
