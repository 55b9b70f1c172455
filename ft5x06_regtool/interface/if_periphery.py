from loguru import logger
from periphery import I2C, I2CError

from .errortype import DeviceOpenError, TransactionError
from .templates import I2CMessage, I2CTransportTemplate, Transaction
from .utils import error_code, force_bind, i2c_devpath


def build_msg(msg: I2CMessage) -> I2C.Message:
    if msg.read:
        return I2C.Message(bytearray(msg.length), read=True)
    return I2C.Message(bytearray(msg.data))


class Periphery_I2CInterface(I2CTransportTemplate):
    def __init__(self, bus: int, address: int) -> None:
        self._bus_num = bus
        self._addr = address
        devpath = i2c_devpath(bus)
        logger.debug(f"Opening {devpath}")
        try:
            self._i2c = I2C(devpath)
        except I2CError as e:
            raise DeviceOpenError(devpath, e.strerror or str(e)) from e
        try:
            force_bind(self._i2c.fd, address)
        except Exception:
            self._i2c.close()
            raise
        return super().__init__()

    @property
    def bus(self) -> int:
        return self._bus_num

    @property
    def address(self) -> int:
        return self._addr

    @address.setter
    def address(self, address: int) -> None:
        force_bind(self._i2c.fd, address)
        self._addr = address

    def execute(self, transaction: Transaction) -> bytes:
        assert not self._destroyed, "Interface has been destroyed"
        # periphery addresses every message of a transfer to one target
        if len({msg.address for msg in transaction}) != 1:
            raise ValueError("Transaction addresses more than one target")
        target = transaction.messages[0].address
        periphery_msgs = [build_msg(msg) for msg in transaction]
        try:
            self._i2c.transfer(target, periphery_msgs)
        except I2CError as e:
            raise TransactionError(error_code(e), e.strerror or str(e)) from e
        logger.debug(f"Transferred {len(periphery_msgs)} messages on bus {self._bus_num}")
        return b"".join(
            bytes(p_msg.data)
            for msg, p_msg in zip(transaction, periphery_msgs)
            if msg.read
        )

    def close(self) -> None:
        self._i2c.close()
