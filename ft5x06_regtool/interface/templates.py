from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union, final

from loguru import logger

__all__ = [
    "I2CMessage",
    "Transaction",
    "BaseInterfaceTemplate",
    "I2CTransportTemplate",
]


@dataclass(frozen=True)
class I2CMessage:
    """
    One message of a bus transaction

    A write message carries its payload in `data`, a read message
    only carries the number of bytes to read in `length`.
    """

    address: int
    read: bool
    data: bytes = b""
    length: int = 0

    @staticmethod
    def write(address: int, data: Union[bytes, List[int]]) -> "I2CMessage":
        payload = bytes(data)
        return I2CMessage(address, False, payload, len(payload))

    @staticmethod
    def read(address: int, length: int) -> "I2CMessage":
        if length <= 0:
            raise ValueError("Read length must be positive")
        return I2CMessage(address, True, b"", length)

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        if self.read:
            return f"i2c_msg(addr={self.address:#04x}, read, len={self.length})"
        return f"i2c_msg(addr={self.address:#04x}, write, data={self.data.hex()})"


@dataclass(frozen=True)
class Transaction:
    """
    Ordered messages submitted to the bus as one combined operation
    """

    messages: Tuple[I2CMessage, ...]

    def __post_init__(self) -> None:
        if not self.messages:
            raise ValueError("Empty transaction")

    @staticmethod
    def combined(address: int, prefix: Union[bytes, List[int]], length: int) -> "Transaction":
        """
        Write `prefix` then read `length` bytes without a stop in between

        An empty prefix gives a plain read.
        """
        msgs = [I2CMessage.read(address, length)]
        if len(prefix) > 0:
            msgs.insert(0, I2CMessage.write(address, prefix))
        return Transaction(tuple(msgs))

    @staticmethod
    def single_write(address: int, data: Union[bytes, List[int]]) -> "Transaction":
        return Transaction((I2CMessage.write(address, data),))

    @property
    def read_length(self) -> int:
        return sum(msg.length for msg in self.messages if msg.read)

    def __iter__(self) -> Iterator[I2CMessage]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


class BaseInterfaceTemplate:
    _destroyed = True

    def __init__(self) -> None:
        self._destroyed = False  # prevent double destroy
        logger.debug(f"Interface {self.__class__.__name__} initialized")

    def close(self):
        """
        Release the underlying handle

        Never call directly, use destroy()
        """
        ...

    @final
    def destroy(self):
        """
        Release the interface, safe to call any number of times

        Note: called automatically on context exit and garbage collection, \
              but callers should release the bus as soon as they are done
        """
        if self._destroyed:
            return
        self._destroyed = True
        try:
            self.close()
        finally:
            logger.debug(f"Interface {self.__class__.__name__} destroyed")

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.destroy()

    def __del__(self):
        self.destroy()


class I2CTransportTemplate(BaseInterfaceTemplate):
    @property
    def bus(self) -> int:
        """
        Return the bus number the handle was opened on
        """
        raise NotImplementedError()

    @property
    def address(self) -> int:
        """
        Return the address of communication target

        Note: 7-bit address, r/w bit will be added automatically
        """
        raise NotImplementedError()

    @address.setter
    def address(self, address: int):
        """
        Force-bind the handle to a new target address

        Raises BindError if the driver refuses
        """
        raise NotImplementedError()

    def execute(self, transaction: Transaction) -> bytes:
        """
        Submit all messages of the transaction as one bus operation

        Returns the bytes of the read messages in order, b"" if none.
        Raises TransactionError if the driver reports a failure.
        """
        raise NotImplementedError()
