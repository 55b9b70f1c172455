from typing import List, Optional

import pytest
from loguru import logger

from ft5x06_regtool.interface import I2CTransportTemplate, Transaction, TransactionError


class FakeTransport(I2CTransportTemplate):
    """Transport that records transactions instead of touching a bus."""

    def __init__(self, bus: int = 3, address: int = 0x38, reply: bytes = b"\x00") -> None:
        self._bus_num = bus
        self._address = address
        self.reply = reply
        self.fail_code: Optional[int] = None
        self.transactions: List[Transaction] = []
        self.close_count = 0
        super().__init__()

    @property
    def bus(self) -> int:
        return self._bus_num

    @property
    def address(self) -> int:
        return self._address

    @address.setter
    def address(self, address: int):
        self._address = address

    def execute(self, transaction: Transaction) -> bytes:
        self.transactions.append(transaction)
        if self.fail_code is not None:
            raise TransactionError(self.fail_code)
        return self.reply[: transaction.read_length]

    def close(self):
        self.close_count += 1


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def log_messages():
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
