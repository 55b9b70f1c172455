import pytest

from ft5x06_regtool import FT5x06
from ft5x06_regtool.interface import I2CMessage, Transaction


class TestReadRegister:
    def test_issues_one_combined_transaction(self, transport):
        transport.reply = b"\x12"
        value = FT5x06(transport).read_register(0xA6)

        assert value == 0x12
        assert transport.transactions == [
            Transaction((I2CMessage.write(0x38, [0xA6]), I2CMessage.read(0x38, 1)))
        ]

    @pytest.mark.parametrize("register", [0x00, 0x7F, 0x80, 0xFF])
    def test_register_forwarded_unmodified(self, transport, register):
        transport.reply = bytes([register ^ 0xFF])
        assert FT5x06(transport).read_register(register) == register ^ 0xFF

        (transaction,) = transport.transactions
        write, read = transaction.messages
        assert not write.read and write.data == bytes([register])
        assert read.read and read.length == 1

    def test_uses_bound_address(self, make_transport):
        bus = make_transport(address=0x5D)
        FT5x06(bus).read_register(0xA8)
        assert {msg.address for msg in bus.transactions[0]} == {0x5D}

    def test_failure_returns_none_and_logs_code(self, transport, log_messages):
        transport.fail_code = -121
        assert FT5x06(transport).read_register(0xA6) is None
        assert "Error -121" in log_messages
        assert len(transport.transactions) == 1

    def test_rejects_register_wider_than_a_byte(self, transport):
        with pytest.raises(ValueError):
            FT5x06(transport).read_register(0x100)
        assert transport.transactions == []


class TestWriteRegister:
    def test_issues_single_two_byte_write(self, transport):
        assert FT5x06(transport).write_register(0x86, 0x08) is True
        assert transport.transactions == [
            Transaction((I2CMessage.write(0x38, [0x86, 0x08]),))
        ]

    @pytest.mark.parametrize("register,value", [(0x00, 0x00), (0xFF, 0xFF), (0x80, 0x01)])
    def test_payload_is_register_then_value(self, transport, register, value):
        FT5x06(transport).write_register(register, value)
        (transaction,) = transport.transactions
        (msg,) = transaction.messages
        assert msg.data == bytes([register, value])

    def test_no_confirmation_read(self, transport):
        FT5x06(transport).write_register(0x80, 0x16)
        assert transport.transactions[0].read_length == 0

    def test_failure_is_logged_not_raised(self, transport, log_messages):
        transport.fail_code = -6
        assert FT5x06(transport).write_register(0x86, 0x08) is False
        assert "Error -6" in log_messages

    @pytest.mark.parametrize("value", [-1, 0x100])
    def test_rejects_value_wider_than_a_byte(self, transport, value):
        with pytest.raises(ValueError):
            FT5x06(transport).write_register(0x86, value)
        assert transport.transactions == []


class TestRead:
    def test_multi_byte_read(self, transport):
        transport.reply = b"\x01\x02\x03"
        assert FT5x06(transport).read([0x02], 3) == b"\x01\x02\x03"
        assert len(transport.transactions[0]) == 2

    def test_empty_prefix_is_plain_read(self, transport):
        transport.reply = b"\x55"
        assert FT5x06(transport).read(b"", 1) == b"\x55"
        (msg,) = transport.transactions[0].messages
        assert msg.read and msg.length == 1
