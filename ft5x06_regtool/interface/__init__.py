"""
# Bus transport layer

Every backend opens `/dev/i2c-N`, force-binds one target address and runs
combined transactions as a single atomic bus operation.

```python
from ft5x06_regtool.interface import Transaction, open_interface

with open_interface("smbus2", bus=3, address=0x38) as bus:
    data = bus.execute(Transaction.combined(bus.address, [0xA6], 1))
```
"""
from .errortype import (  # noqa: F401
    BindError,
    DeviceOpenError,
    InterfaceError,
    InterfaceNotFoundError,
    TransactionError,
)
from .helper import AVAILABLE_DRIVERS, open_interface  # noqa: F401
from .templates import (  # noqa: F401
    BaseInterfaceTemplate,
    I2CMessage,
    I2CTransportTemplate,
    Transaction,
)
