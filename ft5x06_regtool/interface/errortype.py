__all__ = [
    "InterfaceError",
    "InterfaceNotFoundError",
    "DeviceOpenError",
    "BindError",
    "TransactionError",
]


class InterfaceError(Exception):
    """
    Base class of all interface errors
    """


class InterfaceNotFoundError(InterfaceError):
    """
    Requested backend does not exist
    """


class DeviceOpenError(InterfaceError, OSError):
    """
    Bus device node missing or not accessible
    """

    def __init__(self, devpath: str, reason: str) -> None:
        super().__init__(f"Couldn't open {devpath}: {reason}")
        self.devpath = devpath
        self.reason = reason


class BindError(InterfaceError, OSError):
    """
    Target address could not be bound to the bus handle
    """

    def __init__(self, address: int, reason: str) -> None:
        super().__init__(f"Couldn't set slave addr: {reason}")
        self.address = address
        self.reason = reason


class TransactionError(InterfaceError, IOError):
    """
    Bus transaction reported a negative result

    code: negative errno of the failed operation (-1 if unknown)
    """

    def __init__(self, code: int, reason: str = "") -> None:
        super().__init__(f"Error {code}" + (f" ({reason})" if reason else ""))
        self.code = code
        self.reason = reason
