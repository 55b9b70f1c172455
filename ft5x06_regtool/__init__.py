from .config import Request, Session  # noqa: F401
from .ft5x06 import FT5X06_ADDR, FT5x06  # noqa: F401
