import enum
import re
from typing import Optional

INT_BITS = 32
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


# ASCII digits only: int() would also accept "1_000", " 7" and non-latin digits
_INT_LITERAL_RE = re.compile(r"(?P<sign>[+-]?)0*(?P<digits>[0-9]+)")


def is_int_literal(lexeme: str) -> bool:
    return _INT_LITERAL_RE.fullmatch(lexeme) is not None


def parse_int_literal(lexeme: str) -> Optional[int]:
    """Signed decimal literal within [INT_MIN, INT_MAX], None for anything else"""
    match = _INT_LITERAL_RE.fullmatch(lexeme)
    # length check first: int() refuses huge digit strings outright
    if match is None or len(match.group("digits")) > len(str(INT_MAX)):
        return None
    value = int(lexeme)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def wrap_int(value: int) -> int:
    """Two's complement wrap-around into [INT_MIN, INT_MAX]"""
    return (value - INT_MIN) % 2**INT_BITS + INT_MIN
