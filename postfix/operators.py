import enum
from typing import Callable

from postfix.utils import PrintableEnum, wrap_int

BinaryOperationImpl = Callable[[int, int], int]


class Operator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    MOD = enum.auto()


OPERATOR_SYMBOLS: dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUB,
    "*": Operator.MUL,
    "/": Operator.DIV,
    "%": Operator.MOD,
}


def truncating_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero, unlike Python's floor division"""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def truncating_mod(a: int, b: int) -> int:
    """Remainder matching truncating_div, its sign follows the dividend"""
    return a - b * truncating_div(a, b)


OPERATOR_IMPLS: dict[Operator, BinaryOperationImpl] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: truncating_div,
    Operator.MOD: truncating_mod,
}

DIVIDING_OPERATORS = frozenset({Operator.DIV, Operator.MOD})


def apply_operator(operator: Operator, operand1: int, operand2: int) -> int:
    """operand1 is the deeper stack value, operand2 the most recently pushed one.

    Results wrap around like a 32-bit signed integer, so INT_MAX + 1 is INT_MIN.
    """
    return wrap_int(OPERATOR_IMPLS[operator](operand1, operand2))
