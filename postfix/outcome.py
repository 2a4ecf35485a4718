import enum
from dataclasses import dataclass, field
from typing import Optional

from postfix.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    INSUFFICIENT_OPERANDS = enum.auto()
    DIVISION_BY_ZERO = enum.auto()
    UNKNOWN_OPERATOR = enum.auto()
    MALFORMED_EXPRESSION = enum.auto()


@dataclass
class EvaluationError(Exception):
    kind: ErrorKind
    errmsg: str
    expression: str
    error_char_idx: int
    token: Optional[str] = None

    def __str__(self) -> str:
        marker_width = min(max(1, len(self.token or "")), _MAX_MARKER_WIDTH)
        excerpt, marker_offset = _excerpt(self.expression, self.error_char_idx, marker_width)
        return f"[Evaluation error] {self.errmsg}\n{excerpt}\n{' ' * marker_offset}{'^' * marker_width}"


_EXCERPT_MARGIN = 20
_MAX_MARKER_WIDTH = 40


def _excerpt(expression: str, idx: int, width: int) -> tuple[str, int]:
    """Cuts the expression down to the marked span plus some context, returns it with the marker column"""
    start = max(0, idx - _EXCERPT_MARGIN)
    end = min(len(expression), idx + width + _EXCERPT_MARGIN)
    prefix = "..." if start > 0 else ""
    suffix = "..." if end < len(expression) else ""
    return prefix + expression[start:end] + suffix, idx - start + len(prefix)


@dataclass(frozen=True)
class Success:
    value: int

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> int:
        return self.value


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    detail: str
    token: Optional[str] = None
    error: Optional[EvaluationError] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> int:
        if self.error is not None:
            raise self.error
        raise EvaluationError(self.kind, self.detail, expression="", error_char_idx=0, token=self.token)


Outcome = Success | Failure
