import abc
import re
from dataclasses import dataclass

from postfix.operators import OPERATOR_SYMBOLS, Operator
from postfix.utils import parse_int_literal

_WHITESPACE_RE = re.compile(r"\s")


@dataclass
class Operand:
    lexeme: str
    start_idx: int
    value: int

    def __str__(self) -> str:
        return f"<OPERAND>{self.lexeme}"


@dataclass
class OperatorToken:
    lexeme: str
    start_idx: int
    operator: Operator

    def __str__(self) -> str:
        return f"<{self.operator}>{self.lexeme}"


@dataclass
class UnknownToken:
    lexeme: str
    start_idx: int

    def __str__(self) -> str:
        return f"<UNKNOWN>{self.lexeme}"


Token = Operand | OperatorToken | UnknownToken


def classify(lexeme: str, start_idx: int) -> Token:
    value = parse_int_literal(lexeme)
    if value is not None:
        return Operand(lexeme=lexeme, start_idx=start_idx, value=value)
    operator = OPERATOR_SYMBOLS.get(lexeme)
    if operator is not None:
        return OperatorToken(lexeme=lexeme, start_idx=start_idx, operator=operator)
    return UnknownToken(lexeme=lexeme, start_idx=start_idx)


class Tokenizer(abc.ABC):
    @abc.abstractmethod
    def split(self, expression: str) -> list[tuple[str, int]]:
        """Returns (lexeme, start index) pairs in input order"""


class SpaceSplitTokenizer(Tokenizer):
    """Splits on every single whitespace character, so runs of whitespace produce empty lexemes"""

    def split(self, expression: str) -> list[tuple[str, int]]:
        result: list[tuple[str, int]] = []
        start = 0
        for match in _WHITESPACE_RE.finditer(expression):
            result.append((expression[start : match.start()], start))
            start = match.end()
        result.append((expression[start:], start))
        return result


class CharSplitTokenizer(Tokenizer):
    def split(self, expression: str) -> list[tuple[str, int]]:
        return [(char, i) for i, char in enumerate(expression)]


def select_tokenizer(expression: str) -> Tokenizer:
    if _WHITESPACE_RE.search(expression):
        return SpaceSplitTokenizer()
    else:
        return CharSplitTokenizer()


def tokenize(expression: str, skip_empty: bool = False) -> list[Token]:
    tokens: list[Token] = []
    for lexeme, start_idx in select_tokenizer(expression).split(expression):
        if skip_empty and not lexeme:
            continue
        tokens.append(classify(lexeme, start_idx))
    return tokens
