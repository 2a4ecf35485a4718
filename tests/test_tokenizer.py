import pytest

from postfix.operators import Operator
from postfix.tokenizer import (
    CharSplitTokenizer,
    Operand,
    OperatorToken,
    SpaceSplitTokenizer,
    UnknownToken,
    select_tokenizer,
    tokenize,
)


@pytest.mark.parametrize(
    "expression, expected_tokenizer",
    [
        pytest.param("23 4 *", SpaceSplitTokenizer),
        pytest.param("2\t3", SpaceSplitTokenizer),
        pytest.param(" ", SpaceSplitTokenizer),
        pytest.param("23*", CharSplitTokenizer),
        pytest.param("", CharSplitTokenizer),
    ],
)
def test_select_tokenizer(expression: str, expected_tokenizer: type) -> None:
    assert isinstance(select_tokenizer(expression), expected_tokenizer)


@pytest.mark.parametrize(
    "expression, expected_lexemes",
    [
        pytest.param("23 4 *", ["23", "4", "*"]),
        pytest.param("23*4-", ["2", "3", "*", "4", "-"]),
        pytest.param("1  2", ["1", "", "2"]),
        pytest.param(" 1", ["", "1"]),
        pytest.param("1 ", ["1", ""]),
        pytest.param("", []),
    ],
)
def test_tokenize_lexemes(expression: str, expected_lexemes: list[str]) -> None:
    assert [t.lexeme for t in tokenize(expression)] == expected_lexemes


def test_tokenize_skip_empty() -> None:
    assert [t.lexeme for t in tokenize(" 1  2 ", skip_empty=True)] == ["1", "2"]


def test_token_positions() -> None:
    assert [t.start_idx for t in tokenize("23  4 *")] == [0, 3, 4, 6]
    assert [t.start_idx for t in tokenize("23*")] == [0, 1, 2]


def test_token_classification() -> None:
    tokens = tokenize("-12 + % ^ 007")
    assert [type(t) for t in tokens] == [Operand, OperatorToken, OperatorToken, UnknownToken, Operand]
    assert tokens[0].value == -12
    assert tokens[1].operator is Operator.ADD
    assert tokens[2].operator is Operator.MOD
    assert tokens[4].value == 7
    assert str(tokens[0]) == "<OPERAND>-12"
    assert str(tokens[1]) == "<ADD>+"
    assert str(tokens[3]) == "<UNKNOWN>^"


@pytest.mark.parametrize("lexeme", ["1_000", "٣", "1e3", "0x1f", "--1", "", "2147483648", "-2147483649", "1" * 5000])
def test_not_integer_literals(lexeme: str) -> None:
    assert isinstance(tokenize(f"{lexeme} 1")[0], UnknownToken)


@pytest.mark.parametrize(
    "lexeme, expected_value",
    [
        pytest.param("2147483647", 2147483647),
        pytest.param("-2147483648", -2147483648),
        pytest.param("+2147483647", 2147483647),
        pytest.param("00000000002147483647", 2147483647),
        pytest.param("-0", 0),
    ],
)
def test_integer_literals_at_range_bounds(lexeme: str, expected_value: int) -> None:
    token = tokenize(f"{lexeme} 1")[0]
    assert isinstance(token, Operand)
    assert token.value == expected_value
