import logging
import reprlib

from postfix.operators import DIVIDING_OPERATORS, apply_operator
from postfix.outcome import ErrorKind, EvaluationError, Failure, Outcome, Success
from postfix.tokenizer import Operand, OperatorToken, Token, tokenize
from postfix.utils import INT_MAX, INT_MIN, is_int_literal

logger = logging.getLogger(__name__)

_lexeme_repr = reprlib.Repr()
_lexeme_repr.maxstring = 40


def evaluate(expression: str, skip_empty: bool = False) -> Outcome:
    try:
        value = evaluate_tokens(tokenize(expression, skip_empty=skip_empty), expression)
    except EvaluationError as e:
        logger.debug("Evaluation of %s failed: %s", _lexeme_repr.repr(expression), e.errmsg)
        return Failure(kind=e.kind, detail=e.errmsg, token=e.token, error=e)
    return Success(value)


def evaluate_tokens(tokens: list[Token], expression: str) -> int:
    stack: list[int] = []
    for token in tokens:
        if isinstance(token, Operand):
            stack.append(token.value)
        elif isinstance(token, OperatorToken):
            if len(stack) < 2:
                raise EvaluationError(
                    ErrorKind.INSUFFICIENT_OPERANDS,
                    f"Not enough operands for {token.lexeme!r}: expected 2, found {len(stack)}",
                    expression=expression,
                    error_char_idx=token.start_idx,
                    token=token.lexeme,
                )
            operand2 = stack.pop()
            operand1 = stack.pop()
            if token.operator in DIVIDING_OPERATORS and operand2 == 0:
                raise EvaluationError(
                    ErrorKind.DIVISION_BY_ZERO,
                    f"Can't divide by zero: {operand1} {token.lexeme} {operand2}",
                    expression=expression,
                    error_char_idx=token.start_idx,
                    token=token.lexeme,
                )
            stack.append(apply_operator(token.operator, operand1, operand2))
        else:
            if is_int_literal(token.lexeme):
                errmsg = f"Integer {_lexeme_repr.repr(token.lexeme)} is outside [{INT_MIN}, {INT_MAX}]"
            else:
                errmsg = f"Unknown operator {_lexeme_repr.repr(token.lexeme)}"
            raise EvaluationError(
                ErrorKind.UNKNOWN_OPERATOR,
                errmsg,
                expression=expression,
                error_char_idx=token.start_idx,
                token=token.lexeme,
            )

    if len(stack) != 1:
        raise EvaluationError(
            ErrorKind.MALFORMED_EXPRESSION,
            f"Incorrect final stack size: expected 1 value, found {len(stack)}",
            expression=expression,
            error_char_idx=len(expression),
        )
    return stack[0]
