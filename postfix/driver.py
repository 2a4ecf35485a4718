import logging
import os
from dataclasses import dataclass
from typing import Iterable, TextIO, Union

from postfix.evaluator import evaluate
from postfix.outcome import Outcome, Success

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, TextIO]


@dataclass
class SourceUnreadable(Exception):
    errmsg: str
    source: str

    def __str__(self) -> str:
        return f"[Source error] {self.source}: {self.errmsg}"


def evaluate_lines(source: Source, skip_empty: bool = False) -> list[tuple[str, Outcome]]:
    """Reads the whole source before returning, so an I/O error aborts the batch with no partial results"""
    if isinstance(source, (str, os.PathLike)):
        source_name = os.fspath(source)
        try:
            with open(source, encoding="utf-8") as file:
                return _evaluate_stream(file, source_name, skip_empty)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Unable to read %s: %s", source_name, e)
            raise SourceUnreadable(str(e), source=source_name) from e
    else:
        source_name = getattr(source, "name", repr(source))
        try:
            return _evaluate_stream(source, source_name, skip_empty)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Unable to read %s: %s", source_name, e)
            raise SourceUnreadable(str(e), source=source_name) from e


def _evaluate_stream(lines: Iterable[str], source_name: str, skip_empty: bool) -> list[tuple[str, Outcome]]:
    results: list[tuple[str, Outcome]] = []
    for line in lines:
        expression = line.rstrip("\r\n")
        results.append((expression, evaluate(expression, skip_empty=skip_empty)))
    logger.info("Evaluated %d expression(s) from %s", len(results), source_name)
    return results


def format_outcome(expression: str, outcome: Outcome) -> str:
    if isinstance(outcome, Success):
        return f"Result: {expression} = {outcome.value}"
    else:
        return f"Evaluation failed for expression: {expression} ({outcome.kind}: {outcome.detail})"


DEMO_EXPRESSIONS = [
    "23 4 * 5 +",
    "55 9 + 7 *",
    "92 2 % 4 +",
    "93 8 - 9 +",
    "76 9 % 2 -",
    "8 2 / -",
    "30 0 / 8 +",
    "45 0 % 9 -",
]
