from postfix.driver import SourceUnreadable, evaluate_lines
from postfix.evaluator import evaluate
from postfix.outcome import ErrorKind, EvaluationError, Failure, Outcome, Success
