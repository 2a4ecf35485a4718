import random
import string

from postfix.evaluator import evaluate
from postfix.outcome import Failure, Success


if __name__ == "__main__":
    alphabet = string.digits + "+-*/% "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        expression = generate(random.randint(0, 12))

        try:
            first = evaluate(expression)
            second = evaluate(expression)
        except Exception as e:
            print(f"{expression!r}\ncrashed: {e!r}\n\n")
            continue

        if not isinstance(first, (Success, Failure)):
            print(f"{expression!r}\nunexpected outcome: {first!r}\n\n")
        elif first != second:
            print(f"{expression!r}\nnot idempotent: {first!r} != {second!r}\n\n")
