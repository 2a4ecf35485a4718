from postfix.evaluator import evaluate
from postfix.outcome import Success


if __name__ == "__main__":
    while True:
        try:
            expression = input("> ")
        except EOFError:
            break

        outcome = evaluate(expression)
        if isinstance(outcome, Success):
            print(outcome.value)
        else:
            print(outcome.error if outcome.error is not None else outcome.detail)
