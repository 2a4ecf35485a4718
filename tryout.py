from postfix.driver import DEMO_EXPRESSIONS, SourceUnreadable, evaluate_lines, format_outcome
from postfix.evaluator import evaluate
from postfix.tokenizer import select_tokenizer, tokenize

for expression in DEMO_EXPRESSIONS + ["23*4-", "5 3 ^", "", "1  2 +"]:
    print("=" * 10)
    print(f"expression: {expression!r}")
    print(f"tokenizer: {type(select_tokenizer(expression)).__name__}")
    print(f"tokens: {' '.join(str(t) for t in tokenize(expression))}")

    outcome = evaluate(expression)
    print(format_outcome(expression, outcome))
    if not outcome.ok:
        print(outcome.error)

print("=" * 10)
print("These are the expressions from the saved file.")
try:
    for expression, outcome in evaluate_lines("expressions.txt"):
        print(format_outcome(expression, outcome))
except SourceUnreadable as e:
    print(e)
