import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from expression_equivalence import (
  leaf, ADD, SUB, MUL, DIV, is_equivalent, confirm_equivalence, describe,
  find_missing_originals, configure_logging, LogLevel
)


def show_normal_forms():
  """Print a few expressions next to their normal forms"""
  expressions = [
    leaf(7).apply(DIV, leaf(9).apply(SUB, 8).apply(DIV, 2)),  # 7 / ((9 - 8) / 2)
    leaf(2).apply(ADD, 3).apply(SUB, 5).apply(DIV, 7),        # (2 + 3 - 5) / 7
    leaf(1).apply(DIV, leaf(1).apply(DIV, 7)),                # 1 / (1 / 7)
  ]
  for expression in expressions:
    print(describe(expression))


def compare(a, b):
  verdict = is_equivalent(a, b)
  print(f"{a}  vs  {b}: {'equivalent' if verdict else 'different'}")
  if verdict:
    print(f"  confirmed by exact arithmetic: {confirm_equivalence(a, b)}")


if __name__ == "__main__":
  configure_logging(LogLevel.MINIMAL)

  show_normal_forms()
  print()

  compare(leaf(9).apply(ADD, leaf(3).apply(MUL, 4).apply(SUB, 7)),
          leaf(9).apply(ADD, leaf(3).apply(MUL, 4)).apply(SUB, 7))
  compare(leaf(2).apply(SUB, 3).apply(DIV, leaf(5).apply(SUB, 7)),
          leaf(3).apply(SUB, 2).apply(DIV, leaf(7).apply(SUB, 5)))
  compare(leaf(2).apply(ADD, 3).apply(MUL, 4),
          leaf(2).apply(MUL, 4).apply(ADD, leaf(3).apply(MUL, 4)))
  print()

  expression = leaf(1).apply(DIV, leaf(1).apply(DIV, 7))
  print(f"Missing originals of {expression}: {find_missing_originals(expression)}")
