"""
Integer calculator – Main entry point.

Evaluates a single "A OP B" expression and prints the result:

    python main.py 7 / 3          # 2
    python main.py -7 divide 2    # -3 (truncated toward zero)
    python main.py 5 / 0          # 0

OP is a symbol (+ - * x /) or a name (add, subtract, multiply, divide).
Quote "*" in most shells, or use "x".
"""

import argparse
import sys
from typing import List, Optional

from src.calculator.operations import get_operation


def main(argv: Optional[List[str]] = None) -> int:
    """Parse "A OP B", print the result, and return the exit code."""
    parser = argparse.ArgumentParser(
        description="Evaluate one integer expression: A OP B.",
    )
    parser.add_argument("a", type=int, help="Left operand (integer).")
    parser.add_argument("op", help="Operator: + - * x / or add, subtract, multiply, divide.")
    parser.add_argument("b", type=int, help="Right operand (integer).")
    args = parser.parse_args(argv)

    try:
        operation = get_operation(args.op)
    except ValueError as e:
        parser.error(str(e))

    print(operation(args.a, args.b))
    return 0


if __name__ == "__main__":
    sys.exit(main())
