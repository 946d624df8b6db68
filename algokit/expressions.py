"""Expression evaluation and conversion with stacks."""

import math
from operator import add, mul, sub, truediv

_OPERATORS = "+-*/%"
_OPENERS = {")": "(", "}": "{", "]": "["}


class ExpressionError(ValueError):
    """Raised for a malformed expression."""


def _c_mod(a, b):
    """Integer remainder with the sign of the dividend, on truncated operands."""
    return float(math.fmod(int(a), int(b)))


_APPLY = {"+": add, "-": sub, "*": mul, "/": truediv, "%": _c_mod}


def _pop(stack):
    if not stack:
        raise ExpressionError("stack underflow: missing operand")
    return stack.pop()


def _apply(symbol, op1, op2):
    try:
        func = _APPLY[symbol]
    except KeyError:
        raise ExpressionError(f"unknown operator {symbol!r}") from None
    return func(op1, op2)


def _evaluate(symbols, prefix):
    stack = []
    for ch in symbols:
        if ch.isspace():
            continue
        if ch.isdigit():
            stack.append(float(int(ch)))
            continue
        if ch not in _APPLY:
            raise ExpressionError(f"unknown operator {ch!r}")
        if prefix:
            op1 = _pop(stack)
            op2 = _pop(stack)
        else:
            op2 = _pop(stack)
            op1 = _pop(stack)
        stack.append(_apply(ch, op1, op2))
    return _pop(stack)


def evaluate_postfix(expression):
    """Value of a postfix expression of single-digit operands."""
    return _evaluate(expression, prefix=False)


def evaluate_prefix(expression):
    """Value of a prefix expression of single-digit operands, scanned right to left."""
    return _evaluate(reversed(expression), prefix=True)


def _priority(op):
    return 1 if op in "*/%" else 0


def infix_to_postfix(expression):
    """Convert an infix expression of letters, digits, operators and parentheses to postfix."""
    stack = []
    output = []
    for ch in expression:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("incorrect expression: unmatched ')'")
            stack.pop()
        elif ch.isdigit() or ch.isalpha():
            output.append(ch)
        elif ch in _OPERATORS:
            while stack and stack[-1] != "(" and _priority(stack[-1]) >= _priority(ch):
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ExpressionError(f"incorrect element in expression: {ch!r}")
    while stack and stack[-1] != "(":
        output.append(stack.pop())
    return "".join(output)


def _reverse_swapping_parentheses(text):
    swap = {"(": ")", ")": "("}
    return "".join(swap.get(ch, ch) for ch in reversed(text))


def infix_to_prefix(expression):
    """Convert an infix expression to prefix by reversing around a postfix conversion."""
    postfix = infix_to_postfix(_reverse_swapping_parentheses(expression))
    return _reverse_swapping_parentheses(postfix)


def is_balanced(expression):
    """Whether the (), {} and [] brackets in expression match and nest properly."""
    stack = []
    for ch in expression:
        if ch in "({[":
            stack.append(ch)
        elif ch in _OPENERS:
            if not stack or stack.pop() != _OPENERS[ch]:
                return False
    return not stack