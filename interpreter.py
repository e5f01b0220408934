"""
Simplify Interpreter - tree-walking evaluator
Pure functions over immutable syntax trees; one integer per statement
"""

from typing import Callable, Dict, Optional
import sys

from error_handling import EvalError
from options import Options
from syntax_tree import (
  BinaryOp,
  BinaryOperator,
  Node,
  NumberLiteral,
  UnaryOp,
  UnaryOperator,
)
from utilities import (
  checked_add,
  checked_sub,
  checked_mul,
  fit_to_range,
  negate,
)


BUILTIN_OPERATORS: Dict[BinaryOperator, Callable[[int, int, Options], int]] = {
  BinaryOperator.ADD: checked_add,
  BinaryOperator.SUBTRACT: checked_sub,
  BinaryOperator.MULTIPLY: checked_mul,
}


# ============================================================================
# NODE EVALUATION
# ============================================================================

def eval_ast(node: Node, options: Options) -> int:
  """
  Evaluate a syntax tree node, children first.
  Any shape outside the three node classes is reported as EvalError.
  """
  if options.debug:
    print(f"Evaluating: {type(node).__name__}", file=sys.stderr)

  if isinstance(node, NumberLiteral):
    return eval_number(node, options)
  elif isinstance(node, UnaryOp):
    return eval_unary(node, options)
  elif isinstance(node, BinaryOp):
    return eval_binary(node, options)
  else:
    raise EvalError(f"malformed tree: unexpected node {node!r}")


def _literal_value(node: NumberLiteral) -> int:
  value = node.value
  if type(value) is not int or value < 0:
    raise EvalError(f"malformed tree: invalid literal {value!r}")
  return value


def eval_number(node: NumberLiteral, options: Options) -> int:
  """Evaluate number literal"""
  return fit_to_range(_literal_value(node), options)


def eval_unary(node: UnaryOp, options: Options) -> int:
  """Evaluate negation or the transparent statement wrapper"""
  if node.op == UnaryOperator.STATEMENT:
    return eval_ast(node.child, options)
  elif node.op == UnaryOperator.NEGATE:
    # Checked as a whole so the most negative integer can be written
    if isinstance(node.child, NumberLiteral):
      return fit_to_range(-_literal_value(node.child), options)
    return negate(eval_ast(node.child, options), options)
  else:
    raise EvalError(f"malformed tree: unknown unary operator {node.op!r}")


def eval_binary(node: BinaryOp, options: Options) -> int:
  """Evaluate binary operation"""
  op_func = BUILTIN_OPERATORS.get(node.op) if isinstance(node.op, BinaryOperator) else None
  if op_func is None:
    raise EvalError(f"malformed tree: unknown binary operator {node.op!r}")

  left_val = eval_ast(node.left, options)
  right_val = eval_ast(node.right, options)
  return op_func(left_val, right_val, options)


# ============================================================================
# ENTRY POINTS
# ============================================================================

def evaluate(node: Node, options: Optional[Options] = None) -> int:
  """Evaluate a statement or expression tree to a single integer"""
  if options is None:
    options = Options()
  try:
    return eval_ast(node, options)
  except RecursionError:
    raise EvalError("malformed tree: nesting too deep to evaluate") from None


def create_interpreter(options: Optional[Options] = None) -> Callable[[Node], int]:
  """Factory function returning an evaluator bound to one set of options"""
  bound = options or Options()

  def interpreter(node: Node) -> int:
    return evaluate(node, bound)

  return interpreter


def create_debug_interpreter() -> Callable[[Node], int]:
  """Factory function returning a debug evaluator"""
  return create_interpreter(Options(debug=True))
