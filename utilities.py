"""
Utilities module for the simplify evaluator
Fixed-width integer arithmetic and the overflow policies applied to it
"""

from typing import Callable, Dict
import operator

from error_handling import EvalError
from options import Options


# ==================== RANGE POLICIES ====================

def check_range(value: int, options: Options) -> int:
  """
  Fail when value does not fit the configured integer width

  Raises:
    EvalError if value is outside [min_value, max_value]
  """
  if value < options.min_value or value > options.max_value:
    raise EvalError(
      f"integer overflow: {value} does not fit in {options.int_bits} bits"
    )
  return value


def wrap_range(value: int, options: Options) -> int:
  """
  Two's complement wrap-around

  Examples:
    wrap_range(2147483648, Options()) -> -2147483648
    wrap_range(-2147483649, Options()) -> 2147483647
  """
  span = 2 ** options.int_bits
  return (value - options.min_value) % span + options.min_value


def saturate_range(value: int, options: Options) -> int:
  """Clamp value to [min_value, max_value]"""
  return max(options.min_value, min(options.max_value, value))


RANGE_POLICIES: Dict[str, Callable[[int, Options], int]] = {
  "error": check_range,
  "wrap": wrap_range,
  "saturate": saturate_range,
}


def fit_to_range(value: int, options: Options) -> int:
  """Apply the configured overflow policy to an intermediate result"""
  return RANGE_POLICIES[options.overflow](value, options)


# ==================== ARITHMETIC OPERATION FACTORIES ====================

def binary_arithmetic_op(
  op: Callable[[int, int], int]
) -> Callable[[int, int, Options], int]:
  """
  Factory for fixed-width binary arithmetic operations

  Args:
    op: Python operator function (e.g., operator.add)

  Returns:
    Function computing op(x, y) under the overflow policy

  Examples:
    add = binary_arithmetic_op(operator.add)
    add(2, 3, Options()) -> 5
  """
  def arithmetic(x: int, y: int, options: Options) -> int:
    return fit_to_range(op(x, y), options)

  return arithmetic


def negate(x: int, options: Options) -> int:
  """Fixed-width negation"""
  return fit_to_range(operator.neg(x), options)


checked_add = binary_arithmetic_op(operator.add)
checked_sub = binary_arithmetic_op(operator.sub)
checked_mul = binary_arithmetic_op(operator.mul)
