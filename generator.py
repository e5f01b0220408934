"""
Random statement generator
Emits grammatical simplify lines for use as test input
"""

from typing import Optional
import random

from options import DEFAULT_KEYWORD


DEFAULT_MAX_LITERAL = 5000
BINARY_PROBABILITY = 0.75
OPERATORS = ("+", "-", "*")


def generate_expression(depth: int, rng: random.Random, max_literal: int = DEFAULT_MAX_LITERAL) -> str:
    """Random expression whose operator nesting is exactly depth levels"""
    if depth <= 0:
        return str(rng.randrange(max_literal))

    if rng.random() < BINARY_PROBABILITY:
        op = rng.choice(OPERATORS)
        left = generate_expression(depth - 1, rng, max_literal)
        right = generate_expression(depth - 1, rng, max_literal)
        return f"({op} {left} {right})"

    child = generate_expression(depth - 1, rng, max_literal)
    return f"(- {child})"


def generate_statement(
    max_depth: int,
    rng: random.Random,
    keyword: str = DEFAULT_KEYWORD,
    max_literal: int = DEFAULT_MAX_LITERAL
) -> str:
    return f"({keyword} {generate_expression(max_depth, rng, max_literal)})"


def write_statements(
    path: str,
    count: int,
    max_depth: int = 1,
    seed: Optional[int] = None,
    max_literal: int = DEFAULT_MAX_LITERAL,
    keyword: str = DEFAULT_KEYWORD
) -> None:
    """Write count generated statements to path, one per line"""
    rng = random.Random(seed)
    with open(path, 'w', encoding='utf-8') as f:
        for _ in range(count):
            f.write(generate_statement(max_depth, rng, keyword, max_literal) + "\n")
