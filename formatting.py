"""
Output formatting for simplify results
Everything produced here is itself valid grammar text
"""

from syntax_tree import BinaryOp, Node, NumberLiteral, UnaryOp, UnaryOperator
from options import DEFAULT_KEYWORD


def format_value(value: int) -> str:
    """Negative results use the unary form, e.g. -5 -> '(- 5)'"""
    if value < 0:
        return f"(- {-value})"
    return str(value)


def format_tree(node: Node, keyword: str = DEFAULT_KEYWORD) -> str:
    """Write a syntax tree back as source text"""
    if isinstance(node, NumberLiteral):
        return str(node.value)
    if isinstance(node, UnaryOp):
        child = format_tree(node.child, keyword)
        if node.op == UnaryOperator.STATEMENT:
            return f"({keyword} {child})"
        return f"(- {child})"
    if isinstance(node, BinaryOp):
        left = format_tree(node.left, keyword)
        right = format_tree(node.right, keyword)
        return f"({node.op.value} {left} {right})"
    raise TypeError(f"cannot format {type(node).__name__} as source")
