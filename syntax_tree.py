"""
Syntax tree for simplify statements
Three immutable node shapes; parents own their children
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class UnaryOperator(Enum):
    NEGATE = "-"
    STATEMENT = "statement"


class BinaryOperator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"


@dataclass(frozen=True)
class NumberLiteral:
    value: int

    def __post_init__(self):
        # Sign only ever comes from a NEGATE node
        if self.value < 0:
            raise ValueError(f"NumberLiteral value must be non-negative, got {self.value}")


@dataclass(frozen=True)
class UnaryOp:
    op: UnaryOperator
    child: "Node"


@dataclass(frozen=True)
class BinaryOp:
    op: BinaryOperator
    left: "Node"
    right: "Node"


Node = Union[NumberLiteral, UnaryOp, BinaryOp]


# Utility functions for working with trees
def children(node: Node) -> tuple:
    """Direct children of a node, left to right"""
    if isinstance(node, UnaryOp):
        return (node.child,)
    if isinstance(node, BinaryOp):
        return (node.left, node.right)
    return ()


def tree_depth(node: Node) -> int:
    """Number of nodes on the longest root-to-leaf path"""
    depth = 0
    level = [node]
    while level:
        depth += 1
        level = [child for current in level for child in children(current)]
    return depth


def pretty_print_tree(node: Node, indent: int = 0) -> str:
    """Pretty print a syntax tree for debugging"""
    pad = "  " * indent
    if isinstance(node, NumberLiteral):
        return f"{pad}Number({node.value})\n"
    if isinstance(node, UnaryOp):
        return f"{pad}UnaryOp({node.op.name})\n" + pretty_print_tree(node.child, indent + 1)
    if isinstance(node, BinaryOp):
        result = f"{pad}BinaryOp({node.op.name})\n"
        result += pretty_print_tree(node.left, indent + 1)
        result += pretty_print_tree(node.right, indent + 1)
        return result
    return f"{pad}<unknown {type(node).__name__}>\n"
