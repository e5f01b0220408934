"""
Simplify statement parser
Recursive descent with one token of lookahead over the grammar:

    Statement  := '(' Identifier Expression ')'
    Expression := Number
                | '(' ('+' | '*') Expression Expression ')'
                | '(' '-' Expression [ Expression ] ')'
"""

from typing import List, Optional
import sys

from error_handling import ParseError
from options import Options
from syntax_tree import (
    BinaryOp,
    BinaryOperator,
    Node,
    NumberLiteral,
    UnaryOp,
    UnaryOperator,
    pretty_print_tree,
)
from tokenizer import Token, TokenKind, tokenize


END_OF_INPUT = "end of input"

_BINARY_OPERATORS = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MULTIPLY: BinaryOperator.MULTIPLY,
}


def describe_token(token: Optional[Token]) -> str:
    """Human-readable form of a token for error messages"""
    if token is None:
        return END_OF_INPUT
    if token.kind == TokenKind.NUMBER:
        return f"number {token.text}"
    if token.kind == TokenKind.IDENTIFIER:
        return f"identifier '{token.text}'"
    return f"'{token.text}'"


class Parser:
    """Parses the tokens of exactly one statement"""

    def __init__(self, tokens: List[Token], options: Optional[Options] = None):
        self.tokens = tokens
        self.options = options or Options()
        self.pos = 0
        self.depth = 0

    @property
    def current(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _end_position(self) -> int:
        if not self.tokens:
            return 0
        last = self.tokens[-1]
        return last.position + len(last.text)

    def _error(self, expected: str) -> ParseError:
        token = self.current
        position = token.position if token is not None else self._end_position()
        return ParseError(expected, describe_token(token), position)

    def _check(self, kind: TokenKind) -> bool:
        token = self.current
        return token is not None and token.kind == kind

    def advance(self) -> Token:
        token = self.current
        if token is None:
            raise self._error("more input")
        self.pos += 1
        return token

    def expect(self, kind: TokenKind, expected: str) -> Token:
        if not self._check(kind):
            raise self._error(expected)
        return self.advance()

    # -- Grammar rules --

    def parse(self) -> Node:
        """Parse a full statement and require that nothing follows it"""
        try:
            statement = self.parse_statement()
        except RecursionError:
            raise self._error("a less deeply nested expression") from None
        if self.current is not None:
            raise self._error(END_OF_INPUT)
        return statement

    def parse_statement(self) -> UnaryOp:
        """'(' Identifier Expression ')'"""
        self.expect(TokenKind.LPAREN, "'('")

        keyword = self.options.keyword
        if keyword is None:
            self.expect(TokenKind.IDENTIFIER, "identifier")
        else:
            if not (self._check(TokenKind.IDENTIFIER) and self.current.text == keyword):
                raise self._error(f"'{keyword}'")
            self.advance()

        child = self.parse_expression()
        self.expect(TokenKind.RPAREN, "')'")
        return UnaryOp(UnaryOperator.STATEMENT, child)

    def parse_expression(self) -> Node:
        """Number | '(' operator Expression [Expression] ')'"""
        token = self.current

        if self._check(TokenKind.NUMBER):
            self.advance()
            return NumberLiteral(token.value)

        if not self._check(TokenKind.LPAREN):
            raise self._error("'(' or number")

        if self.depth >= self.options.max_depth:
            raise self._error(f"expression nested at most {self.options.max_depth} deep")

        self.advance()
        self.depth += 1
        try:
            node = self._parse_operation()
        finally:
            self.depth -= 1
        self.expect(TokenKind.RPAREN, "')'")
        return node

    def _parse_operation(self) -> Node:
        token = self.current

        if token is not None and token.kind in _BINARY_OPERATORS:
            self.advance()
            left = self.parse_expression()
            right = self.parse_expression()
            return BinaryOp(_BINARY_OPERATORS[token.kind], left, right)

        if self._check(TokenKind.MINUS):
            self.advance()
            operand = self.parse_expression()
            # A closing paren right after the first operand makes it negation
            if self._check(TokenKind.RPAREN):
                return UnaryOp(UnaryOperator.NEGATE, operand)
            right = self.parse_expression()
            return BinaryOp(BinaryOperator.SUBTRACT, operand, right)

        raise self._error("operator '+', '-' or '*'")


def parse(tokens: List[Token], options: Optional[Options] = None) -> Node:
    """Parse the tokens of one statement into a syntax tree"""
    return Parser(tokens, options).parse()


class SimplifyParser:
    """Tokenizer and parser bundled with one set of options"""

    def __init__(self, options: Optional[Options] = None):
        self.options = options or Options()

    def tokenize(self, text: str) -> List[Token]:
        return tokenize(text, self.options.int_bits)

    def parse_tokens(self, tokens: List[Token]) -> Node:
        tree = parse(tokens, self.options)
        if self.options.debug:
            print("Parsed:\n" + pretty_print_tree(tree), end="", file=sys.stderr)
        return tree

    def parse_line(self, text: str) -> Node:
        """Tokenize and parse one statement line"""
        return self.parse_tokens(self.tokenize(text))


# Factory functions for creating parsers
def create_parser(options: Optional[Options] = None) -> SimplifyParser:
    """Create a simplify parser"""
    return SimplifyParser(options)


def create_debug_parser() -> SimplifyParser:
    """Create a simplify parser with debug enabled"""
    return SimplifyParser(Options(debug=True))
