"""
Tokenizer for simplify statements
Turns one line of text into a flat list of tokens
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from pyparsing import Word, alphas, nums, one_of

from error_handling import LexError
from options import DEFAULT_INT_BITS, Options


class TokenKind(Enum):
    NUMBER = auto()
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    LPAREN = auto()
    RPAREN = auto()
    IDENTIFIER = auto()


@dataclass(frozen=True)
class Token:
    """Token with its source text and 0-based offset in the line"""
    kind: TokenKind
    text: str
    position: int
    value: Optional[int] = None

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"NUMBER({self.value})"
        return f"{self.kind.name}({self.text})"


_SYMBOLS = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.MULTIPLY,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
}

# C isspace in the default locale
_WHITESPACE = frozenset(" \t\n\r\v\f")

# Longest runs of digits or letters; signs are always separate tokens
_TOKEN = (Word(nums) | Word(alphas) | one_of(list(_SYMBOLS))).parse_with_tabs()
# Shared by worker threads; streamlined at import time
_TOKEN.streamline()


def _abbreviate(text: str, limit: int = 40) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} digits)"


def _make_token(text: str, position: int, max_literal: int) -> Token:
    if text.isdigit():
        # Compare digit counts first so huge literals never reach int()
        digits = text.lstrip("0") or "0"
        if len(digits) > len(str(max_literal)) or int(digits) > max_literal:
            raise LexError(f"integer literal {_abbreviate(text)} does not fit in the integer range", position)
        value = int(digits)
        return Token(TokenKind.NUMBER, text, position, value)
    if text.isalpha():
        return Token(TokenKind.IDENTIFIER, text, position)
    return Token(_SYMBOLS[text], text, position)


def _check_gap(line: str, start: int, end: int) -> None:
    """Anything between two matched tokens must be whitespace"""
    for pos in range(start, end):
        if line[pos] not in _WHITESPACE:
            raise LexError(f"unexpected character {line[pos]!r}", pos)


def tokenize(line: str, int_bits: int = DEFAULT_INT_BITS) -> List[Token]:
    """Tokenize one line; integer literals may not exceed 2 ** (int_bits - 1)"""
    max_literal = Options(int_bits=int_bits).max_literal
    tokens = []
    last_end = 0

    for matched, start, end in _TOKEN.scan_string(line):
        _check_gap(line, last_end, start)
        tokens.append(_make_token(matched[0], start, max_literal))
        last_end = end

    _check_gap(line, last_end, len(line))
    return tokens


def describe_tokens(tokens: List[Token]) -> str:
    """Token list as a single debug line"""
    return "Tokens: [" + ", ".join(str(token) for token in tokens) + "]"
