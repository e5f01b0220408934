"""
Line runner for simplify programs
Drives tokenize -> parse -> evaluate -> format for each input line and
keeps one line's failure from affecting any other line
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple
import sys

import pykka

from error_handling import SimplifyError, format_diagnostic
from formatting import format_value
from interpreter import evaluate
from options import Options
from parsing import create_parser
from syntax_tree import Node, pretty_print_tree
from tokenizer import Token, describe_tokens


# ============================================================================
# DATA STRUCTURES
# ============================================================================

@dataclass(frozen=True)
class LineResult:
    """Outcome of one input line: a value or the error that stopped it"""
    line_number: int
    source: str
    value: Optional[int] = None
    error: Optional[SimplifyError] = None
    tokens: Tuple[Token, ...] = ()
    tree: Optional[Node] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def output(self) -> str:
        return format_value(self.value)

    def diagnostic(self, show_context: bool = False) -> str:
        return format_diagnostic(self.line_number, self.source, self.error, show_context)


@dataclass
class RunSummary:
    results: List[LineResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def errors(self) -> List[SimplifyError]:
        return [result.error for result in self.results if not result.ok]


# ============================================================================
# SINGLE LINE
# ============================================================================

def evaluate_line(text: str, options: Optional[Options] = None) -> int:
    """Full pipeline for one statement line; raises SimplifyError on failure"""
    options = options or Options()
    return evaluate(create_parser(options).parse_line(text), options)


def process_line(line_number: int, text: str, options: Options) -> LineResult:
    """Run one line, capturing lex, parse and evaluation errors"""
    parser = create_parser(options)
    tokens: List[Token] = []
    tree = None
    try:
        tokens = parser.tokenize(text)
        if options.debug:
            print(f"Line {line_number}: {describe_tokens(tokens)}", file=sys.stderr)
        tree = parser.parse_tokens(tokens)
        value = evaluate(tree, options)
    except SimplifyError as e:
        if options.debug:
            print(f"Line {line_number} failed: {e}", file=sys.stderr)
        return LineResult(line_number, text, error=e, tokens=tuple(tokens), tree=tree)

    return LineResult(line_number, text, value=value, tokens=tuple(tokens), tree=tree)


def iter_statements(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, text) for every non-blank line, numbered from 1"""
    for line_number, raw in enumerate(lines, 1):
        text = raw.rstrip("\r\n")
        if not text.strip(" \t\n\r\v\f"):
            continue
        yield line_number, text


# ============================================================================
# ACTOR POOL (Using Pykka)
# ============================================================================

class LineWorker(pykka.ThreadingActor):
    """Actor that evaluates (line_number, text) messages"""

    def __init__(self, options: Options):
        super().__init__()
        self.options = options

    def on_receive(self, message):
        line_number, text = message
        return process_line(line_number, text, self.options)


def _process_parallel(statements: List[Tuple[int, str]], options: Options) -> List[LineResult]:
    workers = [LineWorker.start(options) for _ in range(min(options.jobs, len(statements)))]
    try:
        futures = [
            workers[index % len(workers)].ask(statement, block=False)
            for index, statement in enumerate(statements)
        ]
        # Futures are kept in submission order, so results come back in input order
        return [future.get() for future in futures]
    finally:
        for worker in workers:
            worker.stop()


def process_lines(lines: Iterable[str], options: Optional[Options] = None) -> List[LineResult]:
    """Process every statement line, returning results in input order"""
    options = options or Options()
    statements = list(iter_statements(lines))

    if options.jobs > 1 and len(statements) > 1:
        return _process_parallel(statements, options)
    return [process_line(line_number, text, options) for line_number, text in statements]


# ============================================================================
# OUTPUT
# ============================================================================

def emit_results(
    results: Iterable[LineResult],
    out: TextIO,
    err: TextIO,
    show_tokens: bool = False,
    show_tree: bool = False,
    show_context: bool = False
) -> None:
    """Values to the primary channel, diagnostics to the diagnostic channel"""
    for result in results:
        if show_tokens and result.tokens:
            print(describe_tokens(list(result.tokens)), file=out)
        if show_tree and result.tree is not None:
            print(pretty_print_tree(result.tree), end="", file=out)

        if result.ok:
            print(result.output, file=out)
        else:
            print(result.diagnostic(show_context), file=err)


def run_file(
    path: str,
    options: Optional[Options] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    show_tokens: bool = False,
    show_tree: bool = False
) -> RunSummary:
    """
    Evaluate every line of a file.
    The whole file is read before any line runs, so I/O and decoding
    errors (OSError, UnicodeDecodeError) surface before any output.
    """
    options = options or Options()
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    with open(path, 'r', encoding='utf-8') as f:
        lines = f.readlines()

    results = process_lines(lines, options)
    emit_results(results, out, err, show_tokens, show_tree, show_context=options.debug)
    return RunSummary(results)
