"""
Error types and diagnostic formatting for the simplify front end
Every per-line failure is a SimplifyError; the line runner catches them
"""

from typing import List, Optional


# ============================================================================
# EXCEPTION CLASSES
# ============================================================================

class SimplifyError(Exception):
    """Base class for lex, parse and evaluation failures of one line"""

    kind = "Error"

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(self._format_error())

    @property
    def column(self) -> Optional[int]:
        """1-based column of the failure, if known"""
        if self.position is None:
            return None
        return self.position + 1

    def _format_error(self) -> str:
        if self.position is not None:
            return f"{self.kind} at column {self.column}: {self.message}"
        return f"{self.kind}: {self.message}"


class LexError(SimplifyError):
    """Unrecognized character or unrepresentable integer literal"""

    kind = "Lex error"


class ParseError(SimplifyError):
    """Grammar violation, including premature end of input"""

    kind = "Parse error"

    def __init__(self, expected: str, got: str, position: Optional[int] = None):
        self.expected = expected
        self.got = got
        super().__init__(f"expected {expected}, got {got}", position)


class EvalError(SimplifyError):
    """Structurally invalid tree or integer overflow during evaluation"""

    kind = "Evaluation error"


# ============================================================================
# PURE FUNCTIONS
# ============================================================================

def get_context_lines(source_text: str, position: int) -> str:
    """Source line with a caret under the failing character"""
    lines = [f"{'':4}{source_text}"]
    lines.append(f"{'':4}{' ' * position}^ Error here")
    return '\n'.join(lines)


def format_diagnostic(
    line_number: int,
    source_text: str,
    error: SimplifyError,
    show_context: bool = False
) -> str:
    """Format the diagnostic-channel message for a failed line"""
    message = f"Error in line {line_number}: {source_text} - {error}"
    if show_context and error.position is not None:
        message += "\n" + get_context_lines(source_text, error.position)
    return message


def summarize_errors(errors: List[SimplifyError]) -> str:
    """One-line count of failures by kind, e.g. '2 parse errors, 1 lex error'"""
    counts = {}
    for error in errors:
        counts[error.kind] = counts.get(error.kind, 0) + 1

    parts = []
    for kind, count in counts.items():
        noun = kind.lower() + ("s" if count != 1 else "")
        parts.append(f"{count} {noun}")
    return ", ".join(parts) if parts else "no errors"
