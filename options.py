"""
Run options for the simplify front end
Built from command line arguments or directly in tests
"""

from dataclasses import dataclass
from typing import Optional


OVERFLOW_POLICIES = ("error", "wrap", "saturate")

DEFAULT_INT_BITS = 32
# Keeps every in-range value printable as a decimal string
MAX_INT_BITS = 4096
DEFAULT_MAX_DEPTH = 256
DEFAULT_KEYWORD = "simplify"


@dataclass(frozen=True)
class Options:
    """Settings shared by every stage for one run"""
    # None accepts any identifier as the statement wrapper
    keyword: Optional[str] = None
    int_bits: int = DEFAULT_INT_BITS
    overflow: str = "error"
    max_depth: int = DEFAULT_MAX_DEPTH
    jobs: int = 1
    debug: bool = False

    @property
    def max_value(self) -> int:
        return 2 ** (self.int_bits - 1) - 1

    @property
    def min_value(self) -> int:
        return -(2 ** (self.int_bits - 1))

    @property
    def max_literal(self) -> int:
        """Largest literal the lexer accepts: the magnitude of min_value"""
        return -self.min_value

    def validate(self) -> "Options":
        """Raise ValueError for settings no stage can honor"""
        if not 2 <= self.int_bits <= MAX_INT_BITS:
            raise ValueError(f"int_bits must be between 2 and {MAX_INT_BITS}, got {self.int_bits}")
        if self.overflow not in OVERFLOW_POLICIES:
            raise ValueError(
                f"overflow must be one of {', '.join(OVERFLOW_POLICIES)}, got {self.overflow!r}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.jobs < 1:
            raise ValueError(f"jobs must be at least 1, got {self.jobs}")
        if self.keyword is not None and not (self.keyword.isascii() and self.keyword.isalpha()):
            raise ValueError(f"keyword must be ASCII letters only, got {self.keyword!r}")
        return self


def options_from_args(args) -> Options:
    """Build validated Options from an argparse namespace"""
    return Options(
        keyword=args.keyword,
        int_bits=args.int_bits,
        overflow=args.overflow,
        max_depth=args.max_depth,
        jobs=args.jobs,
        debug=args.debug,
    ).validate()
