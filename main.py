"""
Simplify - Main Entry Point
Evaluates prefix arithmetic statements of the form (simplify <expr>), one per line
"""

import sys
import argparse
from typing import List, Optional
import os

# Readline support for history and auto-completion
try:
  import readline
  READLINE_AVAILABLE = True
except ImportError:
  READLINE_AVAILABLE = False

from error_handling import summarize_errors
from generator import DEFAULT_MAX_LITERAL, write_statements
from options import (
  DEFAULT_INT_BITS,
  DEFAULT_KEYWORD,
  DEFAULT_MAX_DEPTH,
  OVERFLOW_POLICIES,
  Options,
  options_from_args,
)
from runner import emit_results, process_line, run_file

VERSION = "simplify 0.1.0"


def create_arg_parser() -> argparse.ArgumentParser:
  """Create command line argument parser"""
  parser = argparse.ArgumentParser(
      prog='simplify',
      description='Evaluate (simplify <expr>) statements, one per line',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  %(prog)s input.txt                    # Evaluate every line of input.txt
  %(prog)s --parse input.txt            # Show the syntax tree of each line
  %(prog)s --keyword simplify input.txt # Reject other wrapper words
  %(prog)s --jobs 4 input.txt           # Evaluate lines on 4 workers
  %(prog)s -i                           # Interactive mode
  %(prog)s --generate 100 out.txt       # Write 100 random statements
        """
  )

  parser.add_argument(
      'script',
      nargs='?',
      help='file with one statement per line'
  )

  parser.add_argument(
      '-i', '--interactive',
      action='store_true',
      help='Start interactive mode'
  )

  parser.add_argument(
      '--tokens',
      action='store_true',
      help='Show the tokens of each line (for debugging)'
  )

  parser.add_argument(
      '--parse',
      action='store_true',
      help='Show the syntax tree of each line (for debugging)'
  )

  parser.add_argument(
      '--keyword',
      default=None,
      help='Require this word as the statement wrapper (default: any identifier)'
  )

  parser.add_argument(
      '--int-bits',
      type=int,
      default=DEFAULT_INT_BITS,
      help='Integer width in bits (default: %(default)s)'
  )

  parser.add_argument(
      '--overflow',
      choices=OVERFLOW_POLICIES,
      default='error',
      help='What to do when a result does not fit (default: %(default)s)'
  )

  parser.add_argument(
      '--max-depth',
      type=int,
      default=DEFAULT_MAX_DEPTH,
      help='Deepest accepted expression nesting (default: %(default)s)'
  )

  parser.add_argument(
      '--jobs',
      type=int,
      default=1,
      help='Number of worker actors evaluating lines (default: %(default)s)'
  )

  parser.add_argument(
      '--generate',
      nargs=2,
      metavar=('COUNT', 'OUTPUT'),
      help='Write COUNT random statements to OUTPUT and exit'
  )

  parser.add_argument(
      '--depth',
      type=int,
      default=1,
      help='Nesting depth of generated statements (default: %(default)s)'
  )

  parser.add_argument(
      '--seed',
      type=int,
      default=None,
      help='Random seed for --generate'
  )

  parser.add_argument(
      '--max-literal',
      type=int,
      default=DEFAULT_MAX_LITERAL,
      help='Generated literals are below this bound (default: %(default)s)'
  )

  parser.add_argument(
      '--debug',
      action='store_true',
      help='Enable debug output for all stages'
  )

  parser.add_argument(
      '--version',
      action='version',
      version=VERSION
  )

  return parser


def run_script_file(script_path: str, options: Options,
                    show_tokens: bool = False, show_tree: bool = False) -> None:
  """Evaluate every line of a script file"""
  try:
    summary = run_file(script_path, options, show_tokens=show_tokens, show_tree=show_tree)
    if options.debug:
      print(f"Evaluated {len(summary.results)} lines: {summary.succeeded} succeeded, "
            f"{summarize_errors(summary.errors)}", file=sys.stderr)

  except FileNotFoundError:
    print(f"Error: Input file '{script_path}' not found", file=sys.stderr)
    print(f"  Hint: Check the file path and make sure the file exists", file=sys.stderr)
    sys.exit(1)
  except PermissionError:
    print(f"Error: Permission denied reading '{script_path}'", file=sys.stderr)
    print(f"  Hint: Make sure you have read permissions for this file", file=sys.stderr)
    sys.exit(1)
  except UnicodeDecodeError as e:
    print(f"Error: Cannot decode file '{script_path}': {e}", file=sys.stderr)
    print(f"  Hint: Make sure the file is a text file with UTF-8 encoding", file=sys.stderr)
    sys.exit(1)
  except OSError as e:
    print(f"Error: Cannot read '{script_path}': {e}", file=sys.stderr)
    sys.exit(1)
  except Exception as e:
    print(f"Unexpected error while processing '{script_path}': {e}", file=sys.stderr)
    if options.debug:
      import traceback
      traceback.print_exc()
    sys.exit(1)


def generate_file(count: int, output_path: str, depth: int,
                  seed: Optional[int], max_literal: int, keyword: str = DEFAULT_KEYWORD) -> None:
  """Write generated statements for use as test input"""
  try:
    write_statements(output_path, count, max_depth=depth, seed=seed,
                     max_literal=max_literal, keyword=keyword)
  except OSError as e:
    print(f"Error: Cannot write '{output_path}': {e}", file=sys.stderr)
    sys.exit(1)
  print(f"Wrote {count} statements to {output_path}")


def setup_readline():
  """Setup readline with history and auto-completion"""
  if not READLINE_AVAILABLE:
    return

  history_file = os.path.expanduser("~/.simplify_history")
  try:
    readline.read_history_file(history_file)
  except OSError:
    pass  # First time, no history yet, or permission denied

  readline.set_history_length(1000)

  completions = ["simplify", ":tokens", ":parse", ":help", "exit"]

  def completer(text, state):
    options = [cmd for cmd in completions if cmd.startswith(text)]
    if state < len(options):
      return options[state]
    return None

  readline.set_completer(completer)
  readline.parse_and_bind("tab: complete")

  import atexit
  atexit.register(readline.write_history_file, history_file)


def run_interactive_mode(options: Options) -> None:
  """Evaluate statements typed at the prompt"""
  print(f"{VERSION} - Interactive Mode")
  print("Type 'exit' to quit, ':help' for commands")
  if READLINE_AVAILABLE:
    print("Readline enabled: Use ↑/↓ for history, Tab for completion")
  if options.debug:
    print("Debug mode enabled")
  print()

  setup_readline()
  line_number = 0

  while True:
    try:
      code = input("simplify> ")
    except (KeyboardInterrupt, EOFError):
      print("\nGoodbye!")
      break

    text = code.strip()
    if text in ("exit", "exit."):
      break
    if not text:
      continue

    if text == ":help":
      print("REPL Commands:")
      print("  :tokens <statement> - Show tokens")
      print("  :parse <statement>  - Show syntax tree")
      print("  :help               - Show this help")
      print("  exit                - Exit REPL")
      print()
      print("Statements:")
      print("  (simplify (+ 2 (* 3 4)))  => 14")
      print("  (simplify (- 5))          => (- 5)")
      continue

    show_tokens = text.startswith(":tokens ")
    show_tree = text.startswith(":parse ")
    if show_tokens or show_tree:
      text = text.split(" ", 1)[1]

    line_number += 1
    result = process_line(line_number, text, options)
    emit_results([result], sys.stdout, sys.stdout, show_tokens, show_tree,
                 show_context=True)


def main(argv: Optional[List[str]] = None) -> int:
  """Main entry point for simplify"""
  arg_parser = create_arg_parser()
  args = arg_parser.parse_args(argv)

  try:
    options = options_from_args(args)
  except ValueError as e:
    arg_parser.error(str(e))

  if args.generate:
    count_text, output_path = args.generate
    try:
      count = int(count_text)
    except ValueError:
      arg_parser.error(f"--generate COUNT must be an integer, got {count_text!r}")
    if count < 0 or args.max_literal < 1:
      arg_parser.error("--generate needs COUNT >= 0 and --max-literal >= 1")
    generate_file(count, output_path, args.depth, args.seed, args.max_literal,
                  options.keyword or DEFAULT_KEYWORD)
    return 0

  if args.script:
    run_script_file(args.script, options, show_tokens=args.tokens, show_tree=args.parse)
  elif args.interactive:
    run_interactive_mode(options)
  else:
    arg_parser.error("an input file is required (or use -i or --generate)")

  return 0


if __name__ == "__main__":
  sys.exit(main())
