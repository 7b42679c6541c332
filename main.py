"""
letprint - Main Entry Point
Runs a program of let declarations and print statements
"""

import sys
import argparse
from typing import List, Optional, Sequence

from error_handling import (
    EXIT_INPUT_ERROR, EXIT_OK, LetprintError, format_error
)
from lexing import format_tokens
from parsing import create_parser, create_debug_parser, pretty_print_ast
from interpreter import Emit, create_interpreter, create_debug_interpreter


VERSION = "letprint 0.1.0"


def run_source(source: str, emit: Optional[Emit] = None, debug: bool = False) -> List[int]:
  """Tokenize, parse and evaluate source; return the printed values"""
  parser = create_debug_parser() if debug else create_parser()
  interpreter = create_debug_interpreter() if debug else create_interpreter()

  ast = parser.parse_string(source)
  return interpreter.interpret_program(ast, emit)


def print_value(value: int) -> None:
  print(value, flush=True)


def create_arg_parser() -> argparse.ArgumentParser:
  """Create command line argument parser"""
  parser = argparse.ArgumentParser(
      prog='letprint',
      description='letprint - let declarations and print statements',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  %(prog)s program.lp             # Run a program file
  %(prog)s < program.lp           # Run a program read from stdin
  %(prog)s -c 'print(42);'        # Run a program given on the command line
  %(prog)s --tokens program.lp    # Show tokens
  %(prog)s --parse program.lp     # Show AST
  %(prog)s --debug program.lp     # Trace every stage on stderr

Exit codes: 0 ok, 1 input error, 2 lexical error, 3 syntax error, 4 evaluation error
        """
  )

  parser.add_argument(
      'script',
      nargs='?',
      help="program file to run ('-' or omitted reads standard input)"
  )

  parser.add_argument(
      '-c', '--command',
      dest='command',
      metavar='CODE',
      help='program passed in as a string'
  )

  stage = parser.add_mutually_exclusive_group()
  stage.add_argument(
      '--tokens',
      action='store_true',
      help='Tokenize only and show the tokens'
  )
  stage.add_argument(
      '--parse',
      action='store_true',
      help='Parse only and show the AST'
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


def read_program(args: argparse.Namespace) -> str:
  if args.command is not None:
    return args.command
  if args.script is None or args.script == '-':
    return sys.stdin.read()
  with open(args.script, 'r', encoding='utf-8') as f:
    return f.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
  """Main entry point for letprint; returns the process exit code"""
  arg_parser = create_arg_parser()
  args = arg_parser.parse_args(argv)

  if args.command is not None and args.script is not None:
    arg_parser.error("give either a script or -c CODE, not both")

  try:
    source = read_program(args)
  except FileNotFoundError:
    print(f"Error: Script file '{args.script}' not found", file=sys.stderr)
    return EXIT_INPUT_ERROR
  except (OSError, UnicodeDecodeError) as e:
    print(f"Error: Cannot read '{args.script}': {e}", file=sys.stderr)
    return EXIT_INPUT_ERROR

  parser = create_debug_parser() if args.debug else create_parser()

  try:
    if args.tokens:
      print(format_tokens(parser.tokenize(source)))
    elif args.parse:
      ast = parser.parse_string(source)
      if ast:
        print(pretty_print_ast(ast))
    else:
      run_source(source, emit=print_value, debug=args.debug)
  except LetprintError as e:
    print(format_error(e), file=sys.stderr)
    return e.exit_code

  return EXIT_OK


if __name__ == "__main__":
  sys.exit(main())
