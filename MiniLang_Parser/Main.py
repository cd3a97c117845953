import argparse
import logging
import sys

from .Errors import LexerError, ParserError
from .Parser import Parser
from .Tokenizer import Lexer

logger = logging.getLogger(__name__)


def read_source(path):
    # every line, including the last one, ends with '\n'
    with open(path, "r") as inputFile:
        return ''.join(line.rstrip('\n') + '\n' for line in inputFile)


def print_tokens(source):
    print(f"| {'Line':^10} | {'Column':^10} | {'Token':^15} | {'Value':^10}")
    print("|------------|------------|-----------------|------------")
    for tok in Lexer(source):
        line, column = tok.position
        print(f"| {line:^10} | {column:^10} | {tok.kind:^15} |   {tok.text}")


def print_tree(source):
    parser = Parser(source)
    parser.parse()
    print(parser.to_string(), end="")


def build_arg_parser():
    arg_parser = argparse.ArgumentParser(prog="minilang", description="Parse MiniLang source files.")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="log parser progress")
    subparsers = arg_parser.add_subparsers(dest="command", required=True)
    parse_cmd = subparsers.add_parser("parse", help="print the syntax tree of a file")
    parse_cmd.add_argument("path")
    tokens_cmd = subparsers.add_parser("tokens", help="print the token table of a file")
    tokens_cmd.add_argument("path")
    return arg_parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = read_source(args.path)
    except OSError as e:
        print(f"Error: cannot read '{args.path}': {e.strerror}", file=sys.stderr)
        return 2
    logger.debug("read %d characters from %s", len(source), args.path)

    try:
        if args.command == "tokens":
            print_tokens(source)
        else:
            print_tree(source)
    except LexerError as e:
        print(f"Lexer error: {e}", file=sys.stderr)
        return 1
    except ParserError as e:
        print(f"Parser error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
