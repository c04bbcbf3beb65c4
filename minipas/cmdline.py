"""
This is an interpreter for a small Pascal-flavored language.

{0}

For example:

    minipas examples/nested.pas -d bare

will run nested.pas and print the variables it leaves behind, or else try to explain why not.

    minipas -e "(1 + 2) * 3" --lisp

will print the expression in Lisp notation.

    minipas -h

will explain all the arguments.
"""
import sys, math, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="minipas",
	description="Interpreter for a small Pascal-flavored language.",
)
parser.add_argument("program", nargs="?", help="try examples/typed.pas for example.")
parser.add_argument('-d', "--dialect", choices=["typed", "bare"], default="typed", help="'typed' wants a PROGRAM header and ignores case in variable names; 'bare' wants only BEGIN ... END. and does not.")
parser.add_argument('-t', "--tokens", action="store_true", help="Print the tokens of the program instead of running it.")
parser.add_argument('-c', "--check", action="count", help="Check the program verbosely but do not actually execute the program.")
parser.add_argument('-v', "--verbose", action="count", help="Say what's happening along the way.")
parser.add_argument('-e', "--expression", help="Translate this expression to reverse-Polish notation instead of running a program.")
parser.add_argument("--lisp", action="store_true", help="With -e, translate to Lisp notation instead.")

def run(args):
	from .diagnostics import Report
	from . import front_end
	report = Report(verbose=(args.verbose or 0) + (args.check or 0))
	if args.expression is not None:
		text = front_end.translate_text(args.expression, report, "lisp" if args.lisp else "rpn")
		if report.sick():
			report.complain_to_console()
			return 1
		print(text)
		return 0
	if args.program is None:
		parser.error("Either name a program or give an expression with -e.")
	path = Path(args.program)
	try:
		text = path.read_text(encoding="utf-8")
	except OSError as ex:
		print("Something went pear-shaped while trying to read %s: %s" % (path, ex), file=sys.stderr)
		return 1
	if args.tokens:
		return _dump_tokens(text, report, str(path))
	if args.check:
		front_end.parse_text(text, report, args.dialect, str(path))
		if report.sick():
			report.complain_to_console()
			return 1
		print("Looks plausible to me.", file=sys.stderr)
		return 0
	variables = front_end.run_text(text, report, args.dialect, str(path))
	if report.sick():
		report.complain_to_console()
		return 1
	print("Tree has been traversed!")
	for name, value in variables.items():
		print("%s = %s" % (name, render(value)))
	return 0

def render(value) -> str:
	""" Python will not spell out an int past a few thousand digits, so say roughly how big it is instead. """
	try: return str(value)
	except ValueError:
		digits = int(abs(value).bit_length() * math.log10(2)) + 1
		return "<%san integer of about %d digits>" % ("-" if value < 0 else "", digits)

def _dump_tokens(text, report, path):
	from .diagnostics import Document
	from .errors import LexError
	from .lexer import Lexer
	try:
		for token in Lexer(text).tokenize():
			print(token)
	except LexError as ex:
		report.lex_error(Document(text, path), ex)
		report.complain_to_console()
		return 1
	return 0

def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	if argv:
		return run(parser.parse_args(argv))
	else:
		print(__doc__.strip().format(parser.format_usage()))
		return 0
