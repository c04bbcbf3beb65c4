"""
The outermost caller of the pipeline: hand it text, get back a tree, a scope, or a string.
Failures from any stage land in the Report instead, and the function returns None.
This is the only place that catches what the pipeline raises.
"""
from typing import Optional
from . import syntax
from .lexer import Lexer
from .parser import Parser
from .tokens import Token
from .scope import Scope, ExactScope, FoldedScope, NUMBER
from .evaluator import Calculator
from .notation import NOTATIONS
from .errors import LexError, ParseError, EvalError
from .diagnostics import Report, Document

TYPED = "typed"
BARE = "bare"

# Each dialect pairs a program grammar with a variable-naming policy. They do not mix.
DIALECTS = {
	TYPED: (Parser.parse_program, FoldedScope),
	BARE: (Parser.parse_bare_program, ExactScope),
}

def tokenize(text:str) -> list[Token]:
	""" Every token in the text, through END_OF_FILE. Raises LexError. """
	return list(Lexer(text).tokenize())

def new_scope(dialect:str=TYPED) -> Scope:
	return DIALECTS[dialect][1]()

def parse_text(text:str, report:Report, dialect:str=TYPED, path:Optional[str]=None) -> Optional[syntax.Node]:
	""" Submit text to the parser; complain about the first problem, if any. """
	entry_point = DIALECTS[dialect][0]
	report.info("Parsing", path or "<text>", "as", dialect)
	return _guard(Document(text, path), report, lambda: entry_point(Parser(Lexer(text))))

def parse_expression_text(text:str, report:Report) -> Optional[syntax.Expression]:
	return _guard(Document(text), report, lambda: Parser(Lexer(text)).parse_expression())

def run_text(text:str, report:Report, dialect:str=TYPED, path:Optional[str]=None) -> Optional[dict[str, NUMBER]]:
	""" Parse and run a whole program. The result is the final contents of its scope. """
	tree = parse_text(text, report, dialect, path)
	if tree is None: return None
	calculator = Calculator(new_scope(dialect))
	scope = _guard(Document(text, path), report, lambda: calculator.run(tree))
	if scope is None: return None
	report.info("Ran", path or "<text>", "to completion.")
	return scope.snapshot()

def translate_text(text:str, report:Report, notation:str="rpn") -> Optional[str]:
	tree = parse_expression_text(text, report)
	if tree is None: return None
	translator = NOTATIONS[notation]()
	return _guard(Document(text), report, lambda: translator.translate(tree))

def _guard(doc:Document, report:Report, thunk):
	try: return thunk()
	except LexError as ex: report.lex_error(doc, ex)
	except ParseError as ex: report.parse_error(doc, ex)
	except EvalError as ex: report.eval_error(doc, ex)
	except ArithmeticError as ex: report.arithmetic_error(ex)
