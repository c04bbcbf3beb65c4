"""
Everything that gets said to the person at the console goes through a Report.
Issues pile up as Pics (an intro, some illustrated source, maybe a footer)
until somebody calls complain_to_console.
"""
import sys, random
from typing import Optional, Sequence
from boozetools.support.failureprone import SourceText, illustration

from .errors import LexError, ParseError, UndefinedVariableError, UnsupportedOperationError
from .tokens import TokenKind

class TooManyIssues(Exception):
	pass

def _outburst():
	exclamations = ['Drat', 'Rats', 'Fiddlesticks', 'Good Grief', 'Confound it', 'Nuts', 'Bother']
	resignations = ['I cannot continue.', 'That program will not run.', 'I need to ask for help.']
	return "%s! %s" % (random.choice(exclamations), random.choice(resignations))

class Document:
	""" Program text, and the name of wherever it came from (if anywhere). """
	def __init__(self, text:str, path:Optional[str]=None):
		self.text, self.path = text, path
		self.source = SourceText(text)

class Annotation:
	""" A caption attached to a stretch of some document. """
	def __init__(self, doc:Document, offset:int, width:int=1, caption:str=""):
		self.path, self.source = doc.path, doc.source
		self.offset, self.width = offset, max(width, 1)
		self.caption = caption

	def illustrate(self):
		row, col = self.source.find_row_col(self.offset)
		single_line = self.source.line_of_text(row)
		return illustration(single_line, col, self.width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer:Sequence[str]=()):
		self.intro, self._anns, self._footer = intro, anns, footer

	def as_text(self):
		lines = [self.intro, ""]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				if path: lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> list[Pic]: return list(self._issues)

	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)

	# Methods the front-end calls when some stage gives up:

	def lex_error(self, doc:Document, ex:LexError):
		intro = "There's a character here I don't know what to do with: %r" % ex.character
		self.issue(Pic(intro, [Annotation(doc, ex.offset, 1, "this one")]))

	def parse_error(self, doc:Document, ex:ParseError):
		found = ex.found
		if found.kind is TokenKind.END_OF_FILE:
			intro = "Ran out of words while looking for %s." % _describe(ex.expected)
			self.issue(Pic(intro, [Annotation(doc, found.offset)], ["Is something missing at the end?"]))
		else:
			intro = "Got confused by %s." % (found,)
			caption = "expected %s here" % _describe(ex.expected)
			self.issue(Pic(intro, [Annotation(doc, found.offset, len(found.lexeme()), caption)]))

	def eval_error(self, doc:Optional[Document], ex):
		if isinstance(ex, UndefinedVariableError):
			intro = "This variable is used before anything was assigned to it."
			anns = [Annotation(doc, ex.offset, len(ex.name), ex.name)] if doc else []
			self.issue(Pic(intro, anns))
		elif isinstance(ex, UnsupportedOperationError):
			intro = "That can't be written in %s notation." % ex.evaluator
			self.issue(Pic(intro, [], ["The trouble is a %s." % type(ex.node).__name__]))
		else:
			self.issue(Pic(str(ex), []))

	def arithmetic_error(self, ex:ArithmeticError):
		intro = "Arithmetic went wrong while running the program."
		self.issue(Pic(intro, [], [str(ex)]))

def _describe(expected) -> str:
	if isinstance(expected, TokenKind): return "a %s" % expected
	return "a %s" % expected.replace("_", " ")
