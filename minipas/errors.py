"""
Every way the pipeline can refuse an input.
Nothing inside the pipeline catches these: they go straight up to whoever called.
The front-end is where they turn into diagnostics.
"""

class MinipasError(Exception):
	pass

class LexError(MinipasError):
	""" Some character the lexer has no rule for. """
	def __init__(self, character:str, offset:int):
		super().__init__(character, offset)
		self.character, self.offset = character, offset
	def __str__(self):
		return "can't scan character %r at position %d" % (self.character, self.offset)

class ParseError(MinipasError):
	"""
	The current token does not fit where the grammar is.
	"expected" is either a TokenKind or the name of a grammar production.
	"""
	def __init__(self, expected, found):
		super().__init__(expected, found)
		self.expected, self.found = expected, found
	
	@property
	def offset(self) -> int: return self.found.offset
	
	def __str__(self):
		return "can't parse as %s; got %s" % (self.expected, self.found)

class EvalError(MinipasError):
	pass

class UndefinedVariableError(EvalError):
	def __init__(self, name:str, offset:int):
		super().__init__(name, offset)
		self.name, self.offset = name, offset
	def __str__(self):
		return "variable %r is not defined" % self.name

class UnsupportedOperationError(EvalError):
	""" An evaluator was handed a kind of node it deliberately does not handle. """
	def __init__(self, node, evaluator:str):
		super().__init__(node, evaluator)
		self.node, self.evaluator = node, evaluator
	def __str__(self):
		return "can't translate %s to %s" % (type(self.node).__name__, self.evaluator)
