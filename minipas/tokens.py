"""
The lexical vocabulary: which kinds of token exist, and what one token looks like.
Both the lexer and the parser speak in these terms, and nothing else does.
"""
from enum import Enum
from typing import NamedTuple, Optional

class TokenKind(Enum):
	# Keywords
	PROGRAM = "Program"
	VAR = "Var"
	BEGIN = "Begin"
	END = "End"
	INTEGER = "Integer"
	REAL = "Real"
	INTEGER_DIV = "Div"
	
	# Tokens with a payload
	IDENTIFIER = "Identifier"
	INTEGER_CONST = "IntegerConstant"
	REAL_CONST = "RealConstant"
	
	# Separators
	DOT = "Dot"
	ASSIGN = "Assign"
	SEMICOLON = "Semicolon"
	LEFT_PAREN = "LeftParen"
	RIGHT_PAREN = "RightParen"
	COLON = "Colon"
	COMMA = "Comma"
	
	# Operators
	PLUS = "Plus"
	MINUS = "Minus"
	MUL = "Mul"
	FLOAT_DIV = "FloatDiv"
	
	END_OF_FILE = "EndOfFile"
	
	def __str__(self): return self.value

# Keys are lower-case; the lexer folds each word before looking here.
RESERVED = {
	"program": TokenKind.PROGRAM,
	"var": TokenKind.VAR,
	"begin": TokenKind.BEGIN,
	"end": TokenKind.END,
	"integer": TokenKind.INTEGER,
	"real": TokenKind.REAL,
	"div": TokenKind.INTEGER_DIV,
}

PUNCTUATION = {
	"+": TokenKind.PLUS,
	"-": TokenKind.MINUS,
	"*": TokenKind.MUL,
	"/": TokenKind.FLOAT_DIV,
	"(": TokenKind.LEFT_PAREN,
	")": TokenKind.RIGHT_PAREN,
	";": TokenKind.SEMICOLON,
	".": TokenKind.DOT,
	",": TokenKind.COMMA,
}

WITH_PAYLOAD = frozenset([TokenKind.IDENTIFIER, TokenKind.INTEGER_CONST, TokenKind.REAL_CONST])

class Token(NamedTuple):
	kind: TokenKind
	value: Optional[str] = None
	offset: int = 0
	
	def __str__(self):
		if self.value is None: return "Token(%s)" % self.kind
		else: return "Token(%s, %s)" % (self.kind, self.value)
	
	def lexeme(self) -> str:
		"""
		The text this token stood for, as near as can be told from the token alone.
		Keywords come back in upper case, since the lexer does not keep their spelling.
		"""
		if self.value is not None: return self.value
		for text, kind in PUNCTUATION.items():
			if kind is self.kind: return text
		if self.kind is TokenKind.ASSIGN: return ":="
		if self.kind is TokenKind.COLON: return ":"
		if self.kind is TokenKind.END_OF_FILE: return ""
		for word, kind in RESERVED.items():
			if kind is self.kind: return word.upper()
		raise NotImplementedError(self.kind)

def make_token(kind:TokenKind, value:Optional[str]=None, offset:int=0) -> Token:
	assert (value is not None) == (kind in WITH_PAYLOAD), (kind, value)
	return Token(kind, value, offset)
