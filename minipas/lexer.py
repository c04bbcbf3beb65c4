"""
A pull-based scanner: the parser asks for one token at a time.
There is exactly one character of look-ahead: enough to tell ':=' from ':', and '5.' from '5.25'.
"""
import string
from typing import Iterator
from .tokens import Token, TokenKind, RESERVED, PUNCTUATION, make_token
from .errors import LexError

DIGITS = frozenset(string.digits)
WORD_START = frozenset(string.ascii_letters + "_")
WORD_PART = WORD_START | DIGITS

class Lexer:
	_text: str
	_pos: int
	
	def __init__(self, text:str=""):
		self.set_text(text)
	
	def set_text(self, text:str):
		""" Start over at the beginning of some (possibly new) text. """
		self._text = text
		self._pos = 0
	
	def advance(self) -> Token:
		"""
		Consume and return the next token.
		At the end, this keeps on returning END_OF_FILE however often it's called.
		"""
		text = self._text
		while self._pos < len(text):
			ch = text[self._pos]
			if ch.isspace():
				self._skip_whitespace()
			elif ch == "{":
				self._skip_comment()
			elif ch in DIGITS:
				return self._read_number()
			elif ch in WORD_START:
				return self._read_word()
			elif ch in PUNCTUATION:
				self._pos += 1
				return make_token(PUNCTUATION[ch], None, self._pos - 1)
			elif ch == ":":
				start = self._pos
				if self._lookahead("="):
					self._pos += 2
					return make_token(TokenKind.ASSIGN, None, start)
				self._pos += 1
				return make_token(TokenKind.COLON, None, start)
			else:
				raise LexError(ch, self._pos)
		return make_token(TokenKind.END_OF_FILE, None, len(text))
	
	def tokenize(self) -> Iterator[Token]:
		""" Every remaining token, through the first END_OF_FILE. """
		while True:
			token = self.advance()
			yield token
			if token.kind is TokenKind.END_OF_FILE: return
	
	def _at(self, ch:str) -> bool:
		return self._pos < len(self._text) and self._text[self._pos] == ch

	def _lookahead(self, ch:str) -> bool:
		nxt = self._pos + 1
		return nxt < len(self._text) and self._text[nxt] == ch

	def _lookahead_digit(self) -> bool:
		nxt = self._pos + 1
		return nxt < len(self._text) and self._text[nxt] in DIGITS
	
	def _skip_whitespace(self):
		text = self._text
		while self._pos < len(text) and text[self._pos].isspace():
			self._pos += 1
	
	def _skip_comment(self):
		# An unterminated comment quietly swallows the rest of the text.
		assert self._text[self._pos] == "{"
		close = self._text.find("}", self._pos)
		self._pos = len(self._text) if close < 0 else close + 1
	
	def _take_digits(self):
		text = self._text
		while self._pos < len(text) and text[self._pos] in DIGITS:
			self._pos += 1
	
	def _read_number(self) -> Token:
		start = self._pos
		self._take_digits()
		if self._at(".") and self._lookahead_digit():
			self._pos += 1
			self._take_digits()
			return make_token(TokenKind.REAL_CONST, self._text[start:self._pos], start)
		return make_token(TokenKind.INTEGER_CONST, self._text[start:self._pos], start)
	
	def _read_word(self) -> Token:
		start = self._pos
		text = self._text
		while self._pos < len(text) and text[self._pos] in WORD_PART:
			self._pos += 1
		word = text[start:self._pos]
		kind = RESERVED.get(word.lower())
		if kind is None: return make_token(TokenKind.IDENTIFIER, word, start)
		else: return make_token(kind, None, start)
