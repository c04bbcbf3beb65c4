"""
Recursive descent, one method per production, with a single token of look-ahead.

	program        := PROGRAM name ; block .          (typed dialect)
	               |  compound .                      (bare dialect)
	block          := declarations compound
	declarations   := [ VAR (var_decl ;)+ ]
	var_decl       := name (, name)* : type_spec
	type_spec      := INTEGER | REAL
	compound       := BEGIN statement_list END
	statement_list := statement (; statement)*
	statement      := compound | assignment | <empty>
	assignment     := variable := expr
	expr           := term ((+ | -) term)*
	term           := factor ((* | DIV | /) factor)*
	factor         := (+ | -) factor | integer | real | ( expr ) | variable

Binary operators fold to the left; unary operators nest to the right.
The first mismatch raises ParseError and that's the end of it.
"""
from .lexer import Lexer
from .tokens import Token, TokenKind
from .errors import ParseError
from . import syntax

ADDITIVE = {TokenKind.PLUS: "+", TokenKind.MINUS: "-"}
MULTIPLICATIVE = {TokenKind.MUL: "*", TokenKind.INTEGER_DIV: "DIV", TokenKind.FLOAT_DIV: "/"}
SIGNS = {TokenKind.PLUS: "+", TokenKind.MINUS: "-"}
TYPE_SPECS = {TokenKind.INTEGER: "INTEGER", TokenKind.REAL: "REAL"}

class Parser:
	current_token: Token

	def __init__(self, lexer:Lexer):
		self._lexer = lexer
		self.current_token = lexer.advance()

	def eat(self, kind:TokenKind) -> Token:
		""" Consume a token of the given kind, or complain. Returns the token consumed. """
		token = self.current_token
		if token.kind is not kind:
			raise ParseError(kind, token)
		self.current_token = self._lexer.advance()
		return token

	def _at(self, kind:TokenKind) -> bool:
		return self.current_token.kind is kind

	# Entry points:

	def parse_program(self) -> syntax.Program:
		self.eat(TokenKind.PROGRAM)
		name = self.eat(TokenKind.IDENTIFIER).value
		self.eat(TokenKind.SEMICOLON)
		block = self.block()
		self.eat(TokenKind.DOT)
		self.eat(TokenKind.END_OF_FILE)
		return syntax.Program(name, block)

	def parse_bare_program(self) -> syntax.Compound:
		node = self.compound()
		self.eat(TokenKind.DOT)
		self.eat(TokenKind.END_OF_FILE)
		return node

	def parse_expression(self) -> syntax.Expression:
		node = self.expr()
		self.eat(TokenKind.END_OF_FILE)
		return node

	# Declarations:

	def block(self) -> syntax.Block:
		declarations = self.declarations()
		return syntax.Block(declarations, self.compound())

	def declarations(self) -> list[syntax.VarDecl]:
		result = []
		if self._at(TokenKind.VAR):
			self.eat(TokenKind.VAR)
			while True:
				result.append(self.var_decl())
				self.eat(TokenKind.SEMICOLON)
				if not self._at(TokenKind.IDENTIFIER): break
		return result

	def var_decl(self) -> syntax.VarDecl:
		names = [self.eat(TokenKind.IDENTIFIER).value]
		while self._at(TokenKind.COMMA):
			self.eat(TokenKind.COMMA)
			names.append(self.eat(TokenKind.IDENTIFIER).value)
		self.eat(TokenKind.COLON)
		return syntax.VarDecl(names, self.type_spec())

	def type_spec(self) -> syntax.TypeTag:
		kind = self.current_token.kind
		if kind not in TYPE_SPECS:
			raise ParseError("type_spec", self.current_token)
		self.eat(kind)
		return syntax.TypeTag(TYPE_SPECS[kind])

	# Statements:

	def compound(self) -> syntax.Compound:
		self.eat(TokenKind.BEGIN)
		statements = self.statement_list()
		self.eat(TokenKind.END)
		return syntax.Compound(statements)

	def statement_list(self) -> list[syntax.Statement]:
		statements = [self.statement()]
		while self._at(TokenKind.SEMICOLON):
			self.eat(TokenKind.SEMICOLON)
			statements.append(self.statement())
		return statements

	def statement(self) -> syntax.Statement:
		if self._at(TokenKind.BEGIN): return self.compound()
		if self._at(TokenKind.IDENTIFIER): return self.assignment()
		return syntax.NoOp()

	def assignment(self) -> syntax.Assignment:
		target = self.variable()
		self.eat(TokenKind.ASSIGN)
		return syntax.Assignment(target, self.expr())

	def variable(self) -> syntax.Variable:
		token = self.eat(TokenKind.IDENTIFIER)
		return syntax.Variable(token.value, token.offset)

	# Expressions:

	def expr(self) -> syntax.Expression:
		node = self.term()
		while self.current_token.kind in ADDITIVE:
			op = ADDITIVE[self.eat(self.current_token.kind).kind]
			node = syntax.BinaryOp(node, op, self.term())
		return node

	def term(self) -> syntax.Expression:
		node = self.factor()
		while self.current_token.kind in MULTIPLICATIVE:
			op = MULTIPLICATIVE[self.eat(self.current_token.kind).kind]
			node = syntax.BinaryOp(node, op, self.factor())
		return node

	def factor(self) -> syntax.Expression:
		token = self.current_token
		kind = token.kind
		if kind in SIGNS:
			self.eat(kind)
			return syntax.UnaryOp(SIGNS[kind], self.factor())
		if kind is TokenKind.INTEGER_CONST:
			self.eat(kind)
			try: value = int(token.value)
			except ValueError: raise ParseError("integer", token) from None
			return syntax.NumberLiteral(value, True)
		if kind is TokenKind.REAL_CONST:
			self.eat(kind)
			return syntax.NumberLiteral(float(token.value), False)
		if kind is TokenKind.LEFT_PAREN:
			self.eat(TokenKind.LEFT_PAREN)
			node = self.expr()
			self.eat(TokenKind.RIGHT_PAREN)
			return node
		if kind is TokenKind.IDENTIFIER:
			return self.variable()
		raise ParseError("factor", token)
