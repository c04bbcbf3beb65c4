"""
Direct interpretation: walk the tree, do the arithmetic, keep the variables in a Scope.
A Calculator lives for exactly one run. Make a fresh one for the next.
"""
import operator
from typing import Optional
from . import syntax
from .errors import UndefinedVariableError
from .scope import Scope, FoldedScope, Absent, NUMBER

def integer_divide(a, b):
	""" DIV truncates toward zero, not toward negative infinity as Python's // would. """
	if isinstance(a, int) and isinstance(b, int):
		quotient = abs(a) // abs(b)
		return quotient if (a < 0) == (b < 0) else -quotient
	return int(a / b)

def float_divide(a, b):
	return float(a) / b

OPS = {
	"+": operator.add,
	"-": operator.sub,
	"*": operator.mul,
	"DIV": integer_divide,
	"/": float_divide,
}

SIGNS = {
	"+": operator.pos,
	"-": operator.neg,
}

class Calculator(syntax.TreeWalker):
	scope: Scope

	def __init__(self, scope:Optional[Scope]=None):
		self.scope = FoldedScope() if scope is None else scope

	def calculate(self, node:syntax.Expression) -> NUMBER:
		return self.visit(node)

	def run(self, node:syntax.Node) -> Scope:
		self.visit(node)
		return self.scope

	@staticmethod
	def visit_NumberLiteral(num:syntax.NumberLiteral):
		return num.value

	def visit_BinaryOp(self, binop:syntax.BinaryOp):
		try: fn = OPS[binop.op]
		except KeyError: raise NotImplementedError(binop.op) from None
		left = self.visit(binop.left)
		right = self.visit(binop.right)
		return fn(left, right)

	def visit_UnaryOp(self, unop:syntax.UnaryOp):
		try: fn = SIGNS[unop.op]
		except KeyError: raise NotImplementedError(unop.op) from None
		return fn(self.visit(unop.operand))

	def visit_Variable(self, var:syntax.Variable):
		try: return self.scope.lookup(var.name)
		except Absent: raise UndefinedVariableError(var.name, var.spot) from None

	def visit_Assignment(self, assign:syntax.Assignment):
		value = self.visit(assign.expr)
		self.scope.assign(assign.target_name, value)

	@staticmethod
	def visit_NoOp(nop:syntax.NoOp):
		pass

	def visit_Compound(self, compound:syntax.Compound):
		for statement in compound.statements:
			self.visit(statement)

	# Declarations are purely syntax. They neither create nor constrain variables.

	@staticmethod
	def visit_TypeTag(tag:syntax.TypeTag):
		pass

	@staticmethod
	def visit_VarDecl(decl:syntax.VarDecl):
		pass

	def visit_Block(self, block:syntax.Block):
		self.visit(block.compound)

	def visit_Program(self, program:syntax.Program):
		self.visit(program.block)
