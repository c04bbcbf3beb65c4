"""
Two ways to spell an expression tree without parentheses-by-precedence:
reverse-Polish (operands first, operator last) and Lisp-style (operator first, in parentheses).

These render expressions only. Unary operators are refused outright rather than faked,
and so is anything at the level of statements.
"""
from abc import ABC, abstractmethod
from . import syntax
from .errors import UnsupportedOperationError

class _Translator(syntax.TreeWalker, ABC, abstract=True):
	notation: str

	def translate(self, node:syntax.Node) -> str:
		return self.visit(node)

	@abstractmethod
	def combine(self, op:str, left:str, right:str) -> str: pass

	@staticmethod
	def visit_NumberLiteral(num:syntax.NumberLiteral):
		return str(num.value)

	@staticmethod
	def visit_Variable(var:syntax.Variable):
		return var.name

	def visit_BinaryOp(self, binop:syntax.BinaryOp):
		if binop.op not in syntax.BINARY_OPERATORS: raise NotImplementedError(binop.op)
		return self.combine(binop.op, self.visit(binop.left), self.visit(binop.right))

	def refuse(self, node:syntax.Node):
		raise UnsupportedOperationError(node, self.notation)

	visit_UnaryOp = refuse
	visit_NoOp = refuse
	visit_Assignment = refuse
	visit_Compound = refuse
	visit_TypeTag = refuse
	visit_VarDecl = refuse
	visit_Block = refuse
	visit_Program = refuse


class PostfixTranslator(_Translator):
	""" (1 + 2) * 3  -->  1 2 + 3 * """
	notation = "postfix"
	def combine(self, op, left, right): return "%s %s %s" % (left, right, op)


class LispTranslator(_Translator):
	""" (1 + 2) * 3  -->  (* (+ 1 2) 3) """
	notation = "lisp"
	def combine(self, op, left, right): return "(%s %s %s)" % (op, left, right)


NOTATIONS = {
	"rpn": PostfixTranslator,
	"lisp": LispTranslator,
}
