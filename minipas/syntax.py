"""
The set of parse-nodes in simple form.
The parser calls these constructors bottom-up; nothing changes a node after that.
Every node knows its own fields, which buys structural equality and a readable repr.

Passes over the tree are Visitors: a method "visit_Foo" for each node-class "Foo".
The set of node-classes is closed, and TreeWalker insists that each concrete pass
has a method for every one of them.
"""
from typing import Sequence, Union
from boozetools.support.foundation import Visitor

BINARY_OPERATORS = frozenset(["+", "-", "*", "DIV", "/"])
UNARY_OPERATORS = frozenset(["+", "-"])
TYPE_NAMES = frozenset(["INTEGER", "REAL"])

class Node:
	_fields: tuple[str, ...] = ()

	def __eq__(self, other):
		if type(self) is not type(other): return NotImplemented
		return all(getattr(self, f) == getattr(other, f) for f in self._fields)

	__hash__ = None

	def __repr__(self):
		inside = ", ".join("%s=%r" % (f, getattr(self, f)) for f in self._fields)
		return "%s(%s)" % (type(self).__name__, inside)

class Expression(Node): pass

class Statement(Node): pass

class BinaryOp(Expression):
	_fields = ("left", "op", "right")
	def __init__(self, left:Expression, op:str, right:Expression):
		assert op in BINARY_OPERATORS, op
		self.left, self.op, self.right = left, op, right

class UnaryOp(Expression):
	_fields = ("op", "operand")
	def __init__(self, op:str, operand:Expression):
		assert op in UNARY_OPERATORS, op
		self.op, self.operand = op, operand

class NumberLiteral(Expression):
	_fields = ("value", "is_integer")
	def __init__(self, value:Union[int, float], is_integer:bool):
		self.value, self.is_integer = value, is_integer
	def __str__(self): return str(self.value)

class Variable(Expression):
	"""
	The spot is where the name appeared, for the sake of error messages.
	It does not participate in equality.
	"""
	_fields = ("name",)
	def __init__(self, name:str, spot:int=0):
		self.name, self.spot = name, spot

class NoOp(Statement):
	pass

class Assignment(Statement):
	_fields = ("target", "expr")
	def __init__(self, target:Variable, expr:Expression):
		self.target, self.expr = target, expr

	@property
	def target_name(self) -> str: return self.target.name

class Compound(Statement):
	_fields = ("statements",)
	def __init__(self, statements:Sequence[Statement]):
		self.statements = tuple(statements)

class TypeTag(Node):
	_fields = ("name",)
	def __init__(self, name:str):
		assert name in TYPE_NAMES, name
		self.name = name

class VarDecl(Node):
	_fields = ("names", "type_tag")
	def __init__(self, names:Sequence[str], type_tag:TypeTag):
		self.names, self.type_tag = tuple(names), type_tag

class Block(Node):
	_fields = ("declarations", "compound")
	def __init__(self, declarations:Sequence[VarDecl], compound:Compound):
		self.declarations, self.compound = tuple(declarations), compound

class Program(Node):
	_fields = ("name", "block")
	def __init__(self, name:str, block:Block):
		self.name, self.block = name, block

NODE_TYPES = (
	BinaryOp, UnaryOp, NumberLiteral, Variable,
	NoOp, Assignment, Compound,
	TypeTag, VarDecl, Block, Program,
)

class TreeWalker(Visitor):
	"""
	Base for every pass over the tree.
	Defining a concrete subclass that forgets some kind of node is a TypeError on the spot.
	Intermediate bases opt out with "abstract=True" in the class statement.
	"""
	def __init_subclass__(cls, abstract=False, **kwargs):
		super().__init_subclass__(**kwargs)
		if abstract: return
		missing = [t.__name__ for t in NODE_TYPES if not callable(getattr(cls, "visit_"+t.__name__, None))]
		if missing:
			raise TypeError("%s does not visit %s" % (cls.__name__, ", ".join(missing)))
