import sys
import unittest

from minipas import syntax
from minipas.lexer import Lexer
from minipas.parser import Parser
from minipas.tokens import TokenKind
from minipas.errors import ParseError

def program(text) -> syntax.Program:
	return Parser(Lexer(text)).parse_program()

def bare(text) -> syntax.Compound:
	return Parser(Lexer(text)).parse_bare_program()

def expression(text) -> syntax.Expression:
	return Parser(Lexer(text)).parse_expression()

def num(n):
	return syntax.NumberLiteral(n, isinstance(n, int))

class ProgramShapeTests(unittest.TestCase):

	def test_typed_program(self):
		tree = program("PROGRAM p; VAR x: INTEGER; BEGIN x := 5 END.")
		self.assertIsInstance(tree, syntax.Program)
		self.assertEqual("p", tree.name)
		decls = tree.block.declarations
		self.assertEqual(1, len(decls))
		self.assertEqual(("x",), decls[0].names)
		self.assertEqual(syntax.TypeTag("INTEGER"), decls[0].type_tag)
		statements = tree.block.compound.statements
		self.assertEqual(1, len(statements))
		self.assertIsInstance(statements[0], syntax.Assignment)
		self.assertEqual("x", statements[0].target_name)
		self.assertEqual(num(5), statements[0].expr)

	def test_several_declarations(self):
		tree = program("""
			PROGRAM Part10;
			VAR
				a, b, c : INTEGER;
				y       : REAL;
			BEGIN END.
		""")
		decls = tree.block.declarations
		self.assertEqual([("a", "b", "c"), ("y",)], [d.names for d in decls])
		self.assertEqual(["INTEGER", "REAL"], [d.type_tag.name for d in decls])

	def test_no_declarations(self):
		tree = program("PROGRAM empty; BEGIN END.")
		self.assertEqual((), tree.block.declarations)

	def test_empty_block_is_one_noop(self):
		tree = bare("BEGIN END.")
		self.assertIsInstance(tree, syntax.Compound)
		self.assertEqual((syntax.NoOp(),), tree.statements)

	def test_trailing_semicolon_makes_noop(self):
		tree = bare("BEGIN a := 1; END.")
		self.assertEqual(2, len(tree.statements))
		self.assertIsInstance(tree.statements[1], syntax.NoOp)

	def test_consecutive_semicolons(self):
		tree = bare("BEGIN ;; END.")
		self.assertEqual(3, len(tree.statements))

	def test_nested_compound(self):
		tree = bare("BEGIN BEGIN a := 1 END; b := 2 END.")
		inner = tree.statements[0]
		self.assertIsInstance(inner, syntax.Compound)
		self.assertEqual("a", inner.statements[0].target_name)

	def test_reparse_is_equal_but_distinct(self):
		text = "PROGRAM p; VAR x: REAL; BEGIN x := -(1 + 2.5) * y DIV 3 END."
		first, second = program(text), program(text)
		self.assertEqual(first, second)
		self.assertIsNot(first, second)
		self.assertIsNot(first.block, second.block)
		self.assertIsNot(first.block.compound.statements[0], second.block.compound.statements[0])


class ExpressionTests(unittest.TestCase):

	def test_left_associative(self):
		tree = expression("10 - 3 - 2")
		self.assertEqual(syntax.BinaryOp(syntax.BinaryOp(num(10), "-", num(3)), "-", num(2)), tree)

	def test_precedence(self):
		tree = expression("2 + 3 * 4")
		self.assertEqual(syntax.BinaryOp(num(2), "+", syntax.BinaryOp(num(3), "*", num(4))), tree)

	def test_parentheses_leave_no_trace(self):
		tree = expression("(1 + 2) * 3")
		self.assertEqual(syntax.BinaryOp(syntax.BinaryOp(num(1), "+", num(2)), "*", num(3)), tree)
		self.assertEqual(num(7), expression("((7))"))

	def test_division_operators(self):
		tree = expression("a DIV b / c")
		self.assertEqual("/", tree.op)
		self.assertEqual("DIV", tree.left.op)

	def test_unary_nests_to_the_right(self):
		tree = expression("- + - 4")
		self.assertEqual(syntax.UnaryOp("-", syntax.UnaryOp("+", syntax.UnaryOp("-", num(4)))), tree)

	def test_subtracting_a_negative(self):
		tree = expression("a - - b")
		self.assertEqual(syntax.BinaryOp(syntax.Variable("a"), "-", syntax.UnaryOp("-", syntax.Variable("b"))), tree)

	def test_literals_are_tagged(self):
		self.assertTrue(expression("3").is_integer)
		self.assertFalse(expression("3.0").is_integer)
		self.assertIsInstance(expression("3.0").value, float)

	def test_variable_spot(self):
		self.assertEqual(4, expression("1 + abc").right.spot)


class ParseErrorTests(unittest.TestCase):

	def expect(self, parse, text, expected):
		with self.assertRaises(ParseError) as cm:
			parse(text)
		self.assertEqual(expected, cm.exception.expected)
		return cm.exception

	def test_missing_dot(self):
		ex = self.expect(bare, "BEGIN END", TokenKind.DOT)
		self.assertIs(TokenKind.END_OF_FILE, ex.found.kind)

	def test_junk_after_dot(self):
		self.expect(bare, "BEGIN END. x", TokenKind.END_OF_FILE)

	def test_missing_assign(self):
		self.expect(bare, "BEGIN x 1 END.", TokenKind.ASSIGN)

	def test_bad_factor(self):
		ex = self.expect(expression, "1 + * 2", "factor")
		self.assertEqual(4, ex.offset)

	def test_unclosed_parenthesis(self):
		self.expect(expression, "(1 + 2", TokenKind.RIGHT_PAREN)

	def test_typed_program_needs_header(self):
		self.expect(program, "BEGIN END.", TokenKind.PROGRAM)

	def test_bare_program_refuses_header(self):
		self.expect(bare, "PROGRAM p; BEGIN END.", TokenKind.BEGIN)

	def test_bad_type(self):
		self.expect(program, "PROGRAM p; VAR x: BOOLEAN; BEGIN END.", "type_spec")

	def test_empty_var_section(self):
		self.expect(program, "PROGRAM p; VAR BEGIN END.", TokenKind.IDENTIFIER)

	def test_declaration_needs_semicolon(self):
		self.expect(program, "PROGRAM p; VAR x: INTEGER BEGIN END.", TokenKind.SEMICOLON)

	@unittest.skipUnless(hasattr(sys, "get_int_max_str_digits"), "no limit on integer conversion")
	def test_integer_too_long_to_convert(self):
		ex = self.expect(expression, "1 + " + "7" * 5000, "integer")
		self.assertEqual(4, ex.offset)


if __name__ == '__main__':
	unittest.main()
