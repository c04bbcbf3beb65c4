import unittest

from minipas import syntax
from minipas.lexer import Lexer
from minipas.parser import Parser
from minipas.notation import PostfixTranslator, LispTranslator, NOTATIONS, _Translator
from minipas.errors import UnsupportedOperationError

def parse(text):
	return Parser(Lexer(text)).parse_expression()

class TranslatorTests(unittest.TestCase):

	def test_rpn(self):
		translator = PostfixTranslator()
		self.assertEqual("1 2 + 3 *", translator.translate(parse("(1 + 2) * 3")))
		self.assertEqual("2 3 4 * +", translator.translate(parse("2 + 3 * 4")))
		self.assertEqual("10 3 - 2 -", translator.translate(parse("10 - 3 - 2")))

	def test_lisp(self):
		translator = LispTranslator()
		self.assertEqual("(* (+ 1 2) 3)", translator.translate(parse("(1 + 2) * 3")))
		self.assertEqual("(+ 2 (* 3 4))", translator.translate(parse("2 + 3 * 4")))
		self.assertEqual("(- (- 10 3) 2)", translator.translate(parse("10 - 3 - 2")))

	def test_both_divisions_and_reals(self):
		tree = parse("7 DIV 2 / 1.5")
		self.assertEqual("7 2 DIV 1.5 /", PostfixTranslator().translate(tree))
		self.assertEqual("(/ (DIV 7 2) 1.5)", LispTranslator().translate(tree))

	def test_variables_render_by_name(self):
		self.assertEqual("(+ x 1)", LispTranslator().translate(parse("x + 1")))

	def test_unary_is_refused(self):
		for cls in NOTATIONS.values():
			for text in ("-5", "1 + -5", "+(2 * 3)"):
				with self.subTest(cls.__name__ + " " + text):
					with self.assertRaises(UnsupportedOperationError) as cm:
						cls().translate(parse(text))
					self.assertIsInstance(cm.exception.node, syntax.UnaryOp)

	def test_statements_are_refused(self):
		tree = Parser(Lexer("BEGIN x := 1 END.")).parse_bare_program()
		for cls in (PostfixTranslator, LispTranslator):
			for node in (tree, tree.statements[0], syntax.NoOp()):
				with self.subTest(cls.__name__ + " " + type(node).__name__):
					with self.assertRaises(UnsupportedOperationError):
						cls().translate(node)

	def test_translation_leaves_tree_alone(self):
		tree = parse("(1 + 2) * 3")
		before = repr(tree)
		PostfixTranslator().translate(tree)
		LispTranslator().translate(tree)
		self.assertEqual(before, repr(tree))
		self.assertEqual(parse("(1 + 2) * 3"), tree)

	def test_a_notation_must_say_how_to_combine(self):
		class Mute(_Translator):
			notation = "mute"
		with self.assertRaises(TypeError):
			Mute()


if __name__ == '__main__':
	unittest.main()
