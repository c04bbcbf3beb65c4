"""
minipas: lex, parse, and directly interpret a small Pascal-flavored language.

The pipeline is Lexer -> Parser -> one of the tree-walkers in evaluator and notation.
The front_end module strings these together and turns failures into diagnostics.
"""
