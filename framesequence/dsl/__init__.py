"""Frame sequence notation — tokenizer, parser, and validator.

Usage:
    from framesequence.dsl import Lexer, Parser, validate_sequence

    tokens = Lexer(source).tokenize()
    tree = Parser(tokens, source).parse()
    diagnostics = validate_sequence(tree)
"""

from framesequence.dsl.lexer import Lexer
from framesequence.dsl.parser import FrameSequenceSyntaxError, NumericOverflowError, Parser
from framesequence.dsl.validator import validate_sequence

__all__ = [
    "FrameSequenceSyntaxError",
    "Lexer",
    "NumericOverflowError",
    "Parser",
    "validate_sequence",
]
