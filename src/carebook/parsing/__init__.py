"""Prefix grammar, field validators, and command parsers."""

from carebook.parsing.errors import ParseError, ParseErrorKind
from carebook.parsing.tokenizer import ArgumentMultimap, Prefix, tokenize

__all__ = [
    "ArgumentMultimap",
    "ParseError",
    "ParseErrorKind",
    "Prefix",
    "tokenize",
]
