"""Ordered token table used by the classifier.

Order is significant: when a fragment satisfies more than one pattern the
rule declared first wins, in both the exact and the loose pass.
"""

import re

from astouml.models import TokenKind, TokenTypeRule

RESERVED_WORDS: tuple[str, ...] = (
    "await",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "new",
    "null",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "yield",
)

_K = TokenKind

_PUNCTUATION_PATTERNS: tuple[tuple[TokenKind, str], ...] = (
    (_K.LEFT_CURLY_BRACKET, r"\{"),
    (_K.RIGHT_CURLY_BRACKET, r"\}"),
    (_K.LEFT_PARENTHESIS, r"\("),
    (_K.RIGHT_PARENTHESIS, r"\)"),
    (_K.LEFT_SQUARE_BRACKET, r"\["),
    (_K.RIGHT_SQUARE_BRACKET, r"\]"),
    (_K.LEFT_ANGLE_BRACKET, r"<"),
    (_K.RIGHT_ANGLE_BRACKET, r">"),
    (_K.COMMA, r","),
    (_K.SEMICOLON, r";"),
    (_K.COLON, r":"),
    (_K.DOUBLE_COLON, r"::"),
    (_K.DOT, r"\."),
    (_K.DOUBLE_DOT, r"\.\."),
    (_K.EQUALS, r"="),
    # compound assignments share the DoubleEquals kind
    (_K.DOUBLE_EQUALS, r"==|\+=|-="),
    (_K.TRIPLE_EQUALS, r"==="),
    (_K.NOT_EQUALS, r"!="),
    (_K.NOT_DOUBLE_EQUALS, r"!=="),
    (_K.NOT, r"!"),
    (_K.PLUS, r"\+"),
    (_K.DOUBLE_PLUS, r"\+\+"),
    (_K.MINUS, r"-"),
    (_K.DOUBLE_MINUS, r"--"),
    (_K.ASTERISK, r"\*"),
    (_K.DOUBLE_ASTERISK, r"\*\*"),
    (_K.SLASH, r"/"),
    (_K.DOUBLE_SLASH, r"//"),
    (_K.PERCENT, r"%"),
    (_K.AMPERSAND, r"&"),
    (_K.DOUBLE_AMPERSAND, r"&&"),
    (_K.PIPE, r"\|"),
    (_K.DOUBLE_PIPE, r"\|\|"),
    (_K.CARET, r"\^"),
    (_K.TILDE, r"~"),
    (_K.LESS_THAN, r"<"),
    (_K.LESS_THAN_OR_EQUAL, r"<="),
    (_K.GREATER_THAN, r">"),
    (_K.GREATER_THAN_OR_EQUAL, r">="),
    (_K.QUESTION_MARK, r"\?"),
    (_K.DOUBLE_QUESTION_MARK, r"\?\?"),
    (_K.ARROW, r"=>"),
    (_K.DOUBLE_ARROW, r"=>>"),
)

_TRAILING_PATTERNS: tuple[tuple[TokenKind, str], ...] = (
    (_K.IDENTIFIER, r"[a-zA-Z_][a-zA-Z0-9_]*"),
    (_K.STRING, r'"[^"]*"'),
    (_K.NUMBER, r"[0-9]+"),
)


def _build_table() -> tuple[TokenTypeRule, ...]:
    rules = [TokenTypeRule(kind, re.compile(pattern)) for kind, pattern in _PUNCTUATION_PATTERNS]
    rules.extend(TokenTypeRule(_K.RESERVED_WORD, re.compile(re.escape(word))) for word in RESERVED_WORDS)
    rules.extend(TokenTypeRule(kind, re.compile(pattern)) for kind, pattern in _TRAILING_PATTERNS)
    return tuple(rules)


def _derive_loose_table(table: tuple[TokenTypeRule, ...]) -> tuple[TokenTypeRule, ...]:
    # Patterns carry no anchors; the loose table differs only in how the
    # classifier applies it.
    return tuple(TokenTypeRule(rule.kind, rule.pattern) for rule in table)


TOKEN_TYPES: tuple[TokenTypeRule, ...] = _build_table()
LOOSE_TOKEN_TYPES: tuple[TokenTypeRule, ...] = _derive_loose_table(TOKEN_TYPES)
