import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(StrEnum):
    LEFT_CURLY_BRACKET = "LeftCurlyBracket"
    RIGHT_CURLY_BRACKET = "RightCurlyBracket"
    LEFT_PARENTHESIS = "LeftParenthesis"
    RIGHT_PARENTHESIS = "RightParenthesis"
    LEFT_SQUARE_BRACKET = "LeftSquareBracket"
    RIGHT_SQUARE_BRACKET = "RightSquareBracket"
    LEFT_ANGLE_BRACKET = "LeftAngleBracket"
    RIGHT_ANGLE_BRACKET = "RightAngleBracket"

    COMMA = "Comma"
    SEMICOLON = "Semicolon"
    COLON = "Colon"
    DOUBLE_COLON = "DoubleColon"
    DOT = "Dot"
    DOUBLE_DOT = "DoubleDot"

    EQUALS = "Equals"
    DOUBLE_EQUALS = "DoubleEquals"
    TRIPLE_EQUALS = "TripleEquals"
    NOT_EQUALS = "NotEquals"
    NOT_DOUBLE_EQUALS = "NotDoubleEquals"
    NOT = "Not"

    PLUS = "Plus"
    DOUBLE_PLUS = "DoublePlus"
    MINUS = "Minus"
    DOUBLE_MINUS = "DoubleMinus"
    ASTERISK = "Asterisk"
    DOUBLE_ASTERISK = "DoubleAsterisk"
    SLASH = "Slash"
    DOUBLE_SLASH = "DoubleSlash"
    PERCENT = "Percent"

    AMPERSAND = "Ampersand"
    DOUBLE_AMPERSAND = "DoubleAmpersand"
    PIPE = "Pipe"
    DOUBLE_PIPE = "DoublePipe"
    CARET = "Caret"
    TILDE = "Tilde"

    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"

    QUESTION_MARK = "QuestionMark"
    DOUBLE_QUESTION_MARK = "DoubleQuestionMark"

    ARROW = "Arrow"
    DOUBLE_ARROW = "DoubleArrow"

    RESERVED_WORD = "ReservedWord"
    IDENTIFIER = "Identifier"
    STRING = "String"
    NUMBER = "Number"

    UNRECOGNIZED = "Unrecognized"


class MatchPass(StrEnum):
    EXACT = "exact"
    LOOSE = "loose"


@dataclass(frozen=True)
class TokenTypeRule:
    """One row of the token table.

    ``pattern`` is stored without anchors: the exact pass applies it with
    ``fullmatch`` and the loose pass with ``search``.
    """

    kind: TokenKind
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class Unrecognized:
    kind: TokenKind = TokenKind.UNRECOGNIZED


UNRECOGNIZED: Final = Unrecognized()


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    line: int
    column: int
    text: str
    raw_hex: str | None = None
    length: int | None = None

    @property
    def is_unrecognized(self) -> bool:
        return self.kind is TokenKind.UNRECOGNIZED


class ClassModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    attributes: list[str] = Field(default_factory=list)
    methods: list[str] = Field(default_factory=list)


class DiagramModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    classes: list[ClassModel] = Field(default_factory=list)
    associations: list[str] = Field(default_factory=list)
