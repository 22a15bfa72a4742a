"""Build a class/association model from a scanned token stream.

Recognition is line oriented and deliberately shallow: a ``class`` reserved
word followed by a name opens a class, braces are counted to follow its body,
and every line directly inside the body is read as one member.
"""

import itertools
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from astouml.models import ClassModel, DiagramModel, Token, TokenKind

_NAME_RE = re.compile(r"[#A-Za-z_$][\w$]*")
_DOTTED_NAME_RE = re.compile(r"[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*")
_THIS_ASSIGNMENT_RE = re.compile(r"(?<![\w$.])this\.([#A-Za-z_$][\w$]*)\s*=(?![=>])")
_MODIFIERS = frozenset({"static", "async", "get", "set"})
_COMMENT_PREFIXES = ("//", "/*", "*")


@dataclass
class _ClassBuilder:
    name: str
    attributes: list[str] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)
    instantiated: list[str] = field(default_factory=list)
    depth: int = 0
    parens: int = 0
    opened: bool = False

    def add_attribute(self, entry: str) -> None:
        if entry not in self.attributes:
            self.attributes.append(entry)

    def add_method(self, entry: str) -> None:
        self.methods.append(entry)

    def count_nesting(self, tokens: Sequence[Token]) -> None:
        for token in tokens:
            if token.kind is TokenKind.STRING:
                continue
            opening = token.text.count("{")
            if opening:
                self.opened = True
            self.depth += opening - token.text.count("}")
            self.parens = max(0, self.parens + token.text.count("(") - token.text.count(")"))

    @property
    def closed(self) -> bool:
        return self.opened and self.depth <= 0

    def to_model(self) -> ClassModel:
        return ClassModel(name=self.name, attributes=self.attributes, methods=self.methods)


def _leading_name(text: str) -> str | None:
    match = _NAME_RE.match(text)
    if match is None or match.group(0).startswith("#"):
        return None
    return match.group(0)


def _dotted_name(text: str) -> str | None:
    match = _DOTTED_NAME_RE.match(text)
    return None if match is None else match.group(0)


def _visibility(name: str) -> str:
    return "-" if name.startswith(("#", "_")) else "+"


def _is_comment(tokens: Sequence[Token]) -> bool:
    return tokens[0].text.startswith(_COMMENT_PREFIXES)


def _is_reserved(token: Token, word: str) -> bool:
    return token.kind is TokenKind.RESERVED_WORD and token.text == word


def _class_header(tokens: Sequence[Token]) -> tuple[str, str | None] | None:
    """Return ``(name, base)`` when the line declares a named class."""
    for index, token in enumerate(tokens[:-1]):
        if not _is_reserved(token, "class"):
            continue
        name = _leading_name(tokens[index + 1].text)
        if name is None:
            return None
        base = None
        if index + 3 < len(tokens) and _is_reserved(tokens[index + 2], "extends"):
            base = _dotted_name(tokens[index + 3].text)
        return name, base
    return None


def _format_params(text: str) -> str:
    closing = text.find(")")
    inner = text if closing == -1 else text[:closing]
    return ", ".join(part.strip() for part in inner.split(",") if part.strip())


def _parse_member(tokens: Sequence[Token]) -> tuple[bool, str] | None:
    """Read one class-body line as ``(is_method, entry)``."""
    words = [token.text for token in tokens]
    static = False
    while len(words) > 1 and words[0] in _MODIFIERS:
        static = static or words[0] == "static"
        words = words[1:]

    text = " ".join(words)
    match = _NAME_RE.match(text)
    if match is None:
        return None

    name = match.group(0)
    prefix = "{static} " if static else ""
    entry = f"{prefix}{_visibility(name)} {name.lstrip('#')}"
    rest = text[match.end() :].lstrip()
    if rest.startswith("("):
        return True, f"{entry}({_format_params(rest[1:])})"
    return False, entry


def _collect_this_assignments(builder: _ClassBuilder, tokens: Sequence[Token]) -> None:
    line = " ".join(token.text for token in tokens)
    for match in _THIS_ASSIGNMENT_RE.finditer(line):
        name = match.group(1)
        builder.add_attribute(f"{_visibility(name)} {name.lstrip('#')}")


def _collect_instantiations(builder: _ClassBuilder, tokens: Sequence[Token]) -> None:
    for token, following in itertools.pairwise(tokens):
        if _is_reserved(token, "new"):
            target = _leading_name(following.text)
            if target is not None:
                builder.instantiated.append(target)


def _lines(tokens: Iterable[Token]) -> Iterable[list[Token]]:
    for _, line_tokens in itertools.groupby(tokens, key=lambda token: token.line):
        yield list(line_tokens)


def build_diagram_model(tokens: Iterable[Token]) -> DiagramModel:
    builders: list[_ClassBuilder] = []
    inheritance: list[tuple[str, str]] = []
    current: _ClassBuilder | None = None

    for line_tokens in _lines(tokens):
        if _is_comment(line_tokens):
            continue

        if current is None:
            header = _class_header(line_tokens)
            if header is None:
                continue
            name, base = header
            current = _ClassBuilder(name)
            builders.append(current)
            if base is not None:
                inheritance.append((base, name))
        else:
            if current.opened and current.depth == 1 and current.parens == 0:
                member = _parse_member(line_tokens)
                if member is not None:
                    is_method, entry = member
                    if is_method:
                        current.add_method(entry)
                    else:
                        current.add_attribute(entry)
            _collect_this_assignments(current, line_tokens)
            _collect_instantiations(current, line_tokens)

        current.count_nesting(line_tokens)
        if current.closed:
            current = None

    declared = {builder.name for builder in builders}
    associations: list[str] = [f"{base} <|-- {name}" for base, name in inheritance]
    for builder in builders:
        for target in builder.instantiated:
            if target in declared and target != builder.name:
                associations.append(f"{builder.name} --> {target}")

    return DiagramModel(
        classes=[builder.to_model() for builder in builders],
        associations=list(dict.fromkeys(associations)),
    )
