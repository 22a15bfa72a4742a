from astouml.core.classifier import classify
from astouml.core.ports.observer import ScanObserver
from astouml.models import Token, TokenKind


def to_raw_hex(text: str) -> str:
    return " ".join(format(ord(char), "x") for char in text)


def scan(source_text: str, observer: ScanObserver | None = None) -> list[Token]:
    """Split source text into positioned tokens.

    Lines are split on ``"\\n"`` and fragments on single spaces. Empty
    fragments from consecutive spaces are skipped and do not move the column;
    the column advances by each fragment's length only, never by the
    separator width.
    """
    tokens: list[Token] = []

    for line_number, line in enumerate(source_text.split("\n"), start=1):
        column = 1
        for fragment in line.split(" "):
            if not fragment:
                continue

            kind = classify(fragment, observer).kind
            if kind is TokenKind.UNRECOGNIZED:
                token = Token(
                    kind=kind,
                    line=line_number,
                    column=column,
                    text=fragment,
                    raw_hex=to_raw_hex(fragment),
                    length=len(fragment),
                )
                if observer is not None:
                    observer.on_unrecognized(token)
            else:
                token = Token(kind=kind, line=line_number, column=column, text=fragment)

            tokens.append(token)
            column += len(fragment)

    if observer is not None:
        observer.on_scan_complete(tokens)
    return tokens
