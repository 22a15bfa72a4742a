from collections import Counter
from collections.abc import Iterable

from astouml.models import Token, TokenKind


def summarize_tokens(tokens: Iterable[Token]) -> dict[TokenKind, int]:
    """Count tokens per kind, listing every kind in declaration order."""
    counts = Counter(token.kind for token in tokens)
    return {kind: counts.get(kind, 0) for kind in TokenKind}


def unrecognized_tokens(tokens: Iterable[Token]) -> list[Token]:
    return [token for token in tokens if token.is_unrecognized]
