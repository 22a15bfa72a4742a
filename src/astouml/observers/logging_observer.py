from __future__ import annotations

import logging
from collections.abc import Sequence

from astouml.core.summary import summarize_tokens, unrecognized_tokens
from astouml.models import MatchPass, Token, TokenTypeRule, Unrecognized

logger = logging.getLogger(__name__)


class LoggingScanObserver:
    """Report scanning progress through the standard logging module.

    Implements the ``ScanObserver`` protocol.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_match(
        self,
        fragment: str,
        result: TokenTypeRule | Unrecognized,
        match_pass: MatchPass | None,
    ) -> None:
        if match_pass is None:
            self._log.debug("No match found for %r (length %d)", fragment, len(fragment))
        else:
            self._log.debug("%s match for %r: %s", match_pass.capitalize(), fragment, result.kind)

    def on_unrecognized(self, token: Token) -> None:
        self._log.warning(
            "Unknown token %r at line %d, column %d (hex: %s)",
            token.text,
            token.line,
            token.column,
            token.raw_hex,
        )

    def on_scan_complete(self, tokens: Sequence[Token]) -> None:
        counts = summarize_tokens(tokens)
        self._log.info("Scanned %d token(s)", len(tokens))
        for kind, count in counts.items():
            if count:
                self._log.info("  %d %s", count, kind)
        unknown = unrecognized_tokens(tokens)
        if unknown:
            self._log.info("%d token(s) with unknown type", len(unknown))
