from collections.abc import Sequence
from typing import Protocol

from astouml.models import MatchPass, Token, TokenTypeRule, Unrecognized


class ScanObserver(Protocol):
    def on_match(
        self,
        fragment: str,
        result: TokenTypeRule | Unrecognized,
        match_pass: MatchPass | None,
    ) -> None: ...

    def on_unrecognized(self, token: Token) -> None: ...

    def on_scan_complete(self, tokens: Sequence[Token]) -> None: ...
