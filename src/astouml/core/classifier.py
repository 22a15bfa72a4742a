from astouml.core.ports.observer import ScanObserver
from astouml.core.token_types import LOOSE_TOKEN_TYPES, TOKEN_TYPES
from astouml.models import UNRECOGNIZED, MatchPass, TokenTypeRule, Unrecognized


def match_exact(fragment: str) -> TokenTypeRule | None:
    """Return the first rule whose pattern matches the whole fragment."""
    for rule in TOKEN_TYPES:
        if rule.pattern.fullmatch(fragment):
            return rule
    return None


def match_loose(fragment: str) -> TokenTypeRule | None:
    """Return the first rule whose pattern matches anywhere inside the fragment."""
    for rule in LOOSE_TOKEN_TYPES:
        if rule.pattern.search(fragment):
            return rule
    return None


def classify(fragment: str, observer: ScanObserver | None = None) -> TokenTypeRule | Unrecognized:
    """Classify one whitespace-delimited fragment.

    The loose pass is only consulted when no rule matches the fragment
    exactly. A loose match reports the kind of the embedded substring, so
    ``"x;"`` classifies as a semicolon.
    """
    result: TokenTypeRule | Unrecognized = UNRECOGNIZED
    match_pass: MatchPass | None = None

    rule = match_exact(fragment)
    if rule is not None:
        result, match_pass = rule, MatchPass.EXACT
    else:
        rule = match_loose(fragment)
        if rule is not None:
            result, match_pass = rule, MatchPass.LOOSE

    if observer is not None:
        observer.on_match(fragment, result, match_pass)
    return result
