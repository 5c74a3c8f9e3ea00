"""
Deterministic name handling. No fuzzy matching, no plural folding.
Canonical form: first character upper-case, the rest lower-case ("kiwi" -> "Kiwi").
"""
from typing import Optional

from pantry.errors import ValidationError


def canonical_name(text: str) -> str:
    """Upper-case the first character and lower-case the remainder. Caller validates emptiness."""
    return text[:1].upper() + text[1:].lower()


def is_blank(text: Optional[str]) -> bool:
    return text is None or not str(text).strip()


def validate_name(name: Optional[str], what: str = "name") -> str:
    """
    Constructor-side check: a string, not empty, no leading/trailing whitespace.
    Returns the canonical form.
    """
    if not isinstance(name, str) or not name:
        raise ValidationError(f"{what} can't be blank or empty")
    if name != name.strip():
        raise ValidationError(f"{what} can't start or end with a space")
    return canonical_name(name)


def validate_text(text: Optional[str], what: str) -> str:
    """
    Free text (recipe names, descriptions, instructions): must not be blank.
    Surrounding whitespace is dropped, so a recipe name canonicalises to the same key
    lookup_key() produces.
    """
    if not isinstance(text, str) or is_blank(text):
        raise ValidationError(f"{what} can't be blank")
    return canonical_name(text.strip())


def lookup_key(name: Optional[str], what: str = "name") -> str:
    """
    Key for container lookups. Blank or missing names are a contract violation;
    otherwise surrounding whitespace is dropped and the result canonicalised.
    """
    if not isinstance(name, str) or is_blank(name):
        raise ValidationError(f"{what} can't be blank, empty or null")
    return canonical_name(name.strip())
