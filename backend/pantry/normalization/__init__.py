from .names import canonical_name, lookup_key, validate_name, validate_text

__all__ = [
    "canonical_name",
    "lookup_key",
    "validate_name",
    "validate_text",
]
