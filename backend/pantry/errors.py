"""
Contract violations raised by the pantry core.
"Not found" is never an error: lookups return None.
"""


class ValidationError(ValueError):
    """Invalid constructor, mutator or lookup-key argument."""
