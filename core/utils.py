# core/utils.py

"""
Repository for program-wide utilities.
"""

import uuid


def generate_uuid() -> str:
    return str(uuid.uuid4())


def normalize_key(text: str) -> str:
    """
    Produces the case-insensitive lookup key for a name such as a test name.

    Args:
        text (str): The name to normalize.

    Returns:
        The case-folded name. Whitespace is left untouched.
    """
    return text.casefold()


def normalize_query(text: str) -> str:
    return text.strip().casefold()
