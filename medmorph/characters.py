"""
Input text handling for MedMorph.

Turns raw user input into the normalized term the segmenter expects.
"""

import re

from medmorph.settings import PLURAL_MIN_LENGTH, STRIPPED_PUNCTUATION

PUNCTUATION_REGEX = re.compile(f"[{re.escape(STRIPPED_PUNCTUATION)}]")


def strip_punctuation(text: str) -> str:
    """Remove sentence punctuation (. , ! ? ; :) anywhere in text."""
    return PUNCTUATION_REGEX.sub("", text)


def collapse_plural(term: str) -> str:
    """
    Naively map a plural medical term back to its singular.

    Only terms ending in 's' and longer than PLURAL_MIN_LENGTH are touched:
    '-ies' becomes '-y' and '-es' becomes '-is'
    (e.g. 'atheroscleroses' -> 'atherosclerosis').
    """
    if not term.endswith("s") or len(term) <= PLURAL_MIN_LENGTH:
        return term
    if term.endswith("ies"):
        return term[:-3] + "y"
    if term.endswith("es"):
        return term[:-2] + "is"
    return term


def prepare_term(raw: str) -> str:
    """
    Normalize raw user input for segmentation.

    Trims whitespace, lower-cases, strips punctuation and collapses
    simple plurals.

    Examples:
        >>> prepare_term("  Atheroscleroses. ")
        'atherosclerosis'
        >>> prepare_term("Arteries")
        'artery'
    """
    clean = strip_punctuation(raw.strip().lower())
    return collapse_plural(clean)
