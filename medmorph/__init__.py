"""
MedMorph: medical term morpheme decoder
Splits medical terms into prefix/root/suffix morphemes.
"""

import time
from typing import Optional, Tuple

__version__ = "0.1.0"


def warm_up(verbose: bool = False) -> Tuple[float, dict]:
    """
    Pre-build the default lexicon.

    Call this once at application startup to move lexicon construction
    out of the first request.

    Args:
        verbose: If True, print timing information.

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)

    Example:
        >>> import medmorph
        >>> elapsed, details = medmorph.warm_up(verbose=True)
        Warming up medmorph...
          Lexicon:            0.2ms (21 entries)
        Total warm-up:        0.2ms
    """
    from medmorph.lexicon import get_lexicon

    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Warming up medmorph...")

    t0 = time.perf_counter()
    lexicon = get_lexicon()
    timings['lexicon'] = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"  Lexicon:        {timings['lexicon']:>7.1f}ms ({len(lexicon)} entries)")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {timings['total']:>7.1f}ms")

    return total_time, timings


def analyze(text: str, lexicon=None):
    """
    Normalize a term and split it into morphemes.

    This is the main high-level API for segmentation.

    Args:
        text: Medical term as entered by the user.
        lexicon: Optional Lexicon. If None, uses the default lexicon.

    Returns:
        DecodeResult. Its segments list is empty when the input is blank;
        the caller decides whether that is an error.

    Example:
        >>> import medmorph
        >>> result = medmorph.analyze("Atheroscleroses")
        >>> [s.text for s in result.segments]
        ['athero', 'sclerosis']
    """
    from medmorph.characters import prepare_term
    from medmorph.models import DecodeResult
    from medmorph.segment import segment

    term = prepare_term(text)
    segments = segment(term, lexicon)
    return DecodeResult.from_segments(text, term, segments)


def decode(text: str, profile, enricher, lexicon=None):
    """
    Segment a term and hand the result to an enrichment collaborator.

    Args:
        text: Medical term as entered by the user.
        profile: UserProfile (or a dict accepted by UserProfile).
        enricher: Collaborator callable, see medmorph.enrichment.
        lexicon: Optional Lexicon. If None, uses the default lexicon.

    Returns:
        VisualBoard presentation model.

    Raises:
        ValueError: If the input is empty after normalization.
        EnrichmentError: If the collaborator fails (retryable).
    """
    from medmorph.characters import prepare_term
    from medmorph.enrichment import enrich
    from medmorph.models import UserProfile
    from medmorph.segment import segment

    term = prepare_term(text)
    if not term:
        raise ValueError("Nothing to decode: term is empty")

    if not isinstance(profile, UserProfile):
        profile = UserProfile.model_validate(profile)

    segments = segment(term, lexicon)
    return enrich(text, profile, segments, enricher)


__all__ = ["analyze", "decode", "warm_up", "__version__"]
