"""
Enrichment boundary for MedMorph.

The segmenter only knows which morphemes a term is made of. Definitions,
pronunciation, usage examples, mnemonics and related words come from an
external enrichment collaborator, supplied by the caller as a plain
callable:

    def my_enricher(original_term, profile, segments) -> dict | str | VisualBoard:
        ...

This module invokes it and validates its answer into a VisualBoard. Any
failure on the collaborator's side, including a malformed response, is
reported as EnrichmentError, which is retryable and never produced by
segmentation itself.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from medmorph.models import MorphemeResult, UserProfile, VisualBoard
from medmorph.segment import Segment

logger = logging.getLogger(__name__)

Enricher = Callable[[str, UserProfile, List[Segment]], Union[VisualBoard, Dict[str, Any], str, bytes]]


class EnrichmentError(Exception):
    """The enrichment collaborator failed or returned something unusable."""

    retryable = True

    def __init__(self, message: str, term: Optional[str] = None):
        super().__init__(message)
        self.term = term


def build_context(segments: Sequence[Segment]) -> List[Dict[str, Any]]:
    """
    Structured context describing a segmentation for the collaborator.

    One item per segment, in order. Morpheme keys use the collaborator's
    camelCase naming; unresolved segments carry morpheme=None.
    """
    context = []
    for seg in segments:
        morpheme = None
        if seg.morpheme is not None:
            morpheme = MorphemeResult.from_entry(seg.morpheme).model_dump(mode="json")
            morpheme["normalizedTerm"] = morpheme.pop("normalized_term")
            morpheme["shortDefinition"] = morpheme.pop("short_definition")
        context.append({"text": seg.text, "morpheme": morpheme})
    return context


def _validate_board(raw: Any) -> VisualBoard:
    if isinstance(raw, VisualBoard):
        return raw
    if isinstance(raw, (str, bytes)):
        return VisualBoard.model_validate_json(raw)
    return VisualBoard.model_validate(raw)


def enrich(
    original_term: str,
    profile: UserProfile,
    segments: Sequence[Segment],
    enricher: Enricher,
) -> VisualBoard:
    """
    Run the enrichment collaborator on a segmentation.

    Args:
        original_term: Term as the user entered it.
        profile: Learner profile.
        segments: Output of segment.segment().
        enricher: Collaborator callable.

    Returns:
        The validated presentation model.

    Raises:
        EnrichmentError: If the collaborator raises, or its response does
            not match the VisualBoard schema.
    """
    try:
        raw = enricher(original_term, profile, list(segments))
    except EnrichmentError:
        raise
    except Exception as e:
        logger.warning(f"Enrichment failed for {original_term!r}: {e}")
        raise EnrichmentError(f"Decoding failed for {original_term!r}: {e}", term=original_term) from e

    try:
        return _validate_board(raw)
    except ValidationError as e:
        logger.warning(f"Malformed enrichment response for {original_term!r}: {e.error_count()} errors")
        raise EnrichmentError(
            f"Decoding failed for {original_term!r}: malformed enrichment response",
            term=original_term,
        ) from e
