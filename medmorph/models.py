"""
Pydantic models for MedMorph results.

Two groups of models live here:
- Segmentation results (MorphemeResult, SegmentResult, DecodeResult), the
  serializable form of what the segmenter produced.
- The enrichment contract (UserProfile, VisualBoard and its parts), i.e.
  what is handed to the enrichment collaborator and what it must return.
  The collaborator speaks camelCase JSON, so these models accept both
  the camelCase aliases and the snake_case field names.

Usage:
    from medmorph.models import DecodeResult

    result = DecodeResult.from_segments("Atheroscleroses", "atherosclerosis", segments)
    print(result.model_dump_json())
"""

from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from medmorph.lexicon import MorphemeEntry, MorphemeKind
from medmorph.segment import Segment, unresolved_count as count_unresolved


# =============================================================================
# Segmentation Results
# =============================================================================

class MorphemeResult(BaseModel):
    """Serializable view of a lexicon entry."""
    term: str = Field(..., description="Surface form, e.g. 'cardio-'")
    normalized_term: str = Field(..., description="Lookup form, e.g. 'cardio'")
    type: MorphemeKind = Field(..., description="PF (prefix), RT (root) or SF (suffix)")
    definition: str = Field("", description="Full definition")
    short_definition: str = Field("", description="Short gloss")

    class Config:
        from_attributes = True

    @classmethod
    def from_entry(cls, entry: MorphemeEntry) -> "MorphemeResult":
        return cls(
            term=entry.surface_form,
            normalized_term=entry.normalized_form,
            type=entry.kind,
            definition=entry.definition,
            short_definition=entry.short_definition,
        )


class SegmentResult(BaseModel):
    """A segment of the input term and the morpheme it resolved to, if any."""
    text: str = Field(..., description="Substring of the normalized term")
    start: int = Field(..., description="Start index in the normalized term")
    end: int = Field(..., description="End index in the normalized term")
    morpheme: Optional[MorphemeResult] = Field(None, description="Resolved morpheme, None if unmatched")

    @classmethod
    def from_segment(cls, seg: Segment) -> "SegmentResult":
        return cls(
            text=seg.text,
            start=seg.start,
            end=seg.end,
            morpheme=MorphemeResult.from_entry(seg.morpheme) if seg.morpheme else None,
        )

    @property
    def is_resolved(self) -> bool:
        return self.morpheme is not None


class DecodeResult(BaseModel):
    """
    Segmentation of a single term.

    Example response:
        {
            "original_term": "Atheroscleroses",
            "normalized_term": "atherosclerosis",
            "segments": [
                {"text": "athero", "start": 0, "end": 6, "morpheme": {"term": "athero-", ...}},
                {"text": "sclerosis", "start": 6, "end": 15, "morpheme": {"term": "-sclerosis", ...}}
            ],
            "unresolved_count": 0
        }
    """
    original_term: str = Field(..., description="Term as entered by the user")
    normalized_term: str = Field(..., description="Term after input normalization")
    segments: List[SegmentResult] = Field(default_factory=list, description="Segments in input order")
    unresolved_count: int = Field(0, description="Number of characters no morpheme covers")

    @classmethod
    def from_segments(
        cls,
        original_term: str,
        normalized_term: str,
        segments: Sequence[Segment],
    ) -> "DecodeResult":
        return cls(
            original_term=original_term,
            normalized_term=normalized_term,
            segments=[SegmentResult.from_segment(s) for s in segments],
            unresolved_count=count_unresolved(segments),
        )

    def matched_morphemes(self) -> List[MorphemeResult]:
        """Resolved morphemes in order, skipping unmatched characters."""
        return [s.morpheme for s in self.segments if s.morpheme is not None]

    @property
    def is_empty(self) -> bool:
        return not self.segments


# =============================================================================
# Enrichment Contract
# =============================================================================

class _CamelModel(BaseModel):
    """Base for models exchanged with the enrichment collaborator."""

    class Config:
        populate_by_name = True


class UserProfile(_CamelModel):
    """Learner profile the collaborator tailors explanations to."""
    age_group: str = Field("adult", alias="ageGroup")
    occupation: Literal[
        "high-school", "undergrad", "grad", "professional", "retired", "elderly"
    ] = Field("undergrad")
    reading_level: Literal["simple", "technical", "concise"] = Field("simple", alias="readingLevel")
    goal: Literal["exam", "patient-ed", "curiosity", "clinical"] = Field("curiosity")
    use_analogies: bool = Field(True, alias="useAnalogies")


class BoardMorpheme(_CamelModel):
    """A morpheme as explained by the collaborator."""
    term: str
    type: MorphemeKind
    definition: str
    short_definition: str = Field("", alias="shortDefinition")
    alternatives: List[str] = Field(default_factory=list)
    misspellings: List[str] = Field(default_factory=list)
    where_found: Optional[str] = Field(None, alias="whereFound", description="start, middle or end")
    source_info: Optional[str] = Field(None, alias="sourceInfo")


class RephraseOptions(_CamelModel):
    elementary: str
    highschool: str
    professional: str


class Pronunciation(_CamelModel):
    syllables: List[str]
    stressed_syllable_index: int = Field(..., alias="stressedSyllableIndex")
    phonetic: str
    is_approximate: bool = Field(..., alias="isApproximate")
    common_mistakes: Optional[str] = Field(None, alias="commonMistakes")


class Usage(_CamelModel):
    patient_friendly: str = Field(..., alias="patientFriendly")
    textbook: str
    chart_note: str = Field(..., alias="chartNote")


class SimilarWord(_CamelModel):
    word: str
    status: Literal["real", "suggested"]
    morphemes: List[str] = Field(default_factory=list)
    search_keywords: List[str] = Field(default_factory=list, alias="searchKeywords")


class Confusable(_CamelModel):
    term: str
    meaning: str
    difference: str


class VisualBoard(_CamelModel):
    """Presentation model returned by the enrichment collaborator."""
    original_term: str = Field(..., alias="originalTerm")
    morpheme_breakdown: List[BoardMorpheme] = Field(..., alias="morphemeBreakdown")
    assembled_definition: str = Field(..., alias="assembledDefinition")
    rephrase_options: RephraseOptions = Field(..., alias="rephraseOptions")
    pronunciation: Pronunciation
    usage: Usage
    similar_words: List[SimilarWord] = Field(default_factory=list, alias="similarWords")
    confusables: List[Confusable] = Field(default_factory=list)
    mnemonic: Optional[str] = None
    media_keywords: List[str] = Field(default_factory=list, alias="mediaKeywords")
    uncertainty_warnings: Optional[str] = Field(None, alias="uncertaintyWarnings")
    split_reasoning: str = Field(..., alias="splitReasoning")
