"""
Compiled-in constants for MedMorph.

This module provides the single source of truth for:
- Morpheme type codes and their human-readable names
- The default morpheme data set the lexicon is built from
- The disclaimer shown alongside decoded terms

Rows in MORPHEME_DATA keep the key names of the source data set
(term, normalized_term, type, definition, short_definition). The lexicon
tolerates rows whose term and normalized_term disagree, and duplicate rows.
"""

from typing import Dict, List


# ============================================================================
# Morpheme Type Codes
# ============================================================================

TYPE_PREFIX = "PF"
TYPE_ROOT = "RT"
TYPE_SUFFIX = "SF"

TYPE_NAMES: Dict[str, str] = {
    TYPE_PREFIX: "Prefix",
    TYPE_ROOT: "Root",
    TYPE_SUFFIX: "Suffix",
}


# ============================================================================
# Default Morpheme Data
# ============================================================================

MORPHEME_DATA: List[Dict[str, str]] = [
    {"term": "athero-", "normalized_term": "athero", "type": TYPE_ROOT,
     "definition": "fatty deposit, soft gruel-like deposit, plaque",
     "short_definition": "fatty deposit"},
    {"term": "-sclerosis", "normalized_term": "sclerosis", "type": TYPE_SUFFIX,
     "definition": "hardening",
     "short_definition": "hardening"},
    {"term": "cardio-", "normalized_term": "cardio", "type": TYPE_ROOT,
     "definition": "of or pertaining to the heart",
     "short_definition": "of or pertaining to the heart"},
    {"term": "abdomino-", "normalized_term": "abdomino", "type": TYPE_ROOT,
     "definition": "of or relating to the abdomen",
     "short_definition": "of or relating to the abdomen"},
    {"term": "-itis", "normalized_term": "itis", "type": TYPE_SUFFIX,
     "definition": "inflammation",
     "short_definition": "inflammation"},
    {"term": "angio-", "normalized_term": "angio", "type": TYPE_ROOT,
     "definition": "blood vessel",
     "short_definition": "blood vessel"},
    {"term": "brady-", "normalized_term": "brady", "type": TYPE_PREFIX,
     "definition": "slow",
     "short_definition": "slow"},
    {"term": "tachy-", "normalized_term": "tachy", "type": TYPE_PREFIX,
     "definition": "fast, rapid",
     "short_definition": "fast"},
    {"term": "-ectomy", "normalized_term": "ectomy", "type": TYPE_SUFFIX,
     "definition": "surgical removal, excision",
     "short_definition": "surgical removal"},
    {"term": "nephro-", "normalized_term": "nephro", "type": TYPE_ROOT,
     "definition": "of or pertaining to the kidney",
     "short_definition": "kidney"},
    {"term": "neuro-", "normalized_term": "neuro", "type": TYPE_ROOT,
     "definition": "of or pertaining to nerves and the nervous system",
     "short_definition": "nerve"},
    {"term": "osteo-", "normalized_term": "osteo", "type": TYPE_ROOT,
     "definition": "bone",
     "short_definition": "bone"},
    {"term": "myo-", "normalized_term": "myo", "type": TYPE_ROOT,
     "definition": "of or relating to muscle",
     "short_definition": "muscle"},
    {"term": "hepato-", "normalized_term": "hepato", "type": TYPE_ROOT,
     "definition": "of or pertaining to the liver",
     "short_definition": "liver"},
    {"term": "hyper-", "normalized_term": "hyper", "type": TYPE_PREFIX,
     "definition": "extreme or beyond normal, excessive",
     "short_definition": "excessive"},
    {"term": "hypo-", "normalized_term": "hypo", "type": TYPE_PREFIX,
     "definition": "below, deficient, under",
     "short_definition": "below"},
    {"term": "gastro-", "normalized_term": "gastro", "type": TYPE_ROOT,
     "definition": "of or pertaining to the stomach",
     "short_definition": "stomach"},
    {"term": "pneumo-", "normalized_term": "pneumo", "type": TYPE_ROOT,
     "definition": "air, breath, lung",
     "short_definition": "lung"},
    {"term": "dermato-", "normalized_term": "dermato", "type": TYPE_ROOT,
     "definition": "of or pertaining to the skin",
     "short_definition": "skin"},
    {"term": "arthro-", "normalized_term": "arthro", "type": TYPE_ROOT,
     "definition": "of or pertaining to the joints, limbs",
     "short_definition": "joint"},
    {"term": "cephalo-", "normalized_term": "cephalo", "type": TYPE_ROOT,
     "definition": "of or pertaining to the head (as a whole)",
     "short_definition": "head"},
]


DISCLAIMER = (
    "MedMorph is a language-learning tool for medical terminology. "
    "It does not provide medical advice, diagnosis, or treatment. "
    "Always consult a healthcare professional for medical concerns."
)
