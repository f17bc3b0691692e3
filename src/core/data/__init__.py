"""Data package for the course skill analyzer."""

from .base_taxonomy import (
    TECHNICAL_SKILLS,
    FUNCTIONAL_SKILLS,
    SOFT_SKILLS,
    KNOWN_VARIATIONS,
    TECHNICAL_KEYWORDS,
    FUNCTIONAL_KEYWORDS,
    SOFT_KEYWORDS,
    SKILL_TYPE_LABELS,
)
from .text_constants import STOP_WORDS

__all__ = [
    'TECHNICAL_SKILLS',
    'FUNCTIONAL_SKILLS',
    'SOFT_SKILLS',
    'KNOWN_VARIATIONS',
    'TECHNICAL_KEYWORDS',
    'FUNCTIONAL_KEYWORDS',
    'SOFT_KEYWORDS',
    'SKILL_TYPE_LABELS',
    'STOP_WORDS'
]
