import csv
import io
import json
import logging
import re
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

import httpx
from pydantic import ValidationError
from tenacity import RetryError

from .data import (
    TECHNICAL_SKILLS,
    FUNCTIONAL_SKILLS,
    SOFT_SKILLS,
    KNOWN_VARIATIONS,
    TECHNICAL_KEYWORDS,
    FUNCTIONAL_KEYWORDS,
    SOFT_KEYWORDS,
    SKILL_TYPE_LABELS,
)
from .data_models import SkillCategory, SkillEntry, Taxonomy, TaxonomyRecord
from .errors import TaxonomyUnavailableError
from config.settings import settings

logger = logging.getLogger(__name__)

_SIMPLE_TERM = re.compile(r'^[a-z]+(\s[a-z]+)*$', re.IGNORECASE)


def category_from_label(label: Optional[str]) -> Optional[SkillCategory]:
    """Map a skill library "Skill Type" label onto a category.

    Returns None for a missing label. Unrecognized labels are logged and also
    return None so the keyword rules decide.
    """
    if not label:
        return None
    mapped = SKILL_TYPE_LABELS.get(label.strip().lower())
    if mapped is None:
        logger.warning(f"Unrecognized skill type label '{label}', using keyword rules")
        return None
    return SkillCategory(mapped)


def categorize_term(term: str, label: Optional[str] = None) -> SkillCategory:
    """Decide the category of a skill term.

    Precedence: explicit type label, then technical/functional/soft indicator
    keywords (first set with a substring hit wins), then the default rule that
    short letters-only terms are soft and everything else is technical.
    """
    category = category_from_label(label)
    if category is not None:
        return category

    term_lower = term.lower()
    if any(keyword in term_lower for keyword in TECHNICAL_KEYWORDS):
        return SkillCategory.TECHNICAL
    if any(keyword in term_lower for keyword in FUNCTIONAL_KEYWORDS):
        return SkillCategory.FUNCTIONAL
    if any(keyword in term_lower for keyword in SOFT_KEYWORDS):
        return SkillCategory.SOFT

    if len(term_lower) < 15 and _SIMPLE_TERM.match(term):
        return SkillCategory.SOFT
    return SkillCategory.TECHNICAL


def generate_derived_variants(term: str) -> List[str]:
    """Plural/singular, separator and known abbreviation forms of a term."""
    term_lower = " ".join(term.split()).lower()
    # One-letter terms are never matched, so neither are their forms
    if len(term_lower) < 2:
        return []
    variations = list(KNOWN_VARIATIONS.get(term_lower, []))

    if not term_lower.endswith('s'):
        variations.append(term_lower + 's')
    elif len(term_lower) > 3 and not term_lower.endswith(('ss', 'is', 'us')):
        variations.append(term_lower[:-1])

    if ' ' in term_lower:
        variations.append(term_lower.replace(' ', '-'))
    elif '-' in term_lower:
        variations.append(term_lower.replace('-', ' '))

    return variations


def make_entry(term: str,
               category: SkillCategory,
               synonyms: Sequence[str] = (),
               source_type: Optional[str] = None) -> SkillEntry:
    derived = generate_derived_variants(term)
    for synonym in synonyms:
        derived.extend(generate_derived_variants(synonym))
    return SkillEntry(
        canonical_term=term,
        category=category,
        synonyms=tuple(synonyms),
        derived=tuple(derived),
        source_type=source_type,
    )


def build_taxonomy(records: Iterable[TaxonomyRecord] = (),
                   max_terms: Optional[int] = None) -> Taxonomy:
    """Merge the built-in term lists with skill library records.

    Built-in terms come first, then external canonical terms in record order.
    Terms are deduplicated case-insensitively; the first spelling is kept and
    later mapped terms are attached to it. A type label from the skill library
    overrides the keyword rules for every term it names.
    """
    max_terms = max_terms or settings.MAX_TAXONOMY_TERMS
    records = list(records)

    labels: Dict[str, str] = {}
    synonyms: Dict[str, List[str]] = {}
    for record in records:
        key = record.canonical_term.lower()
        if record.skill_type and key not in labels:
            labels[key] = record.skill_type
        synonyms.setdefault(key, []).extend(record.mapped_terms)

    terms: Dict[str, str] = {}
    for term in TECHNICAL_SKILLS + FUNCTIONAL_SKILLS + SOFT_SKILLS:
        terms.setdefault(term.lower(), term)

    dropped = 0
    for record in records:
        key = record.canonical_term.lower()
        if key in terms:
            continue
        if len(terms) >= max_terms:
            dropped += 1
            continue
        terms[key] = record.canonical_term
    if dropped:
        logger.warning(f"Taxonomy limit of {max_terms} terms reached, dropped {dropped} skill library terms")

    entries = []
    for key, term in terms.items():
        label = labels.get(key)
        entries.append(make_entry(
            term,
            categorize_term(term, label),
            synonyms=synonyms.get(key, ()),
            source_type=label,
        ))

    taxonomy = Taxonomy.from_entries(entries)
    logger.info(
        f"Final taxonomy - Technical: {len(taxonomy.technical)}, "
        f"Functional: {len(taxonomy.functional)}, Soft: {len(taxonomy.soft)}"
    )
    return taxonomy


def parse_records(rows: Iterable[dict]) -> List[TaxonomyRecord]:
    """Validate raw skill library rows, skipping the ones without a term."""
    records = []
    for row in rows:
        try:
            records.append(TaxonomyRecord.model_validate(row))
        except ValidationError as e:
            logger.debug(f"Skipping skill library row {row!r}: {e}")
    return records


def load_taxonomy_file(path) -> List[TaxonomyRecord]:
    """Read skill library records from a CSV or JSON file.

    Both formats use the skill library column names (``Canonical Term``,
    ``Mapped Terms``, ``Skill Type``); mapped terms in CSV are separated by
    semicolons or pipes.
    """
    path = Path(path)
    content = path.read_text(encoding='utf-8-sig')
    if path.suffix.lower() == '.json':
        data = json.loads(content)
        if isinstance(data, dict):
            data = data.get('data') or data.get('skills') or []
        rows = data
    else:
        rows = list(csv.DictReader(io.StringIO(content)))
    records = parse_records(rows)
    logger.info(f"Loaded {len(records)} skill library records from {path}")
    return records


class TaxonomyProvider:
    """Builds and caches the read-only taxonomy snapshot used per request"""

    def __init__(self,
                 client=None,
                 taxonomy_file: Optional[Path] = None,
                 cache_enabled: bool = None,
                 cache_ttl: int = None):
        self.client = client
        self.taxonomy_file = taxonomy_file if taxonomy_file is not None else settings.SKILL_TAXONOMY_FILE
        self.cache_enabled = cache_enabled if cache_enabled is not None else settings.CACHE_ENABLED
        self.cache_ttl = cache_ttl if cache_ttl is not None else settings.CACHE_TTL
        self._snapshot: Optional[Taxonomy] = None
        self._loaded_at = 0.0

    def _fetch_store_records(self) -> List[TaxonomyRecord]:
        try:
            return self.client.fetch_records()
        except (httpx.HTTPError, RetryError, ValueError) as e:
            raise TaxonomyUnavailableError(f"Skill library query failed: {e}") from e

    def _load_records(self) -> List[TaxonomyRecord]:
        records = []
        if self.client is not None:
            try:
                records.extend(self._fetch_store_records())
            except TaxonomyUnavailableError as e:
                logger.warning(f"{e.message}, using built-in taxonomy")
        if self.taxonomy_file:
            try:
                records.extend(load_taxonomy_file(self.taxonomy_file))
            except (OSError, ValueError) as e:
                logger.warning(f"Could not read taxonomy file {self.taxonomy_file}: {e}")
        return records

    def get_taxonomy(self) -> Taxonomy:
        if (self.cache_enabled and self._snapshot is not None
                and time.monotonic() - self._loaded_at < self.cache_ttl):
            return self._snapshot

        snapshot = build_taxonomy(self._load_records())
        self._snapshot = snapshot
        self._loaded_at = time.monotonic()
        return snapshot

    def invalidate(self):
        self._snapshot = None
