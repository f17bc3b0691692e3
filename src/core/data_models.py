from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List, Tuple, Iterator, Dict, Any
from datetime import datetime, timezone
from enum import Enum
import re


class SkillCategory(str, Enum):
    TECHNICAL = "technical"
    FUNCTIONAL = "functional"
    SOFT = "soft"


CATEGORY_ORDER = (SkillCategory.TECHNICAL, SkillCategory.FUNCTIONAL, SkillCategory.SOFT)


def _normalize_terms(values) -> Tuple[str, ...]:
    seen = []
    for value in values or ():
        term = " ".join(str(value).split()).lower()
        if term and term not in seen:
            seen.append(term)
    return tuple(seen)


class SkillEntry(BaseModel):
    """A canonical skill and every string form that counts as evidence for it.

    ``synonyms`` are mapped terms from the skill library and are weighted like
    the canonical term itself. ``derived`` holds generated forms (plurals,
    abbreviations, known misspellings) which count as weaker evidence.
    """
    model_config = ConfigDict(frozen=True)

    canonical_term: str
    category: SkillCategory
    synonyms: Tuple[str, ...] = ()
    derived: Tuple[str, ...] = ()
    source_type: Optional[str] = None

    @field_validator('canonical_term')
    @classmethod
    def strip_canonical(cls, v):
        return " ".join(v.split())

    @field_validator('synonyms', 'derived', mode='before')
    @classmethod
    def normalize_variants(cls, v):
        return _normalize_terms(v)

    @property
    def key(self) -> str:
        return self.canonical_term.lower()

    @property
    def primary_variants(self) -> Tuple[str, ...]:
        return _normalize_terms((self.canonical_term,) + self.synonyms)

    @property
    def derived_variants(self) -> Tuple[str, ...]:
        primary = set(self.primary_variants)
        return tuple(term for term in self.derived if term not in primary)

    @property
    def variants(self) -> Tuple[str, ...]:
        return self.primary_variants + self.derived_variants


class Taxonomy(BaseModel):
    """Read-only snapshot of the skills taxonomy, grouped by category."""
    model_config = ConfigDict(frozen=True)

    technical: Tuple[SkillEntry, ...] = ()
    functional: Tuple[SkillEntry, ...] = ()
    soft: Tuple[SkillEntry, ...] = ()

    @model_validator(mode='after')
    def check_unique_terms(self):
        seen = set()
        for entry in self.entries():
            if entry.key in seen:
                raise ValueError(f"Duplicate canonical term in taxonomy: {entry.canonical_term}")
            seen.add(entry.key)
        for category in CATEGORY_ORDER:
            for entry in self.by_category(category):
                if entry.category != category:
                    raise ValueError(
                        f"Skill '{entry.canonical_term}' is {entry.category.value} "
                        f"but listed under {category.value}"
                    )
        return self

    @classmethod
    def from_entries(cls, entries) -> 'Taxonomy':
        grouped = {category: [] for category in CATEGORY_ORDER}
        for entry in entries:
            grouped[entry.category].append(entry)
        return cls(**{category.value: tuple(items) for category, items in grouped.items()})

    def by_category(self, category: SkillCategory) -> Tuple[SkillEntry, ...]:
        return getattr(self, category.value)

    def entries(self) -> Iterator[SkillEntry]:
        for category in CATEGORY_ORDER:
            yield from self.by_category(category)

    @property
    def size(self) -> int:
        return len(self.technical) + len(self.functional) + len(self.soft)


class TaxonomyRecord(BaseModel):
    """A row of the external skill library."""
    model_config = ConfigDict(populate_by_name=True)

    canonical_term: str = Field(alias="Canonical Term")
    mapped_terms: List[str] = Field(default_factory=list, alias="Mapped Terms")
    skill_type: Optional[str] = Field(default=None, alias="Skill Type")

    @field_validator('canonical_term', mode='before')
    @classmethod
    def require_term(cls, v):
        term = " ".join(str(v or "").split())
        if not term:
            raise ValueError("Canonical Term is empty")
        return term

    @field_validator('mapped_terms', mode='before')
    @classmethod
    def split_mapped_terms(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = re.split(r'[;|,]', v)
        return [" ".join(str(term).split()) for term in v if term and str(term).strip()]

    @field_validator('skill_type', mode='before')
    @classmethod
    def blank_type_is_none(cls, v):
        if v is None or not str(v).strip():
            return None
        return str(v).strip()


class ExtractedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    source_file_name: str = ""
    source_size: int = 0
    source_mime_type: str = ""


class SkillMatch(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    skill_name: str = Field(alias="name")
    frequency: int = Field(ge=1)
    category: SkillCategory
    confidence: float = Field(ge=0, le=100)
    contexts: Tuple[str, ...] = ()

    @property
    def score(self) -> float:
        return self.frequency * self.confidence

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class AnalysisMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text_length: int = Field(alias="textLength")
    skills_found: int = Field(alias="skillsFound")
    processed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="processedAt"
    )


class FileInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    size: int = 0
    mime_type: str = Field(default="", alias="type")

    @property
    def size_formatted(self) -> str:
        return f"{self.size / 1024 / 1024:.2f} MB"

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True, mode="json")
        data["sizeFormatted"] = self.size_formatted
        return data


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    skills: Tuple[SkillMatch, ...] = ()
    domains: Tuple[str, ...] = ()
    summary: str = ""
    metadata: AnalysisMetadata
    file_info: FileInfo = Field(default_factory=FileInfo, alias="fileInfo")
    keywords: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON structure returned by the API"""
        return {
            "skills": [skill.to_dict() for skill in self.skills],
            "domains": list(self.domains),
            "summary": self.summary,
            "keywords": list(self.keywords),
            "metadata": self.metadata.model_dump(by_alias=True, mode="json"),
            "fileInfo": self.file_info.to_dict(),
        }


class ErrorResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    error: str
    error_type: str = Field(alias="type")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    suggestions: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
