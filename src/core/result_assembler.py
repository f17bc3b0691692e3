import re
from collections import Counter
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .data.text_constants import STOP_WORDS
from .data_models import AnalysisMetadata, AnalysisResult, FileInfo, SkillMatch
from config.settings import settings

TOP_SKILLS_IN_SUMMARY = 5
MAX_KEYWORDS = 20


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> List[str]:
    """Most frequent meaningful words of the document, capitalized."""
    words = re.sub(r'[^\w\s\-]', ' ', (text or "").lower()).split()
    counts = Counter(w for w in words if len(w) > 3 and w not in STOP_WORDS and not w.isdigit())
    frequent = [(word, freq) for word, freq in counts.items() if freq >= 2]
    # Counter keeps first-seen order, so equal counts stay in document order
    frequent.sort(key=lambda item: item[1], reverse=True)
    return [word.capitalize() for word, _ in frequent[:limit]]


def generate_summary(text: str, skills: Sequence[SkillMatch], min_confidence: float = None) -> str:
    min_confidence = min_confidence if min_confidence is not None else settings.MIN_CONFIDENCE
    categories = {s.category for s in skills}
    top_skills = [s.skill_name for s in skills[:TOP_SKILLS_IN_SUMMARY]]

    summary = (
        f"Analysis identified {len(skills)} relevant skills with at least "
        f"{min_confidence:g}% confidence across {len(categories)} categories. "
    )
    if top_skills:
        summary += f"Top skills include: {', '.join(top_skills)}. "
    else:
        summary += "No skills met the confidence threshold. "
    summary += f"Content spans {round(len(text or '') / 1000)}K characters."
    return summary


def assemble_result(text: str,
                    skills: Sequence[SkillMatch],
                    domains: Sequence[str],
                    file_info: Optional[FileInfo] = None,
                    min_confidence: float = None,
                    processed_at: datetime = None) -> AnalysisResult:
    """Package the analysis into the immutable response object"""
    return AnalysisResult(
        skills=tuple(skills),
        domains=tuple(domains),
        summary=generate_summary(text, skills, min_confidence),
        keywords=tuple(extract_keywords(text)),
        metadata=AnalysisMetadata(
            text_length=len(text or ""),
            skills_found=len(skills),
            processed_at=processed_at or datetime.now(timezone.utc),
        ),
        file_info=file_info or FileInfo(),
    )
