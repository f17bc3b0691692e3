import logging
from typing import List, Sequence

from .data.text_constants import (
    DATA_INDICATORS,
    PROCESS_INDICATORS,
    MANAGEMENT_INDICATORS,
    TECHNOLOGY_DOMAIN,
    DATA_DOMAIN,
    PROCESS_DOMAIN,
    MANAGEMENT_DOMAIN,
    DEFAULT_DOMAIN,
)
from .data_models import SkillCategory, SkillMatch
from config.settings import settings

logger = logging.getLogger(__name__)


class DomainClassifier:
    """Rule-based subject area labels for an analyzed document.

    Rules are independent and several may fire; the result keeps rule order.
    """

    def __init__(self, tech_min_skills: int = None, management_min_skills: int = None):
        self.tech_min_skills = tech_min_skills or settings.TECH_DOMAIN_MIN_SKILLS
        self.management_min_skills = management_min_skills or settings.MANAGEMENT_DOMAIN_MIN_SKILLS

    def classify(self, text: str, skills: Sequence[SkillMatch]) -> List[str]:
        domains = []
        text_lower = (text or "").lower()

        tech_skills = sum(1 for s in skills if s.category == SkillCategory.TECHNICAL)
        if tech_skills >= self.tech_min_skills:
            domains.append(TECHNOLOGY_DOMAIN)

        if any(indicator in text_lower for indicator in DATA_INDICATORS):
            domains.append(DATA_DOMAIN)

        if any(indicator in text_lower for indicator in PROCESS_INDICATORS):
            domains.append(PROCESS_DOMAIN)

        management_skills = sum(
            1 for s in skills
            if any(indicator in s.skill_name.lower() for indicator in MANAGEMENT_INDICATORS)
        )
        if management_skills >= self.management_min_skills:
            domains.append(MANAGEMENT_DOMAIN)

        if not domains:
            domains.append(DEFAULT_DOMAIN)
        logger.debug(f"Detected domains: {domains}")
        return domains
