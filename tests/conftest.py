import pytest

from src.core.course_analyzer import CourseAnalyzer
from src.core.data_models import SkillCategory, Taxonomy
from src.core.document_reader import DocumentReader
from src.core.domain_classifier import DomainClassifier
from src.core.skill_matcher import SkillMatcher
from src.core.taxonomy import TaxonomyProvider, make_entry


class StaticTaxonomyProvider(TaxonomyProvider):
    """Provider that always serves the same snapshot"""

    def __init__(self, taxonomy):
        super().__init__(client=None, taxonomy_file=None, cache_enabled=False)
        self.taxonomy = taxonomy
        self.calls = 0

    def get_taxonomy(self):
        self.calls += 1
        return self.taxonomy


@pytest.fixture
def scenario_text():
    """Fixture to provide the reference course sentence"""
    return "We used Python for data analysis and led the team with strong communication skills."

@pytest.fixture
def sample_course_text():
    """Fixture to provide sample course outline text"""
    return """
    Course Outline: Applied Process Control

    Module 1 introduces Python programming for engineers. Students write Python scripts
    to automate data collection from field instruments.

    Module 2 covers PLC programming and SCADA systems used in industrial automation.
    Calibration of pressure transmitters is practiced in the lab.

    Module 3 focuses on project management and team leadership. Students present their
    results and practice written communication with stakeholders.
    """

@pytest.fixture
def scenario_taxonomy():
    """Fixture to provide a small taxonomy with fixed categories"""
    return Taxonomy.from_entries([
        make_entry("Python", SkillCategory.TECHNICAL),
        make_entry("Data Analysis", SkillCategory.TECHNICAL),
        make_entry("Team Leadership", SkillCategory.FUNCTIONAL, synonyms=["led the team"]),
        make_entry("Communication", SkillCategory.SOFT),
    ])

@pytest.fixture
def skill_matcher():
    """Fixture to provide a SkillMatcher with a lenient threshold"""
    return SkillMatcher(min_confidence=10.0, max_results=50)

@pytest.fixture
def domain_classifier():
    return DomainClassifier(tech_min_skills=2, management_min_skills=2)

@pytest.fixture
def document_reader():
    """Fixture to provide DocumentReader instance"""
    return DocumentReader(max_chars=100000)

@pytest.fixture
def course_analyzer(scenario_taxonomy):
    """Fixture to provide a CourseAnalyzer over the scenario taxonomy"""
    return CourseAnalyzer(
        taxonomy_provider=StaticTaxonomyProvider(scenario_taxonomy),
        matcher=SkillMatcher(min_confidence=15.0),
        max_document_size=1024 * 1024,
        min_text_length=50,
    )
