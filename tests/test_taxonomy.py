import json

import httpx
import pytest
from pydantic import ValidationError

from src.core.data_models import SkillCategory, SkillEntry, Taxonomy, TaxonomyRecord
from src.core.errors import TaxonomyUnavailableError
from src.core.taxonomy import (
    TaxonomyProvider,
    build_taxonomy,
    categorize_term,
    generate_derived_variants,
    load_taxonomy_file,
    make_entry,
    parse_records,
)


class FakeClient:
    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.calls = 0

    def fetch_records(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.records


@pytest.mark.parametrize("label,expected", [
    ("Technical Skill", SkillCategory.TECHNICAL),
    ("Functional Skill", SkillCategory.FUNCTIONAL),
    ("Leadership Skill", SkillCategory.SOFT),
    ("Soft Skill", SkillCategory.SOFT),
])
def test_type_label_wins(label, expected):
    """Test an explicit skill library label overrides the keyword rules"""
    assert categorize_term("Python", label) == expected


def test_unrecognized_label_falls_through():
    assert categorize_term("Python", "Mystery Skill") == SkillCategory.TECHNICAL
    assert categorize_term("Empathy", "Mystery Skill") == SkillCategory.SOFT


@pytest.mark.parametrize("term,expected", [
    ("Product Development", SkillCategory.TECHNICAL),  # technical keywords are checked first
    ("Sales Strategy", SkillCategory.FUNCTIONAL),
    ("Empathy", SkillCategory.SOFT),
    ("Patience", SkillCategory.SOFT),  # short letters-only default
    ("Conscientiousness", SkillCategory.TECHNICAL),  # too long for the soft default
    ("C++", SkillCategory.TECHNICAL),
    ("Microsoft Excel 2019", SkillCategory.TECHNICAL),
])
def test_keyword_and_default_rules(term, expected):
    assert categorize_term(term) == expected


def test_generate_derived_variants():
    assert {"pythons", "py", "python3"} <= set(generate_derived_variants("Python"))
    assert "sale" in generate_derived_variants("Sales")
    assert "analysi" not in generate_derived_variants("Analysis")
    assert "problem-solving" in generate_derived_variants("Problem Solving")
    assert "self motivation" in generate_derived_variants("Self-Motivation")
    assert generate_derived_variants("   ") == []


def test_make_entry_splits_primary_and_derived():
    entry = make_entry("Team Leadership", SkillCategory.FUNCTIONAL, synonyms=["Led the Team", " "])

    assert entry.primary_variants == ("team leadership", "led the team")
    assert "team-leadership" in entry.derived_variants
    assert "led-the-team" in entry.derived_variants
    assert set(entry.primary_variants).isdisjoint(entry.derived_variants)


def test_built_taxonomy_has_unique_terms():
    taxonomy = build_taxonomy()
    keys = [entry.key for entry in taxonomy.entries()]

    assert taxonomy.size > 200
    assert len(keys) == len(set(keys))
    assert all(entry.variants for entry in taxonomy.entries())


def test_built_taxonomy_categories():
    taxonomy = build_taxonomy()
    by_key = {entry.key: entry for entry in taxonomy.entries()}

    assert by_key["python"].category == SkillCategory.TECHNICAL
    assert by_key["project management"].category == SkillCategory.FUNCTIONAL
    assert by_key["communication"].category == SkillCategory.SOFT
    assert by_key["team leadership"].category == SkillCategory.SOFT


def test_merge_attaches_mapped_terms_case_insensitively():
    records = [
        TaxonomyRecord(canonical_term="python", mapped_terms=["Py3", "CPython"], skill_type="Technical Skill"),
        TaxonomyRecord(canonical_term="Communication", skill_type="Functional Skill"),
        TaxonomyRecord(canonical_term="Hazard Analysis", mapped_terms=["HAZOP"], skill_type="Technical Skill"),
    ]
    taxonomy = build_taxonomy(records)
    by_key = {entry.key: entry for entry in taxonomy.entries()}

    assert by_key["python"].canonical_term == "Python"
    assert "py3" in by_key["python"].primary_variants
    assert "cpython" in by_key["python"].primary_variants
    assert by_key["communication"].category == SkillCategory.FUNCTIONAL
    assert by_key["communication"].source_type == "Functional Skill"
    assert by_key["hazard analysis"].primary_variants == ("hazard analysis", "hazop")
    assert sum(1 for e in taxonomy.entries() if e.key == "python") == 1


def test_merge_respects_term_limit():
    base_size = build_taxonomy().size
    records = [TaxonomyRecord(canonical_term=f"Custom Skill {i}") for i in range(10)]

    taxonomy = build_taxonomy(records, max_terms=base_size + 3)

    assert taxonomy.size == base_size + 3


def test_taxonomy_rejects_duplicates():
    entry = make_entry("Python", SkillCategory.TECHNICAL)
    duplicate = make_entry("PYTHON", SkillCategory.SOFT)

    with pytest.raises(ValidationError):
        Taxonomy.from_entries([entry, duplicate])


def test_taxonomy_is_read_only(scenario_taxonomy):
    with pytest.raises(ValidationError):
        scenario_taxonomy.technical = ()
    with pytest.raises(ValidationError):
        scenario_taxonomy.technical[0].category = SkillCategory.SOFT


def test_parse_records_skips_invalid_rows():
    rows = [
        {"Canonical Term": "Loop Tuning", "Mapped Terms": ["PID tuning"], "Skill Type": "Technical Skill"},
        {"Canonical Term": "  ", "Mapped Terms": None},
        {"Mapped Terms": ["orphan"]},
        {"Canonical Term": "Mentoring", "Mapped Terms": "coaching; peer mentoring", "Skill Type": ""},
    ]
    records = parse_records(rows)

    assert [r.canonical_term for r in records] == ["Loop Tuning", "Mentoring"]
    assert records[1].mapped_terms == ["coaching", "peer mentoring"]
    assert records[1].skill_type is None


def test_load_taxonomy_file_csv(tmp_path):
    path = tmp_path / "skills.csv"
    path.write_text(
        "Canonical Term,Mapped Terms,Skill Type\n"
        "Loop Tuning,PID tuning;controller tuning,Technical Skill\n"
        "Mentoring,,Leadership Skill\n",
        encoding="utf-8",
    )
    records = load_taxonomy_file(path)

    assert records[0].mapped_terms == ["PID tuning", "controller tuning"]
    assert records[1].skill_type == "Leadership Skill"


def test_load_taxonomy_file_json(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text(json.dumps([
        {"Canonical Term": "Loop Tuning", "Mapped Terms": ["PID tuning"], "Skill Type": "Technical Skill"},
    ]), encoding="utf-8")

    assert load_taxonomy_file(path)[0].canonical_term == "Loop Tuning"


def test_provider_falls_back_when_store_unavailable():
    client = FakeClient(error=httpx.ConnectError("connection refused"))
    provider = TaxonomyProvider(client=client, taxonomy_file=None, cache_enabled=False)

    taxonomy = provider.get_taxonomy()

    assert client.calls == 1
    assert taxonomy.size == build_taxonomy().size


def test_provider_merges_store_and_file(tmp_path):
    path = tmp_path / "skills.csv"
    path.write_text("Canonical Term,Mapped Terms,Skill Type\nMentoring,,Leadership Skill\n", encoding="utf-8")
    client = FakeClient(records=[TaxonomyRecord(canonical_term="Loop Tuning", skill_type="Technical Skill")])
    provider = TaxonomyProvider(client=client, taxonomy_file=path, cache_enabled=False)

    keys = {entry.key for entry in provider.get_taxonomy().entries()}

    assert {"loop tuning", "mentoring"} <= keys


def test_provider_ignores_missing_file(tmp_path):
    provider = TaxonomyProvider(client=None, taxonomy_file=tmp_path / "missing.csv", cache_enabled=False)
    assert provider.get_taxonomy().size == build_taxonomy().size


def test_provider_caches_snapshot():
    client = FakeClient()
    provider = TaxonomyProvider(client=client, taxonomy_file=None, cache_enabled=True, cache_ttl=3600)

    first = provider.get_taxonomy()
    second = provider.get_taxonomy()

    assert first is second
    assert client.calls == 1

    provider.invalidate()
    provider.get_taxonomy()
    assert client.calls == 2


def test_provider_without_cache_rebuilds():
    client = FakeClient()
    provider = TaxonomyProvider(client=client, taxonomy_file=None, cache_enabled=False)

    provider.get_taxonomy()
    provider.get_taxonomy()

    assert client.calls == 2


def test_skill_entry_normalizes_variants():
    entry = SkillEntry(
        canonical_term="  Power   BI ",
        category=SkillCategory.TECHNICAL,
        synonyms=["PowerBI", "powerbi", "  "],
        derived=["Power BI", "power-bi"],
    )
    assert entry.canonical_term == "Power BI"
    assert entry.synonyms == ("powerbi",)
    assert entry.derived_variants == ("power-bi",)
    assert entry.variants == ("power bi", "powerbi", "power-bi")


def test_single_letter_terms_have_no_derived_forms(skill_matcher):
    entry = make_entry("R", SkillCategory.TECHNICAL)
    taxonomy = Taxonomy.from_entries([entry])

    assert generate_derived_variants("R") == []
    assert entry.variants == ("r",)
    assert skill_matcher.match("Students compare the rs values of both sensors.", taxonomy) == []


def test_store_failure_is_reported_as_unavailable():
    provider = TaxonomyProvider(client=FakeClient(error=ValueError("bad payload")),
                                taxonomy_file=None, cache_enabled=False)

    with pytest.raises(TaxonomyUnavailableError) as exc_info:
        provider._fetch_store_records()

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert provider.get_taxonomy().size == build_taxonomy().size
