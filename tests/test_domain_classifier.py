from src.core.data_models import SkillCategory, SkillMatch


def _skill(name, category=SkillCategory.TECHNICAL):
    return SkillMatch(skill_name=name, frequency=3, category=category, confidence=30.0)


def test_scenario_domains(domain_classifier, skill_matcher, scenario_text, scenario_taxonomy):
    skills = skill_matcher.match(scenario_text, scenario_taxonomy)

    domains = domain_classifier.classify(scenario_text, skills)

    assert domains == ["Technology & Software Development", "Data Science & Analytics"]


def test_default_domain(domain_classifier):
    assert domain_classifier.classify("", []) == ["General Professional Skills"]
    assert domain_classifier.classify("A course about pottery glazes.", []) == ["General Professional Skills"]


def test_rules_fire_independently_in_rule_order(domain_classifier):
    skills = [
        _skill("Project Management", SkillCategory.FUNCTIONAL),
        _skill("Team Leadership", SkillCategory.SOFT),
        _skill("SCADA"),
    ]
    text = "Automation of the control loop and analytics of plant data."

    domains = domain_classifier.classify(text, skills)

    assert domains == [
        "Data Science & Analytics",
        "Process Industries & Automation",
        "Management & Leadership",
    ]


def test_technology_needs_enough_technical_skills(domain_classifier):
    assert domain_classifier.classify("", [_skill("Python")]) == ["General Professional Skills"]
    assert domain_classifier.classify("", [_skill("Python"), _skill("SQL")]) == [
        "Technology & Software Development"
    ]


def test_single_management_skill_is_not_enough(domain_classifier):
    skills = [_skill("Risk Management", SkillCategory.FUNCTIONAL)]
    assert domain_classifier.classify("", skills) == ["General Professional Skills"]
