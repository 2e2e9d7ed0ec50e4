"""Unit tests for improvement ranking, strengths/weaknesses and role fit."""

import pytest

from models.resume_models import Priority
from services.ats_scorer import analyze_resume_text
from services.recommendations import (
    build_improvements,
    find_missing_keywords,
    identify_strengths_weaknesses,
    score_industry_fit,
)

# Mentions every section the resume-wide detectors look for.
COMPLETE_TEXT = "summary projects certifications achieved"


@pytest.mark.unit
def test_sections_at_or_above_threshold_produce_nothing(sections, section):
    scores = sections(formatting=section(70, ["ignored"]))

    assert build_improvements(scores, COMPLETE_TEXT) == []


@pytest.mark.unit
def test_improvement_entries_restate_score(sections, section):
    scores = sections(education=section(45, ["Add an Education section"]))

    [improvement] = build_improvements(scores, COMPLETE_TEXT)

    assert improvement.section == "Education"
    assert improvement.issue == "Education score is 45%"
    assert improvement.suggestion == "Add an Education section"
    assert improvement.priority == Priority.HIGH
    assert improvement.impact == Priority.HIGH


@pytest.mark.unit
def test_high_priority_precedes_medium_regardless_of_section_order(sections, section):
    scores = sections(
        formatting=section(55, ["f1", "f2"]),
        keywords=section(45, ["k1", "k2"]),
    )

    improvements = build_improvements(scores, COMPLETE_TEXT)

    assert [i.suggestion for i in improvements] == ["k1", "k2", "f1", "f2"]
    assert [i.priority for i in improvements] == [
        Priority.HIGH, Priority.HIGH, Priority.MEDIUM, Priority.MEDIUM,
    ]


@pytest.mark.unit
def test_truncation_drops_lowest_priorities_first(sections, section):
    scores = sections(
        formatting=section(60, ["f1", "f2", "f3"]),
        keywords=section(65, ["k1", "k2", "k3"]),
        experience=section(30, ["e1", "e2", "e3"]),
        education=section(40, ["d1", "d2"]),
    )

    # empty text also triggers both front detectors and both low-priority ones
    improvements = build_improvements(scores, "")

    assert len(improvements) == 8
    assert [i.suggestion for i in improvements][2:] == ["e1", "e2", "e3", "d1", "d2", "f1"]
    assert [i.section for i in improvements][:2] == ["Achievements", "Summary"]
    assert Priority.LOW not in {i.priority for i in improvements}
    assert [i.priority for i in improvements].count(Priority.MEDIUM) == 1


@pytest.mark.unit
def test_missing_achievement_language_goes_first():
    text = "Jane Roe\nEducation\nB.Tech in Computer Science, Delhi University\nSkills\nPython, SQL"

    analysis = analyze_resume_text(text)

    first = analysis.improvements[0]
    assert first.section == "Achievements"
    assert first.issue == "Resume lacks achievement-oriented language"
    assert first.priority == Priority.HIGH


@pytest.mark.unit
def test_missing_summary_is_reported(sections):
    improvements = build_improvements(sections(), "projects certifications improved")

    assert [i.section for i in improvements] == ["Summary"]


@pytest.mark.unit
def test_low_priority_detectors_are_appended(sections, section):
    scores = sections(skills=section(55, ["s1"]))

    improvements = build_improvements(scores, "summary improved")

    assert [i.section for i in improvements] == ["Skills", "Projects", "Certifications"]
    assert improvements[-1].priority == Priority.LOW


@pytest.mark.unit
def test_strengths_and_weaknesses(sections, section):
    scores = sections(
        formatting=section(80),
        keywords=section(79),
        experience=section(50),
        education=section(49),
        skills=section(100),
        contact=section(10),
    )
    text = "python java react docker kubernetes aws sql git linux django flask rust"

    strong, weak = identify_strengths_weaknesses(scores, text)

    assert strong == ["Strong formatting (80%)", "Strong skills (100%)", "Good technical coverage"]
    assert weak == ["Weak education section", "Weak contact section"]


@pytest.mark.unit
def test_limited_technical_keywords_is_a_weakness(sections):
    strong, weak = identify_strengths_weaknesses(sections(), "python")

    assert len(strong) == 5
    assert weak == ["Limited technical keywords"]


@pytest.mark.unit
def test_frontend_resume_fits_frontend_role_better():
    text = "Skills: React, CSS, JavaScript"

    frontend = score_industry_fit(text.lower(), "Frontend Developer")
    backend = score_industry_fit(text.lower(), "Backend Engineer")

    assert frontend.fit_score == 40 + 3 * 12
    assert backend.fit_score == 40
    assert frontend.fit_score > backend.fit_score


@pytest.mark.unit
def test_role_fit_defaults_to_fullstack_and_software_developer():
    fit = score_industry_fit("")

    assert fit.target_role == "Software Developer"
    assert fit.fit_score == 40
    assert list(fit.suggestions) == [
        "Add more fullstack-specific skills such as frontend, backend, api",
        "Tailor your resume to match the job description",
        "Include projects relevant to your target role",
    ]


@pytest.mark.unit
def test_unknown_role_keeps_its_name_but_uses_fullstack():
    fit = score_industry_fit("react frontend backend api database", "Chef")

    assert fit.target_role == "Chef"
    assert fit.fit_score == 100
    assert list(fit.suggestions) == [
        "Tailor your resume to match the job description",
        "Include projects relevant to your target role",
    ]


@pytest.mark.unit
def test_missing_keywords_follow_lexicon_order():
    text = "python and sql reporting"

    assert find_missing_keywords(text, "Data Analyst") == [
        "Pandas", "NumPy", "Machine Learning", "TensorFlow",
        "Statistics", "Visualization", "Tableau", "Spark",
    ]


@pytest.mark.unit
def test_missing_keywords_are_capped_at_ten():
    missing = find_missing_keywords("", "Backend Engineer")

    assert len(missing) == 10
    assert missing[0] == "Node.js"


@pytest.mark.unit
def test_missing_keywords_default_bucket(strong_resume):
    assert find_missing_keywords("") == find_missing_keywords("", "Full Stack Developer")
    assert find_missing_keywords(strong_resume.lower()) == []
