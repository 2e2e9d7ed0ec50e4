"""Unit tests for keyword matching and role bucket selection."""

import pytest

from services import lexicons


@pytest.mark.unit
@pytest.mark.parametrize("text,term,expected", [
    ("good engineer", "go", False),
    ("services in go and rust", "go", True),
    ("skilled communicator", "led", False),
    ("led a team of five", "led", True),
    ("built with node.js.", "node.js", True),
    ("c++, java", "c++", True),
    ("javascript only", "java", False),
    ("designed rest apis", "api", True),
    ("relational databases", "database", True),
    ("ci/cd pipelines", "ci/cd", True),
    ("built services in asp.net core", ".net", True),
    ("vb.net and c#", ".net", True),
    ("asp.network", ".net", False),
])
def test_contains_term(text, term, expected):
    assert lexicons.contains_term(text, term) is expected


@pytest.mark.unit
def test_find_terms_keeps_lexicon_order():
    text = "docker, python and react"

    assert lexicons.find_terms(text, lexicons.TECH_KEYWORDS) == ["python", "react", "docker"]


@pytest.mark.unit
def test_unknown_terms_are_still_matched():
    assert lexicons.contains_term("fluent in haskell", "Haskell")


@pytest.mark.unit
@pytest.mark.parametrize("role,bucket", [
    (None, "fullstack"),
    ("", "fullstack"),
    ("Frontend Developer", "frontend"),
    ("Front End Engineer", "frontend"),
    ("Backend Engineer", "backend"),
    ("Full Stack Developer", "fullstack"),
    ("full-stack engineer", "fullstack"),
    ("Data Scientist", "data"),
    ("DevOps Engineer", "devops"),
    ("Chef", "fullstack"),
])
def test_resolve_role_bucket(role, bucket):
    assert lexicons.resolve_role_bucket(role) == bucket


@pytest.mark.unit
def test_tables_are_read_only():
    with pytest.raises(TypeError):
        lexicons.ROLE_PROFILES["mobile"] = lexicons.RoleProfile(("swift",), 10)

    with pytest.raises(TypeError):
        lexicons.SECTION_HEADERS["summary"] = ("bio",)

    assert isinstance(lexicons.TECH_KEYWORDS, tuple)


@pytest.mark.unit
def test_every_bucket_has_both_tables():
    assert set(lexicons.ROLE_PROFILES) == set(lexicons.ROLE_MISSING_KEYWORDS)
    assert lexicons.DEFAULT_BUCKET in lexicons.ROLE_PROFILES


@pytest.mark.unit
def test_has_section_uses_substring_search():
    assert lexicons.has_section("professional experience at acme", "experience")
    assert lexicons.has_section("technical skills: python", "skills")
    assert not lexicons.has_section("python developer", "education")
