"""Shared fixtures for scorer and API tests."""

import pytest

from models.resume_models import SectionScore, SectionScores
from services.ats_scorer import ATSScorer

STRONG_RESUME = """Priya Sharma
priya.sharma@example.com | +1 (555) 123-4567 | linkedin.com/in/priyasharma | github.com/priyasharma
Bengaluru, India

Professional Summary
Full stack developer who builds reliable web platforms and internal tooling.

Experience
Software Engineer Intern, Acme Corp (Jun 2023 - Aug 2023)
- Developed a React and TypeScript dashboard adopted by 500+ support agents
- Optimized PostgreSQL queries and reduced page load time by 40%
- Built REST API services in Python with FastAPI, Docker and Redis
- Automated CI/CD pipelines with Jenkins, saving $2,000 per month
- Collaborated with a team of 6 in Agile sprints and mentored 2 new interns
- Implemented GraphQL endpoints and improved test coverage by 25%

Projects
- Designed and deployed a Kubernetes job scheduler on AWS used by 3 teams
- Led a Node.js microservices rewrite that increased throughput 3x

Education
B.Tech in Computer Science, National Institute of Technology (2020 - 2024)
CGPA: 8.7/10

Technical Skills
Languages: Python, JavaScript, TypeScript, Java, SQL
Frameworks: React, Django, FastAPI
Databases: PostgreSQL, MongoDB, Redis
Tools: Git, Docker, Kubernetes, Jenkins, Linux
Soft skills: leadership, communication, teamwork, problem-solving

Certifications
- AWS Certified Cloud Practitioner
"""


@pytest.fixture
def scorer():
    return ATSScorer()


@pytest.fixture
def strong_resume():
    return STRONG_RESUME


def make_section(score, tips=()):
    return SectionScore(score=score, feedback="test", tips=list(tips))


def make_sections(**overrides):
    """SectionScores with every section at 90 and no tips unless overridden."""
    values = {name: make_section(90) for name in
              ("formatting", "keywords", "experience", "education", "skills", "contact")}
    values.update(overrides)
    return SectionScores(**values)


@pytest.fixture
def section():
    return make_section


@pytest.fixture
def sections():
    return make_sections
