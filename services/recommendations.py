"""
Improvement ranking and the strengths, weaknesses and role-fit reports.

These read the finished section scores plus the lower-cased resume text;
nothing here feeds back into a section score.
"""
import logging
from typing import List, Optional, Tuple

from models.resume_models import (
    MAX_FIT_SUGGESTIONS,
    MAX_IMPROVEMENTS,
    MAX_MISSING_KEYWORDS,
    MAX_POINTS,
    Improvement,
    IndustryFit,
    Priority,
    SectionScores,
)
from services import lexicons

logger = logging.getLogger(__name__)

IMPROVEMENT_THRESHOLD = 70
HIGH_PRIORITY_BELOW = 50
STRENGTH_AT = 80
WEAKNESS_BELOW = 50
TECH_STRENGTH_AT = 12
TECH_WEAKNESS_BELOW = 6


def build_improvements(sections: SectionScores, text: str) -> List[Improvement]:
    """
    Turn low-scoring sections into prioritized improvements.

    Every tip of a section scoring below 70 becomes one entry (high below 50,
    medium otherwise). Resume-wide findings are then added: missing summary
    and missing achievement language go to the front, missing projects and
    certifications to the back at low priority. The list is stable-sorted by
    priority and only then cut to 8, so the lowest priorities are dropped first.
    """
    improvements: List[Improvement] = []

    for name, section in sections.items():
        if section.score >= IMPROVEMENT_THRESHOLD:
            continue
        priority = Priority.HIGH if section.score < HIGH_PRIORITY_BELOW else Priority.MEDIUM
        for tip in section.tips:
            improvements.append(Improvement(
                section=name.label,
                issue=f"{name.label} score is {section.score}%",
                suggestion=tip,
                priority=priority,
                impact=priority,
            ))

    if not lexicons.has_section(text, 'summary'):
        improvements.insert(0, Improvement(
            section='Summary',
            issue='Missing professional summary',
            suggestion='Add a 2-3 sentence summary highlighting your key qualifications',
            priority=Priority.HIGH,
            impact=Priority.HIGH,
        ))

    if not lexicons.find_terms(text, lexicons.ACHIEVEMENT_VERBS):
        improvements.insert(0, Improvement(
            section='Achievements',
            issue='Resume lacks achievement-oriented language',
            suggestion='Rewrite bullets around outcomes: improved, reduced, increased, delivered',
            priority=Priority.HIGH,
            impact=Priority.HIGH,
        ))

    if not lexicons.has_section(text, 'projects'):
        improvements.append(Improvement(
            section='Projects',
            issue='No projects section found',
            suggestion='Add 2-3 projects with the tech stack used and the result',
            priority=Priority.LOW,
            impact=Priority.LOW,
        ))

    if not lexicons.has_section(text, 'certifications'):
        improvements.append(Improvement(
            section='Certifications',
            issue='No certifications listed',
            suggestion='List relevant certifications or online courses you have completed',
            priority=Priority.LOW,
            impact=Priority.LOW,
        ))

    ranked = sorted(improvements, key=lambda item: item.priority.rank)
    if len(ranked) > MAX_IMPROVEMENTS:
        logger.debug(f"Dropping {len(ranked) - MAX_IMPROVEMENTS} lower-priority improvements")
    return ranked[:MAX_IMPROVEMENTS]


def identify_strengths_weaknesses(sections: SectionScores, text: str) -> Tuple[List[str], List[str]]:
    strong_points: List[str] = []
    weak_points: List[str] = []

    for name, section in sections.items():
        if section.score >= STRENGTH_AT:
            strong_points.append(f"Strong {name.value} ({section.score}%)")
        elif section.score < WEAKNESS_BELOW:
            weak_points.append(f"Weak {name.value} section")

    tech_count = len(lexicons.find_terms(text, lexicons.TECH_KEYWORDS))
    if tech_count >= TECH_STRENGTH_AT:
        strong_points.append('Good technical coverage')
    elif tech_count < TECH_WEAKNESS_BELOW:
        weak_points.append('Limited technical keywords')

    return strong_points[:MAX_POINTS], weak_points[:MAX_POINTS]


def score_industry_fit(text: str, target_role: Optional[str] = None) -> IndustryFit:
    """Keyword fit of the resume against the target role's bucket"""
    role = target_role.strip() if target_role and target_role.strip() else lexicons.DEFAULT_TARGET_ROLE
    bucket = lexicons.resolve_role_bucket(target_role)
    profile = lexicons.ROLE_PROFILES[bucket]

    found = lexicons.find_terms(text, profile.keywords)
    fit_score = min(100, 40 + profile.points_per_hit * len(found))

    suggestions: List[str] = []
    if len(found) < len(profile.keywords) / 2:
        absent = [kw for kw in profile.keywords if kw not in found]
        suggestions.append(f"Add more {bucket}-specific skills such as {', '.join(absent[:3])}")
    suggestions.append('Tailor your resume to match the job description')
    suggestions.append('Include projects relevant to your target role')

    return IndustryFit(
        target_role=role,
        fit_score=fit_score,
        suggestions=suggestions[:MAX_FIT_SUGGESTIONS],
    )


def find_missing_keywords(text: str, target_role: Optional[str] = None) -> List[str]:
    bucket = lexicons.resolve_role_bucket(target_role)
    expected = lexicons.ROLE_MISSING_KEYWORDS[bucket]
    return [kw for kw in expected if not lexicons.contains_term(text, kw)][:MAX_MISSING_KEYWORDS]
