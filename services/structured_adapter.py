"""
Render field-level resume parser output as plain resume text.

Structured input is scored by the same text engine as uploaded text, so the
rendering uses the headers and bullet layout a hand-written resume would.
"""
import re
from typing import List, Optional

from models.resume_models import EducationEntry, StructuredResume, WorkExperience

_SENTENCE_SPLIT = re.compile(r'(?<=[.!?])\s+|\n+')
_LEADING_BULLET = re.compile(r'^\s*(?:[•◦▪▸►→‣⁃●○■\-\*–]|\d{1,2}[.)])\s*')


def _join(*parts: Optional[str], sep: str = ' ') -> str:
    return sep.join(part.strip() for part in parts if part and part.strip())


def _bullets(description: Optional[str]) -> List[str]:
    if not description:
        return []
    bullets = []
    for chunk in _SENTENCE_SPLIT.split(description):
        chunk = _LEADING_BULLET.sub('', chunk).strip()
        if chunk:
            bullets.append(f"- {chunk}")
    return bullets


def _date_range(start: Optional[str], end: Optional[str], open_ended: bool = True) -> str:
    if not start and not end:
        return ''
    if start and not end:
        return f"{start} - Present" if open_ended else start
    return _join(start, end, sep=' - ')


def _render_role(entry: WorkExperience) -> List[str]:
    heading = _join(entry.job_title, entry.organization, sep=' - ')
    dates = _date_range(entry.start_date, entry.end_date)
    if dates:
        heading = _join(heading, f"({dates})")
    lines = [heading] if heading else []
    return lines + _bullets(entry.job_description)


def _render_education(entry: EducationEntry) -> List[str]:
    lines = []
    heading = _join(entry.degree, entry.organization, sep=', ')
    dates = _date_range(entry.start_date, entry.completion_date, open_ended=False)
    if dates:
        heading = _join(heading, f"({dates})")
    if heading:
        lines.append(heading)
    if entry.grade and entry.grade.strip():
        lines.append(f"Grade: {entry.grade.strip()}")
    return lines


def _render_skills(resume: StructuredResume) -> List[str]:
    groups = {}
    for skill in resume.skills:
        label = (skill.type or 'skills').strip().lower()
        groups.setdefault(label, []).append(skill.name.strip())

    lines = []
    for label, names in groups.items():
        if label in ('skills', ''):
            lines.append(', '.join(names))
        else:
            title = label.title() if 'skill' in label else f"{label.title()} Skills"
            lines.append(f"{title}: {', '.join(names)}")
    if resume.languages:
        lines.append(f"Languages: {', '.join(resume.languages)}")
    return lines


def structured_to_text(resume: StructuredResume) -> str:
    """Plain text for ``resume`` with Summary/Experience/Education/Skills blocks."""
    blocks: List[List[str]] = []

    header = []
    if resume.name:
        header.append(resume.name.raw or _join(resume.name.first, resume.name.last))
    contact = list(resume.emails) + list(resume.phone_numbers)
    if resume.linkedin:
        contact.append(resume.linkedin)
    contact.extend(resume.websites)
    if resume.location:
        loc = resume.location
        contact.append(loc.raw_input or _join(loc.city, loc.state, loc.country, sep=', '))
    contact = [item.strip() for item in contact if item and item.strip()]
    if contact:
        header.append(' | '.join(contact))
    header = [line for line in header if line]
    if header:
        blocks.append(header)

    summary = _join(resume.summary, resume.objective)
    if summary:
        blocks.append(['Professional Summary', summary])

    if resume.work_experience:
        lines = ['Work Experience']
        for entry in resume.work_experience:
            lines.extend(_render_role(entry))
        blocks.append(lines)

    if resume.education:
        lines = ['Education']
        for entry in resume.education:
            lines.extend(_render_education(entry))
        blocks.append(lines)

    skills = _render_skills(resume)
    if skills:
        blocks.append(['Technical Skills'] + skills)

    if resume.certifications:
        blocks.append(['Certifications'] + [f"- {cert.strip()}" for cert in resume.certifications if cert.strip()])

    return '\n\n'.join('\n'.join(block) for block in blocks)
