"""
Read-only keyword tables shared by the section scorers and the reporters.

Everything here is built once at import time and never mutated.
"""
import re
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Pattern, Tuple

TECH_KEYWORDS: Tuple[str, ...] = (
    'javascript', 'typescript', 'python', 'java', 'c++', 'react', 'angular', 'vue',
    'node.js', 'express', 'mongodb', 'sql', 'postgresql', 'mysql', 'redis',
    'aws', 'azure', 'gcp', 'docker', 'kubernetes', 'git', 'github', 'gitlab',
    'html', 'css', 'sass', 'tailwind', 'bootstrap', 'rest', 'api', 'graphql',
    'agile', 'scrum', 'jira', 'ci/cd', 'jenkins', 'terraform', 'linux',
    'machine learning', 'deep learning', 'tensorflow', 'pytorch', 'pandas', 'numpy',
    'data structures', 'algorithms', 'oop', 'design patterns', 'microservices',
    'spring', 'django', 'flask', 'fastapi', '.net', 'rust', 'go', 'kotlin', 'swift',
)

ACTION_VERBS: Tuple[str, ...] = (
    'achieved', 'developed', 'implemented', 'designed', 'led', 'managed', 'created',
    'built', 'improved', 'increased', 'reduced', 'optimized', 'delivered', 'launched',
    'collaborated', 'coordinated', 'analyzed', 'architected', 'automated', 'configured',
    'deployed', 'engineered', 'established', 'executed', 'facilitated', 'generated',
    'integrated', 'maintained', 'mentored', 'migrated', 'modernized', 'orchestrated',
    'pioneered', 'refactored', 'resolved', 'scaled', 'streamlined', 'transformed',
    'spearheaded', 'initiated', 'innovated', 'enhanced', 'accelerated',
)

# Outcome verbs; a resume with none of these reads as a list of duties.
ACHIEVEMENT_VERBS: Tuple[str, ...] = (
    'achieved', 'improved', 'increased', 'reduced', 'optimized', 'delivered',
    'launched', 'accelerated', 'generated', 'streamlined', 'scaled', 'saved',
    'won', 'exceeded',
)

SOFT_SKILLS: Tuple[str, ...] = (
    'leadership', 'communication', 'teamwork', 'problem-solving', 'analytical',
    'critical thinking', 'time management', 'adaptability', 'creativity', 'collaboration',
    'attention to detail', 'organization', 'multitasking', 'decision making',
)

SECTION_HEADERS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'experience': ('experience', 'work experience', 'employment', 'work history',
                   'professional experience', 'internship'),
    'education': ('education', 'academic', 'qualifications', 'degrees'),
    'skills': ('skills', 'technical skills', 'technologies', 'competencies', 'expertise'),
    'projects': ('projects', 'personal projects', 'academic projects', 'portfolio'),
    'certifications': ('certifications', 'certificates', 'licenses', 'credentials'),
    'summary': ('summary', 'objective', 'profile', 'about me', 'professional summary'),
})

REQUIRED_SECTIONS: Tuple[str, ...] = ('experience', 'education', 'skills')

SKILL_CATEGORIES: Tuple[str, ...] = (
    'programming', 'languages', 'frameworks', 'libraries', 'databases', 'tools',
    'cloud', 'platforms',
)

ROLE_TITLE_PATTERN = re.compile(
    r'\b(?:engineer|developer|intern|analyst|manager|lead|associate|consultant)s?\b'
)
DEGREE_PATTERN = re.compile(
    r'\b(?:bachelor|master|b\.?\s?tech|m\.?\s?tech|b\.?sc|m\.?sc|b\.?s|m\.?s'
    r'|ph\.?d|mba|bca|mca|diploma)\b'
)
INSTITUTION_PATTERN = re.compile(
    r'\b(?:university|college|institute|school of|academy|iit|nit|iiit|bits)\b'
)
GRADE_PATTERN = re.compile(r'\b(?:c?gpa|grade|cpi|sgpa)\b|\bpercentage\s*[:\-]?\s*\d')

# Percentages, currency amounts, "50+" and "3x" style multipliers.
QUANTIFIED_PATTERN = re.compile(r'\d+(?:\.\d+)?%|[$₹€£]\s?\d[\d,]*(?:\.\d+)?[kmb]?|\d+\+|\b\d+x\b')
METRIC_PATTERN = re.compile(r'\d+(?:\.\d+)?%|[$₹€£]\s?\d[\d,]*')

BULLET_PATTERN = re.compile(r'^\s*(?:[•◦▪▸►→‣⁃●○■\-\*–]|\d{1,2}[.)])\s*\S')
DATE_PATTERN = re.compile(
    r'\b(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?\s+\d{4}\b'
    r'|\b\d{1,2}/\d{4}\b|\b(?:19|20)\d{2}\b'
)

EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')
PHONE_PATTERN = re.compile(r'(?:\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}')


class RoleProfile(NamedTuple):
    keywords: Tuple[str, ...]
    points_per_hit: int


DEFAULT_BUCKET = 'fullstack'
DEFAULT_TARGET_ROLE = 'Software Developer'

# Insertion order is the match order for target-role lookups.
ROLE_PROFILES: Mapping[str, RoleProfile] = MappingProxyType({
    'frontend': RoleProfile(('react', 'vue', 'angular', 'css', 'javascript'), 12),
    'backend': RoleProfile(('api', 'database', 'server', 'node', 'python'), 12),
    'fullstack': RoleProfile(('frontend', 'backend', 'api', 'database', 'react'), 12),
    'data': RoleProfile(('python', 'sql', 'analytics', 'machine learning', 'statistics'), 12),
    'devops': RoleProfile(('docker', 'kubernetes', 'aws', 'ci/cd', 'terraform'), 12),
})

ROLE_MISSING_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'frontend': ('React', 'TypeScript', 'JavaScript', 'CSS', 'HTML5', 'Redux', 'Webpack',
                 'Accessibility', 'Testing', 'Git'),
    'backend': ('Node.js', 'Python', 'Java', 'SQL', 'REST API', 'Database', 'Docker',
                'MongoDB', 'AWS', 'Git', 'Microservices'),
    'fullstack': ('React', 'Node.js', 'JavaScript', 'TypeScript', 'SQL', 'MongoDB', 'API',
                  'Database', 'Docker', 'Git'),
    'data': ('Python', 'SQL', 'Pandas', 'NumPy', 'Machine Learning', 'TensorFlow',
             'Statistics', 'Visualization', 'Tableau', 'Spark'),
    'devops': ('Docker', 'Kubernetes', 'AWS', 'CI/CD', 'Terraform', 'Linux', 'Jenkins',
               'Ansible', 'Monitoring', 'Bash'),
})


def _term_pattern(term: str) -> Pattern:
    term = term.lower()
    # terms like ".net" attach to a prefix ("asp.net"), so only word-led terms need a left boundary
    prefix = r'(?<![a-z0-9])' if term[:1].isalnum() else ''
    return re.compile(prefix + re.escape(term) + r's?(?![a-z0-9])')


_TERM_PATTERNS: Mapping[str, Pattern] = MappingProxyType({
    term.lower(): _term_pattern(term)
    for term in (
        TECH_KEYWORDS + ACTION_VERBS + ACHIEVEMENT_VERBS + SOFT_SKILLS
        + tuple(kw for profile in ROLE_PROFILES.values() for kw in profile.keywords)
        + tuple(kw for kws in ROLE_MISSING_KEYWORDS.values() for kw in kws)
    )
})


def contains_term(text: str, term: str) -> bool:
    """Whole-term match of ``term`` against already lower-cased ``text``."""
    key = term.lower()
    pattern = _TERM_PATTERNS.get(key) or _term_pattern(key)
    return pattern.search(text) is not None


def find_terms(text: str, terms: Iterable[str]) -> list:
    """Terms present in ``text``, in lexicon order."""
    return [term for term in terms if contains_term(text, term)]


def has_section(text: str, section: str) -> bool:
    return any(header in text for header in SECTION_HEADERS[section])


def resolve_role_bucket(target_role) -> str:
    """Pick the role bucket for a free-text target role, falling back to fullstack."""
    if not target_role:
        return DEFAULT_BUCKET
    role = target_role.lower()
    squashed = re.sub(r'[\s_-]+', '', role)
    for bucket in ROLE_PROFILES:
        if bucket in role or bucket in squashed:
            return bucket
    return DEFAULT_BUCKET
