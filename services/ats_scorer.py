import logging
from typing import Dict, List, Optional, Sequence, Tuple

from models.resume_models import (
    MAX_TIPS,
    ATSAnalysis,
    SectionName,
    SectionScore,
    SectionScores,
    StructuredResume,
)
from services import lexicons
from services.recommendations import (
    build_improvements,
    find_missing_keywords,
    identify_strengths_weaknesses,
    score_industry_fit,
)
from services.structured_adapter import structured_to_text

logger = logging.getLogger(__name__)

# Section weights in hundredths; they must add up to 100.
SECTION_WEIGHTS: Dict[SectionName, int] = {
    SectionName.FORMATTING: 15,
    SectionName.KEYWORDS: 25,
    SectionName.EXPERIENCE: 25,
    SectionName.EDUCATION: 10,
    SectionName.SKILLS: 15,
    SectionName.CONTACT: 10,
}

# (minimum score, feedback) bands, highest first
FEEDBACK: Dict[SectionName, Tuple[Tuple[int, str], ...]] = {
    SectionName.FORMATTING: (
        (80, 'Well-formatted, ATS-friendly resume'),
        (60, 'Readable layout with a few structural gaps'),
        (0, 'Formatting needs improvement'),
    ),
    SectionName.KEYWORDS: (
        (80, 'Excellent keyword optimization'),
        (50, 'Decent keywords, room for more industry terms'),
        (0, 'Needs more relevant keywords'),
    ),
    SectionName.EXPERIENCE: (
        (80, 'Strong work experience section'),
        (60, 'Good experience, could use more detail'),
        (0, 'Experience section needs improvement'),
    ),
    SectionName.EDUCATION: (
        (80, 'Well-documented education'),
        (0, 'Education section needs more detail'),
    ),
    SectionName.SKILLS: (
        (80, 'Comprehensive skills section'),
        (60, 'Solid skills, consider organizing and expanding them'),
        (0, 'Expand your skills section'),
    ),
    SectionName.CONTACT: (
        (80, 'Complete contact information'),
        (0, 'Missing contact details'),
    ),
}


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, int(value)))


class ATSScorer:
    """Deterministic, rule-based resume scorer over plain text."""

    def analyze_resume(self, resume_text: str, target_role: Optional[str] = None) -> ATSAnalysis:
        """
        Score resume text and return the full analysis
        """
        if not isinstance(resume_text, str):
            raise TypeError(f"resume_text must be str, not {type(resume_text).__name__}")
        if target_role is not None and not isinstance(target_role, str):
            raise TypeError(f"target_role must be str or None, not {type(target_role).__name__}")

        text = resume_text.lower()
        lines = [line for line in resume_text.splitlines() if line.strip()]

        sections = SectionScores(
            formatting=self.score_formatting(text, lines),
            keywords=self.score_keywords(text),
            experience=self.score_experience(text),
            education=self.score_education(text),
            skills=self.score_skills(text),
            contact=self.score_contact(text, resume_text),
        )
        overall_score = self.calculate_overall_score(sections)
        strong_points, weak_points = identify_strengths_weaknesses(sections, text)

        analysis = ATSAnalysis(
            overall_score=overall_score,
            sections=sections,
            improvements=build_improvements(sections, text),
            missing_keywords=find_missing_keywords(text, target_role),
            strong_points=strong_points,
            weak_points=weak_points,
            industry_fit=score_industry_fit(text, target_role),
        )

        logger.info(
            f"Scored resume ({len(resume_text)} chars, bucket "
            f"'{lexicons.resolve_role_bucket(target_role)}'): overall {overall_score}"
        )
        logger.debug(
            "Section scores: "
            + ", ".join(f"{name.value}={section.score}" for name, section in sections.items())
        )
        return analysis

    def analyze_structured(self, resume: StructuredResume,
                           target_role: Optional[str] = None) -> ATSAnalysis:
        """Score parser output by rendering it to text first."""
        return self.analyze_resume(structured_to_text(resume), target_role)

    def calculate_overall_score(self, sections: SectionScores) -> int:
        """Weighted sum of the section scores, rounded half-up"""
        weighted = sum(SECTION_WEIGHTS[name] * section.score for name, section in sections.items())
        return clamp((weighted + 50) // 100)

    def score_formatting(self, text: str, lines: Sequence[str]) -> SectionScore:
        """Length, section headers, bullets, dates and line density"""
        score = 100
        tips: List[str] = []

        word_count = len(text.split())
        if word_count < 200:
            score -= 25
            tips.append('Add more detail to your experience and projects')
        elif word_count > 1500:
            score -= 15
            tips.append('Consider condensing your resume to 1-2 pages')

        missing = [s for s in lexicons.REQUIRED_SECTIONS if not lexicons.has_section(text, s)]
        if missing:
            score -= 10 * len(missing)
            tips.append('Add clear section headers: Experience, Education, Skills')

        bullet_lines = [line for line in lines if lexicons.BULLET_PATTERN.match(line)]
        if len(bullet_lines) < 5:
            score -= 15
            tips.append('Use bullet points to list your achievements')

        if len(lexicons.DATE_PATTERN.findall(text)) < 2:
            score -= 10
            tips.append('Add start and end dates to each role and degree')

        if lines and sum(len(line.strip()) for line in lines) / len(lines) > 160:
            score -= 10
            tips.append('Break long paragraphs into short, scannable lines')

        return self._section(SectionName.FORMATTING, score, tips)

    def score_keywords(self, text: str) -> SectionScore:
        """Technical terms, action verbs, soft skills and quantified results"""
        tech = lexicons.find_terms(text, lexicons.TECH_KEYWORDS)
        verbs = lexicons.find_terms(text, lexicons.ACTION_VERBS)
        soft = lexicons.find_terms(text, lexicons.SOFT_SKILLS)
        quantified = lexicons.QUANTIFIED_PATTERN.findall(text)

        score = (
            min(40, len(tech) * 3)
            + min(30, len(verbs) * 3)
            + min(20, len(soft) * 4)
            + min(10, len(quantified) * 2)
        )

        tips: List[str] = []
        if len(tech) < 8:
            tips.append('Add more technical keywords that match your target jobs')
        if len(verbs) < 5:
            tips.append('Start bullet points with strong action verbs')
        if len(quantified) < 3:
            tips.append('Quantify results with numbers, percentages or amounts')

        return self._section(SectionName.KEYWORDS, score, tips)

    def score_experience(self, text: str) -> SectionScore:
        """Experience header, role titles, action verbs and metrics"""
        score = 50
        tips: List[str] = []

        if not lexicons.has_section(text, 'experience'):
            score -= 30
            tips.append('Add an Experience section')

        roles = lexicons.ROLE_TITLE_PATTERN.findall(text)
        score += min(20, len(roles) * 5)

        verbs = lexicons.find_terms(text, lexicons.ACTION_VERBS)
        score += min(15, len(verbs) * 2)

        metrics = lexicons.METRIC_PATTERN.findall(text)
        score += min(15, len(metrics) * 5)

        if len(metrics) < 2:
            tips.append('Add quantified achievements to your roles')
        if len(verbs) < 5:
            tips.append('Describe each role with action verbs')

        return self._section(SectionName.EXPERIENCE, score, tips)

    def score_education(self, text: str) -> SectionScore:
        """Education header, degree, institution and grade"""
        score = 50
        tips: List[str] = []

        if not lexicons.has_section(text, 'education'):
            score -= 20
            tips.append('Add an Education section')

        degrees = lexicons.DEGREE_PATTERN.findall(text)
        score += min(25, len(degrees) * 15)
        if not degrees:
            tips.append('State your degree clearly (e.g. B.Tech in Computer Science)')

        if lexicons.INSTITUTION_PATTERN.search(text):
            score += 15

        if lexicons.GRADE_PATTERN.search(text):
            score += 10
        else:
            tips.append('Add your GPA/CGPA if it is 3.0 (or 7.5/10) or above')

        return self._section(SectionName.EDUCATION, score, tips)

    def score_skills(self, text: str) -> SectionScore:
        """Skills header, technical breadth, grouping and soft skills"""
        score = 40
        tips: List[str] = []

        if not lexicons.has_section(text, 'skills'):
            score -= 20
            tips.append('Add a Skills section')

        tech = lexicons.find_terms(text, lexicons.TECH_KEYWORDS)
        score += min(35, len(tech) * 3)

        categories = [c for c in lexicons.SKILL_CATEGORIES if c in text]
        if len(categories) >= 2:
            score += 15
        else:
            tips.append('Group skills into categories such as Languages, Frameworks, Tools')

        soft = lexicons.find_terms(text, lexicons.SOFT_SKILLS)
        if len(soft) >= 2:
            score += 10
        else:
            tips.append('Mention soft skills such as communication or teamwork')

        return self._section(SectionName.SKILLS, score, tips)

    def score_contact(self, text: str, original_text: str) -> SectionScore:
        """Email, phone, LinkedIn, GitHub/portfolio and location"""
        score = 0
        tips: List[str] = []

        if lexicons.EMAIL_PATTERN.search(original_text):
            score += 30
        else:
            tips.append('Add a professional email address')

        if lexicons.PHONE_PATTERN.search(original_text):
            score += 20
        else:
            tips.append('Add a phone number')

        if 'linkedin' in text:
            score += 20
        else:
            tips.append('Add your LinkedIn profile URL')

        if 'github' in text or 'portfolio' in text:
            score += 20
        else:
            tips.append('Add a GitHub or portfolio link')

        if text.strip():
            score += 10

        return self._section(SectionName.CONTACT, score, tips)

    def _section(self, name: SectionName, score: int, tips: List[str]) -> SectionScore:
        score = clamp(score)
        feedback = next(text for floor, text in FEEDBACK[name] if score >= floor)
        return SectionScore(score=score, feedback=feedback, tips=tips[:MAX_TIPS])


ats_scorer = ATSScorer()


def analyze_resume_text(resume_text: str, target_role: Optional[str] = None) -> ATSAnalysis:
    """Score plain resume text, optionally against a target role."""
    return ats_scorer.analyze_resume(resume_text, target_role)


def analyze_structured_resume(resume: StructuredResume,
                              target_role: Optional[str] = None) -> ATSAnalysis:
    """Score field-level parser output through the same plain-text engine."""
    return ats_scorer.analyze_structured(resume, target_role)
