from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel


class SectionName(str, Enum):
    FORMATTING = "formatting"
    KEYWORDS = "keywords"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    CONTACT = "contact"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Status(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs-improvement"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: int) -> "Status":
        if score >= 80:
            return cls.EXCELLENT
        if score >= 60:
            return cls.GOOD
        if score >= 40:
            return cls.NEEDS_IMPROVEMENT
        return cls.POOR


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}

MAX_TIPS = 3
MAX_IMPROVEMENTS = 8
MAX_MISSING_KEYWORDS = 10
MAX_POINTS = 5
MAX_FIT_SUGGESTIONS = 3


class ResultModel(BaseModel):
    """Immutable result record, serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SectionScore(ResultModel):
    score: int = Field(ge=0, le=100)
    feedback: str
    tips: Tuple[str, ...] = Field(default=(), max_length=MAX_TIPS)

    @computed_field
    @property
    def status(self) -> Status:
        return Status.from_score(self.score)


class SectionScores(ResultModel):
    formatting: SectionScore
    keywords: SectionScore
    experience: SectionScore
    education: SectionScore
    skills: SectionScore
    contact: SectionScore

    def get(self, name: SectionName) -> SectionScore:
        return getattr(self, name.value)

    def items(self):
        """Yield (SectionName, SectionScore) pairs in declared order."""
        for name in SectionName:
            yield name, self.get(name)


class Improvement(ResultModel):
    section: str
    issue: str
    suggestion: str
    priority: Priority
    impact: Priority


class IndustryFit(ResultModel):
    target_role: str
    fit_score: int = Field(ge=0, le=100)
    suggestions: Tuple[str, ...] = Field(default=(), max_length=MAX_FIT_SUGGESTIONS)


class ATSAnalysis(ResultModel):
    overall_score: int = Field(ge=0, le=100)
    sections: SectionScores
    improvements: Tuple[Improvement, ...] = Field(default=(), max_length=MAX_IMPROVEMENTS)
    missing_keywords: Tuple[str, ...] = Field(default=(), max_length=MAX_MISSING_KEYWORDS)
    strong_points: Tuple[str, ...] = Field(default=(), max_length=MAX_POINTS)
    weak_points: Tuple[str, ...] = Field(default=(), max_length=MAX_POINTS)
    industry_fit: IndustryFit


# Request models

class AnalyzeRequest(BaseModel):
    resume_text: str
    target_role: Optional[str] = None


class BatchAnalyzeRequest(BaseModel):
    resumes: List[AnalyzeRequest]


class ParsedModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonName(ParsedModel):
    raw: Optional[str] = None
    first: Optional[str] = None
    last: Optional[str] = None


class Location(ParsedModel):
    raw_input: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class WorkExperience(ParsedModel):
    job_title: Optional[str] = None
    organization: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    job_description: Optional[str] = None


class EducationEntry(ParsedModel):
    degree: Optional[str] = None
    organization: Optional[str] = None
    grade: Optional[str] = None
    start_date: Optional[str] = None
    completion_date: Optional[str] = None


class Skill(ParsedModel):
    name: str
    type: Optional[str] = None


class StructuredResume(ParsedModel):
    """Field-level resume data as returned by a third-party resume parser."""

    name: Optional[PersonName] = None
    emails: List[str] = Field(default_factory=list)
    phone_numbers: List[str] = Field(default_factory=list)
    linkedin: Optional[str] = None
    websites: List[str] = Field(default_factory=list)
    location: Optional[Location] = None
    summary: Optional[str] = None
    objective: Optional[str] = None
    work_experience: List[WorkExperience] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skill_strings(cls, value):
        # parsers return either plain names or {"name", "type"} objects
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value
