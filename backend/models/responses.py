from pydantic import BaseModel, ConfigDict, Field


class SkillCategory(BaseModel):
    category: str = ""
    skills: list[str] = []


class InterviewFeedback(BaseModel):
    score: float = 0
    feedback: str = ""
    strengths: list[str] = []


class AnalysisRecord(BaseModel):
    """One completed resume-vs-JD analysis, as stored in history."""

    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: int  # epoch millis
    score: float = Field(ge=0, le=100)
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    extra_skills: list[str] = []
    grouped_skills: list[SkillCategory] = []
    suggestions: list[str] = []
    summary: str = ""
    job_title: str = ""


class PracticeTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
    feedback: InterviewFeedback
    timestamp: int


class InterviewSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: int
    job_title: str
    turns: list[PracticeTurn] = []
    overall_score: int = 0


class ATSReport(BaseModel):
    total: float = 0
    formatting: float = 0
    keywords: float = 0
    readability: float = 0
    findings: list[str] = []
    improvements: list[str] = []


class LocalScoreResponse(BaseModel):
    score: float = 0.0
    resume_skills: list[str] = []
    matched_skills: list[str] = []
    grouped_skills: list[SkillCategory] = []


class PracticeStartResponse(BaseModel):
    session_id: str
    job_title: str


class QuestionResponse(BaseModel):
    question: str
