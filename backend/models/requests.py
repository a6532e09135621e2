from pydantic import BaseModel, Field


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=10000, description="Job description text")


class ATSRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class PracticeStartRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000)
    job_description: str = Field(..., max_length=10000)


class QuestionRequest(BaseModel):
    question: str | None = Field(None, description="Preset question; generated when omitted")


class AnswerRequest(BaseModel):
    answer: str = Field(..., max_length=20000, description="Transcribed answer to the open question")
