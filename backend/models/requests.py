from pydantic import BaseModel, ConfigDict, Field


class ResumeInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field("", description="Candidate label shown in the results table")
    text: str | None = Field(None, description="Plain text resume content")

    @property
    def is_blank(self) -> bool:
        return not self.text or not self.text.strip()


class AnalyzeRequest(BaseModel):
    jd: str | None = Field(None, description="Job description text")
    resumes: list[ResumeInput] | None = None
