from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AnalyzeResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    fit_score: int | None = None
    risk_score: int | None = None
    verdict: str = ""
    report: str = ""


class AnalyzeResponse(BaseModel):
    results: list[AnalyzeResult] = []


class ErrorResponse(BaseModel):
    error: str
