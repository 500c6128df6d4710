from pydantic import BaseModel


class ParsedReply(BaseModel):
    """Fields extracted from one tagged-text model reply."""

    fit_score: int | None = None
    risk_score: int | None = None
    verdict: str = ""
    report: str = ""
