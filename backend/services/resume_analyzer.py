"""Orchestrator: batch resume analysis against one job description.

Pipeline, per non-blank resume and strictly in input order:
1. Build the tagged-text prompt
2. Model call (the only suspension point, bounded by a timeout)
3. Parse the tagged reply into scores, verdict and report

A failure in steps 1-3 degrades that candidate's entry only; the rest of
the batch still runs.
"""

import logging

from config import settings
from models.requests import AnalyzeRequest, ResumeInput
from models.responses import AnalyzeResult
from services import prompt_builder, response_parser
from services.exceptions import InvalidRequestError
from services.model_client import ModelClient

logger = logging.getLogger(__name__)

DEGRADED_VERDICT = "Analysis failed - fallback verdict. Check backend logs."


def validate_request(request: AnalyzeRequest) -> None:
    """Reject a request before any model call is made."""
    if not request.jd or not request.jd.strip():
        raise InvalidRequestError("missing_jd", "Missing 'jd' in request body")
    if not request.resumes:
        raise InvalidRequestError("no_resumes", "Provide at least one resume")


def _degraded_result(resume: ResumeInput, error: Exception) -> AnalyzeResult:
    message = str(error) or error.__class__.__name__
    return AnalyzeResult(
        id=resume.id,
        fit_score=None,
        risk_score=None,
        verdict=DEGRADED_VERDICT,
        report=f"Raw error: {message}",
    )


async def _analyze_one(
    job_description: str,
    resume: ResumeInput,
    client: ModelClient,
    timeout: float,
) -> AnalyzeResult:
    prompt = prompt_builder.build_analysis_prompt(job_description, resume.text)
    raw = await client.invoke(prompt, timeout)
    logger.info("Raw model output for %s:\n%s\n---", resume.id, raw)

    parsed = response_parser.parse_model_output(raw)
    return AnalyzeResult(
        id=resume.id,
        fit_score=parsed.fit_score,
        risk_score=parsed.risk_score,
        verdict=parsed.verdict,
        report=parsed.report,
    )


async def analyze(
    request: AnalyzeRequest,
    client: ModelClient,
    timeout: float | None = None,
) -> list[AnalyzeResult]:
    """Score every non-blank resume in the request, one model call at a time.

    Raises InvalidRequestError for a blank job description or an empty
    resume list. Per-candidate failures never raise; they come back as
    degraded entries with null scores.
    """
    validate_request(request)
    if timeout is None:
        timeout = settings.task_timeout_seconds

    job_description = (request.jd or "").strip()
    results: list[AnalyzeResult] = []

    for resume in request.resumes:
        if resume.is_blank:
            logger.debug("Skipping blank resume %r", resume.id)
            continue

        try:
            result = await _analyze_one(job_description, resume, client, timeout)
        except Exception as e:
            logger.exception("Error analyzing resume %r: %s", resume.id, e)
            result = _degraded_result(resume, e)

        results.append(result)

    logger.info(
        "Analyzed %d of %d resumes (%d degraded)",
        len(results),
        len(request.resumes),
        sum(1 for r in results if r.verdict == DEGRADED_VERDICT),
    )
    return results
