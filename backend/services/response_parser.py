"""Tagged-text reply parsing.

The model is asked to answer in this shape (see services/prompt_builder.py):

    FIT_SCORE: <integer>
    RISK_SCORE: <integer>
    VERDICT: <single line of text>
    REPORT:
    <free-form multi-line text>

Extraction is a fixed sequence of regex searches, each with its own
fallback, so a reply that drifts from the format degrades field by field
instead of failing as a whole.
"""

import logging
import re

from models.schemas.parsed_reply import ParsedReply

logger = logging.getLogger(__name__)

FIT_SCORE_RE = re.compile(r"FIT_SCORE\s*:\s*(\d+)", re.IGNORECASE)
RISK_SCORE_RE = re.compile(r"RISK_SCORE\s*:\s*(\d+)", re.IGNORECASE)
VERDICT_RE = re.compile(r"VERDICT\s*:\s*(.+)", re.IGNORECASE)
REPORT_RE = re.compile(r"REPORT\s*:", re.IGNORECASE)

NO_VERDICT = "No clear verdict parsed"

SCORE_MIN = 0
SCORE_MAX = 10


def _extract_score(pattern: re.Pattern, raw: str, tag: str) -> int | None:
    match = pattern.search(raw)
    if not match:
        return None
    score = int(match.group(1))
    # Passed through unclamped; the UI shows whatever the model said.
    if not SCORE_MIN <= score <= SCORE_MAX:
        logger.warning("%s out of range [%d, %d]: %d", tag, SCORE_MIN, SCORE_MAX, score)
    return score


def _extract_report(raw: str) -> str:
    match = REPORT_RE.search(raw)
    if not match:
        return raw
    after = raw[match.end():]
    newline = after.find("\n")
    if newline == -1:
        return after.strip()
    return after[newline + 1:].strip()


def parse_model_output(raw: str) -> ParsedReply:
    """Extract scores, verdict and report from a raw model reply.

    Never raises on malformed text: missing scores become None, a missing
    verdict becomes NO_VERDICT, and a missing REPORT: marker keeps the whole
    reply as the report.
    """
    verdict_match = VERDICT_RE.search(raw)
    return ParsedReply(
        fit_score=_extract_score(FIT_SCORE_RE, raw, "FIT_SCORE"),
        risk_score=_extract_score(RISK_SCORE_RE, raw, "RISK_SCORE"),
        verdict=verdict_match.group(1).strip() if verdict_match else NO_VERDICT,
        report=_extract_report(raw),
    )
