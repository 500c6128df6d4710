import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.dependencies import get_model_client
from models.requests import AnalyzeRequest
from models.responses import AnalyzeResponse, ErrorResponse
from services import resume_analyzer
from services.exceptions import InvalidRequestError
from services.model_client import ModelClient

logger = logging.getLogger(__name__)

router = APIRouter()

INTERNAL_ERROR_MESSAGE = "Internal server error while analyzing resumes. Check backend logs."


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)


@router.post("/analyze")
async def analyze(request: Request, client: ModelClient = Depends(get_model_client)):
    # Body is parsed by hand so that a missing 'jd' is a 400 from the
    # validation gate and a malformed body is a 500, never a 422.
    try:
        body = AnalyzeRequest.model_validate(await request.json())
        results = await resume_analyzer.analyze(body, client)
    except InvalidRequestError as e:
        logger.info("Rejected /analyze request: %s", e.code)
        return _error(e.message, 400)
    except Exception:
        logger.exception("/analyze handler error")
        return _error(INTERNAL_ERROR_MESSAGE, 500)

    return JSONResponse(AnalyzeResponse(results=results).model_dump(by_alias=True))
