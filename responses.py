import logging

from fastapi.responses import JSONResponse

from store import Outcome, StoreResult

STATUS_CODES = {
    Outcome.CREATED: 201,
    Outcome.OK: 200,
    Outcome.CONFLICT: 409,
    Outcome.NOT_FOUND: 404,
}


def result_response(result: StoreResult, logger: logging.Logger) -> JSONResponse:
    """Map a store result to an HTTP response whose body is the message string"""
    if result.succeeded:
        logger.info(result.message)
    else:
        logger.warning(result.message)
    return JSONResponse(status_code=STATUS_CODES[result.outcome], content=result.message)
