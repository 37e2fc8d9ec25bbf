# This project was developed with assistance from AI tools.
"""Payment schedule route -- no authentication required.

Translation layer only: decode the body, run the calculator, and turn the
outcome into a status code and JSON body. All arithmetic and business rules
live in ``services.calculator``.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from ..core.config import settings
from ..schemas.calculator import (
    CalculationError,
    CalculationErrorKind,
    PaymentScheduleRequest,
    PaymentScheduleResponse,
)
from ..schemas.error import ErrorResponse
from ..services.calculator import compute_payment_schedule

logger = logging.getLogger(__name__)

router = APIRouter()

INTERNAL_SERVER_ERROR = "Internal Server Error"


def error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.body())


def internal_server_error() -> JSONResponse:
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(error=INTERNAL_SERVER_ERROR)
    )


class PaymentScheduleHandler:
    """Maps calculator outcomes to HTTP responses.

    Holds nothing but its logger, so one instance can serve concurrent
    requests.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def handle(self, body: bytes, request_id: str = "") -> JSONResponse:
        """Decode a raw request body and answer with the payment or an error.

        An undecodable body is answered 500, not 400, matching the
        behaviour existing clients rely on.
        """
        try:
            req = PaymentScheduleRequest.model_validate_json(body)
        except ValidationError as exc:
            self._logger.error(
                "Unable to decode payload (request_id=%s): %s",
                request_id,
                exc.errors(include_url=False),
            )
            return internal_server_error()

        result = compute_payment_schedule(req)
        if result.error is not None:
            return self._error_response(result.error, request_id)

        payload = PaymentScheduleResponse(payment_per_schedule=float(result.amount))
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=payload.model_dump(by_alias=True),
        )

    def _error_response(self, error: CalculationError, request_id: str) -> JSONResponse:
        if error.kind is CalculationErrorKind.FIELD_VALIDATION:
            self._logger.warning(
                "Data validation error (request_id=%s): %s",
                request_id,
                [fe.model_dump() for fe in error.fields],
            )
            return error_response(
                status.HTTP_400_BAD_REQUEST,
                ErrorResponse(error=error.message, fields=error.fields),
            )

        if error.kind in CalculationErrorKind.rule_violations():
            self._logger.warning(
                "Error calculating mortgage (request_id=%s): %s", request_id, error.message
            )
            return error_response(status.HTTP_400_BAD_REQUEST, ErrorResponse(error=error.message))

        self._logger.error("Calculation failed (request_id=%s): %s", request_id, error.message)
        return internal_server_error()


def get_payment_schedule_handler() -> PaymentScheduleHandler:
    return PaymentScheduleHandler(logger)


@router.post(
    "/paymentSchedule",
    response_model=PaymentScheduleResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid loan parameters"},
        500: {"model": ErrorResponse, "description": "Undecodable body or unsupported schedule"},
    },
)
async def payment_schedule(
    request: Request,
    handler: PaymentScheduleHandler = Depends(get_payment_schedule_handler),
) -> JSONResponse:
    """Return the payment due per schedule period.

    The body is read raw rather than bound to a model so that a missing
    field is reported as a 400 field error and an undecodable body as a 500.
    """
    request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
    body = await request.body()
    return handler.handle(body, request_id=request_id)


@router.options("/paymentSchedule", include_in_schema=False)
async def payment_schedule_preflight() -> Response:
    """Answer every CORS preflight with 200 and an empty body.

    Origin and requested headers are not checked; the configured values
    are what the browser is told it may use.
    """
    return Response(
        status_code=status.HTTP_200_OK,
        headers={
            "Access-Control-Allow-Origin": settings.CORS_ALLOWED_ORIGIN,
            "Access-Control-Allow-Headers": ", ".join(settings.CORS_ALLOWED_HEADERS),
        },
    )
