import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from ledger.exceptions import ApiError

logger = logging.getLogger(__name__)

SUCCESS = 0
INVALID_PARAMETER = 102
MISSING_PARAMETER = 201
INVALID_TOKEN = 108
INTERNAL_ERROR = 100

MISSING_CODES = frozenset({"required", "blank", "null"})


def success_response(message: str, data=None, http_status=status.HTTP_200_OK) -> Response:
    """Wrap a payload in the ``{status, message, data}`` envelope."""
    return Response(
        {"status": SUCCESS, "message": message, "data": data if data is not None else {}},
        status=http_status,
    )


def error_response(code: int, message: str, http_status: int, headers=None) -> Response:
    return Response(
        {"status": code, "message": message, "data": None},
        status=http_status,
        headers=headers,
    )


def api_error_response(exc: ApiError) -> Response:
    return error_response(exc.code, exc.message, exc.http_status)


def _first_validation_message(detail):
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_validation_message(value)
            if field == "non_field_errors":
                return message
            return f"{field}: {message}"
    if isinstance(detail, list) and detail:
        return _first_validation_message(detail[0])
    return str(detail)


def _has_code(codes, wanted):
    if isinstance(codes, dict):
        return any(_has_code(value, wanted) for value in codes.values())
    if isinstance(codes, list):
        return any(_has_code(value, wanted) for value in codes)
    return codes in wanted


def _coded_errors():
    """Map each ApiError ``validation_code`` to its subclass."""
    found = {}
    pending = list(ApiError.__subclasses__())
    while pending:
        cls = pending.pop()
        pending.extend(cls.__subclasses__())
        if cls.validation_code:
            found[cls.validation_code] = cls
    return found


def _find_detail(detail, wanted):
    if isinstance(detail, dict):
        detail = list(detail.values())
    if isinstance(detail, list):
        for item in detail:
            found = _find_detail(item, wanted)
            if found is not None:
                return found
        return None
    return detail if getattr(detail, "code", None) in wanted else None


def api_exception_handler(exc, context):
    """
    DRF exception handler rendering every error into the response envelope.

    - ApiError subclasses keep their own code and HTTP status.
    - Serializer validation errors become 201 (missing field), the code of
      the ApiError whose validation_code they carry, or 102.
    - Authentication failures become 108 / 401.
    - Anything unexpected is logged and rendered as 100 / 500.
    """
    if isinstance(exc, ApiError):
        return api_error_response(exc)

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled error in %s: %s", view.__class__.__name__ if view else "-", exc
        )
        return error_response(
            INTERNAL_ERROR, "Internal server error.", status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, exceptions.ValidationError):
        if _has_code(exc.get_codes(), MISSING_CODES):
            return error_response(
                MISSING_PARAMETER, "Missing parameter.", status.HTTP_400_BAD_REQUEST
            )
        coded = _coded_errors()
        detail = _find_detail(exc.detail, coded)
        if detail is not None:
            error = coded[detail.code]
            return error_response(error.code, str(detail), error.http_status)
        return error_response(
            INVALID_PARAMETER,
            _first_validation_message(exc.detail),
            status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        return error_response(
            INVALID_TOKEN,
            "Token is invalid or expired.",
            status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": exc.auth_header}
            if getattr(exc, "auth_header", None)
            else None,
        )

    detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
    return error_response(
        INTERNAL_ERROR if response.status_code >= 500 else response.status_code,
        str(detail) or "Request failed.",
        response.status_code,
    )
