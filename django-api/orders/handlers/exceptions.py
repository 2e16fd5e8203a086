"""Map domain errors to HTTP responses without exposing internals."""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from orders.domain.errors import DomainError, ErrorCode

STATUS_BY_CODE = {
    ErrorCode.NO_ITEMS_SELECTED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SLEEVE_EXCEEDS_GARMENT_COUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_IDENTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN_SIZE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ORDER_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_AUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALREADY_IN_PROGRESS: status.HTTP_409_CONFLICT,
    ErrorCode.DELETE_NOT_REQUESTED: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return Response(
            {"code": exc.code.value, "message": exc.message},
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        )
    return exception_handler(exc, context)
