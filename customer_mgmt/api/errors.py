from fastapi import HTTPException, status

from customer_mgmt.core.exceptions import (
    ConstraintViolationError,
    DataAccessError,
    InvalidInputError,
    NotFoundError,
    TransientStoreError,
)

_STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConstraintViolationError, status.HTTP_409_CONFLICT),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (TransientStoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def to_http_exception(exc: DataAccessError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=exc.to_detail())
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.to_detail())
