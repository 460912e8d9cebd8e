from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ResultStatus(Enum):
    SUCCESS = "Success"
    CREATED = "Created"
    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    INTERNAL_ERROR = "InternalError"


_HTTP_BY_STATUS = {
    ResultStatus.SUCCESS: 200,
    ResultStatus.CREATED: 201,
    ResultStatus.BAD_REQUEST: 400,
    ResultStatus.UNAUTHORIZED: 401,
    ResultStatus.FORBIDDEN: 403,
    ResultStatus.NOT_FOUND: 404,
    ResultStatus.INTERNAL_ERROR: 500,
}


@dataclass
class FieldError:
    field: str | None
    message: str

    def to_dict(self):
        return {"message": self.message, "field": self.field}


@dataclass
class Result:
    """Outcome of a service call: a status, an optional payload and field errors."""

    status: ResultStatus
    data: Any = None
    extensions: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status in (ResultStatus.SUCCESS, ResultStatus.CREATED)

    @classmethod
    def success(cls, data=None):
        return cls(ResultStatus.SUCCESS, data)

    @classmethod
    def not_found(cls):
        return cls(ResultStatus.NOT_FOUND)

    @classmethod
    def internal_error(cls):
        return cls(ResultStatus.INTERNAL_ERROR)

    @classmethod
    def bad_request(cls, *errors: FieldError):
        return cls(ResultStatus.BAD_REQUEST, extensions=list(errors))


def result_status_to_http(status: ResultStatus) -> int:
    return _HTTP_BY_STATUS[status]


def errors_payload(errors):
    return {"errorsMessages": [error.to_dict() for error in errors]}
