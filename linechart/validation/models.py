from enum import Enum
from typing import Optional
from pydantic import BaseModel

from linechart.models import ChartRequest


class FailureKind(str, Enum):
    """Which validation gate rejected the request"""

    INVALID_JSON = "InvalidJson"
    MISSING_KEY = "MissingKey"
    TYPE_MISMATCH = "TypeMismatch"
    EMPTY_ARRAY = "EmptyArray"
    TOO_MANY_ARRAYS = "TooManyArrays"
    MISSING_SUBOBJECTS = "MissingSubobjects"
    EMPTY_CAPTION = "EmptyCaption"

    @property
    def category(self) -> str:
        """Error taxonomy bucket used in logs"""
        if self is FailureKind.INVALID_JSON:
            return "MalformedInput"
        if self is FailureKind.EMPTY_CAPTION:
            return "SemanticViolation"
        return "SchemaViolation"


class ValidationFailure(BaseModel):
    """The first violation found, with the message returned to the caller"""

    kind: FailureKind
    message: str
    key: Optional[str] = None


class ValidationResult(BaseModel):
    """Either a validated request or exactly one failure"""

    request: Optional[ChartRequest] = None
    failure: Optional[ValidationFailure] = None

    @property
    def is_valid(self) -> bool:
        return self.failure is None

    @classmethod
    def ok(cls, request: ChartRequest) -> "ValidationResult":
        return cls(request=request)

    @classmethod
    def fail(cls, kind: FailureKind, message: str, key: Optional[str] = None) -> "ValidationResult":
        return cls(failure=ValidationFailure(kind=kind, message=message, key=key))
