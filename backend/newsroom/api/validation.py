"""
Input validation for API handlers.

Each validator takes the raw request data and returns either ``Valid`` with the
parsed model or ``Invalid`` with a list of ``{"path", "message"}`` issues.
Handlers call one explicitly and pass the result to ``ensure_valid``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from newsroom.core.errors import ValidationError
from newsroom.schemas.category import CategoryCreate, CategoryUpdate
from newsroom.schemas.news import NewsCreate, NewsUpdate

ModelT = TypeVar("ModelT", bound=BaseModel)

Issue = Dict[str, str]


@dataclass(frozen=True)
class Valid(Generic[ModelT]):
    value: ModelT


@dataclass(frozen=True)
class Invalid:
    issues: List[Issue] = field(default_factory=list)


ValidationResult = Union[Valid[ModelT], Invalid]


def format_issues(errors: Iterable[Dict[str, Any]]) -> List[Issue]:
    """Flatten pydantic error dicts into ``{"path", "message"}`` pairs."""
    return [
        {
            "path": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", "Invalid value"),
        }
        for error in errors
    ]


def _validate(model: Type[ModelT], data: Any) -> ValidationResult:
    try:
        return Valid(model.model_validate(data))
    except PydanticValidationError as e:
        return Invalid(format_issues(e.errors()))


def category_create(data: Any) -> ValidationResult:
    return _validate(CategoryCreate, data)


def category_update(data: Any) -> ValidationResult:
    return _validate(CategoryUpdate, data)


def news_create(data: Any) -> ValidationResult:
    return _validate(NewsCreate, data)


def news_update(data: Any) -> ValidationResult:
    return _validate(NewsUpdate, data)


def ensure_valid(result: ValidationResult) -> Any:
    """
    Unwrap a validation result.

    Returns:
        The parsed model from a ``Valid`` result

    Raises:
        ValidationError: If the result is ``Invalid``
    """
    if isinstance(result, Invalid):
        raise ValidationError(result.issues)
    return result.value


MAX_INT = 2147483647  # Max PostgreSQL integer


def parse_positive_int(
    value: Optional[str], default: int, maximum: int = MAX_INT
) -> int:
    """
    Coerce a query-string value to an integer in ``1..maximum``.

    Anything missing, not numeric or out of range falls back to ``default``.
    """
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    if parsed < 1 or parsed > maximum:
        return default
    return parsed
