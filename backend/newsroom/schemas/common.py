import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

DESCRIPTION_MIN_LENGTH = 1
DESCRIPTION_MAX_LENGTH = 2000
NO_CODE_MESSAGE = (
    "Description must not contain any programming code or code-like syntax."
)

# Heuristic only: a match anywhere rejects the text, so ordinary prose that
# happens to use a keyword ("go", "new", "print") is rejected as well.
CODE_PATTERNS = [
    # Code block syntax
    re.compile(r"```[\s\S]*?```"),  # fenced code block
    re.compile(r"`[^`]*`"),  # inline code
    # HTML / XML / JSX
    re.compile(r"<[^>]+>"),
    re.compile(r"</?[A-Za-z]+\s*[^>]*>"),
    # Comments
    re.compile(r"//.*$", re.MULTILINE),  # JS, Java, C++ line comment
    re.compile(r"/\*[\s\S]*?\*/"),  # block comment
    re.compile(r"^#.*$", re.MULTILINE),  # Python, shell
    re.compile(r"-- .*$", re.MULTILINE),  # SQL
    # Code punctuation
    re.compile(r"[{}();=<>]"),
    # Language keywords
    re.compile(
        r"\b(function|return|var|let|const|class|import|export|console|await|async)\b",
        re.IGNORECASE,
    ),  # JavaScript
    re.compile(
        r"\b(def|print|self|None|True|False|import|global)\b", re.IGNORECASE
    ),  # Python
    re.compile(
        r"\b(public|private|protected|static|void|int|new|class|extends|implements)\b",
        re.IGNORECASE,
    ),  # Java / C#
    re.compile(r"\b#include\b|\bprintf\b|\bscanf\b|\bmain\s*\(", re.IGNORECASE),  # C / C++
    re.compile(r"\bpackage\b|\bfunc\b|\bgo\b|\bdefer\b|\binterface\b", re.IGNORECASE),  # Go
    re.compile(r"\bfn\b|\blet\b|\bmut\b|\bimpl\b|\btrait\b", re.IGNORECASE),  # Rust
    re.compile(r"\becho\b|\b<?php\b|\bendif\b|\bforeach\b|\bstrlen\b", re.IGNORECASE),  # PHP
    re.compile(
        r"\bSELECT\b|\bINSERT\b|\bUPDATE\b|\bDELETE\b|\bWHERE\b|\bJOIN\b", re.IGNORECASE
    ),  # SQL
    re.compile(r"\b#!"),  # shebang
]


def looks_like_code(text: str) -> bool:
    return any(pattern.search(text) for pattern in CODE_PATTERNS)


def check_no_code_description(value: str) -> str:
    """Length-check ``value`` and reject anything matching a code pattern."""
    if len(value) < DESCRIPTION_MIN_LENGTH:
        raise PydanticCustomError("description_required", "Description required")
    if len(value) > DESCRIPTION_MAX_LENGTH:
        raise PydanticCustomError("description_too_long", "Too long")
    if looks_like_code(value):
        raise PydanticCustomError("description_has_code", NO_CODE_MESSAGE)
    return value


NoCodeDescription = Annotated[str, AfterValidator(check_no_code_description)]


class CamelModel(BaseModel):
    """Base for API shapes: snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationMeta(CamelModel):
    total: int
    page: int
    per_page: int
    total_pages: int
