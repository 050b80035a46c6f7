from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_OPTIONS = ("database", "container", "documentId")

MISSING_BODY = "Bad Request: Missing request body"
MISSING_CREDENTIALS = 'Bad Request: Missing required parameters "endpoint" and/or "key"'
CREDENTIALS_NOT_STRINGS = 'Bad Request: Parameters "endpoint" and "key" must be strings'


class LookupOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    database: str
    container: str
    document_id: str = Field(..., alias="documentId")
    # scalar or hierarchical value, forwarded to the SDK untouched
    partition_key: Optional[Any] = Field(None, alias="partitionKey")


class LookupRequest(BaseModel):
    endpoint: str
    key: str
    options: LookupOptions


@dataclass(frozen=True)
class Valid:
    request: LookupRequest


@dataclass(frozen=True)
class Invalid:
    reason: str


ValidationResult = Union[Valid, Invalid]


def check_envelope(body: Any) -> Optional[str]:
    """Return an error message if the body or its credentials are missing."""
    if not isinstance(body, Mapping):
        return MISSING_BODY
    if not body.get("endpoint") or not body.get("key"):
        return MISSING_CREDENTIALS
    return None


def check_option(options: Any, field: str) -> Optional[str]:
    """
    Validate one required option.

    Checks run in order: present, then string. An empty string counts as
    missing. Anything raised while inspecting `options` (e.g. it is not a
    mapping) is reported as its message.
    """
    try:
        value = options.get(field)
        if not value:
            return f"Bad Request: Missing required parameter: {field}"
        if not isinstance(value, str):
            return f"Bad Request: Parameter {field} must be a string"
    except Exception as e:
        return f"Bad Request: {e}."
    return None


def validate_request(body: Any) -> ValidationResult:
    """
    Validate a lookup body and stop at the first problem.

    Returns Valid(request) with typed options, or Invalid(reason) carrying the
    message that belongs in the 400 response.
    """
    problem = check_envelope(body)
    if problem:
        return Invalid(problem)

    options = body.get("options") or {}
    for field in REQUIRED_OPTIONS:
        problem = check_option(options, field)
        if problem:
            return Invalid(problem)

    if not isinstance(body["endpoint"], str) or not isinstance(body["key"], str):
        return Invalid(CREDENTIALS_NOT_STRINGS)

    request = LookupRequest(
        endpoint=body["endpoint"],
        key=body["key"],
        options=LookupOptions(
            database=options["database"],
            container=options["container"],
            document_id=options["documentId"],
            partition_key=options.get("partitionKey"),
        ),
    )
    return Valid(request)
