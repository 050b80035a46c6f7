"""
Document lookup handler.

The host calls `handle(context, request)` once per HTTP request and reads
`context.res` after it returns. Validation runs in one of two modes:

- strict (default): the first validation failure becomes the response and
  no Cosmos client is ever built.
- legacy: every failed check writes a 400 but execution carries on to the
  read, so the response that survives is whatever was written last. Kept
  for callers that depend on the pass-through behaviour.
"""
from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional

from config import Settings, get_settings
from documents_service import DocumentNotFound, read_document
from validation import (
    MISSING_BODY,
    MISSING_CREDENTIALS,
    REQUIRED_OPTIONS,
    Invalid,
    check_option,
    validate_request,
)

logger = logging.getLogger(__name__)


@dataclass
class LookupResponse:
    status: int
    body: Any = None


@dataclass
class InvocationRequest:
    body: Any = None


@dataclass
class InvocationContext:
    """Mutable per-invocation context; `res` is the only output channel."""

    invocation_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    history: List[LookupResponse] = field(default_factory=list)

    @property
    def res(self) -> Optional[LookupResponse]:
        return self.history[-1] if self.history else None

    @res.setter
    def res(self, value: LookupResponse) -> None:
        self.history.append(value)


def _internal_error(error: Exception) -> LookupResponse:
    return LookupResponse(500, f"Internal Server Error: {error}")


def _not_found(error: Exception, status: int) -> LookupResponse:
    if status == 404:
        return LookupResponse(404, f"Not Found: {error}")
    return _internal_error(error)


def _lookup(
    context: InvocationContext,
    settings: Settings,
    endpoint: Any,
    key: Any,
    database: Any,
    container: Any,
    document_id: Any,
    partition_key: Any,
) -> None:
    try:
        document = read_document(endpoint, key, database, container, document_id, partition_key)
    except DocumentNotFound as e:
        logger.info(
            "[%s] document %s not found in %s/%s",
            context.invocation_id, document_id, database, container,
        )
        context.res = _not_found(e, settings.not_found_status)
        return
    except Exception as e:
        logger.exception("[%s] document lookup failed", context.invocation_id)
        context.res = _internal_error(e)
        return

    logger.info("[%s] document %s retrieved", context.invocation_id, document_id)
    context.res = LookupResponse(200, document)


def _handle_strict(context: InvocationContext, request: Any, settings: Settings) -> None:
    body = getattr(request, "body", None)
    result = validate_request(body)
    if isinstance(result, Invalid):
        logger.info("[%s] rejected: %s", context.invocation_id, result.reason)
        context.res = LookupResponse(400, result.reason)
        return

    lookup = result.request
    opts = lookup.options
    _lookup(
        context, settings,
        lookup.endpoint, lookup.key,
        opts.database, opts.container, opts.document_id, opts.partition_key,
    )


def _handle_legacy(context: InvocationContext, request: Any, settings: Settings) -> None:
    body = getattr(request, "body", None)
    if not isinstance(body, Mapping):
        context.res = LookupResponse(400, MISSING_BODY)

    # fails on a missing body; the outer boundary turns that into a 500
    endpoint, key = body.get("endpoint"), body.get("key")
    if not endpoint or not key:
        context.res = LookupResponse(400, MISSING_CREDENTIALS)

    options = body.get("options") or {}
    for name in REQUIRED_OPTIONS:
        problem = check_option(options, name)
        if problem:
            context.res = LookupResponse(400, problem)

    _lookup(
        context, settings,
        endpoint, key,
        options.get("database"), options.get("container"),
        options.get("documentId"), options.get("partitionKey"),
    )


def handle(context: InvocationContext, request: Any, settings: Optional[Settings] = None) -> None:
    """
    Validate a lookup request, point-read the document and set `context.res`.

    Never raises: anything that escapes validation or lookup is logged and
    reported as a 500.
    """
    settings = settings or get_settings()
    try:
        if settings.is_legacy_validation:
            _handle_legacy(context, request, settings)
        else:
            _handle_strict(context, request, settings)
    except Exception as e:
        logger.exception("[%s] unhandled error", context.invocation_id)
        context.res = _internal_error(e)
