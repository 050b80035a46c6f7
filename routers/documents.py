from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from handler import InvocationContext, InvocationRequest, LookupResponse, handle

router = APIRouter(tags=["documents"])


async def _parse_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        # empty or unparseable payloads are reported as a missing body
        return None


def _render(res: LookupResponse) -> Response:
    if res.body is None:
        return Response(status_code=res.status)
    if isinstance(res.body, str):
        return PlainTextResponse(res.body, status_code=res.status)
    return JSONResponse(res.body, status_code=res.status)


@router.post("/document")
async def lookup_document(request: Request):
    """
    200: stored document JSON
    400: malformed request (text message)
    404/500: not found / Cosmos or other errors (text message)
    """
    context = InvocationContext()
    body = await _parse_body(request)

    # the Cosmos SDK is synchronous; keep it off the event loop
    await run_in_threadpool(handle, context, InvocationRequest(body=body))

    if context.res is None:
        return PlainTextResponse("Internal Server Error: no response produced", status_code=500)
    return _render(context.res)
