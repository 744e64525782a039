"""JSON-lines stdio server dispatching to registered operations.

Each input line is one request object::

    {"id": 1, "op": "align.run", "input": {"lines": ["a,b"], "delimiter": ","}}

and produces one response line, ``{"id": ..., "ok": true, "result": ...}``
or ``{"id": ..., "ok": false, "error": "..."}``. The server keeps one
`TabularizeSession` for its lifetime: an `align.run` request without a
delimiter or format reuses the last ones that aligned successfully.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import structlog

from tabalign.lib.errors import ConfigurationInvariantViolation, TabalignError
from tabalign.lib.ops.align import AlignInput
from tabalign.lib.ops.codec import coerce_input_payload
from tabalign.lib.ops.registry import get_operation
from tabalign.lib.serialization import to_jsonable
from tabalign.lib.session import TabularizeSession

if TYPE_CHECKING:
    from typing import TextIO

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ServerStats:
    handled: int = 0
    failed: int = 0


def _recall_align_inputs(session: TabularizeSession, data: dict[str, object]) -> None:
    recalled = session.recall()
    if not data.get("delimiter") and recalled.delimiter is not None:
        data["delimiter"] = recalled.delimiter
    if data.get("format_spec") is None and recalled.format_spec is not None:
        data["format_spec"] = recalled.format_spec


def _dispatch(session: TabularizeSession, request: object) -> object:
    if not isinstance(request, dict):
        raise ValueError("Request must be a JSON object.")
    typed_request = cast("dict[str, object]", request)
    op_name = typed_request.get("op")
    if not isinstance(op_name, str):
        raise ValueError("Request is missing 'op'.")
    try:
        op = get_operation(op_name)
    except KeyError:
        raise ValueError(f"Unknown operation '{op_name}'.") from None

    raw_input = typed_request.get("input")
    if raw_input is not None and not isinstance(raw_input, dict):
        raise ValueError("Request 'input' must be an object.")
    data = dict(cast("dict[str, object]", raw_input or {}))
    if op.input_type is AlignInput:
        _recall_align_inputs(session, data)

    payload = coerce_input_payload(op.input_type, data)
    result = op.handler(payload)
    if isinstance(payload, AlignInput):
        session.remember(delimiter=payload.delimiter, format_spec=payload.format_spec)
    return to_jsonable(result)


def handle_request(session: TabularizeSession, line: str) -> dict[str, Any]:
    """Handle one request line and build its response object."""

    request_id: object = None
    try:
        request = json.loads(line)
        if isinstance(request, dict):
            request_id = cast("dict[str, object]", request).get("id")
        result = _dispatch(session, request)
    except ConfigurationInvariantViolation:
        raise
    except (TabalignError, ValueError, TypeError) as exc:
        logger.info("server.request_failed", id=request_id, error=str(exc))
        return {"id": request_id, "ok": False, "error": str(exc) or exc.__class__.__name__}
    return {"id": request_id, "ok": True, "result": result}


def serve(
    stdin: TextIO,
    stdout: TextIO,
    session: TabularizeSession | None = None,
) -> ServerStats:
    """Answer requests from `stdin` until EOF."""

    active = session if session is not None else TabularizeSession()
    handled = 0
    failed = 0
    for line in stdin:
        if not line.strip():
            continue
        response = handle_request(active, line)
        handled += 1
        if not response["ok"]:
            failed += 1
        stdout.write(json.dumps(response, sort_keys=True) + "\n")
        stdout.flush()
    logger.debug("server.stopped", handled=handled, failed=failed)
    return ServerStats(handled=handled, failed=failed)


def run_server() -> None:
    """Serve JSON-lines requests on stdio."""

    serve(sys.stdin, sys.stdout)
