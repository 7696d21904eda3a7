"""Result Responder — turns a Result into a Starlette response via the pure status map.

Invariants:
    - Status codes come only from core.map_result_code (never hardcoded per route)
    - Bodies only on success (read/create/update) and on BAD_REQUEST with messages
    - Every other outcome is an empty body with the mapped status

Design Decisions:
    - Separate class injected into controllers: controllers stay framework-light
      and tests can assert on the exact Response objects produced
"""

from typing import Any, Callable
from uuid import UUID

from fastapi import Response
from fastapi.responses import JSONResponse

from autorenter.core.domain_types import ResponseKind, ResultCode
from autorenter.core.errors import build_validation_error
from autorenter.core.map_result_code import map_result_code
from autorenter.core.result import Result


class ResultResponder:
    """Builds HTTP responses for controller actions."""

    def read(
        self, result: Result, field: str,
        project: Callable[[Any], dict],
    ) -> Response:
        """200 with the payload under `field`; lists get an x-total-count header."""
        if not result.is_success:
            return self.failure(result)
        headers = {}
        if isinstance(result.value, list):
            body = [project(item) for item in result.value]
            headers["x-total-count"] = str(len(body))
        else:
            body = project(result.value)
        return JSONResponse(
            status_code=map_result_code(result.code, ResponseKind.READ),
            content={field: body},
            headers=headers,
        )

    def created(self, result: Result[UUID], location: Callable[[UUID], str]) -> Response:
        """201 with a Location header and the new identifier as body."""
        if not result.is_success:
            return self.failure(result)
        return JSONResponse(
            status_code=map_result_code(result.code, ResponseKind.CREATE),
            content=str(result.value),
            headers={"Location": location(result.value)},
        )

    def updated(self, result: Result[UUID]) -> Response:
        if not result.is_success:
            return self.failure(result)
        return JSONResponse(
            status_code=map_result_code(result.code, ResponseKind.UPDATE),
            content=str(result.value),
        )

    def accepted(self, result: Result) -> Response:
        """202 with an empty body; the request was handled without creating a resource."""
        if not result.is_success:
            return self.failure(result)
        return Response(status_code=map_result_code(result.code, ResponseKind.ACCEPT))

    def deleted(self, code: ResultCode) -> Response:
        return Response(status_code=map_result_code(code, ResponseKind.DELETE))

    def failure(self, result: Result) -> Response:
        status_code = map_result_code(result.code)
        if result.code is ResultCode.BAD_REQUEST and result.errors:
            return JSONResponse(
                status_code=status_code,
                content=build_validation_error(list(result.errors)),
            )
        return Response(status_code=status_code)

    def invalid_identifier(self, reason: str) -> Response:
        """400 for a malformed or empty path identifier (request-shape check)."""
        return Response(
            status_code=map_result_code(ResultCode.BAD_REQUEST),
            headers={"x-status-reason": reason},
        )
