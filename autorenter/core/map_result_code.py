"""Result-Code Mapping — total, pure translation of ResultCode to HTTP status.

Invariants:
    - Every (ResultCode, ResponseKind) pair maps to exactly one status
    - Same input always yields the same status, regardless of entity type or payload
    - FAILED and UNKNOWN both map to 500

Design Decisions:
    - match + assert_never: adding a ResultCode member without a branch is a
      type-checker error, and an unreachable value raises at runtime
"""

from typing import assert_never

from autorenter.core.domain_types import ResponseKind, ResultCode

_SUCCESS_STATUS: dict[ResponseKind, int] = {
    ResponseKind.READ: 200,
    ResponseKind.CREATE: 201,
    ResponseKind.UPDATE: 200,
    ResponseKind.DELETE: 204,
    ResponseKind.ACCEPT: 202,
}


def map_result_code(code: ResultCode, kind: ResponseKind = ResponseKind.READ) -> int:
    """Translate a ResultCode into the HTTP status for the given action kind."""
    match code:
        case ResultCode.SUCCESS:
            return _SUCCESS_STATUS[kind]
        case ResultCode.NOT_FOUND:
            return 404
        case ResultCode.BAD_REQUEST:
            return 400
        case ResultCode.CONFLICT:
            return 409
        case ResultCode.FAILED | ResultCode.UNKNOWN:
            return 500
        case _:
            assert_never(code)

