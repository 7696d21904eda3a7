"""Client Log Route — POST /api/v1/log.

Invariants:
    - No database session: records go to server logging only
    - 202 on accept, 400 with validation details on a rejected record
"""

from fastapi import APIRouter, Depends, Response

from autorenter.api.controllers import LogController
from autorenter.api.respond import ResultResponder
from autorenter.schemas.log_entry import LogEntryModel
from autorenter.services.client_log_service import ClientLogService

router = APIRouter(prefix="/api/v1/log", tags=["log"])


def get_log_controller() -> LogController:
    return LogController(ClientLogService(), ResultResponder())


@router.post("")
async def create_log_entry(
    body: LogEntryModel,
    controller: LogController = Depends(get_log_controller),
) -> Response:
    """Record a client log entry."""
    return await controller.post(body)
