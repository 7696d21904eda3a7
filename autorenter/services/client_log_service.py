"""Client Log Service — forwards validated client log records to server logging.

Invariants:
    - Records pass the validation gate first; a rejected record is never logged
    - The client's level picks the stdlib level, so records obey log_level filtering
    - Returns SUCCESS or a BAD_REQUEST Result; no IO besides logging
"""

import logging

from autorenter.core.domain_types import Operation, ResultCode
from autorenter.core.repository_protocols import LogEntryLike
from autorenter.core.result import Result
from autorenter.core.validate_entities import LogEntryValidator, run_validation_gate

logger = logging.getLogger(__name__)


class ClientLogService:
    """Accepts log records from client applications."""

    def __init__(self, validator: LogEntryValidator | None = None):
        self.validator = validator or LogEntryValidator()

    def record(self, entry: LogEntryLike) -> Result:
        rejected = run_validation_gate(self.validator, entry, Operation.INSERT)
        if rejected is not None:
            logger.info(f"Client log entry rejected: {list(rejected.errors)}")
            return rejected

        level = getattr(logging, entry.level.strip().upper())
        logger.log(
            level, entry.message,
            extra={"entity": "LogEntry", "source": entry.source or "client"},
        )
        return Result(ResultCode.SUCCESS)
