"""Use case for removing a process during administrative cleanup."""

import logging

from sqlalchemy.orm import Session

from offboarding.application.use_cases.audit_logs import record_audit_event
from offboarding.domain.exceptions import NotFoundError
from offboarding.infrastructure.repositories import ProcessRepository

logger = logging.getLogger(__name__)


def delete_process(session: Session, process_id: int, *, actor: str | None = None) -> None:
    repository = ProcessRepository(session)
    process = repository.get(process_id)
    if process is None:
        raise NotFoundError("Process not found")

    repository.delete(process_id)
    logger.info("Deleted process %s (%s)", process_id, process.process_name)
    record_audit_event(
        session,
        entity_type="process",
        entity_id=process_id,
        action="deleted",
        actor=actor,
        old_values={"process_name": process.process_name, "status": process.status},
    )
