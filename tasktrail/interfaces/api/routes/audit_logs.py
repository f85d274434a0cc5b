"""Routes for reading the caller's audit trail."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tasktrail.application.use_cases.audit_logs import (
    list_audit_logs as list_audit_logs_uc,
)
from tasktrail.domain.entities import AuditAction, AuditLog, User
from tasktrail.infrastructure.database import get_db
from tasktrail.interfaces.api.dependencies import get_current_user
from tasktrail.interfaces.api.schemas import AuditLogRead

router = APIRouter(prefix="/api/audit-logs", tags=["audit_logs"])


def _audit_log_to_read_model(entry: AuditLog) -> AuditLogRead:
    return AuditLogRead.model_validate(entry)


@router.get("", response_model=list[AuditLogRead])
def list_audit_logs(
    action: AuditAction | None = Query(default=None, description="Only entries of this action"),
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[AuditLogRead]:
    """Return the caller's audit entries, most recent first."""

    entries = list_audit_logs_uc(
        db,
        user_id=current_user.id,
        action=action,
        limit=limit,
        offset=offset,
    )
    return [_audit_log_to_read_model(entry) for entry in entries]


__all__ = ["router"]
