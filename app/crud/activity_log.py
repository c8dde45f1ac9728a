import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import ActivityLog
from app.schemas.activity_log import ActivityLogCreate

logger = logging.getLogger(__name__)


def create_activity_log(db: Session, data: ActivityLogCreate, admin_username: Optional[str]) -> ActivityLog:
    log = ActivityLog(**data.model_dump(), admin_username=admin_username or "unknown")
    db.add(log)
    db.commit()
    db.refresh(log)
    return log

def get_activity_logs(db: Session, limit: int = 100) -> List[ActivityLog]:
    return (
        db.query(ActivityLog)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .limit(limit)
        .all()
    )

def log_action(
    db: Session,
    admin_username: str,
    action: str,
    entity_type: str,
    entity_id: Optional[int] = None,
    entity_name: Optional[str] = None,
    details: Optional[str] = None,
) -> None:
    """Record an admin action; a failure here never fails the request."""
    try:
        create_activity_log(
            db,
            ActivityLogCreate(
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                entity_name=entity_name,
                details=details,
            ),
            admin_username,
        )
    except Exception:
        db.rollback()
        logger.exception("Failed to write activity log for %s %s", action, entity_type)
