from datetime import datetime, timezone
from typing import Dict, Optional

from sqlalchemy.orm import Session

from app.models import AppSetting, VisitorCounter


def get_app_settings(db: Session) -> Dict[str, str]:
    return {s.key: s.value for s in db.query(AppSetting).order_by(AppSetting.id.asc()).all()}

def get_app_setting(db: Session, key: str) -> Optional[str]:
    setting = db.query(AppSetting).filter(AppSetting.key == key).first()
    return setting.value if setting else None

def set_app_settings(db: Session, values: Dict[str, str]) -> None:
    existing = {
        s.key: s for s in db.query(AppSetting).filter(AppSetting.key.in_(list(values))).all()
    }
    for key, value in values.items():
        setting = existing.get(key)
        if setting:
            setting.value = value
            setting.updated_at = datetime.now(timezone.utc)
        else:
            db.add(AppSetting(key=key, value=value))
    db.commit()

# Visitor counter
def get_visitor_count(db: Session) -> int:
    counter = db.query(VisitorCounter).first()
    return counter.count if counter else 0

def increment_visitor_count(db: Session) -> int:
    counter = db.query(VisitorCounter).with_for_update().first()
    if not counter:
        counter = VisitorCounter(count=0)
        db.add(counter)
    counter.count += 1
    db.commit()
    return counter.count
