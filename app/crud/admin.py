from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.core.security import get_password_hash, verify_password
from app.models import AdminUser


def get_admin_by_username(db: Session, username: str) -> Optional[AdminUser]:
    return db.query(AdminUser).filter(AdminUser.username == username).first()

def create_admin(db: Session, username: str, password: str) -> AdminUser:
    admin = AdminUser(username=username, password_hash=get_password_hash(password))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin

def authenticate_admin(db: Session, username: str, password: str) -> Optional[AdminUser]:
    admin = get_admin_by_username(db, username)
    if not admin or not verify_password(password, admin.password_hash):
        return None
    return admin

def update_last_login(db: Session, admin: AdminUser) -> None:
    admin.last_login_at = datetime.now(timezone.utc)
    db.commit()
