import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_admin
from app.core.rate_limit import login_tracker
from app.core.security import create_access_token
from app.crud import activity_log as crud_activity
from app.crud import admin as crud_admin
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_client_ip, get_lang_from_request
from app.models import AdminUser
from app.models.enums import ActivityAction
from app.schemas.admin import AdminLogin, AdminOut

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin Authentication"]
)

def _lockout_response(locked_until: float, lang: str, message_key: str):
    return ResponseHandler.too_many_requests(
        message=translator.t(message_key, lang, minutes=login_tracker.minutes_until(locked_until)),
        data={"locked_until": datetime.fromtimestamp(locked_until, tz=timezone.utc).isoformat()},
    )

@router.post("/login")
def login_admin(payload: AdminLogin, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    client_ip = get_client_ip(request)
    try:
        locked_until = login_tracker.check(client_ip)
        if locked_until:
            return _lockout_response(locked_until, lang, "login_locked")

        admin = crud_admin.authenticate_admin(db, payload.username, payload.password)
        if not admin:
            result = login_tracker.register_failure(client_ip)
            logger.warning("Failed admin login for %r from %s", payload.username, client_ip)
            if result.locked:
                return _lockout_response(result.locked_until, lang, "login_locked_now")
            return ResponseHandler.unauthorized(
                message=translator.t("invalid_credentials", lang, remaining=result.remaining_attempts),
                data={"remaining_attempts": result.remaining_attempts},
            )

        login_tracker.reset(client_ip)
        crud_admin.update_last_login(db, admin)
        crud_activity.log_action(db, admin.username, ActivityAction.LOGIN.value, "admin", admin.id, admin.username)

        access_token = create_access_token(admin.id)
        return ResponseHandler.success(
            data={"access_token": access_token, "token_type": "bearer", "username": admin.username},
            message=translator.t("login_success", lang),
        )
    except Exception as e:
        logger.exception("Admin login failed")
        return ResponseHandler.internal_error(message=translator.t("login_failed", lang), error=str(e))

@router.post("/logout")
def logout_admin(request: Request, current_admin: AdminUser = Depends(get_current_admin)):
    # Tokens are stateless; the client drops its copy.
    lang = get_lang_from_request(request)
    return ResponseHandler.success(data={"success": True}, message=translator.t("logout_success", lang))

@router.get("/me")
def get_me(current_admin: AdminUser = Depends(get_current_admin)):
    return ResponseHandler.success(data=AdminOut.model_validate(current_admin))
