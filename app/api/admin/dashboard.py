import logging
from typing import Dict

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_admin
from app.crud import activity_log as crud_activity
from app.crud import setting as crud_setting
from app.crud import statistics as crud_statistics
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.models import AdminUser
from app.models.enums import ActivityAction
from app.schemas.activity_log import ActivityLogCreate, ActivityLogOut

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin Dashboard"],
    dependencies=[Depends(get_current_admin)]
)

# Settings
@router.get("/settings")
def get_settings(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        return ResponseHandler.success(data=crud_setting.get_app_settings(db))
    except Exception as e:
        logger.exception("Reading settings failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.put("/settings")
def update_settings(
    payload: Dict[str, str],
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        crud_setting.set_app_settings(db, payload)
        crud_activity.log_action(
            db, current_admin.username, ActivityAction.UPDATE.value, "settings",
            details=",".join(sorted(payload)),
        )
        return ResponseHandler.success(data={"success": True}, message=translator.t("settings_updated", lang))
    except Exception as e:
        logger.exception("Updating settings failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

# Activity Logs
@router.get("/activity-logs")
def get_activity_logs(
    request: Request,
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    lang = get_lang_from_request(request)
    try:
        logs = crud_activity.get_activity_logs(db, limit=limit)
        return ResponseHandler.success(data=[ActivityLogOut.model_validate(l).model_dump(mode="json") for l in logs])
    except Exception as e:
        logger.exception("Listing activity logs failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.post("/activity-logs")
def create_activity_log(
    payload: ActivityLogCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        log = crud_activity.create_activity_log(db, payload, current_admin.username)
        return ResponseHandler.created(data=ActivityLogOut.model_validate(log).model_dump(mode="json"))
    except Exception as e:
        logger.exception("Creating activity log failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

# Statistics
@router.get("/statistics")
def get_statistics(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        return ResponseHandler.success(data=crud_statistics.get_statistics(db))
    except Exception as e:
        logger.exception("Computing statistics failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
