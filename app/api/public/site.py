import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.crud import setting as crud_setting
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api",
    tags=["Site"],
)

@router.get("/settings")
def get_settings(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        return ResponseHandler.success(data=crud_setting.get_app_settings(db))
    except Exception as e:
        logger.exception("Reading settings failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

# Visitor Counter
@router.post("/visitors/increment")
def increment_visitors(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        count = crud_setting.increment_visitor_count(db)
        return ResponseHandler.success(data={"count": count})
    except Exception as e:
        db.rollback()
        logger.exception("Updating visitor count failed")
        return ResponseHandler.internal_error(message=translator.t("visitor_count_failed", lang), error=str(e))

@router.get("/visitors/count")
def get_visitors(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        return ResponseHandler.success(data={"count": crud_setting.get_visitor_count(db)})
    except Exception as e:
        logger.exception("Reading visitor count failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
