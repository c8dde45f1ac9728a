import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_admin
from app.crud import activity_log as crud_activity
from app.crud import review as crud_review
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.models import AdminUser
from app.models.enums import ActivityAction

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/admin/reviews",
    tags=["Admin Reviews"],
    dependencies=[Depends(get_current_admin)]
)

@router.get("")
def list_reviews(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        reviews = crud_review.get_all_reviews_with_business(db)
        return ResponseHandler.success(data=[r.model_dump(mode="json") for r in reviews])
    except Exception as e:
        logger.exception("Listing reviews failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.delete("/{review_id}")
def delete_review(
    review_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        review = crud_review.get_review_by_id(db, review_id)
        if not review:
            return ResponseHandler.not_found(message=translator.t("review_not_found", lang))

        visitor = review.visitor_name
        crud_review.delete_review(db, review)
        crud_activity.log_action(db, current_admin.username, ActivityAction.DELETE.value, "review", review_id, visitor)
        return ResponseHandler.success(data={"success": True}, message=translator.t("review_deleted", lang))
    except Exception as e:
        logger.exception("Deleting review %s failed", review_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
