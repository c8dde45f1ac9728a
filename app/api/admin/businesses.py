import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_admin
from app.crud import activity_log as crud_activity
from app.crud import business as crud_business
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.models import AdminUser
from app.models.enums import ActivityAction
from app.schemas.business import BusinessCreate, BusinessUpdate

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/admin/businesses",
    tags=["Admin Businesses"],
    dependencies=[Depends(get_current_admin)]
)

def _business_payload(db: Session, business_id: int) -> dict:
    return crud_business.get_business(db, business_id, include_expired=True).model_dump(mode="json")

@router.get("")
def list_businesses(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        # Admins also see listings whose subscription has run out
        businesses = crud_business.get_businesses(db, include_expired=True)
        return ResponseHandler.success(data=[b.model_dump(mode="json") for b in businesses])
    except Exception as e:
        logger.exception("Listing businesses failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.post("")
def create_business(
    payload: BusinessCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        business = crud_business.create_business(db, payload)
        crud_activity.log_action(db, current_admin.username, ActivityAction.CREATE.value, "business", business.id, business.name)
        return ResponseHandler.created(
            data=_business_payload(db, business.id),
            message=translator.t("business_created", lang),
        )
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Creating business failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.put("/{business_id}")
def update_business(
    business_id: int,
    payload: BusinessUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        business = crud_business.get_business_by_id(db, business_id)
        if not business:
            return ResponseHandler.not_found(message=translator.t("business_not_found", lang))

        updated = crud_business.update_business(db, business, payload)
        crud_activity.log_action(
            db, current_admin.username, ActivityAction.UPDATE.value, "business", updated.id, updated.name,
            details=",".join(sorted(payload.model_dump(exclude_unset=True))),
        )
        return ResponseHandler.success(
            data=_business_payload(db, updated.id),
            message=translator.t("business_updated", lang),
        )
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Updating business %s failed", business_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.delete("/{business_id}")
def delete_business(
    business_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        business = crud_business.get_business_by_id(db, business_id)
        if not business:
            return ResponseHandler.not_found(message=translator.t("business_not_found", lang))

        name = business.name
        crud_business.delete_business(db, business)
        crud_activity.log_action(db, current_admin.username, ActivityAction.DELETE.value, "business", business_id, name)
        return ResponseHandler.success(data={"success": True}, message=translator.t("business_deleted", lang))
    except Exception as e:
        logger.exception("Deleting business %s failed", business_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
