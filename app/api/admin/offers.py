import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_admin
from app.crud import activity_log as crud_activity
from app.crud import offer as crud_offer
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.models import AdminUser
from app.models.enums import ActivityAction
from app.schemas.offer import OfferCreate, OfferOut, OfferUpdate, OfferWithBusinessOut

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/admin/offers",
    tags=["Admin Offers"],
    dependencies=[Depends(get_current_admin)]
)

@router.get("")
def list_offers(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        offers = crud_offer.get_offers(db)
        return ResponseHandler.success(
            data=[OfferWithBusinessOut.model_validate(o).model_dump(mode="json") for o in offers]
        )
    except Exception as e:
        logger.exception("Listing offers failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.post("")
def create_offer(
    payload: OfferCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        offer = crud_offer.create_offer(db, payload)
        crud_activity.log_action(db, current_admin.username, ActivityAction.CREATE.value, "offer", offer.id, offer.title)
        return ResponseHandler.created(
            data=OfferOut.model_validate(offer).model_dump(mode="json"),
            message=translator.t("offer_created", lang),
        )
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Creating offer failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.put("/{offer_id}")
def update_offer(
    offer_id: int,
    payload: OfferUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        offer = crud_offer.get_offer_by_id(db, offer_id)
        if not offer:
            return ResponseHandler.not_found(message=translator.t("offer_not_found", lang))

        updated = crud_offer.update_offer(db, offer, payload)
        crud_activity.log_action(db, current_admin.username, ActivityAction.UPDATE.value, "offer", updated.id, updated.title)
        return ResponseHandler.success(
            data=OfferOut.model_validate(updated).model_dump(mode="json"),
            message=translator.t("offer_updated", lang),
        )
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Updating offer %s failed", offer_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.delete("/{offer_id}")
def delete_offer(
    offer_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        offer = crud_offer.get_offer_by_id(db, offer_id)
        if not offer:
            return ResponseHandler.not_found(message=translator.t("offer_not_found", lang))

        title = offer.title
        crud_offer.delete_offer(db, offer)
        crud_activity.log_action(db, current_admin.username, ActivityAction.DELETE.value, "offer", offer_id, title)
        return ResponseHandler.success(data={"success": True}, message=translator.t("offer_deleted", lang))
    except Exception as e:
        logger.exception("Deleting offer %s failed", offer_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
