import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.crud import offer as crud_offer
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.schemas.offer import OfferRatingCreate, OfferRatingOut, OfferRatingSummary, OfferWithBusinessOut

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/offers",
    tags=["Offers"],
)

@router.get("")
def get_offers(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        offers = crud_offer.get_offers(db)
        return ResponseHandler.success(
            data=[OfferWithBusinessOut.model_validate(o).model_dump(mode="json") for o in offers],
            message=translator.t("offers_retrieved", lang),
        )
    except Exception as e:
        logger.exception("Listing offers failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.get("/active")
def get_active_offers(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        offers = crud_offer.get_active_offers(db)
        return ResponseHandler.success(
            data=[OfferWithBusinessOut.model_validate(o).model_dump(mode="json") for o in offers],
            message=translator.t("offers_retrieved", lang),
        )
    except Exception as e:
        logger.exception("Listing active offers failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

# Offer Ratings
@router.get("/{offer_id}/ratings")
def get_offer_ratings(offer_id: int, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        if not crud_offer.get_offer_by_id(db, offer_id):
            return ResponseHandler.not_found(message=translator.t("offer_not_found", lang))

        ratings = crud_offer.get_offer_ratings(db, offer_id)
        summary = OfferRatingSummary(
            ratings=[OfferRatingOut.model_validate(r) for r in ratings],
            **crud_offer.get_offer_average_rating(db, offer_id),
        )
        return ResponseHandler.success(data=summary.model_dump(mode="json"))
    except Exception as e:
        logger.exception("Listing ratings for offer %s failed", offer_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.post("/{offer_id}/ratings")
def create_offer_rating(offer_id: int, payload: OfferRatingCreate, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        if not crud_offer.get_offer_by_id(db, offer_id):
            return ResponseHandler.not_found(message=translator.t("offer_not_found", lang))

        rating = crud_offer.create_offer_rating(db, offer_id, payload)
        return ResponseHandler.created(
            data=OfferRatingOut.model_validate(rating).model_dump(mode="json"),
            message=translator.t("rating_created", lang),
        )
    except Exception as e:
        logger.exception("Rating offer %s failed", offer_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
