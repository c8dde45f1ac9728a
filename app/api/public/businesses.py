import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.crud import business as crud_business
from app.crud import offer as crud_offer
from app.crud import review as crud_review
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.schemas.offer import OfferOut
from app.schemas.review import ReviewCreate, ReviewOut
from app.services.geo import annotate_distance

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/businesses",
    tags=["Businesses"],
)

@router.get("")
def get_businesses(
    request: Request,
    category_id: Optional[int] = None,
    city_id: Optional[int] = None,
    search: Optional[str] = None,
    min_rating: Optional[float] = Query(None, ge=0, le=5),
    user_lat: Optional[float] = Query(None, ge=-90, le=90),
    user_lng: Optional[float] = Query(None, ge=-180, le=180),
    sort_by_distance: bool = False,
    db: Session = Depends(get_db),
):
    lang = get_lang_from_request(request)
    try:
        businesses = crud_business.get_businesses(
            db,
            category_id=category_id,
            search=search,
            min_rating=min_rating,
            city_id=city_id,
        )
        if user_lat is not None and user_lng is not None:
            businesses = annotate_distance(businesses, user_lat, user_lng, sort=sort_by_distance)

        return ResponseHandler.success(
            data=[b.model_dump(mode="json") for b in businesses],
            message=translator.t("businesses_retrieved", lang),
        )
    except Exception as e:
        logger.exception("Listing businesses failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.get("/map")
def get_businesses_for_map(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        businesses = crud_business.get_businesses_with_location(db)
        return ResponseHandler.success(data=[b.model_dump(mode="json") for b in businesses])
    except Exception as e:
        logger.exception("Listing map businesses failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.get("/{business_id}")
def get_business(business_id: int, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        business = crud_business.get_business(db, business_id)
        if not business:
            return ResponseHandler.not_found(message=translator.t("business_not_found", lang))
        return ResponseHandler.success(data=business.model_dump(mode="json"))
    except Exception as e:
        logger.exception("Fetching business %s failed", business_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

# Reviews
@router.get("/{business_id}/reviews")
def get_reviews(business_id: int, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        reviews = crud_review.get_reviews(db, business_id)
        return ResponseHandler.success(
            data=[ReviewOut.model_validate(r).model_dump(mode="json") for r in reviews],
            message=translator.t("reviews_retrieved", lang),
        )
    except Exception as e:
        logger.exception("Listing reviews for business %s failed", business_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.post("/{business_id}/reviews")
def create_review(business_id: int, payload: ReviewCreate, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        if not crud_business.get_business_by_id(db, business_id):
            return ResponseHandler.not_found(message=translator.t("business_not_found", lang))

        review = crud_review.create_review(db, business_id, payload)
        return ResponseHandler.created(
            data=ReviewOut.model_validate(review).model_dump(mode="json"),
            message=translator.t("review_created", lang),
        )
    except Exception as e:
        logger.exception("Creating review for business %s failed", business_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

# Offers
@router.get("/{business_id}/offers")
def get_business_offers(business_id: int, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        offers = crud_offer.get_offers(db, business_id=business_id)
        return ResponseHandler.success(
            data=[OfferOut.model_validate(o).model_dump(mode="json") for o in offers],
            message=translator.t("offers_retrieved", lang),
        )
    except Exception as e:
        logger.exception("Listing offers for business %s failed", business_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
