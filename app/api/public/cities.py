import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.crud import city as crud_city
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.schemas.city import CityOut

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/cities",
    tags=["Cities"],
)

@router.get("")
def get_cities(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        cities = crud_city.get_cities(db)
        return ResponseHandler.success(
            data=[CityOut.model_validate(c).model_dump(mode="json") for c in cities],
            message=translator.t("cities_retrieved", lang),
        )
    except Exception as e:
        logger.exception("Listing cities failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
