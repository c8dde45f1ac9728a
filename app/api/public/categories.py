import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.crud import category as crud_category
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.schemas.category import CategoryOut

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/categories",
    tags=["Categories"],
)

@router.get("")
def get_categories(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        categories = crud_category.get_categories(db)
        return ResponseHandler.success(
            data=[CategoryOut.model_validate(c).model_dump(mode="json") for c in categories],
            message=translator.t("categories_retrieved", lang),
        )
    except Exception as e:
        logger.exception("Listing categories failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.get("/{category_id}")
def get_category(category_id: int, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        category = crud_category.get_category_by_id(db, category_id)
        if not category:
            return ResponseHandler.not_found(message=translator.t("category_not_found", lang))
        return ResponseHandler.success(data=CategoryOut.model_validate(category).model_dump(mode="json"))
    except Exception as e:
        logger.exception("Fetching category %s failed", category_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
