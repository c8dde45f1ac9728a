import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_admin
from app.crud import activity_log as crud_activity
from app.crud import city as crud_city
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.models import AdminUser
from app.models.enums import ActivityAction
from app.schemas.city import CityCreate, CityOut

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/admin/cities",
    tags=["Admin Cities"],
    dependencies=[Depends(get_current_admin)]
)

@router.get("")
def list_cities(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        cities = crud_city.get_cities(db)
        return ResponseHandler.success(data=[CityOut.model_validate(c).model_dump(mode="json") for c in cities])
    except Exception as e:
        logger.exception("Listing cities failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.post("")
def create_city(
    payload: CityCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        city = crud_city.create_city(db, payload)
        crud_activity.log_action(db, current_admin.username, ActivityAction.CREATE.value, "city", city.id, city.name)
        return ResponseHandler.created(
            data=CityOut.model_validate(city).model_dump(mode="json"),
            message=translator.t("city_created", lang),
        )
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Creating city failed")
        return ResponseHandler.internal_error(message=translator.t("city_create_failed", lang), error=str(e))

@router.delete("/{city_id}")
def delete_city(
    city_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        city = crud_city.get_city_by_id(db, city_id)
        if not city:
            return ResponseHandler.not_found(message=translator.t("city_not_found", lang))

        name = city.name
        crud_city.delete_city(db, city)
        crud_activity.log_action(db, current_admin.username, ActivityAction.DELETE.value, "city", city_id, name)
        return ResponseHandler.success(data={"success": True}, message=translator.t("city_deleted", lang))
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Deleting city %s failed", city_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
