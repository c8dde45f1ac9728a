import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_admin
from app.crud import activity_log as crud_activity
from app.crud import category as crud_category
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.models import AdminUser
from app.models.enums import ActivityAction
from app.schemas.category import CategoryCreate, CategoryOut, CategoryReorder, CategoryUpdate

logger = logging.getLogger(__name__)
translator = Translator()

router = APIRouter(
    prefix="/api/admin/categories",
    tags=["Admin Categories"],
    dependencies=[Depends(get_current_admin)]
)

@router.get("")
def list_categories(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    try:
        categories = crud_category.get_categories(db)
        return ResponseHandler.success(data=[CategoryOut.model_validate(c).model_dump(mode="json") for c in categories])
    except Exception as e:
        logger.exception("Listing categories failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.post("")
def create_category(
    payload: CategoryCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        category = crud_category.create_category(db, payload)
        crud_activity.log_action(db, current_admin.username, ActivityAction.CREATE.value, "category", category.id, category.name)
        return ResponseHandler.created(
            data=CategoryOut.model_validate(category).model_dump(mode="json"),
            message=translator.t("category_created", lang),
        )
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Creating category failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.put("/reorder")
def reorder_categories(
    payload: CategoryReorder,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        crud_category.reorder_categories(db, payload.ids)
        crud_activity.log_action(
            db, current_admin.username, ActivityAction.REORDER.value, "category",
            details=",".join(str(i) for i in payload.ids),
        )
        return ResponseHandler.success(data={"success": True}, message=translator.t("categories_reordered", lang))
    except Exception as e:
        logger.exception("Reordering categories failed")
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.put("/{category_id}")
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        category = crud_category.get_category_by_id(db, category_id)
        if not category:
            return ResponseHandler.not_found(message=translator.t("category_not_found", lang))

        updated = crud_category.update_category(db, category, payload)
        crud_activity.log_action(db, current_admin.username, ActivityAction.UPDATE.value, "category", updated.id, updated.name)
        return ResponseHandler.success(
            data=CategoryOut.model_validate(updated).model_dump(mode="json"),
            message=translator.t("category_updated", lang),
        )
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Updating category %s failed", category_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))

@router.delete("/{category_id}")
def delete_category(
    category_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_admin: AdminUser = Depends(get_current_admin),
):
    lang = get_lang_from_request(request)
    try:
        category = crud_category.get_category_by_id(db, category_id)
        if not category:
            return ResponseHandler.not_found(message=translator.t("category_not_found", lang))

        name = category.name
        crud_category.delete_category(db, category)
        crud_activity.log_action(db, current_admin.username, ActivityAction.DELETE.value, "category", category_id, name)
        return ResponseHandler.success(data={"success": True}, message=translator.t("category_deleted", lang))
    except ValueError as e:
        return ResponseHandler.bad_request(message=translator.t(str(e), lang), error=str(e))
    except Exception as e:
        logger.exception("Deleting category %s failed", category_id)
        return ResponseHandler.internal_error(message=translator.t("something_went_wrong", lang), error=str(e))
