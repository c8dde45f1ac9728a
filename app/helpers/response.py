from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from typing import Any
from pydantic import BaseModel


def safe_serialize(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    elif hasattr(obj, "__table__"):  # SQLAlchemy model
        return jsonable_encoder({col.name: getattr(obj, col.name) for col in obj.__table__.columns})
    elif isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    else:
        try:
            return jsonable_encoder(obj)
        except (TypeError, ValueError):
            return str(obj)  # final fallback


class ResponseHandler:
    @staticmethod
    def _error(code: int, message: str, error: Any = None, data: Any = None) -> JSONResponse:
        content = {
            "status": "error",
            "code": code,
            "message": message,
            "data": safe_serialize(data),
            "error": safe_serialize(error if error is not None else {}),
        }
        return JSONResponse(status_code=code, content=content)

    @staticmethod
    def success(
        data: Any = None,
        message: str = "Success",
        code: int = 200
    ) -> JSONResponse:
        return JSONResponse(
            status_code=code,
            content={
                "status": "success",
                "code": code,
                "message": message,
                "data": safe_serialize(data),
            },
        )

    @staticmethod
    def created(data: Any = None, message: str = "Created") -> JSONResponse:
        return ResponseHandler.success(data=data, message=message, code=201)

    @staticmethod
    def bad_request(message: str = "Bad Request", error: Any = None, data: Any = None, code: int = 400) -> JSONResponse:
        return ResponseHandler._error(code, message, error, data)

    @staticmethod
    def unauthorized(message: str = "Unauthorized", error: Any = None, data: Any = None, code: int = 401) -> JSONResponse:
        return ResponseHandler._error(code, message, error, data)

    @staticmethod
    def not_found(message: str = "Not Found", error: Any = None, data: Any = None, code: int = 404) -> JSONResponse:
        return ResponseHandler._error(code, message, error, data)

    @staticmethod
    def too_many_requests(message: str = "Too Many Requests", data: Any = None, code: int = 429) -> JSONResponse:
        return ResponseHandler._error(code, message, None, data)

    @staticmethod
    def internal_error(message: str = "Internal Server Error", error: Any = None, data: Any = None, code: int = 500) -> JSONResponse:
        return ResponseHandler._error(code, message, error, data)
