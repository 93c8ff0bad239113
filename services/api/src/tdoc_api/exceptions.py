"""应用异常处理注册。"""

from http import HTTPStatus
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from tdoc_api.schemas.responses import ViolationData
from tdoc_api.services.documents import DocumentNotFoundError
from tdoc_api.utils.response import DEFAULT_ERROR_MESSAGE, error_payload
from tdoc_api.validation.violations import PayloadValidationError

logger = logging.getLogger("tdoc_api.exceptions")

# 状态码 -> (错误码, 默认信息, 处理建议)
_HTTP_ERROR_DEFAULTS: dict[int, tuple[str, str, str]] = {
    status.HTTP_400_BAD_REQUEST: (
        "BAD_REQUEST",
        "请求参数不合法。",
        "请根据错误字段提示修正请求参数后重试。",
    ),
    status.HTTP_404_NOT_FOUND: (
        "NOT_FOUND",
        "请求资源不存在。",
        "请确认资源 ID 是否正确，或资源是否已被删除。",
    ),
    status.HTTP_405_METHOD_NOT_ALLOWED: (
        "METHOD_NOT_ALLOWED",
        "请求方法不被支持。",
        "请确认接口文档中的请求方法。",
    ),
    status.HTTP_422_UNPROCESSABLE_CONTENT: (
        "VALIDATION_ERROR",
        "请求格式无法解析。",
        "请确认请求体为合法 JSON 且路径/查询参数格式正确。",
    ),
}
_FALLBACK_DEFAULTS = ("HTTP_ERROR", "请求处理失败。", "请稍后重试，若持续失败请联系管理员。")


def _http_defaults(status_code: int) -> tuple[str, str, str]:
    return _HTTP_ERROR_DEFAULTS.get(status_code, _FALLBACK_DEFAULTS)


def _base_details(status_code: int, reason: str, suggestion: str) -> dict[str, object]:
    return {"status_code": status_code, "reason": reason, "suggestion": suggestion}


async def payload_validation_exception_handler(request: Request, exc: PayloadValidationError):
    """请求体契约校验失败：返回 400 并列出全部字段错误。"""
    _, _, suggestion = _http_defaults(status.HTTP_400_BAD_REQUEST)
    logger.warning(
        "payload rejected %s %s violations=%s",
        request.method,
        request.url.path,
        [f"{item.location}:{item.kind.value}" for item in exc.violations],
    )
    details = _base_details(status.HTTP_400_BAD_REQUEST, "validation_error", suggestion)
    details["errors"] = [ViolationData.from_violation(item).model_dump() for item in exc.violations]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_payload(request, code="VALIDATION_ERROR", message="请求参数校验失败。", details=details),
    )


async def document_not_found_handler(request: Request, exc: DocumentNotFoundError):
    """文档不存在统一转换为 404。"""
    code, _, suggestion = _http_defaults(status.HTTP_404_NOT_FOUND)
    details = _base_details(status.HTTP_404_NOT_FOUND, "document_not_found", suggestion)
    details["document_id"] = str(exc.document_id)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_payload(request, code=code, message="文档不存在或已删除。", details=details),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """将协议异常统一包装为标准错误结构。"""
    code, message, suggestion = _http_defaults(exc.status_code)
    details = _base_details(exc.status_code, code.lower(), suggestion)
    if isinstance(exc.detail, str) and exc.detail and exc.detail != HTTPStatus(exc.status_code).phrase:
        message = exc.detail
    elif exc.detail is not None:
        details["detail"] = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(request, code=code, message=message, details=details),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """框架层解析失败（非法 JSON、路径参数格式错误等）。"""
    code, message, suggestion = _http_defaults(status.HTTP_422_UNPROCESSABLE_CONTENT)
    details = _base_details(status.HTTP_422_UNPROCESSABLE_CONTENT, "request_validation_error", suggestion)
    details["errors"] = [
        {
            "field": ".".join(str(item) for item in err.get("loc", []) if item != "body"),
            "message": err.get("msg"),
            "type": err.get("type"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=error_payload(request, code=code, message=message, details=details),
    )


async def unexpected_exception_handler(request: Request, exc: Exception):
    """处理未捕获异常，避免内部细节泄露。"""
    logger.exception("unexpected error %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload(
            request,
            code="INTERNAL_ERROR",
            message=DEFAULT_ERROR_MESSAGE,
            details=_base_details(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "unexpected_exception",
                "请稍后重试，若持续失败请联系管理员并提供 request_id。",
            ),
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """集中注册异常处理器。"""
    app.exception_handler(PayloadValidationError)(payload_validation_exception_handler)
    app.exception_handler(DocumentNotFoundError)(document_not_found_handler)
    app.exception_handler(HTTPException)(http_exception_handler)
    app.exception_handler(RequestValidationError)(request_validation_exception_handler)
    app.exception_handler(Exception)(unexpected_exception_handler)
