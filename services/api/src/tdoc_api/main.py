"""FastAPI 应用入口点。"""

import logging

from fastapi import FastAPI

from tdoc_api.api.router import api_router
from tdoc_api.core.config import get_settings
from tdoc_api.core.logging import setup_logging
from tdoc_api.exceptions import register_exception_handlers
from tdoc_api.middlewares import register_middlewares
from tdoc_api.services.documents import InMemoryDocumentStore

logger = logging.getLogger("tdoc_api")


def create_app() -> FastAPI:
    """创建并配置 FastAPI 应用实例。"""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        debug=settings.app_debug,
        description=(
            "多租户团队文档接口。\n\n"
            "所有业务接口统一返回：`{request_id, data, meta}`。\n"
            "请求体契约校验失败统一返回 400，`error.details.errors` 列出全部字段错误。"
        ),
        openapi_tags=[
            {"name": "health", "description": "服务存活探针。"},
            {"name": "documents", "description": "团队文档创建、查询、更新、删除与标签统计。"},
        ],
    )
    app.state.document_store = InMemoryDocumentStore()

    register_middlewares(app)
    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)
    logger.info("app created env=%s prefix=%s", settings.app_env, settings.api_prefix or "/")
    return app


app = create_app()
