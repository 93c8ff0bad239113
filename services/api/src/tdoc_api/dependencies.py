"""路由依赖。

文档集合挂在 `app.state.document_store` 上，由 `create_app` 创建，
每个应用实例独立一份，测试可直接替换。
"""

from fastapi import Request

from tdoc_api.core.config import Settings, get_settings
from tdoc_api.services.documents import DocumentCreator, InMemoryDocumentStore


def get_document_store(request: Request) -> InMemoryDocumentStore:
    """返回当前应用的文档集合。"""
    return request.app.state.document_store


def get_document_creator(request: Request) -> DocumentCreator:
    """返回创建文档协作方，默认即文档集合本身。"""
    return getattr(request.app.state, "document_creator", None) or request.app.state.document_store


def get_app_settings() -> Settings:
    return get_settings()
