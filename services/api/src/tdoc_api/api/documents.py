"""团队文档接口。

请求体以原始 JSON 接收，由 `tdoc_api.validation` 中的请求契约统一校验，
校验失败抛出 PayloadValidationError，由全局异常处理器转换为 400。
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path, Request, status

from tdoc_api.core.config import Settings
from tdoc_api.dependencies import get_app_settings, get_document_creator, get_document_store
from tdoc_api.schemas.common import ErrorResponse, PaginationMeta, SuccessResponse
from tdoc_api.schemas.responses import DocumentData, DocumentDeletedData, PopularTagData
from tdoc_api.services.documents import DocumentCreator, InMemoryDocumentStore
from tdoc_api.utils.response import success
from tdoc_api.validation import (
    validate_create_document,
    validate_document_query,
    validate_popular_tags_query,
    validate_update_document,
)

logger = logging.getLogger("tdoc_api.api.documents")

router = APIRouter(prefix="/documents", tags=["documents"])

_CREATE_EXAMPLE = {
    "teamId": "123e4567-e89b-12d3-a456-426614174000",
    "title": "Q3 Report",
    "content": "Draft text",
    "tags": ["finance", "q3"],
}


@router.post(
    "",
    summary="创建文档",
    description="校验请求体（teamId/title/content/tags）后创建团队文档；校验失败时一次性返回全部字段错误。",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[DocumentData],
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def create_document(
    request: Request,
    payload: Any = Body(default=None, description="创建文档请求体。", examples=[_CREATE_EXAMPLE]),
    creator: DocumentCreator = Depends(get_document_creator),
):
    """创建团队文档。"""
    command = validate_create_document(payload).raise_for_violations()
    record = creator.create(command)
    return success(request, DocumentData.model_validate(record))


@router.get(
    "",
    summary="文档列表",
    description="按团队、关键字、标签过滤并分页，`meta.allTags` 返回团队范围内的全部标签。",
    response_model=SuccessResponse[list[DocumentData]],
    responses={400: {"model": ErrorResponse}},
)
def list_documents(request: Request, store: InMemoryDocumentStore = Depends(get_document_store)):
    """查询文档列表。"""
    query = validate_document_query(dict(request.query_params)).raise_for_violations()
    page = store.list_documents(query)
    pagination = PaginationMeta(page=page.page, limit=page.limit, total=page.total, total_pages=page.total_pages)
    return success(
        request,
        [DocumentData.model_validate(item) for item in page.items],
        meta={"pagination": pagination.model_dump(by_alias=True), "allTags": page.all_tags},
    )


@router.get(
    "/tags/popular",
    summary="热门标签",
    description="统计标签使用次数，按次数倒序返回；支持 `teamId` 与 `limit` 查询参数。",
    response_model=SuccessResponse[list[PopularTagData]],
    responses={400: {"model": ErrorResponse}},
)
def popular_tags(
    request: Request,
    store: InMemoryDocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_app_settings),
):
    """返回热门标签。"""
    query = validate_popular_tags_query(dict(request.query_params)).raise_for_violations()
    ranked = store.popular_tags(team_id=query.team_id, limit=query.limit or settings.popular_tags_limit)
    return success(request, [PopularTagData(tag=tag, count=count) for tag, count in ranked])


@router.get(
    "/{document_id}",
    summary="文档详情",
    response_model=SuccessResponse[DocumentData],
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def get_document(
    request: Request,
    document_id: UUID = Path(..., description="文档 ID。"),
    store: InMemoryDocumentStore = Depends(get_document_store),
):
    """查询单个文档。"""
    return success(request, DocumentData.model_validate(store.get(document_id)))


@router.put(
    "/{document_id}",
    summary="更新文档",
    description="仅更新请求体中提供的 title/content/tags，teamId 不可修改。",
    response_model=SuccessResponse[DocumentData],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_document(
    request: Request,
    document_id: UUID = Path(..., description="文档 ID。"),
    payload: Any = Body(default=None, description="更新文档请求体。"),
    store: InMemoryDocumentStore = Depends(get_document_store),
):
    """更新文档。"""
    command = validate_update_document(payload).raise_for_violations()
    if command.is_empty():
        logger.info("empty update for document id=%s", document_id)
    record = store.update(document_id, command)
    return success(request, DocumentData.model_validate(record))


@router.delete(
    "/{document_id}",
    summary="删除文档",
    response_model=SuccessResponse[DocumentDeletedData],
    responses={404: {"model": ErrorResponse}},
)
def delete_document(
    request: Request,
    document_id: UUID = Path(..., description="文档 ID。"),
    store: InMemoryDocumentStore = Depends(get_document_store),
):
    """删除文档。"""
    store.delete(document_id)
    return success(request, DocumentDeletedData(id=document_id))
