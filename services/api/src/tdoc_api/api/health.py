"""健康检查接口。"""

from fastapi import APIRouter, Request, status

from tdoc_api.schemas.common import ErrorResponse, SuccessResponse
from tdoc_api.schemas.responses import HealthStatusData
from tdoc_api.utils.response import success

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "/live",
    summary="存活探针",
    description="用于容器编排系统检测服务进程是否存活。",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse[HealthStatusData],
    responses={500: {"model": ErrorResponse}},
)
def live(request: Request):
    """仅表示进程存活，不校验外部依赖。"""
    return success(request, {"status": "ok"})
