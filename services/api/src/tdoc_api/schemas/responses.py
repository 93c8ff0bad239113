"""接口成功响应 `data` 字段及错误明细结构定义。

说明：
1. 所有业务接口统一返回 `SuccessResponse[data=...]`。
2. 文档字段名与请求体保持一致（teamId/createdAt 等驼峰形式）。
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from tdoc_api.schemas.common import BaseSchema
from tdoc_api.validation.violations import Violation


class HealthStatusData(BaseSchema):
    """健康检查返回结构。"""

    status: str = Field(description="健康状态值，常见为 ok。")


class DocumentData(BaseSchema):
    """团队文档信息结构。"""

    id: UUID = Field(description="文档 ID。")
    team_id: str = Field(alias="teamId", description="文档所属团队 ID。")
    title: str = Field(description="文档标题。")
    content: str = Field(description="文档正文。")
    tags: list[str] = Field(default_factory=list, description="文档标签列表。")
    created_at: datetime = Field(alias="createdAt", description="创建时间。")
    updated_at: datetime = Field(alias="updatedAt", description="最近更新时间。")


class DocumentDeletedData(BaseSchema):
    """删除文档返回结构。"""

    id: UUID = Field(description="已删除的文档 ID。")
    deleted: bool = Field(default=True, description="是否已删除。")


class PopularTagData(BaseSchema):
    """热门标签统计项。"""

    tag: str = Field(description="标签。")
    count: int = Field(description="使用该标签的文档数。")


class ViolationData(BaseSchema):
    """单条字段校验错误。"""

    field: str = Field(description="违规字段名，与请求体字段一致。")
    location: str = Field(description="违规位置，数组元素形如 tags[1]。")
    kind: str = Field(description="违规类别：missing_field/invalid_format/invalid_type。")
    message: str = Field(description="人类可读错误信息。")
    index: int | None = Field(default=None, description="数组元素违规时的元素下标。")
    received: str | None = Field(default=None, description="违规值的类型名。")

    @classmethod
    def from_violation(cls, violation: Violation) -> "ViolationData":
        return cls(
            field=violation.field,
            location=violation.location,
            kind=violation.kind.value,
            message=violation.message,
            index=violation.index,
            received=violation.received,
        )
