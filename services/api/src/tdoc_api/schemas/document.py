"""文档相关命令结构。

这些结构只由校验器在全部规则通过后构造，字段值与请求体原值保持一致，
不做裁剪或规范化。对外字段名与请求体一致（teamId/title/content/tags）。
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Command(BaseModel):
    """命令基类：不可变，按对外字段名构造。"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """返回对外字段名表示，未提供的可选字段不输出。"""
        return self.model_dump(by_alias=True, exclude_none=True)


class CreateDocumentCommand(_Command):
    """创建文档命令。"""

    team_id: str = Field(alias="teamId", description="文档所属团队 ID（UUID）。")
    title: str = Field(description="文档标题。", examples=["Q3 Report"])
    content: str = Field(description="文档正文。")
    tags: list[str] | None = Field(default=None, description="文档标签列表，未提供时为空。", examples=[["finance", "q3"]])


class UpdateDocumentCommand(_Command):
    """更新文档命令，未提供的字段保持原值。"""

    title: str | None = Field(default=None, description="新的文档标题。")
    content: str | None = Field(default=None, description="新的文档正文。")
    tags: list[str] | None = Field(default=None, description="新的标签列表。")

    def is_empty(self) -> bool:
        """是否没有任何需要更新的字段。"""
        return not self.to_wire()


class DocumentQuery(_Command):
    """文档列表查询条件。"""

    team_id: str | None = Field(default=None, alias="teamId", description="按团队过滤。")
    search: str | None = Field(default=None, description="标题或正文关键字（不区分大小写）。")
    tag: str | None = Field(default=None, description="按单个标签过滤。")
    page: int = Field(default=1, description="页码（从 1 开始）。")
    limit: int = Field(default=10, description="每页条数。")


class PopularTagsQuery(_Command):
    """热门标签查询条件。"""

    team_id: str | None = Field(default=None, alias="teamId", description="按团队过滤。")
    limit: int | None = Field(default=None, description="返回条数，未提供时取配置值。")
