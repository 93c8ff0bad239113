"""团队文档记录。"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class DocumentRecord:
    """进程内保存的团队文档。"""

    team_id: str
    title: str
    content: str
    tags: list[str] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # 单调递增写入序号，updated_at 相同时用于稳定排序。
    revision: int = 0
