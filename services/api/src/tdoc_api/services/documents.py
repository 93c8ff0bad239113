"""团队文档服务（当前为进程内实现）。

接收已通过校验的命令并维护文档集合；不做权限判断，也不做持久化。
"""

from collections import Counter
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from itertools import count
import logging
import math
from threading import Lock
from typing import Protocol
from uuid import UUID

from tdoc_api.models.document import DocumentRecord
from tdoc_api.schemas.document import CreateDocumentCommand, DocumentQuery, UpdateDocumentCommand

logger = logging.getLogger("tdoc_api.services.documents")


class DocumentNotFoundError(LookupError):
    """目标文档不存在。"""

    def __init__(self, document_id: UUID):
        self.document_id = document_id
        super().__init__(f"document not found: {document_id}")


class DocumentCreator(Protocol):
    """创建文档协作方：接收已校验命令，返回新建文档。"""

    def create(self, command: CreateDocumentCommand) -> DocumentRecord: ...


@dataclass
class DocumentPage:
    """分页查询结果。"""

    items: list[DocumentRecord]
    total: int
    page: int
    limit: int
    # 过滤团队范围内出现过的全部标签（去重、排序），不受关键字与标签过滤影响。
    all_tags: list[str]

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _snapshot(record: DocumentRecord) -> DocumentRecord:
    """返回记录副本，调用方读取时不受并发更新影响。"""
    return replace(record, tags=list(record.tags))


def _matches(record: DocumentRecord, query: DocumentQuery) -> bool:
    if query.search:
        needle = query.search.lower()
        if needle not in record.title.lower() and needle not in record.content.lower():
            return False
    if query.tag and query.tag not in record.tags:
        return False
    return True


class InMemoryDocumentStore:
    """线程安全的进程内文档集合。"""

    def __init__(self):
        self._lock = Lock()
        self._documents: dict[UUID, DocumentRecord] = {}
        self._revisions = count(1)

    def create(self, command: CreateDocumentCommand) -> DocumentRecord:
        """按命令新建文档，未提供标签时保存为空列表。"""
        now = _utc_now()
        record = DocumentRecord(
            team_id=command.team_id,
            title=command.title,
            content=command.content,
            tags=list(command.tags or []),
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            record.revision = next(self._revisions)
            self._documents[record.id] = record
            created = _snapshot(record)
        logger.info("document created id=%s team_id=%s", record.id, record.team_id)
        return created

    def get(self, document_id: UUID) -> DocumentRecord:
        with self._lock:
            record = self._documents.get(document_id)
            snapshot = _snapshot(record) if record is not None else None
        if snapshot is None:
            raise DocumentNotFoundError(document_id)
        return snapshot

    def list_documents(self, query: DocumentQuery) -> DocumentPage:
        """按条件过滤，按最近更新倒序分页。"""
        with self._lock:
            records = [_snapshot(r) for r in self._documents.values()]

        team_scope = [r for r in records if not query.team_id or r.team_id.lower() == query.team_id.lower()]
        matched = [r for r in team_scope if _matches(r, query)]
        matched.sort(key=lambda r: (r.updated_at, r.revision), reverse=True)

        offset = (query.page - 1) * query.limit
        return DocumentPage(
            items=matched[offset : offset + query.limit],
            total=len(matched),
            page=query.page,
            limit=query.limit,
            all_tags=sorted({tag for r in team_scope for tag in r.tags}),
        )

    def update(self, document_id: UUID, command: UpdateDocumentCommand) -> DocumentRecord:
        """仅覆盖命令中提供的字段。"""
        with self._lock:
            record = self._documents.get(document_id)
            if record is None:
                raise DocumentNotFoundError(document_id)
            if command.title is not None:
                record.title = command.title
            if command.content is not None:
                record.content = command.content
            if command.tags is not None:
                record.tags = list(command.tags)
            record.updated_at = _utc_now()
            record.revision = next(self._revisions)
            updated = _snapshot(record)
        logger.info("document updated id=%s fields=%s", document_id, sorted(command.to_wire()))
        return updated

    def delete(self, document_id: UUID) -> None:
        with self._lock:
            if self._documents.pop(document_id, None) is None:
                raise DocumentNotFoundError(document_id)
        logger.info("document deleted id=%s", document_id)

    def popular_tags(self, *, team_id: str | None = None, limit: int = 10) -> list[tuple[str, int]]:
        """统计标签使用次数，按次数倒序、标签名正序取前 N 个。"""
        with self._lock:
            records = [_snapshot(r) for r in self._documents.values()]
        counter: Counter[str] = Counter()
        for record in records:
            if team_id and record.team_id.lower() != team_id.lower():
                continue
            counter.update(record.tags)
        ranked = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]
