"""服务层能力导出集合。"""

from tdoc_api.services.documents import (
    DocumentCreator,
    DocumentNotFoundError,
    DocumentPage,
    InMemoryDocumentStore,
)

__all__ = [
    "DocumentCreator",
    "DocumentNotFoundError",
    "DocumentPage",
    "InMemoryDocumentStore",
]
