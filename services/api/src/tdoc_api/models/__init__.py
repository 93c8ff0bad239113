"""领域模型导出集合。"""

from tdoc_api.models.document import DocumentRecord
from tdoc_api.models.enums import ViolationKind

__all__ = [
    "DocumentRecord",
    "ViolationKind",
]
