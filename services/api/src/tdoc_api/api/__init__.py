"""路由模块导出集合。"""

from . import documents, health

__all__ = [
    "documents",
    "health",
]
