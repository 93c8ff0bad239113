"""领域枚举定义。"""

from enum import StrEnum


class ViolationKind(StrEnum):
    """字段校验失败类别。"""

    MISSING_FIELD = "missing_field"  # 必填字段缺失、为 null 或为空字符串。
    INVALID_FORMAT = "invalid_format"  # 字段存在但语法形态不符，例如非法 UUID。
    INVALID_TYPE = "invalid_type"  # 字段或数组元素类型不符。
