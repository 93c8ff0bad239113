"""字段规则声明。

每个字段的约束以有序规则列表表示：规则 = 判定函数 + 违规类别 + 提示文案。
同一字段内按顺序执行，命中第一条失败规则即停止；不同字段之间互不影响。
"""

from collections.abc import Callable
from dataclasses import dataclass
import re
from typing import Any

from tdoc_api.models.enums import ViolationKind

# 8-4-4-4-12 十六进制分组，不区分大小写，不接受花括号或 urn 前缀。
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
# 查询参数整数最多 9 位，更长的数字串视为非整数。
_DECIMAL_PATTERN = re.compile(r"^[0-9]{1,9}$")


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_not_empty(value: Any) -> bool:
    """不裁剪空白，仅空字符串视为空。"""
    return value != ""


def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None


def is_sequence(value: Any) -> bool:
    """列表或元组；字符串与映射不视为序列。"""
    return isinstance(value, (list, tuple))


def as_int(value: Any) -> int | None:
    """解析整数：接受 int 或十进制数字字符串（查询参数），其他返回 None。"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _DECIMAL_PATTERN.fullmatch(value):
        return int(value)
    return None


def is_integer(value: Any) -> bool:
    return as_int(value) is not None


def at_least(minimum: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        parsed = as_int(value)
        return parsed is not None and parsed >= minimum

    return check


def at_most(maximum: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        parsed = as_int(value)
        return parsed is not None and parsed <= maximum

    return check


@dataclass(frozen=True)
class FieldRule:
    """单条规则。`message` 支持 `{field}` 占位符。"""

    check: Callable[[Any], bool]
    kind: ViolationKind
    message: str

    def render(self, field: str) -> str:
        return self.message.format(field=field)


@dataclass(frozen=True)
class FieldSpec:
    """单个字段的完整约束声明。"""

    name: str
    rules: tuple[FieldRule, ...] = ()
    required: bool = True
    # 序列字段的逐元素规则，字段级规则全部通过后才执行。
    each: tuple[FieldRule, ...] = ()
    # 缺省（缺失或 null）时写入命令的值；None 表示不写入。
    default: Any = None
    # 校验通过后的取值转换，例如查询参数字符串转整数。
    convert: Callable[[Any], Any] | None = None


def string_rule() -> FieldRule:
    return FieldRule(is_string, ViolationKind.INVALID_TYPE, "{field} 必须是字符串。")


def not_empty_rule() -> FieldRule:
    return FieldRule(is_not_empty, ViolationKind.MISSING_FIELD, "{field} 不能为空。")


def uuid_rule() -> FieldRule:
    return FieldRule(is_uuid, ViolationKind.INVALID_FORMAT, "{field} 必须是合法的 UUID。")


def sequence_rule() -> FieldRule:
    return FieldRule(is_sequence, ViolationKind.INVALID_TYPE, "{field} 必须是字符串数组。")
