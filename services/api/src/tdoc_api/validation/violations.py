"""校验结果与违规项结构。"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from tdoc_api.models.enums import ViolationKind

CommandT = TypeVar("CommandT")


@dataclass(frozen=True)
class Violation:
    """单个字段（或数组元素）的校验违规。"""

    field: str
    kind: ViolationKind
    message: str
    # 数组元素违规时为元素下标，字段级违规为 None。
    index: int | None = None
    # 违规值的类型名，不回显原值。
    received: str | None = None

    @property
    def location(self) -> str:
        """字段定位，例如 `teamId` 或 `tags[1]`。"""
        if self.index is None:
            return self.field
        return f"{self.field}[{self.index}]"


class PayloadValidationError(Exception):
    """请求体未通过校验，由接口层抛出并统一转换为 400 响应。"""

    def __init__(self, violations: tuple[Violation, ...]):
        self.violations = violations
        fields = ", ".join(item.location for item in violations)
        super().__init__(f"payload validation failed: {fields}")


@dataclass(frozen=True)
class ValidationResult(Generic[CommandT]):
    """校验结果：成功时携带命令，失败时携带全部违规项。"""

    command: CommandT | None = None
    violations: tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def fields(self) -> set[str]:
        """出现违规的字段名集合。"""
        return {item.field for item in self.violations}

    def raise_for_violations(self) -> CommandT:
        """失败时抛出 PayloadValidationError，成功时返回命令。"""
        if self.violations:
            raise PayloadValidationError(self.violations)
        return self.command
