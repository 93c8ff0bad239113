"""通用表驱动校验器。"""

from collections.abc import Callable, Mapping
from typing import Any, Generic

from tdoc_api.models.enums import ViolationKind
from tdoc_api.validation.rules import FieldSpec
from tdoc_api.validation.violations import CommandT, ValidationResult, Violation

# 请求体本身不是对象时使用的伪字段名。
BODY_FIELD = "body"


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


class RequestValidator(Generic[CommandT]):
    """按字段声明逐一校验请求体，一次性收集全部违规项。

    - 所有字段都会被检查，不因某个字段失败而提前结束；
    - 同一字段内按规则顺序检查，首个失败规则即为该字段的违规；
    - 序列字段的逐元素规则对每个元素独立检查，每个失败元素一条违规；
    - 未声明的额外字段直接丢弃。

    校验器不持有可变状态，对同一输入重复调用得到相同结果，可在线程间共享。
    """

    def __init__(self, specs: tuple[FieldSpec, ...], command_factory: Callable[[dict[str, Any]], CommandT]):
        self.specs = specs
        self.command_factory = command_factory

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.specs)

    def validate(self, payload: Any) -> ValidationResult[CommandT]:
        """校验任意输入，永不因输入不合法而抛出异常。"""
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            return ValidationResult(
                violations=(
                    Violation(
                        field=BODY_FIELD,
                        kind=ViolationKind.INVALID_TYPE,
                        message="请求体必须是 JSON 对象。",
                        received=_type_name(payload),
                    ),
                )
            )

        violations: list[Violation] = []
        values: dict[str, Any] = {}
        for spec in self.specs:
            field_violations, value = self._check_field(spec, payload)
            if field_violations:
                violations.extend(field_violations)
            elif value is not None:
                values[spec.name] = value

        if violations:
            return ValidationResult(violations=tuple(violations))
        return ValidationResult(command=self.command_factory(values))

    def _check_field(self, spec: FieldSpec, payload: Mapping) -> tuple[list[Violation], Any]:
        raw = payload.get(spec.name)
        if raw is None:
            if spec.required:
                return [
                    Violation(
                        field=spec.name,
                        kind=ViolationKind.MISSING_FIELD,
                        message=f"{spec.name} 为必填项。",
                        received=None if spec.name not in payload else "null",
                    )
                ], None
            return [], spec.default

        for rule in spec.rules:
            if not rule.check(raw):
                return [
                    Violation(
                        field=spec.name,
                        kind=rule.kind,
                        message=rule.render(spec.name),
                        received=_type_name(raw),
                    )
                ], None

        violations: list[Violation] = []
        if spec.each:
            for index, item in enumerate(raw):
                for rule in spec.each:
                    if not rule.check(item):
                        violations.append(
                            Violation(
                                field=spec.name,
                                kind=rule.kind,
                                message=rule.render(f"{spec.name}[{index}]"),
                                index=index,
                                received=_type_name(item),
                            )
                        )
                        break
        if violations:
            return violations, None

        if spec.convert is not None:
            return [], spec.convert(raw)
        return [], raw
