"""文档接口请求契约。"""

from typing import Any

from tdoc_api.models.enums import ViolationKind
from tdoc_api.schemas.document import (
    CreateDocumentCommand,
    DocumentQuery,
    PopularTagsQuery,
    UpdateDocumentCommand,
)
from tdoc_api.validation.engine import RequestValidator
from tdoc_api.validation.rules import (
    FieldRule,
    FieldSpec,
    as_int,
    at_least,
    at_most,
    is_integer,
    not_empty_rule,
    sequence_rule,
    string_rule,
    uuid_rule,
)
from tdoc_api.validation.violations import ValidationResult

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _tags_spec() -> FieldSpec:
    return FieldSpec("tags", rules=(sequence_rule(),), required=False, each=(string_rule(),))


def _text_spec(name: str, *, required: bool = True) -> FieldSpec:
    return FieldSpec(name, rules=(string_rule(), not_empty_rule()), required=required)


def _int_spec(name: str, *, default: int | None, maximum: int | None = None) -> FieldSpec:
    rules = [
        FieldRule(is_integer, ViolationKind.INVALID_TYPE, "{field} 必须是整数。"),
        FieldRule(at_least(1), ViolationKind.INVALID_FORMAT, "{field} 必须大于等于 1。"),
    ]
    if maximum is not None:
        rules.append(FieldRule(at_most(maximum), ViolationKind.INVALID_FORMAT, f"{{field}} 不能超过 {maximum}。"))
    return FieldSpec(name, rules=tuple(rules), required=False, default=default, convert=as_int)


create_document_validator: RequestValidator[CreateDocumentCommand] = RequestValidator(
    specs=(
        FieldSpec("teamId", rules=(string_rule(), not_empty_rule(), uuid_rule())),
        _text_spec("title"),
        _text_spec("content"),
        _tags_spec(),
    ),
    command_factory=CreateDocumentCommand.model_validate,
)

# teamId 不可更新，与其他未声明字段一样被丢弃。
update_document_validator: RequestValidator[UpdateDocumentCommand] = RequestValidator(
    specs=(
        _text_spec("title", required=False),
        _text_spec("content", required=False),
        _tags_spec(),
    ),
    command_factory=UpdateDocumentCommand.model_validate,
)

document_query_validator: RequestValidator[DocumentQuery] = RequestValidator(
    specs=(
        FieldSpec("teamId", rules=(string_rule(), uuid_rule()), required=False),
        FieldSpec("search", rules=(string_rule(),), required=False),
        FieldSpec("tag", rules=(string_rule(),), required=False),
        _int_spec("page", default=DEFAULT_PAGE),
        _int_spec("limit", default=DEFAULT_PAGE_SIZE, maximum=MAX_PAGE_SIZE),
    ),
    command_factory=DocumentQuery.model_validate,
)

# limit 未提供时为 None，由接口层取配置的默认条数。
popular_tags_query_validator: RequestValidator[PopularTagsQuery] = RequestValidator(
    specs=(
        FieldSpec("teamId", rules=(string_rule(), uuid_rule()), required=False),
        _int_spec("limit", default=None, maximum=MAX_PAGE_SIZE),
    ),
    command_factory=PopularTagsQuery.model_validate,
)


def validate_create_document(payload: Any) -> ValidationResult[CreateDocumentCommand]:
    """校验创建文档请求体。"""
    return create_document_validator.validate(payload)


def validate_update_document(payload: Any) -> ValidationResult[UpdateDocumentCommand]:
    """校验更新文档请求体。"""
    return update_document_validator.validate(payload)


def validate_document_query(params: Any) -> ValidationResult[DocumentQuery]:
    """校验文档列表查询参数。"""
    return document_query_validator.validate(params)


def validate_popular_tags_query(params: Any) -> ValidationResult[PopularTagsQuery]:
    """校验热门标签查询参数。"""
    return popular_tags_query_validator.validate(params)
