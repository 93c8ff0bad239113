"""请求校验能力导出集合。"""

from tdoc_api.validation.documents import (
    create_document_validator,
    document_query_validator,
    popular_tags_query_validator,
    update_document_validator,
    validate_create_document,
    validate_document_query,
    validate_popular_tags_query,
    validate_update_document,
)
from tdoc_api.validation.engine import RequestValidator
from tdoc_api.validation.rules import FieldRule, FieldSpec
from tdoc_api.validation.violations import PayloadValidationError, ValidationResult, Violation

__all__ = [
    "FieldRule",
    "FieldSpec",
    "PayloadValidationError",
    "RequestValidator",
    "ValidationResult",
    "Violation",
    "create_document_validator",
    "document_query_validator",
    "popular_tags_query_validator",
    "update_document_validator",
    "validate_create_document",
    "validate_document_query",
    "validate_popular_tags_query",
    "validate_update_document",
]
