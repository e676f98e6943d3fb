"""
Resume validation.

All field errors of a document are collected in one pass and reported as a
list of ``ValidationIssue``s, each naming the field path, the kind of
violation and the violated constraint. Validation failure is an ordinary
outcome: it is logged at INFO level and handed back to the caller.

>>> resume, issues = check_resume({'content': {'basics': {'name': 'Jo'},
...                                            'education': [],
...                                            'location': {'city': 'B'}}})
>>> resume is None
True
>>> [(i.field_path, i.kind.value) for i in issues]
[('content.location.city', 'length')]
"""

import copy
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Iterator, Union

import jsonschema
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from vitae.base import get_section_registry
from vitae.models import Resume, ResumeContent, ResumeLayout
from vitae.options import SECTION_IDS
from vitae.primitives import (
    INVALID_DATE_ERROR,
    INVALID_LENGTH_UNIT_ERROR,
    INVALID_OPTION_ERROR,
    INVALID_PHONE_ERROR,
    INVALID_URL_ERROR,
    STRING_LENGTH_ERROR,
)
from vitae.util import ResumeSource, _prune_none, ensure_resume_dict

logger = logging.getLogger(__name__)

_CONTENT_SECTION_IDS = frozenset(SECTION_IDS)

ValidationErrorType = Union[PydanticValidationError, JsonSchemaValidationError]


class ViolationKind(str, Enum):
    """What kind of constraint a field broke."""

    LENGTH = 'length'
    INVALID_CHOICE = 'invalid_choice'
    MISSING_REQUIRED_FIELD = 'missing_required_field'
    INVALID_FORMAT = 'invalid_format'
    INVALID_TYPE = 'invalid_type'


_PYDANTIC_ERROR_KINDS = {
    STRING_LENGTH_ERROR: ViolationKind.LENGTH,
    'string_too_short': ViolationKind.LENGTH,
    'string_too_long': ViolationKind.LENGTH,
    INVALID_OPTION_ERROR: ViolationKind.INVALID_CHOICE,
    'literal_error': ViolationKind.INVALID_CHOICE,
    'enum': ViolationKind.INVALID_CHOICE,
    'missing': ViolationKind.MISSING_REQUIRED_FIELD,
    INVALID_DATE_ERROR: ViolationKind.INVALID_FORMAT,
    INVALID_URL_ERROR: ViolationKind.INVALID_FORMAT,
    INVALID_PHONE_ERROR: ViolationKind.INVALID_FORMAT,
    INVALID_LENGTH_UNIT_ERROR: ViolationKind.INVALID_FORMAT,
    'value_error': ViolationKind.INVALID_FORMAT,  # e.g. a malformed email
    'string_pattern_mismatch': ViolationKind.INVALID_FORMAT,
}

_JSONSCHEMA_ERROR_KINDS = {
    'minLength': ViolationKind.LENGTH,
    'maxLength': ViolationKind.LENGTH,
    'enum': ViolationKind.INVALID_CHOICE,
    'required': ViolationKind.MISSING_REQUIRED_FIELD,
    'pattern': ViolationKind.INVALID_FORMAT,
    'format': ViolationKind.INVALID_FORMAT,
}

# ctx keys that describe the input rather than the constraint
_NON_CONSTRAINT_CTX_KEYS = {'field', 'value', 'actual_length', 'error'}


@dataclass(frozen=True)
class ValidationIssue:
    """One field-scoped validation failure."""

    path: tuple
    kind: ViolationKind
    message: str
    constraint: dict = field(default_factory=dict)

    @property
    def field_path(self) -> str:
        """Dotted path of the offending field, e.g. ``content.work.0.name``."""
        return '.'.join(str(p) for p in self.path) or 'root'

    def __str__(self):
        return f"{self.field_path}: {self.message} [{self.kind.value}]"


def _pydantic_constraint(error: dict) -> dict:
    ctx = error.get('ctx') or {}
    return {
        k: v
        for k, v in ctx.items()
        if k not in _NON_CONSTRAINT_CTX_KEYS
        and isinstance(v, (str, int, float, bool))
    }


def _jsonschema_error_issues(error: JsonSchemaValidationError) -> Iterator[ValidationIssue]:
    if error.validator in ('anyOf', 'oneOf') and error.context:
        # Optional fields are ``anyOf [<field schema>, {type: null}]``; the null
        # branch never explains the failure.
        sub_errors = [
            e
            for e in error.context
            if not (e.validator == 'type' and e.validator_value == 'null')
        ] or list(error.context)
        for sub_error in sub_errors:
            yield from _jsonschema_error_issues(sub_error)
        return

    path = tuple(error.absolute_path)
    kind = _JSONSCHEMA_ERROR_KINDS.get(error.validator, ViolationKind.INVALID_TYPE)
    constraint = {}
    if error.validator == 'minLength':
        constraint = {'min_length': error.validator_value}
    elif error.validator == 'maxLength':
        constraint = {'max_length': error.validator_value}
    elif error.validator == 'pattern':
        constraint = {'pattern': error.validator_value}
    elif error.validator == 'required':
        m = re.match(r"'(.+)' is a required property", error.message)
        if m:
            path = path + (m.group(1),)
    yield ValidationIssue(path, kind, error.message, constraint)


def extract_validation_issues(error_obj: ValidationErrorType) -> list[ValidationIssue]:
    """
    Extracts structured issues from a validation error object.

    Works with both pydantic's ValidationError (which carries every error of
    the document) and jsonschema's ValidationError (which carries one).
    """
    if isinstance(error_obj, PydanticValidationError):
        return [
            ValidationIssue(
                path=tuple(error['loc']),
                kind=_PYDANTIC_ERROR_KINDS.get(
                    error['type'], ViolationKind.INVALID_TYPE
                ),
                message=error['msg'],
                constraint=_pydantic_constraint(error),
            )
            for error in error_obj.errors()
        ]
    elif isinstance(error_obj, JsonSchemaValidationError):
        return list(_jsonschema_error_issues(error_obj))
    raise TypeError(f"Not a validation error: {error_obj!r}")


def extract_friendly_errors(error_obj: ValidationErrorType):
    """Yields ``(field, message)`` for each validation error."""
    for issue in extract_validation_issues(error_obj):
        yield issue.field_path, issue.message


def validation_friendly_errors_string(error_obj: ValidationErrorType) -> str:
    return '\n'.join(
        f"Error in field '{field}': {message}"
        for field, message in extract_friendly_errors(error_obj)
    )


# --------------------------------------------------------------------------------------
# Validation entry points


def _as_data(data) -> dict:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=True)
    return _prune_none(ensure_resume_dict(data))


def _log_failure(model: type[BaseModel], error: PydanticValidationError):
    issues = extract_validation_issues(error)
    logger.info(
        "%s validation failed with %d issue(s)", model.__name__, len(issues)
    )
    for issue in issues:
        logger.debug("  %s", issue)
    return issues


def _validate(model: type[BaseModel], data, raise_errors: bool):
    try:
        return model.model_validate(_as_data(data))
    except PydanticValidationError as e:
        _log_failure(model, e)
        if raise_errors:
            raise
        return None


def validate_resume(data: ResumeSource | BaseModel, *, raise_errors: bool = True):
    """Validate a whole resume (``{content: ..., layout: ...}``).

    Accepts a mapping, a model, or anything ``vitae.util.ensure_resume_dict``
    reads (JSON/YAML file or string). Explicit nulls count as absent fields.

    Raises ``pydantic.ValidationError`` on failure, or returns None if
    ``raise_errors`` is False.
    """
    return _validate(Resume, data, raise_errors)


def validate_content(data: ResumeSource | BaseModel, *, raise_errors: bool = True):
    """Validate resume content (the sections, without layout)."""
    return _validate(ResumeContent, data, raise_errors)


def validate_layout(data: ResumeSource | BaseModel, *, raise_errors: bool = True):
    """Validate layout settings alone."""
    return _validate(ResumeLayout, data, raise_errors)


def _section_slice(section_id: str, data) -> dict:
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_none=True)
    if isinstance(data, Mapping) and (not data or _CONTENT_SECTION_IDS.intersection(data)):
        return _prune_none(dict(data))
    # a bare section value, e.g. the location item itself
    return _prune_none({section_id: data})


def validate_section(section_id: str, data: Any, *, raise_errors: bool = True):
    """Validate one section of resume content with its section schema.

    ``data`` may be a whole content document, the slice ``{section_id: value}``
    or the bare value.
    Returns the section model, e.g. ``LocationSection``.

    >>> validate_section('location', {'city': 'Berlin', 'country': 'DE'}).location.city
    'Berlin'
    """
    schema = get_section_registry().get_schema(section_id)
    try:
        return schema.model_validate(_section_slice(section_id, data))
    except PydanticValidationError as e:
        _log_failure(schema, e)
        if raise_errors:
            raise
        return None


def check(data, model: type[BaseModel] = Resume) -> tuple[BaseModel | None, list[ValidationIssue]]:
    """Validate without raising: returns ``(model_instance, [])`` or ``(None, issues)``."""
    try:
        return model.model_validate(_as_data(data)), []
    except PydanticValidationError as e:
        return None, _log_failure(model, e)


def check_resume(data) -> tuple[Resume | None, list[ValidationIssue]]:
    return check(data, Resume)


def check_section(section_id: str, data) -> tuple[BaseModel | None, list[ValidationIssue]]:
    schema = get_section_registry().get_schema(section_id)
    return check(_section_slice(section_id, data), schema)


def is_valid(data, model: type[BaseModel] = Resume) -> bool:
    _, issues = check(data, model)
    return not issues


# --------------------------------------------------------------------------------------
# JSON Schema export and cross-check


@lru_cache
def _json_schema(model: type[BaseModel]) -> dict:
    return model.model_json_schema()


def resume_json_schema(model: type[BaseModel] = Resume) -> dict:
    """The JSON Schema (draft 2020-12) of ``model``, ``Resume`` by default."""
    return copy.deepcopy(_json_schema(model))


def jsonschema_issues(content: Mapping, model: type[BaseModel] = Resume) -> list[ValidationIssue]:
    """Validate ``content`` against the exported JSON Schema of ``model``.

    Checks bounds, options, required fields and patterns; date parsing and
    email checks live only in the pydantic models.
    """
    validator = jsonschema.Draft202012Validator(_json_schema(model))
    return [
        issue
        for error in validator.iter_errors(_prune_none(dict(content)))
        for issue in _jsonschema_error_issues(error)
    ]


def get_jsonschema_errors(content: Mapping, model: type[BaseModel] = Resume) -> list[str]:
    """Return a list of jsonschema validation error messages for the content."""
    return [str(issue) for issue in jsonschema_issues(content, model)]
