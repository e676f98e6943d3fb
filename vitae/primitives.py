"""
Primitive field validators shared by every resume section.

Two factories do the real work:

- ``sized_string(name, min_length, max_length)``: a ``str`` whose character
  count must fall within ``[min_length, max_length]``.
- ``option(name, options)``: a ``str`` that must be a member of a closed
  option set.

Both return ``Annotated`` types usable directly as pydantic field
annotations. Failures are raised as ``PydanticCustomError`` so the field name
and the violated bound travel with the error (see
``vitae.validators.extract_validation_issues``).

>>> from pydantic import TypeAdapter
>>> TypeAdapter(sized_string('city', 2, 64)).validate_python('Berlin')
'Berlin'
"""

import re
from datetime import date, datetime
from typing import Annotated, Iterable

from pydantic import AfterValidator, EmailStr, WithJsonSchema
from pydantic_core import PydanticCustomError

from vitae.options import (
    COUNTRY_OPTIONS,
    DEGREE_OPTIONS,
    FLUENCY_OPTIONS,
    FONT_SIZE_OPTIONS,
    FONTSPEC_NUMBERS_OPTIONS,
    LANGUAGE_OPTIONS,
    LEVEL_OPTIONS,
    LOCALE_LANGUAGE_OPTIONS,
    NETWORK_OPTIONS,
    SECTION_IDS,
    TEMPLATE_OPTIONS,
)

STRING_LENGTH_ERROR = 'string_length'
INVALID_OPTION_ERROR = 'invalid_option'
INVALID_DATE_ERROR = 'invalid_date'
INVALID_URL_ERROR = 'invalid_url'
INVALID_PHONE_ERROR = 'invalid_phone'
INVALID_LENGTH_UNIT_ERROR = 'invalid_length_unit'


def _length_checker(name: str, min_length: int, max_length: int):
    def _check_length(value: str) -> str:
        actual_length = len(value)
        if actual_length < min_length or actual_length > max_length:
            raise PydanticCustomError(
                STRING_LENGTH_ERROR,
                '{field} should be between {min_length} and {max_length} '
                'characters long, got {actual_length}',
                {
                    'field': name,
                    'min_length': min_length,
                    'max_length': max_length,
                    'actual_length': actual_length,
                },
            )
        return value

    return _check_length


def sized_string(name: str, min_length: int, max_length: int):
    """Make a string type bounded to ``[min_length, max_length]`` characters.

    >>> from pydantic import TypeAdapter, ValidationError
    >>> city = TypeAdapter(sized_string('city', 2, 64))
    >>> try:
    ...     city.validate_python('B')
    ... except ValidationError as e:
    ...     print(e.errors()[0]['type'])
    string_length
    """
    return Annotated[
        str,
        AfterValidator(_length_checker(name, min_length, max_length)),
        WithJsonSchema(
            {'type': 'string', 'minLength': min_length, 'maxLength': max_length}
        ),
    ]


def _options_preview(options: tuple, max_items: int = 5) -> str:
    shown = ', '.join(repr(o) for o in options[:max_items])
    if len(options) > max_items:
        shown += f', ... ({len(options)} options)'
    return shown


def option(name: str, options: Iterable[str]):
    """Make a string type restricted to a closed set of ``options``.

    >>> from pydantic import TypeAdapter
    >>> TypeAdapter(option('level', ['Novice', 'Expert'])).validate_python('Expert')
    'Expert'
    """
    options = tuple(options)
    allowed = frozenset(options)

    def _check_option(value: str) -> str:
        if value not in allowed:
            raise PydanticCustomError(
                INVALID_OPTION_ERROR,
                '{field} should be one of {expected}, got {value}',
                {
                    'field': name,
                    'expected': _options_preview(options),
                    'value': value,
                },
            )
        return value

    return Annotated[
        str,
        AfterValidator(_check_option),
        WithJsonSchema({'type': 'string', 'enum': list(options)}),
    ]


# --------------------------------------------------------------------------------------
# Option validators, one per enumerated field

country_option = option('country', COUNTRY_OPTIONS)
degree_option = option('degree', DEGREE_OPTIONS)
fluency_option = option('fluency', FLUENCY_OPTIONS)
language_option = option('language', LANGUAGE_OPTIONS)
level_option = option('level', LEVEL_OPTIONS)
network_option = option('network', NETWORK_OPTIONS)
locale_language_option = option('language', LOCALE_LANGUAGE_OPTIONS)
font_size_option = option('fontSize', FONT_SIZE_OPTIONS)
fontspec_numbers_option = option('numbers', FONTSPEC_NUMBERS_OPTIONS)
section_id_option = option('section', SECTION_IDS)
template_option = option('template', TEMPLATE_OPTIONS)


# --------------------------------------------------------------------------------------
# Dates

# (strptime format, precision) in the order they are tried
DATE_FORMATS = (
    ('%Y-%m-%d', 'day'),
    ('%Y-%m', 'month'),
    ('%Y', 'year'),
    ('%b %Y', 'month'),
    ('%B %Y', 'month'),
)


def parse_date(value: str) -> tuple[date, str] | None:
    """Parse a resume date, returning ``(date, precision)`` or None.

    >>> parse_date('Oct 2020')
    (datetime.date(2020, 10, 1), 'month')
    >>> parse_date('2016')
    (datetime.date(2016, 1, 1), 'year')
    >>> parse_date('someday') is None
    True
    """
    text = value.strip()
    for fmt, precision in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date(), precision
        except ValueError:
            continue
    return None


def date_string(name: str = 'date'):
    """A sized string (4-32 chars) that must also parse as a date."""

    def _check_date(value: str) -> str:
        if parse_date(value) is None:
            raise PydanticCustomError(
                INVALID_DATE_ERROR,
                '{field} should be a date like 2020, 2020-10 or Oct 2020, got {value}',
                {'field': name, 'value': value},
            )
        return value

    return Annotated[sized_string(name, 4, 32), AfterValidator(_check_date)]


# --------------------------------------------------------------------------------------
# Contact fields

_URL_PATTERN = r'^https?://\S+$'
_PHONE_PATTERN = r'^[+]?[0-9 ()./-]+$'


def url_string(name: str = 'url'):
    """An http(s) URL of at most 256 characters."""
    url_re = re.compile(_URL_PATTERN)

    def _check_url(value: str) -> str:
        if not url_re.match(value):
            raise PydanticCustomError(
                INVALID_URL_ERROR,
                '{field} should be an http(s) URL, got {value}',
                {'field': name, 'value': value},
            )
        return value

    return Annotated[
        str,
        AfterValidator(_length_checker(name, 1, 256)),
        AfterValidator(_check_url),
        WithJsonSchema(
            {
                'type': 'string',
                'minLength': 1,
                'maxLength': 256,
                'pattern': _URL_PATTERN,
            }
        ),
    ]


def phone_string(name: str = 'phone'):
    """A phone number: 4-32 chars of digits, spaces and ``+ - ( ) .``"""
    phone_re = re.compile(_PHONE_PATTERN)

    def _check_phone(value: str) -> str:
        if not phone_re.match(value):
            raise PydanticCustomError(
                INVALID_PHONE_ERROR,
                '{field} should only contain digits, spaces and + - ( ) ., got {value}',
                {'field': name, 'value': value},
            )
        return value

    return Annotated[
        str,
        AfterValidator(_length_checker(name, 4, 32)),
        AfterValidator(_check_phone),
        WithJsonSchema(
            {
                'type': 'string',
                'minLength': 4,
                'maxLength': 32,
                'pattern': _PHONE_PATTERN,
            }
        ),
    ]


Email = EmailStr


def summary_string(name: str = 'summary'):
    """Free text (rich text allowed) of 16-1024 characters."""
    return sized_string(name, 16, 1024)


Keywords = list[sized_string('keyword', 1, 32)]


# --------------------------------------------------------------------------------------
# Layout lengths

_LENGTH_PATTERN = r'^\d+(\.\d+)?(cm|mm|pt|in)$'


def length_string(name: str):
    """A TeX-style length such as ``2.5cm`` or ``10pt``."""
    length_re = re.compile(_LENGTH_PATTERN)

    def _check_unit(value: str) -> str:
        if not length_re.match(value):
            raise PydanticCustomError(
                INVALID_LENGTH_UNIT_ERROR,
                '{field} should be a length like 2.5cm, 10mm, 12pt or 1in, got {value}',
                {'field': name, 'value': value},
            )
        return value

    return Annotated[
        str,
        AfterValidator(_check_unit),
        WithJsonSchema({'type': 'string', 'pattern': _LENGTH_PATTERN}),
    ]
