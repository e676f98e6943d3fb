"""
Content sources: where candidate resume documents come from.

Implement:
- FileContentSource: JSON or YAML files
- DictContentSource: in-memory mappings
- TextContentSource: JSON or YAML text
"""

from typing import Any
from collections.abc import Mapping
from vitae.util import ensure_resume_dict, load_data_file, YAML_SUFFIXES


class FileContentSource:
    """Implements ContentSource for file-based data."""

    def __init__(self, path: str):
        self._path = str(path)

    def read(self) -> Mapping[str, Any]:
        if self._path.endswith('.json') or self._path.endswith(YAML_SUFFIXES):
            return load_data_file(self._path)
        else:
            raise ValueError(f'Unsupported file type: {self._path}')


class DictContentSource:
    """Implements ContentSource for dictionary data."""

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def read(self) -> Mapping[str, Any]:
        return self._data


class TextContentSource:
    """Implements ContentSource for JSON or YAML text."""

    def __init__(self, text: str):
        self._text = text

    def read(self) -> Mapping[str, Any]:
        return ensure_resume_dict(self._text)
