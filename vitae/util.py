"""
Utilities for reading resume data and general helpers.
"""

import json
import os
import re
from datetime import date, datetime
from typing import Mapping, Union
from pathlib import Path

import yaml  # pip install PyYAML

JsonContentStr = str  # JSON (or YAML) string
PathStr = str  # filesystem path
ResumeSource = Union[PathStr, JsonContentStr, Path, Mapping]
ResumeDict = dict

YAML_SUFFIXES = ('.yaml', '.yml')
DATA_FILE_SUFFIXES = ('.json',) + YAML_SUFFIXES


class ResumeYamlLoader(yaml.SafeLoader):
    """SafeLoader that only reads true/false as booleans.

    YAML 1.1 also resolves yes/no/on/off, which turns the country code ``NO``
    and the locale ``no`` into False.

    >>> yaml.load('country: NO\\nshow: true\\n', Loader=ResumeYamlLoader)
    {'country': 'NO', 'show': True}
    """


ResumeYamlLoader.yaml_implicit_resolvers = {
    first: [r for r in resolvers if r[0] != 'tag:yaml.org,2002:bool']
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ResumeYamlLoader.add_implicit_resolver(
    'tag:yaml.org,2002:bool',
    re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'),
    list('tTfF'),
)


def _load_json_file(path: str) -> dict:
    """Load a JSON file from the given path."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def load_yaml(yaml_path: str):
    """
    Loads a YAML file using PyYAML.
    This works in Python 3.7+ because dicts preserve insertion order.
    """
    with open(yaml_path, 'r', encoding='utf-8') as file:
        return yaml.load(file, Loader=ResumeYamlLoader)


def dump_yaml(d: dict, yaml_path: str):
    """
    Dumps a dictionary to a YAML file using PyYAML,
    preserving key order and using a readable block style.
    """
    with open(yaml_path, 'w', encoding='utf-8') as file:
        # sort_keys=False keeps section order, which is rendering-significant
        yaml.dump(
            d, file, sort_keys=False, default_flow_style=False, allow_unicode=True
        )


def load_data_file(path: str) -> dict:
    """Load a JSON or YAML file, choosing the parser from the file suffix."""
    if str(path).endswith(YAML_SUFFIXES):
        return _yaml_scalars_to_str(load_yaml(path) or {})
    return _load_json_file(path)


def _yaml_scalars_to_str(obj):
    """Turn YAML-resolved dates and numbers back into strings.

    YAML reads ``startDate: 2020-01-01`` as a date and ``score: 3.8`` as a
    float, but every resume field is a string.

    >>> _yaml_scalars_to_str({'startDate': date(2020, 1, 1), 'score': 3.8})
    {'startDate': '2020-01-01', 'score': '3.8'}
    """
    if isinstance(obj, dict):
        return {k: _yaml_scalars_to_str(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_yaml_scalars_to_str(x) for x in obj]
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    if isinstance(obj, (int, float)) and not isinstance(obj, bool):
        return str(obj)
    return obj


# --------------------------------------------------------------------------------------
# Helpers


def _deep_merge(base: Mapping, override: Mapping) -> dict:
    """Merge nested dicts, with override taking precedence.

    >>> _deep_merge({'a': {'x': 1, 'y': 2}}, {'a': {'y': 3}})
    {'a': {'x': 1, 'y': 3}}
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(result.get(k), Mapping):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _prune_none(obj):
    """Recursively remove keys or list items that are None so that explicit
    nulls read as absent fields."""
    if isinstance(obj, dict):
        return {k: _prune_none(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, list):
        return [_prune_none(x) for x in obj if x is not None]
    return obj


def ensure_resume_dict(src: ResumeSource) -> ResumeDict:
    """
    Get a resume dict from various sources
    (json or yaml file, json or yaml string, dict, ...)

    The result is not validated; see ``vitae.validators``.

    >>> ensure_resume_dict('{"content": {"basics": {"name": "Jane"}}}')
    {'content': {'basics': {'name': 'Jane'}}}
    """
    if isinstance(src, Path):
        src = str(src.expanduser())
    if isinstance(src, str):
        if os.path.exists(src):
            return load_data_file(src)
        if src.strip().endswith(DATA_FILE_SUFFIXES) and '\n' not in src.strip():
            raise FileNotFoundError(f"No such resume file: {src}")
        try:
            content = json.loads(src)
        except json.JSONDecodeError as json_error:
            try:
                content = _yaml_scalars_to_str(yaml.load(src, Loader=ResumeYamlLoader))
            except yaml.YAMLError:
                raise ValueError(
                    f"Invalid JSON content provided: {json_error}"
                ) from json_error
        if not isinstance(content, Mapping):
            raise ValueError(
                f"Content is neither a file, a JSON nor a YAML mapping: {src[:80]!r}"
            )
        return dict(content)
    if not isinstance(src, Mapping):
        raise TypeError(
            f"Content source must be a dict or a valid JSON/YAML string/filename: {src}"
        )
    return dict(src)
