"""
High-level orchestration functions - the main API.

These are the primary user-facing functions that coordinate reading,
validating and transforming resume documents.
"""

import json
from typing import Union
from collections.abc import Mapping
from pathlib import Path
from vitae.base import ContentSource, Transformer
from vitae.content import DictContentSource, FileContentSource, TextContentSource
from vitae.config import resolve_layout
from vitae.models import Resume, ResumeContent, ResumeLayout
from vitae.transform import compute_content, compute_resume
from vitae.util import YAML_SUFFIXES, dump_yaml
from vitae.validators import validate_content, validate_layout, validate_resume


def _to_source(src) -> ContentSource:
    if isinstance(src, Mapping):
        return DictContentSource(src)
    elif isinstance(src, Path):
        return FileContentSource(str(src.expanduser()))
    elif isinstance(src, str):
        if src.endswith(('.json',) + YAML_SUFFIXES) and Path(src).exists():
            return FileContentSource(src)
        return TextContentSource(src)
    return src


def load_resume(
    src: Union[ContentSource, str, Path, Mapping],
    *,
    compute: bool = False,
) -> Resume:
    """
    Read and validate a resume document (``{content: ..., layout: ...}``).

    Args:
        src: A ContentSource, a JSON/YAML file path, JSON/YAML text or a dict
        compute: Whether to populate the ``computed`` fields

    Returns:
        The validated Resume

    Raises:
        pydantic.ValidationError: if the document is invalid (all field
            errors are reported together)

    Examples:
        >>> resume = load_resume({
        ...     'content': {
        ...         'basics': {'name': 'Jane Doe'},
        ...         'education': [],
        ...         'location': {'city': 'Berlin', 'country': 'DE'},
        ...     }
        ... })
        >>> resume.content.location.country
        'DE'
    """
    resume = validate_resume(_to_source(src).read())
    return compute_resume(resume) if compute else resume


def mk_resume(
    content: Union[ResumeContent, ContentSource, str, Path, Mapping],
    layout: Union[ResumeLayout, Mapping, None] = None,
    *,
    transform: Transformer | None = compute_content,
    resolve_defaults: bool = False,
) -> Resume:
    """
    Build a Resume from content and (optional) layout.

    Content and layout are validated separately. ``transform`` fills the
    ``computed`` fields (pass None to skip it); ``resolve_defaults`` fills
    unset layout fields from the configured default layout.
    """
    if not isinstance(content, ResumeContent):
        content = validate_content(_to_source(content).read())
    if layout is not None and not isinstance(layout, ResumeLayout):
        layout = validate_layout(layout)
    if resolve_defaults:
        layout = resolve_layout(layout)
    if transform is not None:
        content = transform(content)
    return Resume(content=content, layout=layout)


def mk_computed_resume(resume: Union[Resume, Mapping, str, Path]) -> Resume:
    """Validate ``resume`` (if needed) and return it with ``computed`` fields populated."""
    if not isinstance(resume, Resume):
        resume = load_resume(resume)
    return compute_resume(resume)


def dump_resume(
    resume: Resume,
    path: Union[str, Path],
    *,
    include_computed: bool = False,
) -> None:
    """Write ``resume`` to a JSON or YAML file (chosen by suffix)."""
    exclude = None if include_computed else _computed_exclusions(resume)
    data = resume.model_dump(exclude_none=True, exclude=exclude)
    path = str(path)
    if path.endswith(YAML_SUFFIXES):
        dump_yaml(data, path)
    else:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


def _computed_exclusions(resume: Resume) -> dict:
    """The ``exclude`` argument dropping every ``computed`` sub-model."""
    content_exclude = {'computed': True}
    for section_id, value in resume.content:
        if isinstance(value, list) and value:
            content_exclude[section_id] = {'__all__': {'computed'}}
        elif section_id in ('basics', 'location') and value is not None:
            content_exclude[section_id] = {'computed'}
    return {'content': content_exclude}
