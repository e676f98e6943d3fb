"""
Configuration management using Mapping interfaces.

Implement:
- ConfigStore: MutableMapping for configuration management
- Default layout configuration
- Layout resolution (defaults + a resume's own layout settings)
"""

import copy
import logging
import os
from typing import Any
from collections.abc import Mapping, MutableMapping
from pydantic import BaseModel
from vitae.models import ResumeLayout
from vitae.util import _deep_merge, load_data_file

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'VITAE_CONFIG'

DFLT_LAYOUT = {
    'template': 'moderncv-banking',
    'margins': {
        'top': '2.5cm',
        'bottom': '2.5cm',
        'left': '1.5cm',
        'right': '1.5cm',
    },
    'typography': {'fontSize': '11pt'},
    'latex': {'fontspec': {'numbers': 'Auto'}},
    'locale': {'language': 'en'},
    'page': {'showPageNumbers': True},
}


class ConfigStore(MutableMapping):
    """Configuration store with cascading defaults."""

    def __init__(self, base_config: dict | None = None):
        self._config = base_config or {}

    def __getitem__(self, key: str) -> Any:
        return self._config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value

    def __delitem__(self, key: str) -> None:
        del self._config[key]

    def __iter__(self):
        return iter(self._config)

    def __len__(self) -> int:
        return len(self._config)

    def __repr__(self):
        return f"{type(self).__name__}({self._config!r})"


def get_default_config() -> ConfigStore:
    return ConfigStore({'layout': copy.deepcopy(DFLT_LAYOUT)})


def load_config(path: str) -> ConfigStore:
    """Load a JSON or YAML config file, on top of the defaults."""
    return ConfigStore(_deep_merge(get_default_config(), load_data_file(path)))


def get_config() -> ConfigStore:
    """The config named by the ``VITAE_CONFIG`` environment variable, if any,
    else the defaults."""
    path = os.environ.get(CONFIG_ENV_VAR)
    if path:
        logger.debug("Loading config from %s", path)
        return load_config(path)
    return get_default_config()


def resolve_layout(
    layout: ResumeLayout | Mapping | None = None,
    config: Mapping | None = None,
) -> ResumeLayout:
    """Fill the unset fields of ``layout`` from the config's default layout.

    >>> resolve_layout({'typography': {'fontSize': '12pt'}}).margins.top
    '2.5cm'
    """
    config = get_config() if config is None else config
    if isinstance(layout, BaseModel):
        layout = layout.model_dump(exclude_none=True)
    merged = _deep_merge(config.get('layout', {}), layout or {})
    return ResumeLayout.model_validate(merged)
