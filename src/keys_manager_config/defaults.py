"""Built-in default configuration template."""

import copy
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .domain import FileFormat

# Read-only at every level: tuples and mapping proxies.
DEFAULT_CONFIG = MappingProxyType({
    'input': ('${sourceRoot}/app',),
    'output': '${sourceRoot}/assets/i18n',
    'translations_path': '${sourceRoot}/assets/i18n',
    'langs': ('en',),
    'file_format': FileFormat.JSON.value,
    'marker': 't',
    'default_value': None,
    'replace': False,
    'remove_extra_keys': False,
    'add_missing_keys': False,
    'emit_error_on_extra_keys': False,
    'unflat': False,
    'sort': False,
    'scope_path_map': MappingProxyType({}),
})


def thaw(value: Any) -> Any:
    """Deep copy ``value`` into plain mutable dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return copy.deepcopy(value)


def default_config() -> Dict[str, Any]:
    """Return a fresh, mutable copy of the defaults template."""
    return thaw(DEFAULT_CONFIG)
