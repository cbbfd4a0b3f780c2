"""Layered configuration merging."""

import logging
from typing import Any, Dict, Mapping, Optional

from .defaults import thaw

logger = logging.getLogger(__name__)


def merge_configs(
    defaults: Mapping[str, Any],
    workspace: Optional[Dict[str, Any]] = None,
    inline: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Merge config layers with precedence inline > workspace > defaults.

    The merge is shallow: a key set in a higher layer replaces the lower
    value wholesale (lists and scope path maps included). Keys whose value
    is None do not override. None of the inputs is mutated.

    Args:
        defaults: Built-in defaults
        workspace: Raw config derived from the shared workspace config
        inline: Inline / command-line overrides

    Returns:
        A new merged configuration dictionary
    """
    result = thaw(defaults)

    for layer_name, layer in (('workspace', workspace), ('inline', inline)):
        if not layer:
            continue
        overridden = []
        for key, value in layer.items():
            if value is None:
                continue
            result[key] = thaw(value)
            overridden.append(key)
        logger.debug(f"merge_configs: {layer_name} layer set {overridden}")

    return result
