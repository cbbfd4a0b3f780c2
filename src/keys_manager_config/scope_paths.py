"""Per-scope translation file paths."""

from typing import Dict, List, Optional, Union

from .domain import FileFormat, ScopeFileEntry
from .interpolation import interpolate


def build_scope_file_paths(
    alias_to_scope: Dict[str, str],
    output: str,
    langs: List[str],
    file_format: Union[FileFormat, str],
    scope_path_map: Optional[Dict[str, str]] = None,
    source_root: str = ''
) -> List[ScopeFileEntry]:
    """
    Build the translation file path of every (scope, language) pair.

    Entries are ordered by scope (mapping insertion order), then by
    language. A scope listed in ``scope_path_map`` uses that directory
    (after ``${sourceRoot}`` interpolation) instead of ``output/<alias>``.
    Keys of ``scope_path_map`` without a matching alias are ignored.

    Args:
        alias_to_scope: Scope alias -> scope name
        output: Default output directory
        langs: Language codes
        file_format: Translation file extension
        scope_path_map: Optional alias -> directory overrides
        source_root: Raw project base path for interpolation

    Returns:
        List of ScopeFileEntry
    """
    scope_path_map = scope_path_map or {}
    extension = FileFormat(file_format).value
    entries: List[ScopeFileEntry] = []

    for alias in alias_to_scope:
        if alias in scope_path_map:
            base_dir = interpolate(scope_path_map[alias], source_root)
        else:
            base_dir = f"{output}/{alias}"

        for lang in langs:
            entries.append(ScopeFileEntry(path=f"{base_dir}/{lang}.{extension}", scope=alias))

    return entries
