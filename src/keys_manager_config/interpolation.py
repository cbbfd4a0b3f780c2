"""${sourceRoot} placeholder substitution for configured paths."""

from typing import List

SOURCE_ROOT_TOKEN = '${sourceRoot}'


def interpolate(path_value: str, source_root: str) -> str:
    """
    Replace every ``${sourceRoot}`` occurrence with ``source_root``.

    The result is not normalized, so relative segments such as ``..``
    are kept as written.

    Examples:
        >>> interpolate("${sourceRoot}/../public/i18n", "libs/my-lib/src")
        'libs/my-lib/src/../public/i18n'
        >>> interpolate("custom/path", "apps/my-app/src")
        'custom/path'
    """
    if SOURCE_ROOT_TOKEN not in path_value:
        return path_value
    return path_value.replace(SOURCE_ROOT_TOKEN, source_root)


def interpolate_paths(path_values: List[str], source_root: str) -> List[str]:
    return [interpolate(p, source_root) for p in path_values]
