"""Data models for keys_manager_config."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

ProjectType = Literal['application', 'library']


class FileFormat(str, Enum):
    JSON = 'json'
    POT = 'pot'


class Command(str, Enum):
    EXTRACT = 'extract'
    FIND = 'find'


@dataclass(frozen=True)
class ProjectBasePath:
    """Result of a project root lookup."""
    base_path: str
    project_type: Optional[ProjectType] = None


@dataclass(frozen=True)
class ScopeFileEntry:
    """Translation file location for one (scope, language) pair."""
    path: str
    scope: str


def _to_camel_case(value: str) -> str:
    head, *rest = re.split(r'[-_\s]+', value)
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


class Scopes(BaseModel):
    """Bidirectional scope <-> alias lookup."""
    alias_to_scope: Dict[str, str] = Field(default_factory=dict)
    scope_to_alias: Dict[str, str] = Field(default_factory=dict)

    def register(self, scope: str, alias: Optional[str] = None) -> str:
        """Register a scope, deriving a camelCase alias when none is given."""
        alias = alias or _to_camel_case(scope)
        self.alias_to_scope[alias] = scope
        self.scope_to_alias[scope] = alias
        return alias


class ResolvedConfig(BaseModel):
    """Fully merged, path-resolved and validated configuration.

    All path fields are absolute. The raw project base path used for
    ``${sourceRoot}`` interpolation is kept privately and exposed through
    :attr:`source_root`; it is not part of ``model_dump()``.
    """
    model_config = ConfigDict(extra='allow')

    input: List[str]
    output: str
    translations_path: str
    langs: List[str] = Field(min_length=1)
    file_format: FileFormat = FileFormat.JSON
    default_value: Optional[str] = None
    scope_path_map: Dict[str, str] = Field(default_factory=dict)
    project: Optional[str] = None
    marker: str = 't'
    replace: bool = False
    remove_extra_keys: bool = False
    add_missing_keys: bool = False
    emit_error_on_extra_keys: bool = False
    unflat: bool = False
    sort: bool = False
    scopes: Scopes = Field(default_factory=Scopes)

    _source_root: str = PrivateAttr(default='')

    @classmethod
    def build(cls, data: Dict[str, Any], source_root: str) -> 'ResolvedConfig':
        config = cls(**data)
        config._source_root = source_root
        return config

    @property
    def source_root(self) -> str:
        return self._source_root

    def scope_file_paths(self) -> List[ScopeFileEntry]:
        """File paths for every registered scope and configured language."""
        from .scope_paths import build_scope_file_paths
        return build_scope_file_paths(
            alias_to_scope=self.scopes.alias_to_scope,
            output=self.output,
            langs=self.langs,
            file_format=self.file_format,
            scope_path_map=self.scope_path_map,
            source_root=self.source_root,
        )
