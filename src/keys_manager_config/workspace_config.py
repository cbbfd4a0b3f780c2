"""Shared workspace configuration (transloco.config.yaml) models and providers."""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .domain import FileFormat, ProjectType
from .settings import resolve_workspace_config_path
from .validators import WorkspaceConfigError

logger = logging.getLogger(__name__)

INLINE_SOURCE = '<inline>'


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KeysManagerSection(_CamelModel):
    """The tool-specific ``keysManager`` block."""
    input: Optional[Union[str, List[str]]] = None
    output: Optional[str] = None
    default_value: Optional[str] = None
    file_format: Optional[FileFormat] = None
    marker: Optional[str] = None
    replace: Optional[bool] = None
    remove_extra_keys: Optional[bool] = None
    add_missing_keys: Optional[bool] = None
    emit_error_on_extra_keys: Optional[bool] = None
    unflat: Optional[bool] = None
    sort: Optional[bool] = None


class WorkspaceProject(_CamelModel):
    source_root: str
    project_type: Optional[ProjectType] = None


class WorkspaceConfig(_CamelModel):
    """Workspace-level config shared by every project in the repository."""
    root_translations_path: Optional[str] = None
    langs: Optional[List[str]] = None
    scope_path_map: Optional[Dict[str, str]] = None
    keys_manager: Optional[KeysManagerSection] = None
    projects: Dict[str, WorkspaceProject] = Field(default_factory=dict)

    def to_raw_config(self) -> Dict[str, Any]:
        """Flatten into a raw config layer using keys manager field names."""
        raw: Dict[str, Any] = {}
        if self.keys_manager:
            raw.update(self.keys_manager.model_dump(exclude_none=True, mode='json'))
        if self.root_translations_path is not None:
            raw['translations_path'] = self.root_translations_path
        if self.langs is not None:
            raw['langs'] = list(self.langs)
        if self.scope_path_map is not None:
            raw['scope_path_map'] = dict(self.scope_path_map)
        return raw


def load_workspace_config(file_path: str) -> WorkspaceConfig:
    """
    Load a workspace config file.

    A missing file yields an empty WorkspaceConfig.

    Raises:
        WorkspaceConfigError: If the file cannot be read, is not valid YAML,
            or does not match the expected structure.
    """
    if not os.path.exists(file_path):
        logger.debug(f"No workspace config at {file_path}, using empty config")
        return WorkspaceConfig()

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error in {file_path}: {e}")
        raise WorkspaceConfigError(file_path, str(e)) from e
    except OSError as e:
        raise WorkspaceConfigError(file_path, str(e)) from e

    if not isinstance(data, dict):
        raise WorkspaceConfigError(file_path, "top-level value must be a mapping")

    try:
        config = WorkspaceConfig.model_validate(data)
    except ValidationError as e:
        raise WorkspaceConfigError(file_path, str(e)) from e

    logger.debug(f"Loaded workspace config from {file_path}")
    return config


class WorkspaceConfigProvider(ABC):
    """Source of the shared workspace config, injected into the resolver."""

    @abstractmethod
    def get(self) -> WorkspaceConfig:
        pass


class StaticWorkspaceConfigProvider(WorkspaceConfigProvider):
    """Serves a fixed workspace config (already parsed or as a raw mapping)."""

    def __init__(self, config: Optional[Union[WorkspaceConfig, Dict[str, Any]]] = None):
        if config is None:
            config = WorkspaceConfig()
        elif isinstance(config, dict):
            try:
                config = WorkspaceConfig.model_validate(config)
            except ValidationError as e:
                raise WorkspaceConfigError(INLINE_SOURCE, str(e)) from e
        self.config = config

    def get(self) -> WorkspaceConfig:
        return self.config


class YamlWorkspaceConfigProvider(WorkspaceConfigProvider):
    """Reads the workspace config file anew on every call."""

    def __init__(self, file_path: Optional[str] = None):
        self.file_path = file_path

    def get(self) -> WorkspaceConfig:
        return load_workspace_config(resolve_workspace_config_path(self.file_path))
