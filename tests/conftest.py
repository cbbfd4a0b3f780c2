import os
import pytest

from keys_manager_config import (
    ConfigResolver,
    ProjectBasePath,
    StaticWorkspaceConfigProvider,
)

SOURCE_ROOT = 'project/src'


@pytest.fixture
def workspace_dir(tmp_path, monkeypatch):
    """Temporary cwd holding an input folder and a plain file."""
    (tmp_path / SOURCE_ROOT / 'folder').mkdir(parents=True)
    (tmp_path / SOURCE_ROOT / 'app').mkdir()
    (tmp_path / SOURCE_ROOT / '1.html').write_text('<div></div>')
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('KEYS_MANAGER_CONFIG_FILE', raising=False)
    return tmp_path


@pytest.fixture
def source_root():
    return SOURCE_ROOT


@pytest.fixture
def valid_input():
    return [f'{SOURCE_ROOT}/folder']


@pytest.fixture
def project_root_resolver():
    def resolve(project_name=None):
        return ProjectBasePath(base_path=SOURCE_ROOT)
    return resolve


@pytest.fixture
def make_resolver(project_root_resolver):
    def factory(workspace=None, project_root=None):
        return ConfigResolver(
            project_root_resolver=project_root or project_root_resolver,
            workspace_config=StaticWorkspaceConfigProvider(workspace),
        )
    return factory


@pytest.fixture
def abs_path(workspace_dir):
    def resolve(path):
        return os.path.normpath(os.path.join(os.getcwd(), path))
    return resolve
