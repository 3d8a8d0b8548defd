"""
Shared Fixtures for plugin_config Tests

Provides:
- A plugin with bundled default resources and an empty data folder
- Sample language/config YAML documents
- Reset of the global unsupported-operation flag
"""

import sys
from pathlib import Path

import pytest

# Allow running the tests from a checkout without installing
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from plugin_config.plugin import Plugin  # noqa: E402
from plugin_config.settings import settings  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O beyond tmp_path")
    config.addinivalue_line("markers", "cli: tests of the plugin-config console script")


# ============================================================================
# Sample Documents
# ============================================================================

SAMPLE_LANG_YAML = """\
prefix:
  enabled: true
  prefix: "&6Example &8> &r"
messages:
  test: "My test message!"
  balance: "&a{0} has {1} coins"
  join: "&e%player joined from %world"
help:
  lines:
    - "&6/example &7- {0}"
    - "&6/example reload &7- Reload {1}"
"""

SAMPLE_CONFIG_YAML = """\
player-names:
  - Alice
  - Bob
  - Alice
  - Carol
  - Bob
scores:
  - 10
  - 20
  - 10
ratios:
  - 0.5
  - 1.5
  - 0.5
settings:
  max-players: 20
  pvp: false
"""


@pytest.fixture
def sample_lang_yaml():
    return SAMPLE_LANG_YAML


@pytest.fixture
def sample_config_yaml():
    return SAMPLE_CONFIG_YAML


# ============================================================================
# Plugin Fixtures
# ============================================================================

@pytest.fixture
def resources_dir(tmp_path):
    """Bundled default resources, as shipped with a plugin"""
    resources = tmp_path / "resources"
    resources.mkdir()
    (resources / "lang.yml").write_text(SAMPLE_LANG_YAML, encoding="utf-8")
    (resources / "config.yml").write_text(SAMPLE_CONFIG_YAML, encoding="utf-8")
    return resources


@pytest.fixture
def data_folder(tmp_path):
    """The plugin's data folder (not created yet)"""
    return tmp_path / "plugins" / "Example"


@pytest.fixture
def plugin(resources_dir, data_folder):
    """A plugin with bundled lang.yml and config.yml"""
    return Plugin("Example", data_folder, resources_dir)


# ============================================================================
# Settings
# ============================================================================

@pytest.fixture(autouse=True)
def reset_unsupported_flag():
    """Restore the global unsupported-operation flag after each test"""
    original = settings.throw_on_unsupported_operation
    yield
    settings.throw_on_unsupported_operation = original
