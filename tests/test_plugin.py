"""
Tests for Plugin - bundled resources and the data folder.
"""

import pytest

from plugin_config.exceptions import ResourceNotFoundError
from plugin_config.plugin import Plugin


class TestGetResource:
    """Test reading bundled resources."""

    @pytest.mark.unit
    def test_existing_resource(self, plugin, sample_lang_yaml):
        stream = plugin.get_resource("lang.yml")
        assert stream is not None
        with stream:
            assert stream.read().decode("utf-8") == sample_lang_yaml

    @pytest.mark.unit
    def test_missing_resource(self, plugin):
        assert plugin.get_resource("nope.yml") is None

    @pytest.mark.unit
    def test_no_resources(self, data_folder):
        assert Plugin("Bare", data_folder).get_resource("config.yml") is None

    @pytest.mark.unit
    def test_nested_resource(self, resources_dir, data_folder):
        (resources_dir / "locales").mkdir()
        (resources_dir / "locales" / "en.yml").write_text("hello: Hello", encoding="utf-8")
        plugin = Plugin("Example", data_folder, resources_dir)

        with plugin.get_resource("locales/en.yml") as stream:
            assert stream.read() == b"hello: Hello"

    @pytest.mark.unit
    def test_parent_segments_rejected(self, plugin, tmp_path):
        """Names cannot reach files next to the resources directory."""
        (tmp_path / "secret.yml").write_text("token: abc", encoding="utf-8")

        with pytest.raises(ValueError):
            plugin.get_resource("../secret.yml")
        with pytest.raises(ValueError):
            plugin.get_resource("locales\\..\\..\\secret.yml")

    @pytest.mark.unit
    def test_from_package(self, data_folder):
        """Resources can come from an installed package."""
        plugin = Plugin.from_package("Self", "plugin_config", data_folder)

        with plugin.get_resource("__init__.py") as stream:
            assert b"__version__" in stream.read()


class TestSaveResource:
    """Test copying bundled resources into the data folder."""

    @pytest.mark.unit
    def test_copies_into_data_folder(self, plugin, data_folder, sample_config_yaml):
        plugin.save_resource("config.yml")

        assert (data_folder / "config.yml").read_text(encoding="utf-8") == sample_config_yaml

    @pytest.mark.unit
    def test_keeps_existing_file(self, plugin, data_folder):
        data_folder.mkdir(parents=True)
        (data_folder / "config.yml").write_text("edited: true", encoding="utf-8")

        plugin.save_resource("config.yml")

        assert (data_folder / "config.yml").read_text(encoding="utf-8") == "edited: true"

    @pytest.mark.unit
    def test_replace_overwrites(self, plugin, data_folder, sample_config_yaml):
        data_folder.mkdir(parents=True)
        (data_folder / "config.yml").write_text("edited: true", encoding="utf-8")

        plugin.save_resource("config.yml", replace=True)

        assert (data_folder / "config.yml").read_text(encoding="utf-8") == sample_config_yaml

    @pytest.mark.unit
    def test_backslash_paths(self, resources_dir, data_folder):
        (resources_dir / "locales").mkdir()
        (resources_dir / "locales" / "de.yml").write_text("hello: Hallo", encoding="utf-8")
        plugin = Plugin("Example", data_folder, resources_dir)

        plugin.save_resource("locales\\de.yml")

        assert (data_folder / "locales" / "de.yml").exists()

    @pytest.mark.unit
    def test_missing_resource_raises(self, plugin):
        with pytest.raises(ResourceNotFoundError, match="nope.yml"):
            plugin.save_resource("nope.yml")

    @pytest.mark.unit
    def test_empty_name_raises(self, plugin):
        with pytest.raises(ValueError):
            plugin.save_resource("")

    @pytest.mark.unit
    def test_parent_segments_rejected(self, plugin, resources_dir, data_folder):
        """Nothing is written outside the data folder."""
        (resources_dir / "escape.yml").write_text("a: 1", encoding="utf-8")

        with pytest.raises(ValueError):
            plugin.save_resource("../escape.yml")
        with pytest.raises(ValueError):
            plugin.save_resource("sub/../../escape.yml")

        assert not (data_folder.parent / "escape.yml").exists()
