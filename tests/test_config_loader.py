"""Tests for core/config/config_loader.py"""

import pytest

from harvest_pipeline.core.config import ConfigLoader, ConfigValidationError


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigLoader:
    def test_minimal_config_uses_defaults(self, tmp_path):
        path = write_config(tmp_path, "api_key: ' KEY '\nchannel: '@googledevs'\n")

        config = ConfigLoader(path).load()

        assert config.api_key == "KEY"
        assert config.channel == "@googledevs"
        assert config.export_format == "zip"
        assert config.refresh is False
        assert config.comment_page_size == 100
        assert config.storage_root == "./storage"

    def test_full_config(self, tmp_path):
        path = write_config(tmp_path, """
api_key: KEY
channel: https://www.youtube.com/c/Legacy
export:
  format: CSV
  refresh: true
  comment_page_size: 20
storage:
  root: /tmp/harvest
""")

        config = ConfigLoader(path).load()

        assert config.export_format == "csv"
        assert config.refresh is True
        assert config.comment_page_size == 20
        assert config.storage_root == "/tmp/harvest"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader(tmp_path / "nope.yaml").load()

    @pytest.mark.parametrize("text,fragment", [
        ("", "empty"),
        ("- a\n- b\n", "mapping"),
        ("channel: x\n", "api_key"),
        ("api_key: KEY\n", "channel"),
        ("api_key: 12\nchannel: x\n", "must be a string"),
        ("api_key: '  '\nchannel: x\n", "cannot be empty"),
        ("api_key: K\nchannel: x\nexport:\n  format: xlsx\n", "export.format"),
        ("api_key: K\nchannel: x\nexport:\n  refresh: 'yes'\n", "export.refresh"),
        ("api_key: K\nchannel: x\nexport:\n  comment_page_size: 500\n", "between 1 and 100"),
        ("api_key: K\nchannel: x\nexport:\n  comment_page_size: true\n", "must be an integer"),
        ("api_key: K\nchannel: x\nexport: zip\n", "must be a mapping"),
        ("api_key: K\nchannel: x\nstorage:\n  root: 3\n", "storage.root"),
        ("api_key: [unclosed\n", "Invalid YAML"),
    ])
    def test_invalid(self, tmp_path, text, fragment):
        path = write_config(tmp_path, text)

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader(path).load()
        assert fragment in str(exc_info.value)
