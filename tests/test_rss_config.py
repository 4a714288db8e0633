"""
RSS输出配置测试
"""
import pytest
import yaml

from feeds.rss.core.rss_error_handler import RSSError, RSSErrorType
from feeds.rss.models.rss_config import RSSConfig


class TestRSSConfig:
    """YAML加载与保存"""

    def test_defaults(self):
        config = RSSConfig()

        assert config.language == ""
        assert config.ttl == 0
        assert config.encode_title is False
        assert config.pretty is True

    def test_from_dict(self):
        config = RSSConfig.from_dict({
            "rss_output": {"language": "zh-cn", "ttl": "15", "encode_description": True}
        })

        assert config.language == "zh-cn"
        assert config.ttl == 15
        assert config.encode_description is True
        assert config.encode_title is False

    def test_from_empty_dict(self):
        assert RSSConfig.from_dict(None) == RSSConfig()
        assert RSSConfig.from_dict({"rss_output": None}) == RSSConfig()

    def test_negative_ttl_rejected(self):
        with pytest.raises(ValueError):
            RSSConfig(ttl=-1)

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config" / "rss_output.yaml"
        config = RSSConfig(language="en", generator="feeds 1.0", ttl=60, encode_title=True)
        config.save_to_yaml_file(str(path))

        assert yaml.safe_load(path.read_text(encoding="utf-8"))["rss_output"]["ttl"] == 60
        assert RSSConfig.from_yaml_file(str(path)) == config

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RSSConfig.from_yaml_file(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml_is_config_error(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("rss_output: [unclosed", encoding="utf-8")

        with pytest.raises(RSSError) as exc_info:
            RSSConfig.from_yaml_file(str(path))

        assert exc_info.value.error_type == RSSErrorType.CONFIG_ERROR
        assert exc_info.value.to_dict()["details"]["file_path"] == str(path)

    def test_invalid_values_are_config_error(self, tmp_path):
        path = tmp_path / "bad_ttl.yaml"
        path.write_text("rss_output:\n  ttl: -5\n", encoding="utf-8")

        with pytest.raises(RSSError) as exc_info:
            RSSConfig.from_yaml_file(str(path))

        assert exc_info.value.error_type == RSSErrorType.CONFIG_ERROR

    def test_summary(self):
        summary = RSSConfig(encode_title=True).get_summary()

        assert summary["title_mode"] == "encoded"
        assert summary["description_mode"] == "plain"
