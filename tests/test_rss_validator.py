"""
RSS频道检查器测试
"""
from feeds.rss.core.rss_validator import RSSValidator
from feeds.rss.models.rss_feed import RSSChannel, RSSImage
from feeds.rss.models.rss_item import RSSItem, RSSTitle, RSSDescription


class TestCheckChannel:
    """缺失字段只报告不抛出"""

    def test_complete_channel(self):
        channel = RSSChannel(
            title="T", link="http://x/", description="D",
            items=(RSSItem(title=RSSTitle(text="I")), RSSItem(description=RSSDescription(text="D")))
        )
        assert RSSValidator().check_channel(channel) == []

    def test_missing_required_fields(self, caplog):
        channel = RSSChannel(title="T", image=RSSImage(title="logo"), items=(RSSItem(),))
        warnings = RSSValidator().check_channel(channel)

        assert warnings == [
            "频道缺少必需元素: link",
            "频道缺少必需元素: description",
            "频道图标缺少url",
            "条目[0]缺少title和description",
        ]
        assert len(caplog.records) == 4
