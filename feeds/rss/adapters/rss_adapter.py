# coding=utf-8
"""
RSS输出适配器

通用Feed → RSS 2.0 的入口：构建频道、封装文档、序列化为XML文本。
"""

from typing import Optional
import logging
from ...feed import Feed
from ..core.rss_builder import RSSBuilder
from ..models.rss_config import RSSConfig
from ..models.rss_feed import RSSChannel, RSSDocument
from ..utils.xml_writer import XMLWriter


class Rss:
    """通用Feed的RSS 2.0适配器"""

    def __init__(self, feed: Feed, config: Optional[RSSConfig] = None):
        """
        初始化RSS适配器

        Args:
            feed: 通用Feed
            config: RSS输出配置
        """
        self.logger = logging.getLogger(__name__)
        self.feed = feed
        self.config = config or RSSConfig()
        self.builder = RSSBuilder(self.config)
        self.xml_writer = XMLWriter()

    def rss_channel(self) -> RSSChannel:
        """构建RSS频道"""
        return self.builder.build_channel(self.feed)

    def feed_xml(self) -> RSSDocument:
        """返回可直接序列化的RSS文档（目前只生成2.0版本）"""
        return self.builder.wrap_channel(self.rss_channel())

    def to_xml(self) -> str:
        """
        生成RSS XML文本

        Returns:
            XML文本
        """
        document = self.feed_xml()
        summary = document.channel.get_summary()
        self.logger.info(f"生成RSS: {summary['title']}, 条目数: {summary['total_items']}")

        return self.xml_writer.to_xml(
            document,
            pretty=self.config.pretty,
            indent=self.config.indent
        )
