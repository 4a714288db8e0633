# coding=utf-8
"""
RSS频道检查器

检查构建出的RSS频道是否缺少RSS 2.0要求的字段。
只报告问题，不修改记录，也不抛出异常：缺字段的Feed仍然可以输出。
"""

from typing import List
import logging
from ..models.rss_feed import RSSChannel


class RSSValidator:
    """RSS频道检查器"""

    def __init__(self):
        """初始化RSS频道检查器"""
        self.logger = logging.getLogger(__name__)

        # RSS 2.0 频道必需元素
        self.required_channel_elements = ['title', 'link', 'description']

    def check_channel(self, channel: RSSChannel) -> List[str]:
        """
        检查频道及其条目

        Args:
            channel: RSS频道

        Returns:
            警告信息列表，为空表示没有发现问题
        """
        warnings = []

        for element in self.required_channel_elements:
            if not getattr(channel, element):
                warnings.append(f"频道缺少必需元素: {element}")

        if channel.image is not None and not channel.image.url:
            warnings.append("频道图标缺少url")

        for index, item in enumerate(channel.items):
            # title 与 description 至少需要一个
            if not item.title.text and not item.description.text:
                warnings.append(f"条目[{index}]缺少title和description")

        for warning in warnings:
            self.logger.warning(warning)

        return warnings
