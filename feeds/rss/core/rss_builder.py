# coding=utf-8
"""
RSS构建器

把通用Feed模型转换为RSS 2.0记录：条目映射、频道映射、文档封装。
转换过程是纯函数式的，任何缺失字段都降级为不输出，不会抛出异常。
"""

from typing import Optional
import logging
from ...feed import Feed, Item
from ...utils.date_utils import DateUtils
from ..models.rss_item import (
    RSSItem, RSSTitle, RSSDescription, RSSContent,
    RSSGuid, RSSMediaContent, RSSMediaTitle
)
from ..models.rss_feed import RSSChannel, RSSImage, RSSDocument
from ..models.rss_config import RSSConfig


class RSSBuilder:
    """RSS构建器"""

    def __init__(self, config: Optional[RSSConfig] = None):
        """
        初始化RSS构建器

        Args:
            config: 输出配置；为空时频道可选字段不填充，标题/描述以普通文本输出
        """
        self.logger = logging.getLogger(__name__)
        self.config = config
        self.date_utils = DateUtils()

    def title_renderer(self) -> RSSTitle:
        """按配置选择标题的输出方式"""
        if self.config and self.config.encode_title:
            return RSSTitle.encoded()
        return RSSTitle.plain()

    def description_renderer(self) -> RSSDescription:
        """按配置选择描述的输出方式"""
        if self.config and self.config.encode_description:
            return RSSDescription.encoded()
        return RSSDescription.plain()

    def build_item(self, item: Item,
                   title_renderer: Optional[RSSTitle] = None,
                   description_renderer: Optional[RSSDescription] = None) -> RSSItem:
        """
        将通用条目转换为RSS条目

        Args:
            item: 通用Feed条目
            title_renderer: 标题输出方式，默认普通文本
            description_renderer: 描述输出方式，默认普通文本

        Returns:
            RSSItem对象
        """
        title_renderer = title_renderer or RSSTitle.plain()
        description_renderer = description_renderer or RSSDescription.plain()

        guid = None
        if item.id:
            guid = RSSGuid(guid=item.id, is_perma_link=True)

        content = None
        if item.content:
            content = RSSContent(content=item.content)

        media_content = None
        media_title = None
        media_keywords = ""
        media = item.media
        if media is not None and media.type and media.length:
            media_content = RSSMediaContent(
                url=media.url,
                type=media.type,
                medium=media.type.split('/')[0],
                length=media.length
            )
            if media.title:
                media_title = RSSMediaTitle(title=media.title, type="plain")
            if media.keywords:
                media_keywords = media.keywords

        return RSSItem(
            title=title_renderer.set_title(item.title),
            link=item.link.href if item.link else "",
            description=description_renderer.set_desc(item.description),
            content=content,
            author=item.author.name if item.author else "",
            category=item.category,
            media_content=media_content,
            media_keywords=media_keywords,
            media_title=media_title,
            guid=guid,
            pub_date=self.date_utils.any_time_format(item.created, item.updated),
            source=item.source.href if item.source else ""
        )

    def build_channel(self, feed: Feed) -> RSSChannel:
        """
        将通用Feed转换为RSS频道

        Args:
            feed: 通用Feed

        Returns:
            RSSChannel对象，条目顺序与feed.items一致
        """
        managing_editor = ""
        if feed.author is not None:
            managing_editor = feed.author.email
            if feed.author.name:
                managing_editor = f"{feed.author.email} ({feed.author.name})"

        image = None
        if feed.image is not None:
            image = RSSImage(
                url=feed.image.url,
                title=feed.image.title,
                link=feed.image.link,
                width=feed.image.width,
                height=feed.image.height
            )

        title_renderer = self.title_renderer()
        description_renderer = self.description_renderer()
        items = tuple(
            self.build_item(item, title_renderer, description_renderer)
            for item in feed.items
        )

        config = self.config or RSSConfig()
        self.logger.debug(f"构建RSS频道: {feed.title}, 条目数: {len(items)}")

        return RSSChannel(
            title=feed.title,
            link=feed.link.href if feed.link else "",
            description=feed.description,
            language=config.language,
            copyright=feed.copyright,
            managing_editor=managing_editor,
            web_master=config.web_master,
            pub_date=self.date_utils.any_time_format(feed.created, feed.updated),
            last_build_date=self.date_utils.any_time_format(feed.updated),
            category=config.category,
            generator=config.generator,
            docs=config.docs,
            ttl=config.ttl,
            rating=config.rating,
            image=image,
            items=items
        )

    def wrap_channel(self, channel: RSSChannel) -> RSSDocument:
        """把频道封装为 <rss version="2.0"> 文档"""
        return RSSDocument(channel=channel)
