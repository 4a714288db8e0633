# coding=utf-8
"""
RSS频道数据模型

定义RSS 2.0 <channel>、<image>、<textInput> 以及最外层 <rss> 文档的数据结构。
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple
from .rss_item import RSSItem


CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"
MEDIA_NAMESPACE = "http://search.yahoo.com/mrss/"
RSS_VERSION = "2.0"


@dataclass(frozen=True)
class RSSImage:
    """<image> 频道图标"""

    url: str = ""                    # 必需
    title: str = ""                  # 必需
    link: str = ""                   # 必需
    width: int = 0
    height: int = 0

    FIELD_ORDER: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ('url', 'url'),
        ('title', 'title'),
        ('link', 'link'),
        ('width', 'width'),
        ('height', 'height'),
    )
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('url', 'title', 'link')


@dataclass(frozen=True)
class RSSTextInput:
    """<textInput> 输入框"""

    title: str = ""
    description: str = ""
    name: str = ""
    link: str = ""

    FIELD_ORDER: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ('title', 'title'),
        ('description', 'description'),
        ('name', 'name'),
        ('link', 'link'),
    )
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('title', 'description', 'name', 'link')


@dataclass(frozen=True)
class RSSChannel:
    """RSS频道数据模型"""

    title: str = ""                  # 必需
    link: str = ""                   # 必需
    description: str = ""            # 必需
    language: str = ""
    copyright: str = ""
    managing_editor: str = ""        # 取自作者
    web_master: str = ""
    pub_date: str = ""               # created 或 updated
    last_build_date: str = ""        # 仅 updated
    category: str = ""
    generator: str = ""
    docs: str = ""
    cloud: str = ""
    ttl: int = 0                     # 缓存生存时间(分钟)
    rating: str = ""
    skip_hours: str = ""
    skip_days: str = ""
    image: Optional[RSSImage] = None
    text_input: Optional[RSSTextInput] = None
    items: Tuple[RSSItem, ...] = ()

    FIELD_ORDER: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ('title', 'title'),
        ('link', 'link'),
        ('description', 'description'),
        ('language', 'language'),
        ('copyright', 'copyright'),
        ('managing_editor', 'managingEditor'),
        ('web_master', 'webMaster'),
        ('pub_date', 'pubDate'),
        ('last_build_date', 'lastBuildDate'),
        ('category', 'category'),
        ('generator', 'generator'),
        ('docs', 'docs'),
        ('cloud', 'cloud'),
        ('ttl', 'ttl'),
        ('rating', 'rating'),
        ('skip_hours', 'skipHours'),
        ('skip_days', 'skipDays'),
        ('image', 'image'),
        ('text_input', 'textInput'),
        ('items', 'item'),
    )
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('title', 'link', 'description')

    def get_summary(self) -> Dict[str, Any]:
        """获取频道摘要信息"""
        return {
            "title": self.title,
            "link": self.link,
            "pub_date": self.pub_date,
            "last_build_date": self.last_build_date,
            "total_items": len(self.items),
            "has_image": self.image is not None,
        }


@dataclass(frozen=True)
class RSSDocument:
    """最外层 <rss> 文档，交给XMLWriter序列化"""

    channel: RSSChannel
    version: str = RSS_VERSION
    content_namespace: str = CONTENT_NAMESPACE
    media_namespace: str = MEDIA_NAMESPACE
