# coding=utf-8
"""
RSS条目数据模型

定义RSS 2.0 <item> 及其子元素（标题、描述、guid、媒体扩展）的数据结构。
记录对象在构造后不可变。
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple


class TextMode(Enum):
    """文本字段的输出方式"""
    PLAIN = "plain"           # 普通元素，实体转义
    ENCODED = "encoded"       # CDATA包裹


@dataclass(frozen=True)
class RSSTitle:
    """<title> 字段"""

    text: str = ""
    mode: TextMode = TextMode.PLAIN

    @classmethod
    def plain(cls) -> 'RSSTitle':
        """普通文本输出"""
        return cls(mode=TextMode.PLAIN)

    @classmethod
    def encoded(cls) -> 'RSSTitle':
        """CDATA输出"""
        return cls(mode=TextMode.ENCODED)

    def set_title(self, title: str) -> 'RSSTitle':
        """返回携带新标题、输出方式不变的新实例"""
        return RSSTitle(text=title, mode=self.mode)


@dataclass(frozen=True)
class RSSDescription:
    """<description> 字段"""

    text: str = ""
    mode: TextMode = TextMode.PLAIN

    @classmethod
    def plain(cls) -> 'RSSDescription':
        """普通文本输出"""
        return cls(mode=TextMode.PLAIN)

    @classmethod
    def encoded(cls) -> 'RSSDescription':
        """CDATA输出"""
        return cls(mode=TextMode.ENCODED)

    def set_desc(self, desc: str) -> 'RSSDescription':
        """返回携带新描述、输出方式不变的新实例"""
        return RSSDescription(text=desc, mode=self.mode)


@dataclass(frozen=True)
class RSSContent:
    """<content:encoded> 完整内容，总是以CDATA输出"""

    content: str


@dataclass(frozen=True)
class RSSGuid:
    """<guid> 唯一标识符"""

    guid: str
    is_perma_link: bool = False


@dataclass(frozen=True)
class RSSMediaContent:
    """<media:content> 媒体附件"""

    url: str
    type: str
    medium: str
    length: str = ""


@dataclass(frozen=True)
class RSSMediaTitle:
    """<media:title> 媒体标题"""

    title: str
    type: str = ""


@dataclass(frozen=True)
class RSSItem:
    """RSS条目数据模型"""

    title: RSSTitle = RSSTitle()                    # 必需
    link: str = ""                                  # 必需
    description: RSSDescription = RSSDescription()  # 必需
    content: Optional[RSSContent] = None
    author: str = ""
    category: str = ""
    comments: str = ""
    media_content: Optional[RSSMediaContent] = None
    media_keywords: str = ""
    media_title: Optional[RSSMediaTitle] = None
    guid: Optional[RSSGuid] = None
    pub_date: str = ""                              # created 或 updated
    source: str = ""

    # 序列化时的元素顺序：(属性名, 元素名)
    FIELD_ORDER: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ('title', 'title'),
        ('link', 'link'),
        ('description', 'description'),
        ('content', 'content:encoded'),
        ('author', 'author'),
        ('category', 'category'),
        ('comments', 'comments'),
        ('media_content', 'media:content'),
        ('media_keywords', 'media:keywords'),
        ('media_title', 'media:title'),
        ('guid', 'guid'),
        ('pub_date', 'pubDate'),
        ('source', 'source'),
    )

    # 即使为空也输出的元素
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('title', 'link', 'description')
