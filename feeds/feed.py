# coding=utf-8
"""
通用Feed数据模型

与输出格式无关的Feed结构（标题、条目、作者、时间、媒体附件），
由RSS / Atom / JSON Feed 等输出适配器共同消费。
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Dict, Any, Union

from .utils.date_utils import DateUtils


_date_utils = DateUtils()


def _parse_time(value: Union[str, datetime, None]) -> Optional[datetime]:
    """解析时间字段，字符串交给DateUtils宽松解析"""
    if value is None or isinstance(value, datetime):
        return value
    return _date_utils.parse_datetime(str(value))


def _text(value: Any) -> str:
    """字符串字段：None取空字符串"""
    if value is None:
        return ""
    return str(value)


def _int(value: Any) -> int:
    """整数字段：缺失或无法转换时取0"""
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


@dataclass
class Link:
    """链接"""

    href: str = ""
    rel: str = ""
    type: str = ""
    length: str = ""

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], str, None]) -> Optional['Link']:
        """从字典（或单纯的URL字符串）创建实例"""
        if not data:
            return None
        if isinstance(data, str):
            return cls(href=data)
        return cls(
            href=_text(data.get('href')),
            rel=_text(data.get('rel')),
            type=_text(data.get('type')),
            length=_text(data.get('length'))
        )


@dataclass
class Author:
    """作者"""

    name: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Author']:
        """从字典创建实例，空数据返回None"""
        if not data:
            return None
        return cls(name=_text(data.get('name')), email=_text(data.get('email')))


@dataclass
class Image:
    """Feed图标"""

    url: str = ""
    title: str = ""
    link: str = ""
    width: int = 0
    height: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Image']:
        """从字典创建实例，空数据返回None"""
        if not data:
            return None
        return cls(
            url=_text(data.get('url')),
            title=_text(data.get('title')),
            link=_text(data.get('link')),
            width=_int(data.get('width')),
            height=_int(data.get('height'))
        )


@dataclass
class MediaContent:
    """条目的媒体附件"""

    url: str = ""
    type: str = ""                    # MIME类型，如 image/png
    length: str = ""                  # 字节数（字符串形式）
    keywords: str = ""                # 媒体关键词，逗号分隔
    title: str = ""                   # 媒体标题

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['MediaContent']:
        """从字典创建实例，空数据返回None"""
        if not data:
            return None
        return cls(
            url=_text(data.get('url')),
            type=_text(data.get('type')),
            length=_text(data.get('length')),
            keywords=_text(data.get('keywords')),
            title=_text(data.get('title'))
        )


@dataclass
class Item:
    """通用Feed条目"""

    title: str = ""
    link: Optional[Link] = None
    description: str = ""
    content: str = ""
    author: Optional[Author] = None
    category: str = ""
    id: str = ""
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    source: Optional[Link] = None
    media: Optional[MediaContent] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        """从字典创建实例，缺失的键取空值"""
        return cls(
            title=_text(data.get('title')),
            link=Link.from_dict(data.get('link')),
            description=_text(data.get('description')),
            content=_text(data.get('content')),
            author=Author.from_dict(data.get('author')),
            category=_text(data.get('category')),
            id=_text(data.get('id')),
            created=_parse_time(data.get('created')),
            updated=_parse_time(data.get('updated')),
            source=Link.from_dict(data.get('source')),
            media=MediaContent.from_dict(data.get('media'))
        )


@dataclass
class Feed:
    """通用Feed"""

    title: str = ""
    link: Optional[Link] = None
    description: str = ""
    author: Optional[Author] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    copyright: str = ""
    image: Optional[Image] = None
    items: List[Item] = field(default_factory=list)

    def add_item(self, item: Item) -> None:
        """追加条目（保持顺序）"""
        if not isinstance(item, Item):
            raise TypeError("必须是Item实例")
        self.items.append(item)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Feed':
        """从字典创建实例"""
        feed = cls(
            title=_text(data.get('title')),
            link=Link.from_dict(data.get('link')),
            description=_text(data.get('description')),
            author=Author.from_dict(data.get('author')),
            created=_parse_time(data.get('created')),
            updated=_parse_time(data.get('updated')),
            copyright=_text(data.get('copyright')),
            image=Image.from_dict(data.get('image'))
        )

        for item_data in data.get('items') or []:
            if not isinstance(item_data, dict):
                continue  # 忽略无效条目
            feed.add_item(Item.from_dict(item_data))

        return feed
