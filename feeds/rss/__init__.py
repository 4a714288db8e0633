# coding=utf-8
"""
RSS模块 - 把通用Feed模型输出为RSS 2.0文档

通用Feed → RSS记录（频道/条目） → <rss version="2.0"> 文档 → XML文本。
"""

__version__ = "1.0.0"

from .core.rss_builder import RSSBuilder
from .core.rss_validator import RSSValidator
from .core.rss_error_handler import RSSError, RSSErrorType
from .adapters.rss_adapter import Rss
from .models.rss_item import (
    RSSItem, RSSTitle, RSSDescription, RSSContent,
    RSSGuid, RSSMediaContent, RSSMediaTitle, TextMode
)
from .models.rss_feed import RSSChannel, RSSImage, RSSTextInput, RSSDocument
from .models.rss_config import RSSConfig
from .utils.xml_writer import XMLWriter

__all__ = [
    "RSSBuilder",
    "RSSValidator",
    "RSSError",
    "RSSErrorType",
    "Rss",
    "RSSItem",
    "RSSTitle",
    "RSSDescription",
    "RSSContent",
    "RSSGuid",
    "RSSMediaContent",
    "RSSMediaTitle",
    "TextMode",
    "RSSChannel",
    "RSSImage",
    "RSSTextInput",
    "RSSDocument",
    "RSSConfig",
    "XMLWriter",
]
