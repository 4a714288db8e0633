# coding=utf-8
"""
XML输出工具

把RSSDocument对象树序列化为XML文本。
空的可选字段不输出；ENCODED文本与 content:encoded 以CDATA输出。
"""

from xml.dom import minidom
from typing import Any, Optional
import re
import logging

from ..core.rss_error_handler import RSSError, RSSErrorType
from ..models.rss_item import (
    RSSTitle, RSSDescription, RSSContent, RSSGuid,
    RSSMediaContent, RSSMediaTitle, TextMode
)
from ..models.rss_feed import RSSDocument


# XML 1.0 不允许的控制字符（保留制表符、换行符、回车符）
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')


class XMLWriter:
    """XML输出工具类"""

    def __init__(self, encoding: str = "utf-8"):
        """
        初始化XML输出工具

        Args:
            encoding: XML声明中的编码
        """
        self.logger = logging.getLogger(__name__)
        self.encoding = encoding

        # 每种文本输出方式对应一个渲染函数
        self.text_renderers = {
            TextMode.PLAIN: self._append_text,
            TextMode.ENCODED: self._append_cdata,
        }

    def to_xml(self, document: RSSDocument, pretty: bool = True, indent: str = "  ") -> str:
        """
        序列化RSS文档

        Args:
            document: RSS文档
            pretty: 是否缩进输出
            indent: 缩进字符串

        Returns:
            XML文本（含XML声明）
        """
        dom = self.build_dom(document)
        try:
            if pretty:
                data = dom.toprettyxml(indent=indent, encoding=self.encoding)
            else:
                data = dom.toxml(encoding=self.encoding)
            return data.decode(self.encoding)
        except (ValueError, LookupError, UnicodeError) as e:
            raise RSSError(
                message=f"RSS文档序列化失败: {str(e)}",
                error_type=RSSErrorType.FORMAT_ERROR,
                details={'encoding': self.encoding},
                original_exception=e
            ) from e
        finally:
            dom.unlink()

    def build_dom(self, document: RSSDocument) -> minidom.Document:
        """构建DOM树"""
        dom = minidom.Document()

        root = dom.createElement('rss')
        root.setAttribute('version', document.version)
        root.setAttribute('xmlns:content', document.content_namespace)
        root.setAttribute('xmlns:media', document.media_namespace)
        dom.appendChild(root)

        root.appendChild(self._build_record(dom, 'channel', document.channel))
        return dom

    def _build_record(self, dom: minidom.Document, tag: str, record: Any) -> minidom.Element:
        """按记录的FIELD_ORDER构建元素"""
        element = dom.createElement(tag)

        for attr_name, child_tag in record.FIELD_ORDER:
            value = getattr(record, attr_name)
            required = attr_name in record.REQUIRED_FIELDS

            if isinstance(value, (tuple, list)):
                for child in value:
                    element.appendChild(self._build_record(dom, child_tag, child))
                continue

            child = self._build_value(dom, child_tag, value, required)
            if child is not None:
                element.appendChild(child)

        return element

    def _build_value(self, dom: minidom.Document, tag: str, value: Any,
                     required: bool) -> Optional[minidom.Element]:
        """构建单个字段，零值的可选字段返回None"""
        if value is None:
            return None

        if isinstance(value, (RSSTitle, RSSDescription)):
            if not value.text and not required:
                return None
            element = dom.createElement(tag)
            self.text_renderers[value.mode](dom, element, value.text)
            return element

        if isinstance(value, RSSContent):
            element = dom.createElement(tag)
            self._append_cdata(dom, element, value.content)
            return element

        if isinstance(value, RSSGuid):
            element = dom.createElement(tag)
            if value.is_perma_link:
                element.setAttribute('isPermaLink', 'true')
            self._append_text(dom, element, value.guid)
            return element

        if isinstance(value, RSSMediaContent):
            element = dom.createElement(tag)
            self._set_attribute(element, 'url', value.url)
            if value.length:
                self._set_attribute(element, 'length', value.length)
            self._set_attribute(element, 'type', value.type)
            self._set_attribute(element, 'medium', value.medium)
            return element

        if isinstance(value, RSSMediaTitle):
            element = dom.createElement(tag)
            if value.type:
                self._set_attribute(element, 'type', value.type)
            self._append_text(dom, element, value.title)
            return element

        if hasattr(value, 'FIELD_ORDER'):
            return self._build_record(dom, tag, value)

        # str / int
        if not value and not required:
            return None
        element = dom.createElement(tag)
        self._append_text(dom, element, str(value))
        return element

    def _clean_text(self, text: str) -> str:
        """移除XML不允许的控制字符"""
        return _CONTROL_CHARS.sub('', text)

    def _set_attribute(self, element: minidom.Element, name: str, value: str) -> None:
        """设置属性，属性值同样移除控制字符"""
        element.setAttribute(name, self._clean_text(value))

    def _append_text(self, dom: minidom.Document, element: minidom.Element, text: str) -> None:
        """追加转义文本节点"""
        text = self._clean_text(text)
        if text:
            element.appendChild(dom.createTextNode(text))

    def _append_cdata(self, dom: minidom.Document, element: minidom.Element, text: str) -> None:
        """追加CDATA节点"""
        text = self._clean_text(text)
        if not text:
            return
        if ']]>' in text:
            # CDATA段内不能出现 ]]>，退回为转义文本
            self.logger.debug("文本包含']]>'，改用转义文本输出")
            element.appendChild(dom.createTextNode(text))
            return
        element.appendChild(dom.createCDATASection(text))
