# coding=utf-8
"""
日期处理工具

提供Feed时间字段的解析、零值判断与RFC 1123格式化功能。
"""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional
import re
import logging
from dateutil import parser as dateutil_parser


class DateUtils:
    """日期处理工具类"""

    def __init__(self):
        """初始化日期工具"""
        self.logger = logging.getLogger(__name__)

        # dateutil失败后的兜底格式
        self.common_formats = [
            '%Y-%m-%dT%H:%M:%S%z',          # ISO 8601 with timezone
            '%Y-%m-%dT%H:%M:%SZ',           # ISO 8601 UTC
            '%Y-%m-%dT%H:%M:%S',            # ISO 8601 without timezone
            '%a, %d %b %Y %H:%M:%S %z',     # RFC 1123 with numeric zone
            '%a, %d %b %Y %H:%M:%S GMT',    # RFC 1123 GMT
            '%Y-%m-%d %H:%M:%S',            # Common database format
            '%Y-%m-%d',                     # Date only
        ]

    def parse_datetime(self, date_str: str,
                      default_timezone: Optional[timezone] = None) -> Optional[datetime]:
        """
        解析日期时间字符串

        Args:
            date_str: 日期时间字符串
            default_timezone: 默认时区（当日期字符串没有时区信息时使用）

        Returns:
            解析后的datetime对象，失败时返回None
        """
        if not date_str or not isinstance(date_str, str):
            return None

        date_str = self._preprocess_date_string(date_str)
        if not date_str:
            return None

        try:
            dt = dateutil_parser.parse(date_str)
            return self._apply_default_timezone(dt, default_timezone)
        except (ValueError, OverflowError):
            pass

        for fmt in self.common_formats:
            try:
                dt = datetime.strptime(date_str, fmt)
                return self._apply_default_timezone(dt, default_timezone)
            except ValueError:
                continue

        self.logger.warning(f"无法解析日期时间: {date_str}")
        return None

    def _apply_default_timezone(self, dt: datetime,
                                default_timezone: Optional[timezone]) -> datetime:
        """无时区信息时补上默认时区（缺省为UTC）"""
        if dt.tzinfo is None:
            # 假定为UTC
            dt = dt.replace(tzinfo=default_timezone or timezone.utc)
        return dt

    def _preprocess_date_string(self, date_str: str) -> str:
        """预处理日期字符串"""
        date_str = re.sub(r'\s+', ' ', date_str).strip()

        # 例如：Mon, 01 Jan 2024 12:00:00 +0000 (UTC)
        date_str = re.sub(r'\s*\([^)]+\)$', '', date_str)

        return date_str

    def normalize_datetime(self, dt: datetime) -> datetime:
        """
        标准化datetime对象（确保有时区信息）

        Args:
            dt: datetime对象

        Returns:
            标准化后的datetime对象
        """
        if dt.tzinfo is None:
            # 假定为UTC
            return dt.replace(tzinfo=timezone.utc)
        return dt

    def is_zero(self, dt: Optional[datetime]) -> bool:
        """None 或 0001-01-01 00:00:00 视为未设置的时间"""
        if dt is None:
            return True
        return dt.replace(tzinfo=None) == datetime.min

    def to_rfc1123z(self, dt: datetime) -> str:
        """
        转换为带数字时区的RFC 1123格式字符串

        与locale无关，例如 ``Mon, 02 Jan 2006 15:04:05 -0700``。

        Args:
            dt: datetime对象（无时区时按UTC处理）

        Returns:
            RFC 1123Z格式字符串
        """
        return format_datetime(self.normalize_datetime(dt))

    def any_time_format(self, *times: Optional[datetime]) -> str:
        """
        按顺序取第一个非零时间并格式化为RFC 1123Z

        Args:
            times: 候选时间，靠前的优先

        Returns:
            格式化后的字符串；全部为零值时返回空字符串
        """
        for dt in times:
            if not self.is_zero(dt):
                return self.to_rfc1123z(dt)
        return ""
