# coding=utf-8
"""
RSS错误定义

RSS转换核心本身不抛出异常（缺失字段一律降级为不输出），
这里的异常只用于配置加载与XML序列化。
"""

from datetime import datetime
from typing import Dict, Any, Optional
from enum import Enum


class RSSErrorType(Enum):
    """RSS错误类型枚举"""
    FORMAT_ERROR = "format_error"         # 序列化/格式错误
    CONFIG_ERROR = "config_error"         # 配置错误
    UNKNOWN_ERROR = "unknown_error"       # 未知错误


class RSSError(Exception):
    """RSS模块自定义异常"""

    def __init__(self, message: str, error_type: RSSErrorType = RSSErrorType.UNKNOWN_ERROR,
                 details: Optional[Dict[str, Any]] = None, original_exception: Optional[Exception] = None):
        """
        初始化RSS异常

        Args:
            message: 错误消息
            error_type: 错误类型
            details: 错误详情
            original_exception: 原始异常
        """
        super().__init__(message)
        self.error_type = error_type
        self.details = details or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            'message': str(self),
            'error_type': self.error_type.value,
            'details': self.details,
            'timestamp': self.timestamp.isoformat(),
            'original_exception': str(self.original_exception) if self.original_exception else None
        }
