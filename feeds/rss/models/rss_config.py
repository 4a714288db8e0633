# coding=utf-8
"""
RSS输出配置数据模型

管理RSS输出时的频道默认值与标题/描述的输出方式。
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
import yaml
from pathlib import Path

from ..core.rss_error_handler import RSSError, RSSErrorType


@dataclass
class RSSConfig:
    """RSS输出配置"""

    language: str = ""                # 频道语言，如 zh-cn
    generator: str = ""               # 生成器名称
    docs: str = ""                    # RSS规范文档地址
    ttl: int = 0                      # 缓存生存时间(分钟)，0表示不输出
    web_master: str = ""
    category: str = ""
    rating: str = ""
    encode_title: bool = False        # 条目标题以CDATA输出
    encode_description: bool = False  # 条目描述以CDATA输出
    pretty: bool = True               # 是否缩进输出
    indent: str = "  "

    def __post_init__(self):
        """初始化后的数据验证"""
        if self.ttl < 0:
            raise ValueError("ttl不能小于0")

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "rss_output": {
                "language": self.language,
                "generator": self.generator,
                "docs": self.docs,
                "ttl": self.ttl,
                "web_master": self.web_master,
                "category": self.category,
                "rating": self.rating,
                "encode_title": self.encode_title,
                "encode_description": self.encode_description,
                "pretty": self.pretty,
                "indent": self.indent
            }
        }

    def to_yaml(self) -> str:
        """转换为YAML字符串"""
        return yaml.dump(self.to_dict(), default_flow_style=False, allow_unicode=True)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'RSSConfig':
        """从字典创建实例"""
        output_data = (data or {}).get('rss_output') or {}

        return cls(
            language=output_data.get('language', ''),
            generator=output_data.get('generator', ''),
            docs=output_data.get('docs', ''),
            ttl=int(output_data.get('ttl') or 0),
            web_master=output_data.get('web_master', ''),
            category=output_data.get('category', ''),
            rating=output_data.get('rating', ''),
            encode_title=bool(output_data.get('encode_title', False)),
            encode_description=bool(output_data.get('encode_description', False)),
            pretty=bool(output_data.get('pretty', True)),
            indent=output_data.get('indent', '  ')
        )

    @classmethod
    def from_yaml_file(cls, file_path: str) -> 'RSSConfig':
        """从YAML文件加载配置"""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
            return cls.from_dict(data)
        except (yaml.YAMLError, ValueError, TypeError, AttributeError) as e:
            raise RSSError(
                message=f"RSS输出配置无效: {file_path} - {str(e)}",
                error_type=RSSErrorType.CONFIG_ERROR,
                details={'file_path': str(path)},
                original_exception=e
            ) from e

    def save_to_yaml_file(self, file_path: str) -> None:
        """保存配置到YAML文件"""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_yaml())

    def get_summary(self) -> Dict[str, Any]:
        """获取配置摘要信息"""
        return {
            "language": self.language or None,
            "generator": self.generator or None,
            "ttl_minutes": self.ttl,
            "title_mode": "encoded" if self.encode_title else "plain",
            "description_mode": "encoded" if self.encode_description else "plain",
            "pretty": self.pretty
        }
