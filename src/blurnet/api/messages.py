"""
API 调用结果的本地化提示文本
"""

from collections.abc import Mapping
from typing import ClassVar

from pydantic import BaseModel


class ErrorMessages(BaseModel):
    """调用结果对应的四条提示文本"""

    unset: str = "No message set"  # 占位文本，成功时保留
    connection_error: str = "There was a problem connecting to the server."
    read_error: str = "There was a problem reading the server response."
    offline: str = "You appear to be offline."

    model_config = {"frozen": True}

    # 资源键 -> 字段
    RESOURCE_KEYS: ClassVar[dict[str, str]] = {
        "error_unset_message": "unset",
        "error_http_connection": "connection_error",
        "error_read_connection": "read_error",
        "error_offline": "offline",
    }

    @classmethod
    def from_mapping(cls, resources: Mapping[str, str]) -> "ErrorMessages":
        """从资源键映射构建；缺失的键使用默认值"""
        values = {
            field: resources[key]
            for key, field in cls.RESOURCE_KEYS.items()
            if key in resources
        }
        return cls(**values)
