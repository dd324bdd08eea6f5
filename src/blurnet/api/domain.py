"""
解码后的 API 响应类型
"""

from typing import Any

from pydantic import BaseModel


class BaseAPIResponse(BaseModel):
    """
    所有 API 响应的公共外层结构

    有数据返回的接口解码为其子类；无需关注返回数据的接口直接使用本类。
    未知字段会被忽略。
    """

    message: str | None = None
    code: int | None = None
    authenticated: bool | None = None
    result: str | None = None
    errors: list[str] | dict[str, Any] | None = None
    read_time: int = 0  # 毫秒，解码后附加

    model_config = {"extra": "ignore"}

    @classmethod
    def zero_value_with_message(cls, text: str) -> "BaseAPIResponse":
        """仅携带 ``text`` 作为 message 的默认实例"""
        return cls(message=text)

    def is_error(self) -> bool:
        """服务端是否在格式正确的响应中报告了错误"""
        if self.code is not None and self.code < 0:
            return True
        if self.result == "error":
            return True
        return bool(self.errors)

    def get_error_message(self, default: str = "") -> str:
        if self.message:
            return self.message
        if isinstance(self.errors, list) and self.errors:
            return str(self.errors[0])
        if isinstance(self.errors, dict):
            for value in self.errors.values():
                if isinstance(value, list) and value:
                    return str(value[0])
                if value:
                    return str(value)
        return default
