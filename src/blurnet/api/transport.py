"""
传输对象模块
APIResponse 所使用的连接抽象及 httpx 适配
"""

from collections.abc import Iterator, Mapping
from typing import Protocol

import httpx

# 读取状态码、URL 或响应体时传输层可能抛出的异常
TRANSPORT_FAULTS: tuple[type[BaseException], ...] = (
    OSError,
    httpx.TransportError,
    httpx.StreamError,
)


class Connection(Protocol):
    """已建立的请求/响应连接（任何访问都可能抛出 ``TRANSPORT_FAULTS``）"""

    @property
    def status_code(self) -> int: ...

    @property
    def url(self) -> str | httpx.URL: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    def get_list(self, name: str) -> list[str]:
        """同名响应头的全部取值，按出现顺序，不合并"""
        ...

    def iter_text(self) -> Iterator[str]: ...

    def close(self) -> None: ...


class HttpxConnection:
    """
    将流式 ``httpx.Response`` 适配为 `Connection`

    响应应来自 ``client.stream(...)`` 或 ``client.send(request, stream=True)``，
    即响应体尚未读取。``url`` 为重定向之后最终请求的 URL。
    """

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def url(self) -> httpx.URL:
        return self._response.url

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    def get_list(self, name: str) -> list[str]:
        return self._response.headers.get_list(name)

    def iter_text(self) -> Iterator[str]:
        return self._response.iter_text()

    def close(self) -> None:
        self._response.close()

    def __repr__(self) -> str:
        return f"HttpxConnection({self._response!r})"
