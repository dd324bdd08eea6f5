"""
API 响应封装模块

将一次 HTTP 调用（或未发出的调用）归类为不可变的结果。
构造过程不抛异常：所有失败都转换为 ``is_error()`` 和可直接展示给用户的 ``error_message``。
"""

import time
from collections.abc import Callable
from typing import TypeVar

import httpx
from pydantic import BaseModel

from blurnet.api.domain import BaseAPIResponse
from blurnet.api.messages import ErrorMessages
from blurnet.api.outcome import (
    Outcome,
    classify_connection,
    host_of,
    never_attempted,
    read_fault,
    success,
)
from blurnet.api.settings import NetworkSettings
from blurnet.api.transport import TRANSPORT_FAULTS, Connection
from blurnet.util.log import get_logger, log_chunked

T = TypeVar("T", bound=BaseAPIResponse)

Decoder = Callable[[str, type[T]], T]

log = get_logger("APIResponse")


def pydantic_decoder(body: str, target: type[T]) -> T:
    """默认解码器：按 ``target`` 校验 JSON 响应体"""
    return target.model_validate_json(body)


class APIResponse(BaseModel):
    """单次 API 调用结果"""

    outcome: Outcome
    error_message: str

    model_config = {"frozen": True}

    @classmethod
    def from_connection(
        cls,
        messages: ErrorMessages,
        original_url: str | httpx.URL,
        connection: Connection,
        expected_status: int = 200,
    ) -> "APIResponse":
        """
        检查已建立的连接并读取响应体

        Args:
            messages: 本地化提示文本
            original_url: 调用方请求的原始 URL
            connection: 已建立的连接，读取响应体后在此关闭
            expected_status: 视为成功的状态码

        Returns:
            APIResponse: 成功结果或某一种错误结果
        """
        try:
            rejected = classify_connection(
                expected_status,
                connection.status_code,
                host_of(original_url),
                host_of(connection.url),
            )
        except (*TRANSPORT_FAULTS, httpx.InvalidURL) as e:
            log.opt(exception=e).error(
                "Error ({error}) calling {url}", error=str(e), url=str(original_url)
            )
            return cls._of(read_fault(f"{type(e).__name__}: {e}"), messages)

        if rejected is not None:
            log.error("{detail} calling {url}", detail=rejected.detail, url=str(original_url))
            return cls._of(rejected, messages)

        outcome = cls._read(original_url, connection)

        if not outcome.is_error and NetworkSettings.is_verbose():
            log_chunked(
                log,
                outcome.body or "",
                threshold=NetworkSettings.log_chunk_threshold,
                level=NetworkSettings.log_level,
            )

        return cls._of(outcome, messages)

    @classmethod
    def offline(cls, messages: ErrorMessages) -> "APIResponse":
        """未发出调用（离线）时的结果"""
        return cls._of(never_attempted(), messages)

    @classmethod
    def _of(cls, outcome: Outcome, messages: ErrorMessages) -> "APIResponse":
        return cls(outcome=outcome, error_message=outcome.message(messages))

    @staticmethod
    def _read(original_url: str | httpx.URL, connection: Connection) -> Outcome:
        """读取 Cookie 和响应体，然后释放连接"""
        try:
            # Set-Cookie 不能合并，取最后一个（与 getHeaderField 一致）
            cookies = connection.get_list("Set-Cookie")
            cookie = cookies[-1] if cookies else None
            start = time.monotonic_ns()
            body = "".join(connection.iter_text())
            read_time = (time.monotonic_ns() - start) // 1_000_000
            outcome = success(body, cookie, read_time)
        except Exception as e:
            log.opt(exception=e).error(
                "{error_type} ({error}) reading {url}",
                error_type=type(e).__name__,
                error=str(e),
                url=str(original_url),
            )
            outcome = read_fault(f"{type(e).__name__}: {e}")
        finally:
            try:
                connection.close()
            except Exception as e:
                log.opt(exception=e).error(
                    "{error_type} caught closing connection: {error}",
                    error_type=type(e).__name__,
                    error=str(e),
                )
        return outcome

    def is_error(self) -> bool:
        return self.outcome.is_error

    @property
    def cookie(self) -> str | None:
        """响应的 Set-Cookie 头（原样）"""
        return self.outcome.cookie

    @property
    def response_body(self) -> str | None:
        """原始响应文本，失败时为 None"""
        return self.outcome.body

    @property
    def read_time(self) -> int:
        return self.outcome.read_time  # 毫秒

    def get_response(
        self,
        target: type[T] = BaseAPIResponse,
        decoder: Decoder | None = None,
    ) -> T | None:
        """
        将响应体解码为 ``target``

        出错时不解码，返回携带错误信息的默认 ``target`` 实例；
        成功时解码并附加 ``read_time``。响应体内的服务端错误由 ``target`` 自行判断。

        Args:
            target: 目标响应类型
            decoder: ``(body, target) -> instance``，默认使用 pydantic 校验

        Returns:
            解码后的响应；``target`` 无法构造默认实例时返回 None（属于编程错误）
        """
        if self.is_error():
            try:
                return target.zero_value_with_message(self.error_message)
            except Exception:
                log.opt(exception=True).critical(
                    "Failed to build {target} with an error message",
                    target=getattr(target, "__name__", repr(target)),
                )
                return None

        decode = decoder or pydantic_decoder
        response = decode(self.outcome.body, target)
        response.read_time = self.read_time
        return response
