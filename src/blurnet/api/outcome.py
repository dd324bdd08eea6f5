"""
单次 API 调用结果及其纯分类规则
"""

from enum import Enum

import httpx
from pydantic import BaseModel

from blurnet.api.messages import ErrorMessages


class OutcomeKind(str, Enum):
    """结果类型枚举"""

    SUCCESS = "success"
    STATUS_MISMATCH = "status_mismatch"  # 状态码不符
    HOST_MISMATCH = "host_mismatch"  # 被重定向到其他主机
    READ_FAULT = "read_fault"  # 读取时传输失败
    NEVER_ATTEMPTED = "never_attempted"  # 离线，未发出调用


class Outcome(BaseModel):
    """单次调用的分类结果"""

    kind: OutcomeKind
    body: str | None = None
    cookie: str | None = None
    read_time: int = 0  # 读取响应体耗时（毫秒）
    detail: str = ""  # 诊断信息，不用于展示

    model_config = {"frozen": True}

    @property
    def is_error(self) -> bool:
        return self.kind != OutcomeKind.SUCCESS

    def message(self, messages: ErrorMessages) -> str:
        """该结果对应的本地化提示文本"""
        if self.kind in (OutcomeKind.STATUS_MISMATCH, OutcomeKind.HOST_MISMATCH):
            return messages.connection_error
        if self.kind == OutcomeKind.READ_FAULT:
            return messages.read_error
        if self.kind == OutcomeKind.NEVER_ATTEMPTED:
            return messages.offline
        return messages.unset


def host_of(url: str | httpx.URL) -> str | None:
    """``url`` 的主机部分，没有时返回 None"""
    host = httpx.URL(url).host if isinstance(url, str) else url.host
    return host or None


def classify_connection(
    expected_status: int,
    status: int,
    requested_host: str | None,
    final_host: str | None,
) -> Outcome | None:
    """
    读取响应体之前检查状态码和主机

    返回错误结果；可以继续读取响应体时返回 None。
    最终主机与请求主机不同一律视为错误，即使重定向本身成功。
    """
    if status != expected_status:
        return Outcome(
            kind=OutcomeKind.STATUS_MISMATCH,
            detail=f"API returned error code {status}. Expected {expected_status}",
        )
    if requested_host != final_host:
        return Outcome(
            kind=OutcomeKind.HOST_MISMATCH,
            detail=f"API redirected from {requested_host} to {final_host}",
        )
    return None


def success(body: str, cookie: str | None, read_time: int) -> Outcome:
    return Outcome(kind=OutcomeKind.SUCCESS, body=body, cookie=cookie, read_time=read_time)


def read_fault(detail: str) -> Outcome:
    return Outcome(kind=OutcomeKind.READ_FAULT, detail=detail)


def never_attempted() -> Outcome:
    return Outcome(kind=OutcomeKind.NEVER_ATTEMPTED, detail="call was not made")
