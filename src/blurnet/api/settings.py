"""
网络设置模块
所有响应共享的进程级设置
"""

import os
from typing import ClassVar

_TRUTHY = {"1", "true", "yes", "on"}


def _env_verbose() -> bool:
    return os.environ.get("BLURNET_VERBOSE_LOG_NET", "").strip().lower() in _TRUTHY


class NetworkSettings:
    """
    网络设置（类级别，单例模式）

    打开 ``verbose_log_net`` 后完整响应体按 ``log_level`` 输出。
    默认级别为 DEBUG，需要 ``configure_logging(level="DEBUG")`` 才能看到；
    也可以将 ``log_level`` 设为 "INFO"，使默认的 INFO 输出也能显示。
    """

    verbose_log_net: ClassVar[bool] = _env_verbose()  # 是否记录完整响应体
    log_chunk_threshold: ClassVar[int] = 2048  # 达到该长度的响应体分段记录
    log_level: ClassVar[str] = "DEBUG"  # 响应体日志级别

    @classmethod
    def configure(
        cls,
        verbose_log_net: bool | None = None,
        log_chunk_threshold: int | None = None,
        log_level: str | None = None,
    ) -> None:
        """更新设置，为 None 的参数保持不变"""
        if verbose_log_net is not None:
            cls.verbose_log_net = verbose_log_net
        if log_chunk_threshold is not None:
            if log_chunk_threshold <= 0:
                msg = f"log_chunk_threshold must be positive, got {log_chunk_threshold}"
                raise ValueError(msg)
            cls.log_chunk_threshold = log_chunk_threshold
        if log_level is not None:
            cls.log_level = log_level.upper()

    @classmethod
    def is_verbose(cls) -> bool:
        return cls.verbose_log_net

    @classmethod
    def reset(cls) -> None:
        """重置为默认值（用于测试）"""
        cls.verbose_log_net = _env_verbose()
        cls.log_chunk_threshold = 2048
        cls.log_level = "DEBUG"
