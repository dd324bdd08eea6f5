"""API 调用结果处理模块"""

from blurnet.api.domain import BaseAPIResponse
from blurnet.api.messages import ErrorMessages
from blurnet.api.outcome import (
    Outcome,
    OutcomeKind,
    classify_connection,
    host_of,
)
from blurnet.api.response import APIResponse, pydantic_decoder
from blurnet.api.settings import NetworkSettings
from blurnet.api.transport import TRANSPORT_FAULTS, Connection, HttpxConnection

__all__ = [
    # messages
    "ErrorMessages",
    # settings
    "NetworkSettings",
    # transport
    "TRANSPORT_FAULTS",
    "Connection",
    "HttpxConnection",
    # outcome
    "OutcomeKind",
    "Outcome",
    "classify_connection",
    "host_of",
    # domain
    "BaseAPIResponse",
    # response
    "APIResponse",
    "pydantic_decoder",
]
