"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-03-02
@Docs: Line protocol error hierarchy.
行协议异常体系。
"""

from typing import Any


class LineProtocolError(Exception):
    """
    Line Protocol Errors.
    行协议异常。

    Errors raised while building or encoding points.
    构建或编码数据点时发生的异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "line_protocol_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.error_code = error_code


class InvalidArgumentError(LineProtocolError, ValueError):
    """
    Invalid argument.
    非法参数。

    Raised at construction time only; decoding and encoding never raise it.
    仅在构建阶段抛出；解码与编码阶段不会抛出。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "invalid_argument",
    ) -> None:
        super().__init__(message=message, details=details, error_code=error_code)


def check_non_empty_string(value: str | None, name: str) -> None:
    """
    Enforce that a string is not empty.
    确保字符串非空。

    Args:
        value: The string to test.
            待校验的字符串。
        name: The argument name used in the message.
            用于错误消息的参数名。

    Raises:
        InvalidArgumentError: If the string is None or empty.
            字符串为 None 或空时抛出。
    """
    if not value:
        raise InvalidArgumentError(
            message=f"Expecting a non-empty string for {name}",
            details={"argument": name},
            error_code="empty_string",
        )
