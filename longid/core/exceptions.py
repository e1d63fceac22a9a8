"""
异常定义模块

定义ID生成与解析过程中使用的自定义异常类。
"""

from typing import Any, Dict, Optional


class LongIdError(Exception):
    """LongId基础异常类"""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        初始化异常

        Args:
            code: 错误代码
            message: 错误消息
            details: 错误详情
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentError(LongIdError, ValueError):
    """参数非法异常，例如服务器ID超出范围"""

    def __init__(
        self,
        message: str = "参数非法",
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        初始化异常

        Args:
            message: 错误消息
            details: 错误详情
        """
        super().__init__(
            code="INVALID_ARGUMENT",
            message=message,
            details=details,
        )


class MalformedIdError(LongIdError, ValueError):
    """ID格式错误异常，输入值不可能由本方案生成"""

    def __init__(
        self,
        message: str = "输入值不是合法的LongId",
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        初始化异常

        Args:
            message: 错误消息
            details: 错误详情
        """
        super().__init__(
            code="MALFORMED_ID",
            message=message,
            details=details,
        )
