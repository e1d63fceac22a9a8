"""
ID解析模块

从任意LongId中提取时间戳、序列号和服务器ID，无需生成器实例。
"""

import datetime
from typing import Any, NamedTuple

from longid.core.exceptions import MalformedIdError
from longid.core.layout import (
    ID_BITS,
    MAX_SEQUENCE,
    MAX_SERVER_ID,
    MIN_ID_BIT_LENGTH,
    SEQUENCE_SHIFT,
    TIMESTAMP_SHIFT,
)


class IdParts(NamedTuple):
    """ID的三个组成字段"""

    timestamp: int
    sequence: int
    server_id: int


def _check(long_id: Any) -> int:
    """
    校验输入是否可能是一个LongId

    Args:
        long_id: 待解析的值

    Returns:
        int: 校验通过的ID

    Raises:
        MalformedIdError: 输入不是整数、为负数、超过64位，或位数不足
    """
    if not isinstance(long_id, int) or isinstance(long_id, bool):
        raise MalformedIdError(
            f"LongId必须是整数，实际类型: {type(long_id).__name__}",
            details={"id": long_id},
        )
    if long_id < 0 or long_id.bit_length() > ID_BITS:
        raise MalformedIdError(
            f"LongId必须是{ID_BITS}位无符号整数", details={"id": long_id}
        )
    if long_id.bit_length() < MIN_ID_BIT_LENGTH:
        raise MalformedIdError("输入值过小，不是合法的LongId", details={"id": long_id})
    return long_id


def extract_timestamp(long_id: int) -> int:
    """
    提取ID生成时的毫秒时间戳

    Args:
        long_id: 由本方案生成的ID，不要求来自当前实例

    Returns:
        int: Unix纪元起的毫秒数
    """
    return _check(long_id) >> TIMESTAMP_SHIFT


def extract_sequence(long_id: int) -> int:
    """
    提取同毫秒序列号，通常仅用于调试

    Args:
        long_id: 由本方案生成的ID

    Returns:
        int: 序列号 (0-255)
    """
    return (_check(long_id) >> SEQUENCE_SHIFT) & MAX_SEQUENCE


def extract_server_id(long_id: int) -> int:
    """
    提取生成ID的服务器ID

    Args:
        long_id: 由本方案生成的ID

    Returns:
        int: 服务器ID (0-4095)
    """
    return _check(long_id) & MAX_SERVER_ID


def extract_datetime(long_id: int) -> datetime.datetime:
    """
    提取ID生成时间

    Args:
        long_id: 由本方案生成的ID

    Returns:
        datetime.datetime: 带UTC时区的生成时间，精确到毫秒
    """
    epoch = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
    return epoch + datetime.timedelta(milliseconds=extract_timestamp(long_id))


def decompose(long_id: int) -> IdParts:
    """拆分ID为时间戳、序列号和服务器ID"""
    return IdParts(
        timestamp=extract_timestamp(long_id),
        sequence=extract_sequence(long_id),
        server_id=extract_server_id(long_id),
    )


def to_hex(long_id: int) -> str:
    """
    按字段输出十六进制表示

    Args:
        long_id: 由本方案生成的ID

    Returns:
        str: 形如 ``0187c3a2f10-00-063`` 的字符串
    """
    parts = decompose(long_id)
    return f"{parts.timestamp:011x}-{parts.sequence:02x}-{parts.server_id:03x}"
