"""
ID位布局模块

定义64位ID的字段宽度、位移量和取值范围，并提供纯整数的组装函数。

ID结构（高位在前）：
- 44位时间戳（Unix纪元起的毫秒数，11个十六进制位）
- 8位同毫秒序列号（2个十六进制位）
- 12位服务器ID（3个十六进制位）
"""

from typing import Any

from longid.core.exceptions import InvalidArgumentError

# 位长度常量
TIMESTAMP_BITS = 44
SEQUENCE_BITS = 8
SERVER_ID_BITS = 12
ID_BITS = TIMESTAMP_BITS + SEQUENCE_BITS + SERVER_ID_BITS

# 位移量
SEQUENCE_SHIFT = SERVER_ID_BITS
TIMESTAMP_SHIFT = SEQUENCE_BITS + SERVER_ID_BITS

# 最大值
MAX_TIMESTAMP = -1 ^ (-1 << TIMESTAMP_BITS)
MAX_SEQUENCE = -1 ^ (-1 << SEQUENCE_BITS)
MAX_SERVER_ID = -1 ^ (-1 << SERVER_ID_BITS)
MAX_ID = -1 ^ (-1 << ID_BITS)

# 合法ID至少要比序列号+服务器ID字段多出一位
MIN_ID_BIT_LENGTH = TIMESTAMP_SHIFT + 1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_server_id(server_id: Any) -> int:
    """
    校验服务器ID

    Args:
        server_id: 服务器ID (0-4095)

    Returns:
        int: 校验通过的服务器ID

    Raises:
        InvalidArgumentError: 服务器ID不是整数或超出范围
    """
    if not _is_int(server_id) or server_id < 0 or server_id > MAX_SERVER_ID:
        raise InvalidArgumentError(
            f"server_id必须是0-{MAX_SERVER_ID}之间的整数",
            details={"server_id": server_id},
        )
    return server_id


def compose_id(timestamp: int, sequence: int, server_id: int) -> int:
    """
    按位组装ID

    Args:
        timestamp: 毫秒时间戳 (0 - 2^44-1)
        sequence: 同毫秒序列号 (0-255)
        server_id: 服务器ID (0-4095)

    Returns:
        int: 组装后的64位ID

    Raises:
        InvalidArgumentError: 任一字段超出范围
    """
    for name, value, upper in (
        ("timestamp", timestamp, MAX_TIMESTAMP),
        ("sequence", sequence, MAX_SEQUENCE),
    ):
        if not _is_int(value) or value < 0 or value > upper:
            raise InvalidArgumentError(
                f"{name}必须是0-{upper}之间的整数",
                details={name: value},
            )
    validate_server_id(server_id)

    return (
        (timestamp << TIMESTAMP_SHIFT)
        | (sequence << SEQUENCE_SHIFT)
        | server_id
    )
