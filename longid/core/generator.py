"""
ID生成器模块

提供无需协调的分布式唯一ID生成功能。
"""

import threading
import time
from typing import Callable, List, Optional

from loguru import logger

from longid.core.exceptions import InvalidArgumentError
from longid.core.layout import (
    MAX_SEQUENCE,
    MAX_TIMESTAMP,
    compose_id,
    validate_server_id,
)

# 同一毫秒内序列号用尽时的等待时长（秒）
THROTTLE_SECONDS = 0.001


def current_millis() -> int:
    """
    获取当前时间戳（毫秒）

    Returns:
        int: Unix纪元起的毫秒数
    """
    return int(time.time() * 1000)


class IdGenerator:
    """
    LongId生成器

    生成的ID是64位整数，由以下部分组成：
    - 44位时间戳（毫秒级，Unix纪元起）
    - 8位同毫秒序列号
    - 12位服务器ID

    每个服务器每毫秒最多生成256个ID，超出时阻塞约1毫秒后重试。
    同一实例可以被任意多个线程共享；用相同服务器ID创建多个实例时，
    唯一性由调用方负责。

    示例：
    ::

        generator = IdGenerator(123)
        new_id = generator.next_id()
    """

    def __init__(
        self,
        server_id: int = 0,
        clock: Optional[Callable[[], int]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        """
        初始化ID生成器

        Args:
            server_id: 服务器ID (0-4095)
            clock: 返回当前毫秒时间戳的函数，默认使用系统时钟
            sleep: 按秒休眠的函数，默认使用time.sleep

        Raises:
            InvalidArgumentError: server_id超出范围
        """
        self._server_id = validate_server_id(server_id)
        self._clock = clock or current_millis
        self._sleep = sleep or time.sleep

        self._last_timestamp = 0
        self._sequence = 0
        self._lock = threading.Lock()

        logger.debug(f"ID生成器已创建，服务器ID: {self._server_id}")

    @property
    def server_id(self) -> int:
        """服务器ID"""
        return self._server_id

    @property
    def last_timestamp(self) -> int:
        """最近一次生成ID时的毫秒时间戳"""
        return self._last_timestamp

    @property
    def sequence(self) -> int:
        """当前毫秒内的序列号"""
        return self._sequence

    def next_id(self) -> int:
        """
        生成下一个ID

        整个判定与组装过程在实例锁内完成。序列号用尽时在持锁状态下
        休眠，因此限流期间该实例的所有调用方都会被串行化。

        Returns:
            int: 生成的唯一ID

        Raises:
            InvalidArgumentError: 时钟读数超出44位时间戳范围，此时生成器状态不变
        """
        with self._lock:
            while True:
                now = self._clock()
                if now < 0 or now > MAX_TIMESTAMP:
                    raise InvalidArgumentError(
                        f"时钟读数超出范围: {now}",
                        details={"timestamp": now},
                    )

                if now != self._last_timestamp:
                    # 时钟回拨按新毫秒处理
                    if now < self._last_timestamp:
                        logger.warning(
                            f"检测到时钟回拨，上次时间戳: {self._last_timestamp}，当前时间戳: {now}"
                        )
                    self._sequence = 0
                    self._last_timestamp = now
                    break

                if self._sequence >= MAX_SEQUENCE:
                    # 同一毫秒内序列号用尽，等待后重新读取时钟
                    logger.trace(f"序列号已用尽，时间戳: {now}，等待下一毫秒")
                    self._sleep(THROTTLE_SECONDS)
                    continue

                self._sequence += 1
                break

            self._last_timestamp = now

            return compose_id(now, self._sequence, self._server_id)

    def next_ids(self, count: int) -> List[int]:
        """
        按顺序批量生成ID

        Args:
            count: 需要生成的数量

        Returns:
            List[int]: 按生成顺序排列的ID列表

        Raises:
            InvalidArgumentError: count为负数
        """
        if count < 0:
            raise InvalidArgumentError(
                "count不能小于0", details={"count": count}
            )
        return [self.next_id() for _ in range(count)]

    def __repr__(self) -> str:
        return f"IdGenerator(server_id={self._server_id})"
