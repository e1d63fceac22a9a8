"""
依赖注入模块

通过Injector提供进程级共享的ID生成器单例。
共享生成器必须显式创建，各实例之间不存在隐式的全局状态。
"""

import threading
from typing import Optional

from injector import Binder, Injector, Module, provider, singleton
from loguru import logger

from longid.core.config import Settings, load_settings
from longid.core.generator import IdGenerator


class LongIdModule(Module):
    """
    LongId依赖注入模块

    绑定Settings实例，并以单例作用域提供IdGenerator。
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        初始化模块

        Args:
            settings: 设置实例，未指定时使用默认设置
        """
        self._settings = settings or Settings()

    def configure(self, binder: Binder) -> None:
        binder.bind(Settings, to=self._settings, scope=singleton)

    @singleton
    @provider
    def provide_generator(self, settings: Settings) -> IdGenerator:
        return IdGenerator(settings.generator.server_id)


def create_injector(settings: Optional[Settings] = None) -> Injector:
    """
    创建依赖注入器

    Args:
        settings: 设置实例

    Returns:
        Injector: 依赖注入器
    """
    return Injector([LongIdModule(settings)])


_lock = threading.Lock()
_injector: Optional[Injector] = None


def configure_default_generator(
    server_id: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> IdGenerator:
    """
    创建（或重建）进程级共享的ID生成器

    Args:
        server_id: 服务器ID，指定时覆盖设置中的值
        settings: 设置实例，未指定时通过load_settings加载

    Returns:
        IdGenerator: 共享的ID生成器
    """
    global _injector

    if settings is None:
        settings = load_settings()
    if server_id is not None:
        settings = settings.model_copy(
            update={
                "generator": settings.generator.model_copy(
                    update={"server_id": server_id}
                )
            }
        )

    injector = create_injector(settings)
    # 在替换前构造，非法的server_id不会破坏已有的单例
    generator = injector.get(IdGenerator)

    with _lock:
        _injector = injector

    logger.info(f"共享ID生成器已配置，服务器ID: {generator.server_id}")
    return generator


def get_default_generator() -> IdGenerator:
    """
    获取进程级共享的ID生成器，首次调用时按加载的设置创建

    Returns:
        IdGenerator: 共享的ID生成器
    """
    global _injector

    with _lock:
        if _injector is None:
            _injector = create_injector(load_settings())
        injector = _injector

    return injector.get(IdGenerator)


def next_id() -> int:
    """使用共享生成器生成下一个ID"""
    return get_default_generator().next_id()
