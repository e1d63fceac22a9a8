"""
核心模块

提供ID生成、ID解析、配置、日志和异常处理等核心功能。
"""

from longid.core.config import GeneratorConfig, LogConfig, Settings, load_settings
from longid.core.decoder import (
    IdParts,
    decompose,
    extract_datetime,
    extract_sequence,
    extract_server_id,
    extract_timestamp,
    to_hex,
)
from longid.core.exceptions import InvalidArgumentError, LongIdError, MalformedIdError
from longid.core.generator import IdGenerator
from longid.core.injection import (
    configure_default_generator,
    create_injector,
    get_default_generator,
    next_id,
)
from longid.core.layout import compose_id
from longid.core.logging import get_logger, setup_logging

__all__ = [
    "GeneratorConfig",
    "LogConfig",
    "Settings",
    "load_settings",
    "IdParts",
    "decompose",
    "extract_datetime",
    "extract_sequence",
    "extract_server_id",
    "extract_timestamp",
    "to_hex",
    "InvalidArgumentError",
    "LongIdError",
    "MalformedIdError",
    "IdGenerator",
    "configure_default_generator",
    "create_injector",
    "get_default_generator",
    "next_id",
    "compose_id",
    "get_logger",
    "setup_logging",
]
