"""
配置管理模块

提供从多种来源加载配置的功能，支持配置文件（YAML/JSON）、环境变量和.env文件，
并按照优先级加载配置。

环境变量使用 ``LONGID_`` 前缀，嵌套字段以 ``__`` 分隔，例如::

    LONGID_GENERATOR__SERVER_ID=7
    LONGID_LOG__LEVEL=DEBUG
"""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from longid.core.layout import validate_server_id

logger = logging.getLogger(__name__)

# 定义类型变量用于泛型函数
T = TypeVar("T", bound="BaseSettings")


def locate_config_file(
    file_name: str, explicit_path: Optional[str] = None
) -> Optional[Path]:
    """
    按照优先级定位配置文件路径

    Args:
        file_name: 配置文件名
        explicit_path: 显式指定的配置文件路径

    Returns:
        Optional[Path]: 配置文件路径，如果未找到则返回None
    """
    paths_to_check = []

    # 1. 显式指定的路径，可以是文件或所在目录
    if explicit_path:
        explicit = Path(explicit_path)
        if explicit.is_dir():
            explicit = explicit / file_name
        paths_to_check.append(explicit)

    # 2. 当前工作目录
    paths_to_check.append(Path.cwd() / file_name)

    # 3. 应用程序运行目录
    app_dir = Path(sys.argv[0]).parent.absolute()
    paths_to_check.append(app_dir / file_name)

    # 4. 用户主目录下的.longid目录
    paths_to_check.append(Path.home() / ".longid" / file_name)

    for path in paths_to_check:
        if path.exists() and path.is_file() and path.name == file_name:
            return path

    return None


def load_yaml_config(file_path: Path) -> Dict[str, Any]:
    """
    加载YAML配置文件

    Args:
        file_path: 配置文件路径

    Returns:
        Dict[str, Any]: 配置字典
    """
    with open(file_path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"解析YAML配置文件失败: {e}")
            return {}


def load_json_config(file_path: Path) -> Dict[str, Any]:
    """
    加载JSON配置文件

    Args:
        file_path: 配置文件路径

    Returns:
        Dict[str, Any]: 配置字典
    """
    with open(file_path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"解析JSON配置文件失败: {e}")
            return {}


def load_config_from_file(
    config_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    从配置文件加载配置

    Args:
        config_path: 配置文件路径，如果未指定则按优先级自动查找

    Returns:
        Dict[str, Any]: 配置字典
    """
    if config_path and Path(config_path).is_file():
        path = Path(config_path)
        if path.suffix.lower() in (".yaml", ".yml"):
            logger.info(f"已从 {path} 加载YAML配置")
            return load_yaml_config(path)
        if path.suffix.lower() == ".json":
            logger.info(f"已从 {path} 加载JSON配置")
            return load_json_config(path)

    yaml_path = locate_config_file("config.yaml", config_path)
    if yaml_path:
        logger.info(f"已从 {yaml_path} 加载YAML配置")
        return load_yaml_config(yaml_path)

    json_path = locate_config_file("config.json", config_path)
    if json_path:
        logger.info(f"已从 {json_path} 加载JSON配置")
        return load_json_config(json_path)

    logger.debug("未找到配置文件，将使用环境变量和默认值")
    return {}


def load_settings(
    settings_class: Type[T] = None,  # type: ignore[assignment]
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> T:
    """
    加载设置，按照优先级从配置文件、.env文件和环境变量加载

    Args:
        settings_class: 设置类型，必须继承自BaseSettings，默认为Settings
        config_path: 配置文件路径，如果未指定则按优先级自动查找
        env_file: .env文件路径，如果未指定则按优先级自动查找

    Returns:
        T: 设置实例
    """
    if settings_class is None:
        settings_class = Settings  # type: ignore[assignment]

    # 加载.env文件
    env_path = Path(env_file) if env_file else locate_config_file(".env")
    if env_path and env_path.exists():
        load_dotenv(env_path)
        logger.info(f"已加载环境变量文件: {env_path}")

    config_dict = load_config_from_file(config_path)

    # 配置文件作为初始化参数传入，优先级高于环境变量
    return settings_class(**config_dict)


class LogLevel(str, Enum):
    """日志级别枚举"""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogConfig(BaseModel):
    """日志配置"""

    level: LogLevel = LogLevel.INFO
    format: str = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    file_path: Optional[str] = None
    rotation: str = "20 MB"
    retention: str = "1 week"
    compression: str = "zip"
    serialize: bool = False


class GeneratorConfig(BaseModel):
    """ID生成器配置"""

    server_id: int = 0

    @field_validator("server_id", mode="before")
    @classmethod
    def check_server_id(cls, value: Any) -> int:
        # 环境变量传入的是字符串
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)
        return validate_server_id(value)


class Settings(BaseSettings):
    """LongId设置"""

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    model_config = {
        "env_prefix": "LONGID_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
    }

    @property
    def server_id(self) -> int:
        """当前配置的服务器ID"""
        return self.generator.server_id
