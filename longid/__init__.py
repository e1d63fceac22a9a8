"""
LongId 分布式ID生成库

生成可作为数据库主键的64位单调递增整数ID，多台服务器之间无需协调。

ID结构：
----------
* 44位毫秒时间戳（11个十六进制位）
* 8位同毫秒序列号（2个十六进制位）
* 12位服务器ID（3个十六进制位，0-4095）

使用方法：
----------
1. 生成ID
   ::

       from longid import IdGenerator

       generator = IdGenerator(123)
       new_id = generator.next_id()

2. 解析ID
   ::

       from longid import extract_datetime, extract_server_id

       extract_server_id(new_id)  # 123
       extract_datetime(new_id)   # 生成时间（UTC）
"""

import importlib.metadata

# 版本号取自已安装的发行包元数据
try:
    __version__ = importlib.metadata.version("longid")
except importlib.metadata.PackageNotFoundError:
    # 未安装时（例如直接从源码目录运行）使用默认版本
    __version__ = "0.0.0.dev0"

from longid.core import (
    IdGenerator,
    IdParts,
    InvalidArgumentError,
    LongIdError,
    MalformedIdError,
    Settings,
    compose_id,
    configure_default_generator,
    decompose,
    extract_datetime,
    extract_sequence,
    extract_server_id,
    extract_timestamp,
    get_default_generator,
    load_settings,
    next_id,
    to_hex,
)

__all__ = [
    "__version__",
    "IdGenerator",
    "IdParts",
    "InvalidArgumentError",
    "LongIdError",
    "MalformedIdError",
    "Settings",
    "compose_id",
    "configure_default_generator",
    "decompose",
    "extract_datetime",
    "extract_sequence",
    "extract_server_id",
    "extract_timestamp",
    "get_default_generator",
    "load_settings",
    "next_id",
    "to_hex",
]
