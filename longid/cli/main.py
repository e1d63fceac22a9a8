"""
命令行工具主入口模块

提供生成ID和解析ID的命令行工具。
"""

import sys
from typing import Optional, Union

import click
from pydantic import ValidationError

from longid import __version__
from longid.core.config import LogConfig, Settings, load_settings
from longid.core.decoder import decompose, extract_datetime, to_hex
from longid.core.exceptions import LongIdError
from longid.core.generator import IdGenerator
from longid.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", default=None, help="配置文件路径")
@click.option("--env-file", default=None, help=".env文件路径")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], env_file: Optional[str]) -> None:
    """LongId 分布式ID命令行工具"""
    try:
        settings = load_settings(config_path=config_path, env_file=env_file)
    except ValidationError as e:
        # 配置错误只在需要读取配置的命令中报告
        setup_logging(LogConfig())
        logger.warning(f"配置加载失败，使用默认日志配置: {e}")
        ctx.obj = e
        return

    setup_logging(settings.log)
    ctx.obj = settings


@main.command()
@click.option("--server-id", type=int, default=None, help="服务器ID，默认取自配置")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="生成数量")
@click.option("--hex", "as_hex", is_flag=True, help="按字段输出十六进制形式")
@click.pass_obj
def generate(
    settings: Union[Settings, ValidationError],
    server_id: Optional[int],
    count: int,
    as_hex: bool,
) -> None:
    """生成新ID，每行一个"""
    if server_id is None:
        if isinstance(settings, ValidationError):
            click.echo(f"错误: 配置无效\n{settings}", err=True)
            sys.exit(1)
        server_id = settings.server_id

    try:
        generator = IdGenerator(server_id)
    except LongIdError as e:
        click.echo(f"错误: {e.message}", err=True)
        sys.exit(1)

    logger.debug(f"生成 {count} 个ID，服务器ID: {server_id}")
    for new_id in generator.next_ids(count):
        click.echo(to_hex(new_id) if as_hex else str(new_id))


@main.command()
@click.argument("value")
def inspect(value: str) -> None:
    """
    解析ID

    VALUE: 十进制或0x开头的十六进制ID
    """
    try:
        long_id = int(value, 0)
    except ValueError:
        click.echo(f"错误: 无法解析的数字 {value}", err=True)
        sys.exit(1)

    try:
        parts = decompose(long_id)
    except LongIdError as e:
        click.echo(f"错误: {e.message}", err=True)
        sys.exit(1)

    click.echo(f"id: {long_id}")
    click.echo(f"hex: {to_hex(long_id)}")
    click.echo(f"timestamp: {parts.timestamp}")
    click.echo(f"datetime: {extract_datetime(long_id).isoformat()}")
    click.echo(f"sequence: {parts.sequence}")
    click.echo(f"server_id: {parts.server_id}")


if __name__ == "__main__":
    main()
