import importlib.metadata
import sys

import pytest
from click.testing import CliRunner
from loguru import logger

from longid import __version__
from longid.cli.main import main
from longid.core.decoder import extract_sequence, extract_server_id
from longid.core.layout import compose_id

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """隔离工作目录和环境变量，并在测试后恢复loguru输出"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LONGID_GENERATOR__SERVER_ID", raising=False)
    yield tmp_path
    logger.remove()
    logger.add(sys.stderr)


def _ids(output: str):
    return [int(line) for line in output.splitlines() if line.strip().isdigit()]


def test_version():
    """测试版本输出"""
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_generate():
    """测试生成ID"""
    result = runner.invoke(main, ["generate", "--server-id", "99", "-n", "3"])
    assert result.exit_code == 0

    ids = _ids(result.output)
    assert len(ids) == 3
    assert ids == sorted(ids)
    assert all(extract_server_id(i) == 99 for i in ids)


def test_generate_uses_configured_server_id(monkeypatch):
    """测试默认使用配置中的服务器ID"""
    monkeypatch.setenv("LONGID_GENERATOR__SERVER_ID", "31")

    result = runner.invoke(main, ["generate"])
    assert result.exit_code == 0
    assert [extract_server_id(i) for i in _ids(result.output)] == [31]


def test_generate_rejects_invalid_server_id():
    """测试非法服务器ID"""
    result = runner.invoke(main, ["generate", "--server-id", "4096"])
    assert result.exit_code == 1


def test_inspect():
    """测试解析十进制和十六进制ID"""
    long_id = compose_id(1_700_000_000_123, 3, 99)

    for value in (str(long_id), hex(long_id)):
        result = runner.invoke(main, ["inspect", value])
        assert result.exit_code == 0
        assert "timestamp: 1700000000123" in result.output
        assert "datetime: 2023-11-14T22:13:20.123000+00:00" in result.output
        assert "sequence: 3" in result.output
        assert "server_id: 99" in result.output

    assert extract_sequence(long_id) == 3


@pytest.mark.parametrize("value", ["0", "12345", "not-a-number"])
def test_inspect_rejects_malformed_values(value):
    """测试无法解析的输入"""
    result = runner.invoke(main, ["inspect", value])
    assert result.exit_code == 1


def test_version_matches_installed_distribution():
    """测试版本号取自已安装的发行包"""
    assert __version__ == importlib.metadata.version("longid")

    result = runner.invoke(main, ["--version"])
    assert importlib.metadata.version("longid") in result.output


def test_invalid_configuration_does_not_break_inspect(monkeypatch):
    """测试配置无效时解析命令仍可用"""
    monkeypatch.setenv("LONGID_GENERATOR__SERVER_ID", "5000")
    long_id = compose_id(1_700_000_000_123, 3, 99)

    result = runner.invoke(main, ["inspect", str(long_id)])
    assert result.exit_code == 0
    assert "server_id: 99" in result.output


def test_explicit_server_id_overrides_invalid_configuration(monkeypatch):
    """测试显式指定服务器ID时忽略无效配置"""
    monkeypatch.setenv("LONGID_GENERATOR__SERVER_ID", "5000")

    result = runner.invoke(main, ["generate", "--server-id", "7", "-n", "2"])
    assert result.exit_code == 0
    ids = _ids(result.output)
    assert len(ids) == 2
    assert all(extract_server_id(i) == 7 for i in ids)


def test_generate_reports_invalid_configuration(monkeypatch):
    """测试需要配置的服务器ID无效时给出错误信息"""
    monkeypatch.setenv("LONGID_GENERATOR__SERVER_ID", "5000")

    result = runner.invoke(main, ["generate"])
    assert result.exit_code == 1
    assert "配置无效" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
