import pytest

from longid.core import injection
from longid.core.config import Settings
from longid.core.decoder import extract_server_id
from longid.core.exceptions import InvalidArgumentError
from longid.core.generator import IdGenerator


@pytest.fixture(autouse=True)
def reset_default_generator(monkeypatch):
    monkeypatch.setattr(injection, "_injector", None)


def test_injector_provides_singleton_generator():
    """测试注入器提供单例生成器"""
    injector = injection.create_injector(Settings(generator={"server_id": 7}))

    generator = injector.get(IdGenerator)
    assert generator is injector.get(IdGenerator)
    assert generator.server_id == 7
    assert injector.get(Settings).server_id == 7


def test_separate_injectors_do_not_share_state():
    """测试不同注入器之间不共享生成器"""
    first = injection.create_injector(Settings()).get(IdGenerator)
    second = injection.create_injector(Settings()).get(IdGenerator)
    assert first is not second


def test_configure_default_generator():
    """测试配置共享生成器"""
    generator = injection.configure_default_generator(server_id=12, settings=Settings())

    assert injection.get_default_generator() is generator
    assert extract_server_id(injection.next_id()) == 12


def test_invalid_server_id_keeps_existing_default():
    """测试非法服务器ID不会替换已有的共享生成器"""
    generator = injection.configure_default_generator(server_id=3, settings=Settings())

    with pytest.raises(InvalidArgumentError):
        injection.configure_default_generator(server_id=5000, settings=Settings())

    assert injection.get_default_generator() is generator


def test_default_generator_built_from_settings(monkeypatch, tmp_path):
    """测试首次使用时按环境变量创建共享生成器"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LONGID_GENERATOR__SERVER_ID", "256")

    generator = injection.get_default_generator()
    assert generator.server_id == 256
    assert injection.get_default_generator() is generator
