"""Testes Unitários - AiohttpSessionManager"""
import pytest

from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    HttpPoolConfig,
    get_aiohttp_session_manager,
)


def test_singleton(monkeypatch):
    monkeypatch.setattr(AiohttpSessionManager, "_instance", None)

    first = get_aiohttp_session_manager(HttpPoolConfig(total_timeout=4))
    again = get_aiohttp_session_manager(HttpPoolConfig(total_timeout=99))

    assert first is again
    assert again.config.total_timeout == 4


def test_default_config_uses_api_constants():
    config = HttpPoolConfig()

    assert config.connect_timeout == 3
    assert config.sock_read_timeout == 5
    assert config.client_timeout().total == config.total_timeout


@pytest.mark.asyncio
class TestSessionLifecycle:

    async def test_session_reused_within_loop(self):
        manager = AiohttpSessionManager(HttpPoolConfig(total_timeout=2))

        first = await manager.get_session()
        second = await manager.get_session()

        assert first is second
        assert first.timeout.total == 2
        await manager.cleanup()

    async def test_cleanup_closes_session(self):
        manager = AiohttpSessionManager()
        session = await manager.get_session()

        await manager.cleanup()

        assert session.closed
        assert manager.has_open_session is False

    async def test_closed_session_is_replaced(self):
        manager = AiohttpSessionManager()
        first = await manager.get_session()
        await first.close()

        second = await manager.get_session()

        assert second is not first
        await manager.cleanup()
