"""Shared fixtures: an in-memory stand-in for redis.asyncio.Redis."""

import pytest

from internal.connection_cache import NewConnectionCacheUseCase


class FakeRedis:
    """Accepts the client keyword arguments and records commands."""

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.commands = []
        self.closed = False
        self.fail_with = None

    async def execute_command(self, *args, **options):
        self.commands.append(args)
        if self.fail_with is not None:
            raise self.fail_with
        return "OK"

    async def ping(self):
        if self.fail_with is not None:
            raise self.fail_with
        return True

    async def aclose(self):
        self.closed = True


@pytest.fixture
def fake_redis_class():
    return FakeRedis


@pytest.fixture
def cache():
    """Connection cache backed by FakeRedis, logging disabled."""
    return NewConnectionCacheUseCase(client_class=FakeRedis)
