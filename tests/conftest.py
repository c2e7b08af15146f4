from __future__ import annotations

import pytest
import redis

from growcalc.web.app import create_app


class FakeRedis:
    """In-memory stand-in for the few Redis commands the store uses."""

    def __init__(self):
        self.values = {}
        self.lists = {}

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value
        return True

    def delete(self, key):
        removed = int(key in self.values or key in self.lists)
        self.values.pop(key, None)
        self.lists.pop(key, None)
        return removed

    def rpush(self, key, value):
        self.lists.setdefault(key, []).append(value)
        return len(self.lists[key])

    def _slice(self, items, start, end):
        return items[start:] if end == -1 else items[start:end + 1]

    def ltrim(self, key, start, end):
        self.lists[key] = self._slice(self.lists.get(key, []), start, end)
        return True

    def lrange(self, key, start, end):
        return list(self._slice(self.lists.get(key, []), start, end))

    def llen(self, key):
        return len(self.lists.get(key, []))


class BrokenRedis(FakeRedis):
    def get(self, key):
        raise redis.ConnectionError("connection refused")

    def set(self, key, value):
        raise redis.ConnectionError("connection refused")


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def client(fake_redis):
    app = create_app(redis_client=fake_redis)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def broken_client():
    app = create_app(redis_client=BrokenRedis())
    app.config["TESTING"] = True
    return app.test_client()
