from types import SimpleNamespace

import pytest


@pytest.fixture(autouse=True)
def no_groq_key(monkeypatch):
    """Start every test without a key, whatever the developer's .env holds."""
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.delenv("NEXT_PUBLIC_GROQ_API_KEY", raising=False)


@pytest.fixture
def groq_key(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "test-key")
    return "test-key"


class FakeCompletions:
    def __init__(self, content=None, error=None, response=None):
        self.content = content
        self.error = error
        self.response = response
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeClient:
    def __init__(self, **kwargs):
        self.completions = FakeCompletions(**kwargs)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def fake_client():
    return FakeClient
