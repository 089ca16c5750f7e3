from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.settings import Settings
from app.dependencies import get_text_generator
from app.main import create_app


class FakeGenerator:
    def __init__(self, text: str | None = "Hi there.", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, *, model, contents, system_instruction, temperature):
        self.calls.append(
            {
                "model": model,
                "contents": contents,
                "system_instruction": system_instruction,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def make_settings(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("CORS_ALLOW_ORIGIN", raising=False)

    def _make(**overrides) -> Settings:
        values = {"GEMINI_API_KEY": "test-key"}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def make_client(make_settings):
    def _make(generator: FakeGenerator | None = None, **settings_overrides):
        app = create_app(make_settings(**settings_overrides))
        if generator is not None:
            app.dependency_overrides[get_text_generator] = lambda: generator
        return TestClient(app)

    return _make


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()
