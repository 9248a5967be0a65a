"""Test fixtures for FireflyBuddy tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

import config
from firefly import InsightGroupEntry


@pytest.fixture(autouse=True)
def firefly_settings(monkeypatch):
    """Point the bot at a fake Firefly III instance."""
    monkeypatch.setattr(config, "FIREFLY_URL", "https://firefly.test")
    monkeypatch.setattr(config, "FIREFLY_TOKEN", "test_token")
    monkeypatch.setattr(config, "DEFAULT_LANGUAGE", "en")


@pytest.fixture
def expense_entries() -> list[InsightGroupEntry]:
    """Expense insight as returned by /insight/expense/category."""
    return [
        InsightGroupEntry(id="1", name="Groceries", difference_float=-40.0, currency_code="USD"),
        InsightGroupEntry(id="2", name="Rent", difference_float=-500.0, currency_code="USD"),
        InsightGroupEntry(id="3", name="Travel", difference_float=-20.0, currency_code="EUR"),
    ]


@pytest.fixture
def income_entries() -> list[InsightGroupEntry]:
    """Income insight as returned by /insight/income/category."""
    return [
        InsightGroupEntry(id="4", name="Salary", difference_float=1000.0, currency_code="USD"),
    ]


@pytest.fixture
def context() -> MagicMock:
    """Callback context with an empty session."""
    ctx = MagicMock()
    ctx.user_data = {}
    ctx.bot.delete_message = AsyncMock()
    return ctx


@pytest.fixture
def message_update() -> MagicMock:
    """Update for a plain text message."""
    update = MagicMock()
    update.callback_query = None
    update.effective_user.id = 42
    update.effective_user.first_name = "Ann"
    update.effective_user.language_code = "en"
    update.message.reply_text = AsyncMock()
    update.effective_message = update.message
    return update


@pytest.fixture
def make_callback_update():
    """Factory for updates produced by an inline button click."""

    def _make(data: str) -> MagicMock:
        update = MagicMock()
        update.message = None
        update.effective_user.id = 42
        update.effective_user.language_code = "en"
        update.callback_query.data = data
        update.callback_query.answer = AsyncMock()
        update.callback_query.edit_message_text = AsyncMock()
        update.callback_query.message.chat_id = 100
        update.callback_query.message.delete = AsyncMock()
        update.effective_message.reply_text = AsyncMock()
        return update

    return _make
