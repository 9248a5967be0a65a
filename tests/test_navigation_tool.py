"""Tests for report navigation tokens and keyboard."""

from datetime import date

import pytest

from tools.navigation_tool import (
    CLOSE_ACTION,
    CLOSE_PATTERN,
    REPORT_PATTERN,
    build_navigation_actions,
    decode_report_action,
    encode_report_action,
    get_report_keyboard,
)


class TestEncoding:
    """Test callback token encoding."""

    def test_encode(self):
        assert encode_report_action(date(2024, 5, 1), "monthly") == "REPORT|monthly|2024-05"

    @pytest.mark.parametrize("kind", ["monthly", "yearly"])
    def test_round_trip(self, kind):
        anchor = date(2023, 11, 1)

        assert decode_report_action(encode_report_action(anchor, kind)) == (anchor, kind)

    @pytest.mark.parametrize("data", ["", "REPORT|weekly|2024-05", "REPORT|monthly|2024", "lang_en", CLOSE_ACTION])
    def test_decode_foreign_data(self, data):
        with pytest.raises(ValueError):
            decode_report_action(data)

    def test_fits_callback_limit(self):
        assert len(encode_report_action(date(2024, 5, 1), "monthly").encode()) <= 64

    def test_patterns(self):
        assert REPORT_PATTERN.match(encode_report_action(date(2024, 5, 1), "yearly"))
        assert not REPORT_PATTERN.match(CLOSE_ACTION)
        assert CLOSE_PATTERN.match(CLOSE_ACTION)


class TestNavigationActions:
    """Test prev/next/toggle/close actions."""

    def test_monthly_actions(self):
        actions = build_navigation_actions(date(2024, 1, 1), "monthly")

        assert actions == {
            "previous": "REPORT|monthly|2023-12",
            "next": "REPORT|monthly|2024-02",
            "toggle": "REPORT|yearly|2024-01",
            "close": CLOSE_ACTION,
        }

    def test_yearly_actions(self):
        actions = build_navigation_actions(date(2024, 5, 1), "yearly")

        assert actions["previous"] == "REPORT|yearly|2023-05"
        assert actions["next"] == "REPORT|yearly|2025-05"
        assert actions["toggle"] == "REPORT|monthly|2024-05"

    def test_previous_then_next_returns_to_anchor(self):
        anchor = date(2024, 3, 1)
        prev_anchor, kind = decode_report_action(build_navigation_actions(anchor, "monthly")["previous"])

        next_anchor, _ = decode_report_action(build_navigation_actions(prev_anchor, kind)["next"])

        assert next_anchor == anchor

    def test_toggle_twice_returns_to_original(self):
        anchor = date(2024, 3, 1)
        yearly_anchor, yearly_kind = decode_report_action(build_navigation_actions(anchor, "monthly")["toggle"])

        back_anchor, back_kind = decode_report_action(
            build_navigation_actions(yearly_anchor, yearly_kind)["toggle"]
        )

        assert (back_anchor, back_kind) == (anchor, "monthly")


class TestReportKeyboard:
    """Test the inline keyboard layout."""

    def test_monthly_keyboard(self):
        keyboard = get_report_keyboard(date(2024, 5, 1), "monthly", "en")
        rows = keyboard.inline_keyboard

        assert [button.text for button in rows[0]] == ["<< Apr 2024", "Jun 2024 >>"]
        assert [button.text for button in rows[1]] == ["🗓 Yearly view", "✅ Done"]
        assert rows[1][1].callback_data == CLOSE_ACTION

    def test_yearly_keyboard(self):
        keyboard = get_report_keyboard(date(2024, 5, 1), "yearly", "en")
        rows = keyboard.inline_keyboard

        assert [button.text for button in rows[0]] == ["<< 2023", "2025 >>"]
        assert rows[1][0].text == "📅 Monthly view"
        assert rows[1][0].callback_data == "REPORT|monthly|2024-05"
