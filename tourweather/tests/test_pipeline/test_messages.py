"""Tests for localized pipeline messages."""

import pytest

from tourweather.pipeline.messages import error_message


class TestErrorMessage:
    @pytest.mark.parametrize(
        "language,expected",
        [
            ("vi", "Không lấy được dữ liệu thời tiết."),
            ("en", "Could not load weather data."),
            ("ko", "날씨 데이터를 불러오지 못했습니다."),
        ],
    )
    def test_supported_languages(self, language: str, expected: str):
        assert error_message(language) == expected

    def test_unknown_language_falls_back_to_vietnamese(self):
        assert error_message("fr") == error_message("vi")
