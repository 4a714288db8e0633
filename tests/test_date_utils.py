"""
日期工具测试
"""
from datetime import datetime, timezone, timedelta

import pytest

from feeds.utils.date_utils import DateUtils


@pytest.fixture
def date_utils():
    return DateUtils()


class TestAnyTimeFormat:
    """取第一个非零时间并格式化"""

    def test_first_non_zero_wins(self, date_utils):
        first = datetime(2021, 1, 1, tzinfo=timezone.utc)
        second = datetime(2022, 1, 1, tzinfo=timezone.utc)

        assert date_utils.any_time_format(first, second) == "Fri, 01 Jan 2021 00:00:00 +0000"
        assert date_utils.any_time_format(None, second) == "Sat, 01 Jan 2022 00:00:00 +0000"

    def test_all_zero(self, date_utils):
        assert date_utils.any_time_format() == ""
        assert date_utils.any_time_format(None, None) == ""
        assert date_utils.any_time_format(datetime.min) == ""

    def test_naive_treated_as_utc(self, date_utils):
        assert date_utils.any_time_format(datetime(2021, 1, 1)) == "Fri, 01 Jan 2021 00:00:00 +0000"


class TestRfc1123z:
    """RFC 1123 + 数字时区"""

    def test_reference_layout(self, date_utils):
        tz = timezone(timedelta(hours=-7))
        dt = datetime(2006, 1, 2, 15, 4, 5, tzinfo=tz)

        assert date_utils.to_rfc1123z(dt) == "Mon, 02 Jan 2006 15:04:05 -0700"

    def test_positive_offset(self, date_utils):
        tz = timezone(timedelta(hours=8))
        dt = datetime(2024, 2, 29, 9, 0, 0, tzinfo=tz)

        assert date_utils.to_rfc1123z(dt) == "Thu, 29 Feb 2024 09:00:00 +0800"


class TestParseDatetime:
    """宽松解析"""

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty(self, date_utils, value):
        assert date_utils.parse_datetime(value) is None

    def test_rfc_with_comment(self, date_utils):
        parsed = date_utils.parse_datetime("Mon, 01 Jan 2024 12:00:00 +0000 (UTC)")
        assert parsed == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_default_timezone(self, date_utils):
        tz = timezone(timedelta(hours=3))
        parsed = date_utils.parse_datetime("2024-01-01 12:00:00", default_timezone=tz)

        assert parsed.tzinfo == tz
