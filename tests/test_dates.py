import time
from unittest import mock

import pytest

from lamina.dates import format_date, get_date, get_time

FIXED = time.struct_time((2024, 3, 5, 10, 0, 0, 1, 65, 0))


def test_get_time_close_to_clock():
    before = int(time.time())
    now = get_time()
    after = int(time.time())
    assert before <= now <= after


@mock.patch("time.localtime", return_value=FIXED)
def test_get_date_format(_localtime):
    assert get_date() == "2024-03-05"


@mock.patch("time.localtime", return_value=FIXED)
def test_format_date_drops_dashes(_localtime):
    assert format_date("Y-m-d") == get_date().replace("-", "")


@mock.patch("time.localtime", return_value=FIXED)
def test_format_date_orders_fields(_localtime):
    assert format_date("dmY") == "05032024"
    assert format_date("Y") == "2024"


def test_format_date_empty_is_empty():
    assert format_date("") == ""


def test_format_date_rejects_other_letters():
    with pytest.raises(ValueError):
        format_date("Y/m/d")


def test_format_date_requires_string():
    with pytest.raises(TypeError):
        format_date(2024)