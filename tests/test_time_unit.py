# tests/test_time_unit.py

import threading

import pytest

from certlogic_units import InvalidTimeUnit, TimeUnit, is_time_unit_name, parse

CANONICAL = {
    "year": TimeUnit.YEAR,
    "month": TimeUnit.MONTH,
    "day": TimeUnit.DAY,
    "hour": TimeUnit.HOUR,
}


def test_exactly_four_units():
    assert len(TimeUnit) == 4
    assert TimeUnit.list() == ["year", "month", "day", "hour"]


@pytest.mark.parametrize("name,unit", CANONICAL.items())
def test_canonical_names_are_recognized(name, unit):
    assert is_time_unit_name(name)
    assert parse(name) is unit


@pytest.mark.parametrize("unit", list(TimeUnit))
def test_parse_canonical_name_gives_back_unit(unit):
    assert parse(unit.canonical_name) is unit
    assert TimeUnit.parse(unit.canonical_name) is unit


@pytest.mark.parametrize("name", ["Year", "YEAR", "Day", "hOUR"])
def test_matching_is_case_sensitive(name):
    assert not is_time_unit_name(name)
    with pytest.raises(InvalidTimeUnit) as exc_info:
        parse(name)
    assert exc_info.value.name == name


@pytest.mark.parametrize("name", [" day", "day ", "\tmonth", "hour\n"])
def test_surrounding_whitespace_is_not_trimmed(name):
    assert not is_time_unit_name(name)
    with pytest.raises(InvalidTimeUnit) as exc_info:
        parse(name)
    assert exc_info.value.name == name


@pytest.mark.parametrize("name", ["", "days", "years", "y", "d", "week", "minute", "dayday"])
def test_unknown_names_are_rejected(name):
    assert not is_time_unit_name(name)
    with pytest.raises(InvalidTimeUnit) as exc_info:
        parse(name)
    assert exc_info.value.name == name


@pytest.mark.parametrize("value", [None, 1, 2.5, True, ["day"], {"unit": "day"}, b"day"])
def test_non_string_input_is_false_not_an_error(value):
    assert is_time_unit_name(value) is False


def test_parse_none_raises_with_input_attached():
    with pytest.raises(InvalidTimeUnit) as exc_info:
        parse(None)
    assert exc_info.value.name is None


def test_invalid_time_unit_message_lists_valid_names():
    with pytest.raises(InvalidTimeUnit) as exc_info:
        parse("fortnight")
    message = str(exc_info.value)
    assert "'fortnight'" in message
    assert "year, month, day, hour" in message


def test_invalid_time_unit_is_a_value_error():
    with pytest.raises(ValueError):
        parse("Month")


def test_classmethod_predicate_matches_module_function():
    for candidate in ["year", "Year", "", "hour", "hours"]:
        assert TimeUnit.is_time_unit_name(candidate) == is_time_unit_name(candidate)


def test_members_are_accepted_as_names():
    assert is_time_unit_name(TimeUnit.DAY)
    assert parse(TimeUnit.MONTH) is TimeUnit.MONTH


def test_repeated_calls_give_same_result():
    results = {is_time_unit_name("day") for _ in range(100)}
    assert results == {True}
    results = {is_time_unit_name("Day") for _ in range(100)}
    assert results == {False}


def test_concurrent_calls_agree():
    outcomes = []

    def worker():
        outcomes.append(tuple(is_time_unit_name(n) for n in ["year", "Year", "hour", ""]))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert set(outcomes) == {(True, False, True, False)}


def test_units_compare_equal_to_their_names():
    assert TimeUnit.YEAR == "year"
    assert TimeUnit("day") is TimeUnit.DAY
