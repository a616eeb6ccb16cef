# tests/test_api.py

import pytest

import calconv
from calconv import api
from calconv.bootstrap import build_registry
from calconv.calendars.specs import ALL_SPECS, CalendarSpec
from calconv.core.errors import DomainError, NotInvertibleError, UnknownCalendarError
from calconv.core.types import (
    GregorianDate,
    HebrewDate,
    IslamicDate,
    JulianDate,
    MayanHaab,
    MayanLongCount,
    MayanTzolkin,
)

REFERENCE = 710347  # 12 November 1945


@pytest.fixture
def scratch_name():
    name = "mayan-long-count-1993"
    yield name
    api._reg()._engines.pop(name, None)


def test_builtin_calendars():
    names = calconv.list_calendars()
    assert len(names) == 11
    assert names == sorted(ALL_SPECS)
    assert calconv.calendar_info("gregorian")["epoch"] == 1
    assert calconv.calendar_info("mayan-long-count")["epoch"] == -1137142
    info = calconv.calendar_info("mayan-haab")
    assert info["kind"] == "cyclic"
    assert info["epoch"] is None
    assert info["params"] == {"correlation": 1137142}


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError):
        calconv.get_calendar("aztec")
    with pytest.raises(KeyError):
        calconv.from_fixed(REFERENCE, "aztec")
    with pytest.raises(UnknownCalendarError):
        CalendarSpec.like("aztec")


def test_to_fixed_dispatches_on_record():
    assert calconv.to_fixed(GregorianDate(1945, 11, 12)) == REFERENCE
    assert calconv.to_fixed(JulianDate(1945, 10, 30)) == REFERENCE
    assert calconv.to_fixed(MayanLongCount(12, 16, 11, 16, 9)) == REFERENCE
    with pytest.raises(DomainError):
        calconv.to_fixed((1945, 11, 12))
    with pytest.raises(DomainError):
        calconv.to_fixed(GregorianDate(1945, 11, 12), calendar="julian")


def test_cyclic_calendars_need_an_anchor():
    haab = calconv.from_fixed(REFERENCE, "mayan-haab")
    assert isinstance(haab, MayanHaab)
    with pytest.raises(NotInvertibleError):
        calconv.to_fixed(haab)
    assert calconv.to_fixed(haab, anchor=REFERENCE + 100) == REFERENCE
    tz = calconv.from_fixed(REFERENCE, "mayan-tzolkin")
    assert isinstance(tz, MayanTzolkin)
    assert calconv.to_fixed(tz, anchor=REFERENCE - 100) == REFERENCE


def test_convert():
    assert calconv.convert(GregorianDate(1945, 11, 12), "hebrew") == HebrewDate(5706, 9, 7)
    assert calconv.convert(HebrewDate(5706, 9, 7), "islamic") == IslamicDate(1364, 12, 6)
    assert calconv.convert(GregorianDate(1945, 11, 12), "gregorian") == GregorianDate(1945, 11, 12)


def test_overrides_build_a_fresh_engine():
    default = calconv.get_calendar("mayan-long-count")
    shifted = calconv.get_calendar("mayan-long-count", correlation=1137140)
    assert shifted is not default
    assert shifted.from_fixed(REFERENCE) == MayanLongCount(12, 16, 11, 16, 7)
    assert shifted.info()["epoch"] == -1137140
    # the registry still holds the default correlation
    assert calconv.get_calendar("mayan-long-count") is default
    assert calconv.from_fixed(REFERENCE, "mayan-long-count") == MayanLongCount(12, 16, 11, 16, 9)


def test_overrides_rejected():
    with pytest.raises(DomainError):
        calconv.get_calendar("gregorian", correlation=1)
    with pytest.raises(DomainError):
        calconv.get_calendar("mayan-haab", offset=3)


def test_register_calendar(scratch_name):
    engine = calconv.make_engine(CalendarSpec.like("mayan-long-count").tweak(correlation=1137140))
    calconv.register_calendar(scratch_name, engine)
    assert scratch_name in calconv.list_calendars()
    assert calconv.from_fixed(REFERENCE, scratch_name) == MayanLongCount(12, 16, 11, 16, 7)
    with pytest.raises(KeyError):
        calconv.register_calendar(scratch_name, engine)
    calconv.register_calendar(scratch_name, calconv.get_calendar("mayan-long-count"), overwrite=True)
    assert calconv.from_fixed(REFERENCE, scratch_name) == MayanLongCount(12, 16, 11, 16, 9)


def test_build_registry_from_selected_specs():
    reg = build_registry({"g": ALL_SPECS["gregorian"], "lc": ALL_SPECS["mayan-long-count"]})
    # engines are registered under the spec names, not the mapping keys
    assert reg.list() == ["gregorian", "mayan-long-count"]
    assert "gregorian" in reg
    assert reg.get("gregorian").from_fixed(REFERENCE) == GregorianDate(1945, 11, 12)
    with pytest.raises(UnknownCalendarError):
        reg.get("hebrew")
    assert build_registry().list() == calconv.list_calendars()
