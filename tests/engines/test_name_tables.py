#!filepath: tests/engines/test_name_tables.py
import pytest

from datetimekit.core import zone
from datetimekit.engines import name_tables
from datetimekit.utils.errors import InvalidNameTable


def test_defaults():
    assert name_tables.weekdays[0] == "Sunday"
    assert name_tables.months[11] == "December"
    assert name_tables.resolve_mask("isoDate") == "yyyy-mm-dd"


def test_unknown_mask_resolves_to_itself():
    assert name_tables.resolve_mask("HH:MM") == "HH:MM"


@pytest.mark.parametrize("names", [["Sun"] * 6, ["Sun"] * 8, []])
def test_weekdays_must_have_seven_entries(names):
    with pytest.raises(InvalidNameTable):
        name_tables.set_weekdays(names)


def test_single_string_is_not_a_name_table():
    with pytest.raises(InvalidNameTable):
        name_tables.set_weekdays("SMTWTFS")


def test_replacement_is_a_snapshot():
    names = ["S", "M", "T", "W", "T", "F", "S"]
    name_tables.set_weekdays(names)
    names[0] = "changed"
    assert name_tables.weekdays[0] == "S"


def test_reset_tables_restores_defaults():
    name_tables.set_months([str(i) for i in range(12)])
    name_tables.set_mask("isoDate", "dd/mm/yyyy")
    name_tables.set_mask("custom", "yyyy")
    zone.set_zone_names({})

    name_tables.reset_tables()

    assert name_tables.months[0] == "January"
    assert name_tables.resolve_mask("isoDate") == "yyyy-mm-dd"
    assert "custom" not in name_tables.masks
    assert zone.zone_names["CDT"] == "Central Daylight Time"
