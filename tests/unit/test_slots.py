# tests/unit/test_slots.py
from cannot.core.slots import WriteOnce


class TestWriteOnce:

    def test_starts_empty(self):
        cell = WriteOnce()

        assert not cell
        assert cell.value is None
        assert cell.get("default") == "default"

    def test_first_value_wins(self):
        cell = WriteOnce()

        assert cell.try_set("first") is True
        assert cell.try_set("second") is False
        assert cell.value == "first"

    def test_falsy_values_do_not_fill(self):
        cell = WriteOnce()

        assert cell.try_set(None) is True
        assert cell.try_set("") is True
        assert not cell.is_set
        assert cell.try_set("value") is True
