import pytest

from drawing import NAVY, YELLOW
from params import (ChoiceParameter, ColorParameter, InfiniteParameter,
                    NumericParameter, ParameterGroup, ToggleParameter)


@pytest.fixture
def group():
    g = ParameterGroup()
    g.define("dots", NumericParameter(1, 360, 16))
    g.define("ratio", InfiniteParameter(1.2))
    g.define("color", ColorParameter(YELLOW))
    return g


class TestParameterGroup:
    def test_defaults(self, group):
        assert group.getValues(environ={}) == {
            "dots": 16, "ratio": 1.2, "color": YELLOW}

    def test_order_preserved(self, group):
        assert list(group.getValues(environ={})) == ["dots", "ratio", "color"]

    def test_environment(self, group):
        values = group.getValues(environ={"FIRECRACKER_DOTS": "4"})
        assert values["dots"] == 4

    def test_overrides_beat_environment(self, group):
        values = group.getValues(
            {"dots": "6"}, environ={"FIRECRACKER_DOTS": "4"})
        assert values["dots"] == 6

    def test_prefix(self):
        g = ParameterGroup(prefix="OVAL_")
        g.define("spokes", NumericParameter(1, 360, 8))
        assert g.envName("spokes") == "OVAL_SPOKES"
        assert g.getValues(environ={"OVAL_SPOKES": "3"})["spokes"] == 3

    def test_reads_os_environ(self, group, monkeypatch):
        monkeypatch.setenv("FIRECRACKER_COLOR", "FF000080")
        assert group.getValues()["color"] == NAVY

    def test_unknown_override(self, group):
        with pytest.raises(ValueError, match="bogus"):
            group.getValues({"bogus": "1"}, environ={})

    def test_define_twice(self, group):
        with pytest.raises(ValueError):
            group.define("dots", NumericParameter(1, 10, 2))

    def test_contains(self, group):
        assert "dots" in group
        assert "nope" not in group

    def test_parse_error_propagates(self, group):
        with pytest.raises(ValueError):
            group.getValues({"dots": "many"}, environ={})


class TestParameters:
    def test_numeric_range(self):
        param = NumericParameter(0.0, 1.0, 0.7)
        assert param.parse("0.25") == 0.25
        with pytest.raises(ValueError):
            param.parse("1.5")

    def test_numeric_default_in_range(self):
        with pytest.raises(ValueError):
            NumericParameter(0, 10, 11)

    def test_numeric_keeps_default_type(self):
        assert isinstance(NumericParameter(1, 360, 16).parse("4"), int)

    def test_infinite(self):
        assert InfiniteParameter(8.0).parse("-3.5") == -3.5

    def test_wrong_default_type(self):
        with pytest.raises(TypeError):
            InfiniteParameter("8")
        with pytest.raises(TypeError):
            ColorParameter("FFFFFF00")

    def test_toggle(self):
        param = ToggleParameter(True)
        assert param.parse("false") is False
        assert param.parse("true") is True
        with pytest.raises(ValueError):
            param.parse("yes")

    def test_choice_of_names(self):
        param = ChoiceParameter(["a", "b"], "b")
        assert param.default == "b"
        assert param.parse("a") == "a"

    def test_choice_mapping(self):
        param = ChoiceParameter({"one": 1, "two": 2}, "two")
        assert param.default == 2
        assert param.parse("one") == 1
        with pytest.raises(ValueError):
            param.parse("three")

    def test_choice_default_must_exist(self):
        with pytest.raises(ValueError):
            ChoiceParameter(["a"], "b")

    def test_color(self):
        assert ColorParameter(YELLOW).parse("FF000080") == NAVY
