import pytest

from plugins.unit_converter.core import Category, convert
from plugins.unit_detector.core import convert_selection, detect, detect_first


def _codes(text):
    return [(item.category.value, item.unit_code) for item in detect(text)]


def test_detect_sentence_in_order_with_offsets():
    text = "I ran 5km in 25 minutes, or about 3.1 mi"
    found = detect(text)
    assert [item.unit_code for item in found] == ["km", "minute", "mi"]
    assert [item.value for item in found] == [5.0, 25.0, 3.1]
    for item in found:
        assert text[item.start_offset : item.end_offset] == item.full_match_text
    assert found[0].start_offset == text.index("5km")
    assert found[1].unit_token == "minutes"


def test_compound_units_win_over_simple_ones():
    assert _codes("60 km/h") == [("speed", "kmh")]
    assert _codes("60 km/hour") == [("speed", "kmh")]
    assert _codes("40 mi/hour") == [("speed", "mph")]
    assert _codes("25 mi/hr") == [("speed", "mph")]
    assert _codes("doing 30 mph") == [("speed", "mph")]
    assert _codes("a 25 m² room") == [("area", "m2")]
    assert _codes("750 sq ft") == [("area", "ft2")]
    assert _codes("120 mmHg") == [("pressure", "mmhg")]
    assert _codes("32 pounds per square inch") == [("pressure", "psi")]


@pytest.mark.parametrize(
    ("text", "category", "code"),
    [
        ("3 kilos", "weight", "kg"),
        ("8 oz", "weight", "oz"),
        ("98.6°F", "temperature", "fahrenheit"),
        ("-5 °C", "temperature", "celsius"),
        ("20 degrees celsius", "temperature", "celsius"),
        ("300 K", "temperature", "kelvin"),
        ("2 litres", "volume", "l"),
        ("2 cups", "volume", "cup"),
        ("45 secs", "time", "second"),
        ("2 hrs", "time", "hour"),
        ("5 KB", "data", "kb"),
        ("3.5 GB", "data", "gb"),
        ("5 gb", "data", "gb"),
        ("500 mb", "data", "mb"),
        ("2 tb", "data", "tb"),
        ("64 kb", "data", "kb"),
        ("8 GiB", "data", "gb"),
        ("200 kcal", "energy", "kcal"),
        ("40 kWh", "energy", "kwh"),
        ("2 acres", "area", "acre"),
        ("15 knots", "speed", "knots"),
    ],
)
def test_detect_common_tokens(text, category, code):
    assert _codes(text) == [(category, code)]


def test_case_sensitive_tokens():
    assert _codes("8 b") == [("data", "bit")]
    assert _codes("8 B") == [("data", "byte")]
    assert _codes("5 g") == [("weight", "g")]
    assert _codes("5G network") == []
    assert _codes("2 pa") == []
    assert _codes("3.5 Gb") == [("data", "bit")]
    assert _codes("10 Mb") == [("data", "bit")]


def test_prefixed_tokens_are_scaled():
    mbar = detect_first("1500 mbar")
    assert mbar.unit_code == "bar"
    assert mbar.value == pytest.approx(1.5)
    assert convert(mbar.value, "bar", "pa", Category.PRESSURE) == pytest.approx(150000)

    assert detect_first("101.3 kPa").value == pytest.approx(101300)
    assert detect_first("1013 hPa").value == pytest.approx(101300)
    assert detect_first("4 kJ").value == pytest.approx(4000)
    assert detect_first("100 Mb").value == pytest.approx(1e8)
    assert detect_first("100 Mb").unit_code == "bit"


def test_number_forms():
    assert detect_first("2.5e3 m").value == pytest.approx(2500)
    assert [item.value for item in detect("10-15 km")] == [15.0]
    assert detect("v5km") == []


def test_no_detections():
    assert detect("") == []
    assert detect("   ") == []
    assert detect("nothing to see here, just 42") == []
    assert detect(None) == []
    assert detect_first("no units") is None


def test_to_dict_uses_camel_case():
    payload = detect_first("Boil at 100 °C").to_dict()
    assert payload == {
        "value": 100.0,
        "unitToken": "°C",
        "unitCode": "celsius",
        "category": "temperature",
        "fullMatchText": "100 °C",
        "startOffset": 8,
        "endOffset": 14,
    }


def test_convert_selection():
    result = convert_selection("  5 km  ")
    assert result["unitCode"] == "km"
    assert result["originalValue"] == 5.0
    assert result["originalUnit"] == "km"
    assert result["category"] == "length"
    assert [item["unitCode"] for item in result["top"]] == ["m", "ft", "in"]
    assert len(result["top"]) + len(result["more"]) == len(result["conversions"])
    assert result["detection"]["fullMatchText"] == "5 km"


def test_convert_selection_limits():
    assert convert_selection("") is None
    assert convert_selection("hello world") is None
    assert convert_selection("5 km " + "x" * 100) is None
    assert convert_selection("5 km " + "x" * 100, max_length=200) is not None
    preferred = convert_selection("5 km", preferred_units=["mi"])
    assert [item["unitCode"] for item in preferred["conversions"]] == ["mi"]
