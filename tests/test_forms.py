import pytest
from werkzeug.datastructures import MultiDict

from common.forms import get_float, get_int
from common.validation import ValidationError


def test_get_float_reads_query_args():
    args = MultiDict({"value": "2.25", "blank": "  "})
    assert get_float(args, "value", 0.0) == 2.25
    assert get_float(args, "blank", 1.5) == 1.5
    assert get_float(args, "missing", 1.5) == 1.5


def test_get_float_rejects_bad_values():
    with pytest.raises(ValidationError, match="Invalid value for value"):
        get_float({"value": "abc"}, "value", 0.0)
    with pytest.raises(ValidationError):
        get_float({"value": "inf"}, "value", 0.0)
    with pytest.raises(ValidationError, match="must be ≥"):
        get_float({"value": "0.1"}, "value", 1.0, minimum=0.5)


def test_get_int_for_plugin_settings():
    settings = {"decimal_places": 3, "top_conversions": "4.2"}
    assert get_int(settings, "decimal_places", 2, minimum=0, maximum=10) == 3
    assert get_int(settings, "top_conversions", 3) == 4
    assert get_int(settings, "max_selection_length", 100) == 100
    with pytest.raises(ValidationError, match="must be ≤"):
        get_int({"decimals": "12"}, "decimals", 2, maximum=10)
    with pytest.raises(ValidationError, match="decimals must be ≥"):
        get_int({"decimals": "-1"}, "decimals", 2, minimum=0)
