from plugins.unit_converter.core import (
    expand_ranked,
    expand_to_all_units,
    rank_conversions,
    split_top,
)
from plugins.unit_converter.core.ranking import priority


def test_rank_orders_by_everyday_relevance():
    ranked = rank_conversions(expand_to_all_units(1, "km", "length"), "length")
    assert [item.unit_code for item in ranked] == ["m", "ft", "in", "cm", "mi", "mm", "yd"]


def test_rank_is_stable_for_shared_priority():
    ranked = rank_conversions(expand_to_all_units(300, "kelvin", "temperature"), "temperature")
    assert [item.unit_code for item in ranked] == ["celsius", "fahrenheit"]


def test_unknown_codes_sort_last():
    assert priority("length", "furlong") == 999
    assert priority("data", "mb") == 1


def test_split_top():
    results = expand_to_all_units(1, "kg", "weight")
    head, rest = split_top(results, 3)
    assert len(head) == 3
    assert len(rest) == len(results) - 3
    assert split_top(results, -1) == ([], list(results))


def test_expand_ranked_payload():
    payload = expand_ranked(5, "km", "length", top=2)
    assert [item["unitCode"] for item in payload["top"]] == ["m", "ft"]
    assert len(payload["more"]) == 5
    assert payload["conversions"][:2] == payload["top"]

    unranked = expand_ranked(5, "km", "length", ranked=False)
    assert unranked["conversions"][0]["unitCode"] == "mm"
