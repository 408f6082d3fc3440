from plugins.unit_converter.core import handle_message


def test_convert_units_message_returns_conversions():
    response = handle_message(
        {"type": "CONVERT_UNITS", "value": 5, "unitCode": "km", "category": "length"}
    )
    conversions = response["conversions"]
    assert len(conversions) == 7
    first = conversions[0]
    assert set(first) == {"formattedValue", "unitLabel", "unitCode", "category"}
    assert first["unitCode"] == "mm"
    assert first["formattedValue"] == "5.00M"


def test_legacy_unit_type_key_and_preferred_units():
    response = handle_message(
        {
            "type": "CONVERT_UNITS",
            "value": "1",
            "unitType": "gb",
            "category": "data",
            "preferredUnits": ["mb"],
        }
    )
    assert response == {
        "conversions": [
            {"formattedValue": "1,024", "unitLabel": "MB", "unitCode": "mb", "category": "data"}
        ]
    }


def test_unknown_message_type():
    assert handle_message({"type": "PING"}) == {"error": "Unknown message type"}
    assert handle_message(None) == {"error": "Unknown message type"}


def test_conversion_failures_are_reported():
    response = handle_message(
        {"type": "CONVERT_UNITS", "value": 1, "unitCode": "m", "category": "distance"}
    )
    assert response["error"].startswith("Conversion failed:")

    response = handle_message({"type": "CONVERT_UNITS", "value": "abc", "unitCode": "m", "category": "length"})
    assert response["error"].startswith("Conversion failed:")
