import pytest

from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def test_categories_endpoint_lists_units():
    client = _client()
    response = client.get("/api/unit_converter/categories")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert "length" in payload["data"]["categories"]
    codes = [unit["code"] for unit in payload["data"]["units"]["pressure"]]
    assert codes == ["pa", "bar", "psi", "atm", "mmhg"]


def test_units_endpoint_rejects_unknown_category():
    client = _client()
    assert client.get("/api/unit_converter/units/speed").status_code == 200
    response = client.get("/api/unit_converter/units/colour")
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.invalid_category"


def test_convert_endpoint_success():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1, "from_unit": "m", "to_unit": "cm", "category": "length"},
    )
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["value"] == pytest.approx(100)
    assert payload["data"]["formatted"] == "100"
    assert payload["data"]["label"] == "centimeters"


def test_convert_endpoint_rejects_bad_unit():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": 1, "from_unit": "m", "to_unit": "bogus", "category": "length"},
    )
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.invalid_unit"


def test_convert_endpoint_rejects_bad_number_and_payload():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"value": "ten", "from_unit": "m", "to_unit": "cm", "category": "length"},
    )
    assert response.get_json()["error"]["code"] == "unit.invalid_number"

    response = client.post("/api/unit_converter/convert", json={"value": 1})
    assert response.status_code == 400
    error = response.get_json()["error"]
    assert error["code"] == "unit.invalid_request"
    assert error["details"]["errors"]


def test_expand_endpoint_splits_top_results():
    client = _client()
    response = client.post(
        "/api/unit_converter/expand",
        json={"value": 2, "unit": "kg", "category": "weight"},
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert [item["unitCode"] for item in data["top"]] == ["lb", "g", "oz"]
    assert len(data["top"]) + len(data["more"]) == len(data["conversions"]) == 5


def test_format_endpoint():
    client = _client()
    response = client.get("/api/unit_converter/format?value=0.005&decimals=2")
    assert response.status_code == 200
    assert response.get_json()["data"]["formatted"] == "5.00e-3"

    response = client.get("/api/unit_converter/format?value=abc")
    assert response.status_code == 400


def test_messages_endpoint():
    client = _client()
    response = client.post(
        "/api/unit_converter/messages",
        json={"type": "CONVERT_UNITS", "value": 1, "unitCode": "hour", "category": "time"},
    )
    assert response.status_code == 200
    assert "conversions" in response.get_json()

    response = client.post("/api/unit_converter/messages", json={"type": "NOPE"})
    assert response.get_json() == {"error": "Unknown message type"}
