from app import create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert titles == ["Unit Converter", "Unit Detector"]
    assert payload["data"]["site"]["title"] == "Unit Lens"
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Content-Type-Options") == "nosniff"


def test_request_id_is_echoed():
    client = create_app("TestingConfig").test_client()
    response = client.get("/", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    assert client.get("/").headers["X-Request-ID"]


def test_unknown_route_uses_error_envelope():
    client = create_app("TestingConfig").test_client()
    response = client.get("/api/unit_converter/nope")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "not_found"


def test_plugin_settings_are_loaded():
    app = create_app("TestingConfig")
    assert app.config["PLUGIN_SETTINGS"]["unit_detector"]["max_selection_length"] == 100
    assert app.config["MAX_CONTENT_LENGTH"] == 1024 * 1024
