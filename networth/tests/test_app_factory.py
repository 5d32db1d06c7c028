from __future__ import annotations

from networth.app import create_app
from networth.config import Settings


def test_factory_keeps_settings_and_cors_origins():
    settings = Settings(env="test", log_level="WARNING", cors_origins=("https://plan.example",))
    app = create_app(settings)

    assert app.config["SETTINGS"] is settings
    with app.test_client() as client:
        resp = client.get("/api/ping", headers={"Origin": "https://plan.example"})

    assert resp.headers.get("Access-Control-Allow-Origin") == "https://plan.example"


def test_wsgi_module_exposes_app():
    from networth.wsgi import app

    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert {"/api/ping", "/api/health", "/api/projection", "/api/projection/defaults"} <= rules
