from __future__ import annotations

from measurestore import MeasurementService, run


def test_run_serves_the_given_service() -> None:
    svc = MeasurementService()
    server = run(host="127.0.0.1", port=0, service=svc)

    assert server.port != 0
    assert server.url == f"http://127.0.0.1:{server.port}"

    client = server.client()
    mid = client.add_or_update({"label": "over http"}, "remote")

    stored = svc.get_measurement(mid, "remote")
    assert stored is not None
    assert stored["label"] == "over http"


def test_main_parses_cli_overrides(monkeypatch) -> None:
    import measurestore.__main__ as cli

    captured: dict = {}

    def fake_run(app, **kwargs):
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    monkeypatch.setattr(cli, "setup_logging", lambda level, fmt: captured.update(level=level, fmt=fmt))

    cli.main(["--host", "0.0.0.0", "--port", "9100", "--log-format", "json"])

    assert captured["host"] == "0.0.0.0"
    assert captured["port"] == 9100
    assert captured["fmt"] == "json"
    assert captured["app"].title == "measurestore"


def test_main_passes_cors_origins_from_env(monkeypatch) -> None:
    import measurestore.__main__ as cli

    captured: dict = {}

    def fake_create_api_app(*, cors_origins=None):
        captured["cors_origins"] = cors_origins
        return object()

    monkeypatch.setenv("MEASURESTORE_CORS_ORIGINS", "http://a.example, http://b.example/")
    monkeypatch.setattr(cli, "create_api_app", fake_create_api_app)
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kwargs: None)
    monkeypatch.setattr(cli, "setup_logging", lambda level, fmt: None)

    cli.main([])
    assert captured["cors_origins"] == ["http://a.example", "http://b.example"]

    cli.main(["--cors-origin", "http://c.example"])
    assert captured["cors_origins"] == ["http://c.example"]
