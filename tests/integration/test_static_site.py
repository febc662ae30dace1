from fastapi.testclient import TestClient

from backend.api import DEFAULT_SITE_DIR, create_app, resolve_site_dir


def test_serves_exported_pages(exported_site):
    client = TestClient(create_app(exported_site))

    home = client.get("/")
    about = client.get("/about/")
    css = client.get("/styles.css")

    assert home.status_code == 200
    assert "home page" in home.text
    assert about.status_code == 200
    assert "about page" in about.text
    assert css.status_code == 200
    assert "margin: 0" in css.text


def test_unknown_html_route_uses_build_404_page(exported_site):
    client = TestClient(create_app(exported_site))

    response = client.get("/no-such-page", headers={"accept": "text/html"})

    assert response.status_code == 404
    assert "not found page" in response.text


def test_unknown_asset_returns_json_404_without_build_404_page(exported_site):
    (exported_site / "404.html").unlink()
    client = TestClient(create_app(exported_site))

    response = client.get("/missing.js", headers={"accept": "application/javascript"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_fallback_page_without_build(tmp_path):
    client = TestClient(create_app(tmp_path / "missing"))

    response = client.get("/")

    assert response.status_code == 200
    assert "reflex export" in response.text


def test_healthz_reports_build_state(exported_site, tmp_path):
    built = TestClient(create_app(exported_site)).get("/healthz")
    missing = TestClient(create_app(tmp_path / "missing")).get("/healthz")

    assert built.json() == {"status": "ok", "site_built": True}
    assert missing.json() == {"status": "ok", "site_built": False}


def test_resolve_site_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("SITE_DIR", raising=False)
    assert resolve_site_dir() == DEFAULT_SITE_DIR

    monkeypatch.setenv("SITE_DIR", str(tmp_path))
    assert resolve_site_dir() == tmp_path.resolve()


def test_main_starts_uvicorn_with_factory(monkeypatch):
    from backend import main as server

    calls = []
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("UVICORN_RELOAD", raising=False)
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    server.main()

    assert calls == [
        (
            ("backend.api:create_app",),
            {"factory": True, "host": "127.0.0.1", "port": 8123, "reload": False},
        )
    ]
