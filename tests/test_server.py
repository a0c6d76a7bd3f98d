from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import main
from helpers.sitemap_writer import generate_sitemaps


@pytest.fixture
def served(tmp_path, pages_dir, catalog):
    sitemaps = tmp_path / "sitemaps"
    generate_sitemaps(sitemaps, catalog)
    return TestClient(main.create_app(pages_dir, sitemaps))


@pytest.fixture
def fake_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


def test_page_is_served(served):
    resp = served.get("/pages/crunchyroll/series/spy_x_family.html")

    assert resp.status_code == 200
    assert resp.text == "<html><body>SPY x FAMILY</body></html>"
    assert resp.headers["content-type"].startswith("text/html")


def test_missing_page_is_not_found(served):
    resp = served.get("/pages/crunchyroll/series/missing.html")
    assert resp.status_code == 404


def test_generated_sitemap_is_served(served):
    resp = served.get("/sitemaps/crunchyroll/sitemap.xml")

    assert resp.status_code == 200
    assert "xml" in resp.headers["content-type"]
    assert "<loc>http://localhost:8080/sitemaps/crunchyroll/series/S.xml</loc>" in resp.text


def test_byte_range_request(served):
    resp = served.get("/sitemaps/crunchyroll/sitemap.xml", headers={"Range": "bytes=0-4"})

    assert resp.status_code == 206
    assert resp.content == b"<?xml"


def test_unknown_prefix_is_not_found(served):
    assert served.get("/crunchyroll/sitemap.xml").status_code == 404


def test_missing_directories_do_not_break_startup(tmp_path):
    client = TestClient(main.create_app(tmp_path / "nope", tmp_path / "nada"))
    assert client.get("/pages/index.html").status_code == 404


def test_run_generates_then_serves(tmp_path, env_file, pages_dir, fake_uvicorn):
    sitemaps = tmp_path / "sitemaps"

    main.run(env_file=env_file, pages_dir=pages_dir, sitemaps_dir=sitemaps)

    assert (sitemaps / "crunchyroll" / "sitemap.xml").is_file()
    assert (sitemaps / "crunchyroll" / "series" / "S.xml").is_file()
    ((app, kwargs),) = fake_uvicorn
    assert kwargs["port"] == 8080
    assert kwargs["log_config"] is None
    assert TestClient(app).get("/sitemaps/crunchyroll/series/S.xml").status_code == 200


def test_run_skips_server_when_generation_fails(tmp_path, env_file, pages_dir, fake_uvicorn):
    blocker = tmp_path / "sitemaps"
    blocker.write_text("")

    assert main.run(env_file=env_file, pages_dir=pages_dir, sitemaps_dir=blocker) is None
    assert fake_uvicorn == []


def test_run_exits_on_missing_config(tmp_path, fake_uvicorn):
    with pytest.raises(SystemExit) as excinfo:
        main.run(env_file=tmp_path / "missing.env", sitemaps_dir=tmp_path / "sitemaps")

    assert excinfo.value.code == 1
    assert fake_uvicorn == []
    assert not (tmp_path / "sitemaps").exists()


def test_run_exits_on_unknown_log_level(tmp_path, fake_uvicorn):
    env = tmp_path / ".env"
    env.write_text("SERVER_PORT=8080\nLOG_LEVEL=verbose\n")

    with pytest.raises(SystemExit) as excinfo:
        main.run(env_file=env, sitemaps_dir=tmp_path / "sitemaps")

    assert excinfo.value.code == 1
    assert fake_uvicorn == []
