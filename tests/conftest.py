from __future__ import annotations

from datetime import date

import pytest

from helpers.sitemap_catalog import build_catalog

HOST = "localhost:8080"
TODAY = date(2024, 5, 17)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # process environment takes precedence over the .env file
    for key in ("SERVER_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def catalog():
    return build_catalog(HOST, today=TODAY)


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text("SERVER_PORT=8080\n", encoding="utf-8")
    return path


@pytest.fixture
def pages_dir(tmp_path):
    pages = tmp_path / "pages"
    series = pages / "crunchyroll" / "series"
    series.mkdir(parents=True)
    (series / "spy_x_family.html").write_text(
        "<html><body>SPY x FAMILY</body></html>", encoding="utf-8"
    )
    return pages
