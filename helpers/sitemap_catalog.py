# helpers/sitemap_catalog.py
# ---------------------------------------------------------------
# The mock sitemap table: domain → relative filename → document.
# Built fresh per process and handed to the writer as a parameter.
# ---------------------------------------------------------------

from __future__ import annotations
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from helpers.sitemap_utils import (
    XHTML_NS,
    SitemapDocument,
    SitemapEntry,
    SitemapIndex,
    Url,
    UrlSet,
)

Catalog = Mapping[str, Mapping[str, SitemapDocument]]


def sitemap_url(host: str, domain: str, path: str) -> str:
    """Absolute URL of a generated sitemap, as served under /sitemaps/."""
    return f"http://{host}/sitemaps/{domain}/{path.lstrip('/')}"


def page_url(host: str, domain: str, path: str) -> str:
    """Absolute URL of a pre-rendered page, as served under /pages/."""
    return f"http://{host}/pages/{domain}/{path.lstrip('/')}"


def build_catalog(host: str, today: Optional[date] = None) -> Catalog:
    today = today or date.today()

    crunchyroll = {
        "sitemap.xml": SitemapIndex(
            sitemaps=(
                SitemapEntry(sitemap_url(host, "crunchyroll", "series/S.xml"), today),
            ),
        ),
        "series/S.xml": UrlSet(
            xmlns_xhtml=XHTML_NS,
            urls=(
                Url(
                    page_url(host, "crunchyroll", "series/spy_x_family.html"),
                    lastmod=today,
                    changefreq="daily",
                ),
            ),
        ),
    }

    return MappingProxyType({
        "crunchyroll": MappingProxyType(crunchyroll),
    })
