# helpers/sitemap_utils.py
# ---------------------------------------------------------------
# Sitemap documents (sitemapindex / urlset) and their XML rendering.
# ---------------------------------------------------------------

from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple, Union
from urllib.parse import urlsplit
from xml.sax.saxutils import escape, quoteattr

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"
NEWS_NS = "http://www.google.com/schemas/sitemap-news/0.9"
MOBILE_NS = "http://www.google.com/schemas/sitemap-mobile/1.0"
IMAGE_NS = "http://www.google.com/schemas/sitemap-image/1.1"
VIDEO_NS = "http://www.google.com/schemas/sitemap-video/1.1"

CHANGEFREQS = ("always", "hourly", "daily", "weekly", "monthly", "yearly", "never")

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

LastMod = Union[date, datetime, str, None]

# whitespace and anything outside the XML 1.0 Char production
_NOT_URL_CHAR = re.compile("[^\x21-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def _check_absolute(value: str, field: str) -> None:
    parts = urlsplit(value or "")
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"{field} must be an absolute http(s) URL, got {value!r}")
    if _NOT_URL_CHAR.search(value):
        raise ValueError(f"{field} contains whitespace or characters not allowed in XML: {value!r}")


def _iso(x: LastMod) -> Optional[str]:
    # date/datetime → YYYY-MM-DD, strings pass through
    if isinstance(x, (datetime, date)):
        return x.strftime("%Y-%m-%d")
    return x or None


@dataclass(frozen=True)
class SitemapEntry:
    loc: str
    lastmod: LastMod = None

    def __post_init__(self):
        _check_absolute(self.loc, "sitemap loc")


@dataclass(frozen=True)
class SitemapIndex:
    sitemaps: Tuple[SitemapEntry, ...]
    xmlns: str = SITEMAP_NS


@dataclass(frozen=True)
class XhtmlLink:
    rel: str
    hreflang: str
    href: str

    def __post_init__(self):
        _check_absolute(self.href, "xhtml:link href")


@dataclass(frozen=True)
class Url:
    loc: str
    lastmod: LastMod = None            # ISO date string or datetime/date
    changefreq: Optional[str] = None   # one of CHANGEFREQS
    priority: Optional[float] = None   # 0.0 - 1.0
    links: Tuple[XhtmlLink, ...] = ()

    def __post_init__(self):
        _check_absolute(self.loc, "url loc")
        if self.changefreq is not None and self.changefreq not in CHANGEFREQS:
            raise ValueError(f"invalid changefreq {self.changefreq!r}")
        if self.priority is not None and not 0.0 <= float(self.priority) <= 1.0:
            raise ValueError(f"priority must be within 0.0-1.0, got {self.priority!r}")


@dataclass(frozen=True)
class UrlSet:
    urls: Tuple[Url, ...]
    xmlns: str = SITEMAP_NS
    xmlns_news: Optional[str] = None
    xmlns_xhtml: Optional[str] = None
    xmlns_mobile: Optional[str] = None
    xmlns_image: Optional[str] = None
    xmlns_video: Optional[str] = None


SitemapDocument = Union[SitemapIndex, UrlSet]


def build_sitemap_index(index: SitemapIndex) -> str:
    """Render a <sitemapindex> document."""
    lines = [
        XML_DECLARATION,
        f"<sitemapindex xmlns={quoteattr(index.xmlns)}>",
    ]
    for s in index.sitemaps:
        lines.append("  <sitemap>")
        lines.append(f"    <loc>{escape(s.loc)}</loc>")
        lastmod = _iso(s.lastmod)
        if lastmod:
            lines.append(f"    <lastmod>{escape(lastmod)}</lastmod>")
        lines.append("  </sitemap>")
    lines.append("</sitemapindex>")
    return "\n".join(lines) + "\n"


def build_urlset(urlset: UrlSet) -> str:
    """
    Render a <urlset> document.

    Optional namespaces and optional <url> fields are left out when empty.
    Alternate-language links are written as self-closing <xhtml:link> elements.
    """
    namespaces = [
        ("xmlns", urlset.xmlns),
        ("xmlns:news", urlset.xmlns_news),
        ("xmlns:xhtml", urlset.xmlns_xhtml),
        ("xmlns:mobile", urlset.xmlns_mobile),
        ("xmlns:image", urlset.xmlns_image),
        ("xmlns:video", urlset.xmlns_video),
    ]
    attrs = " ".join(f"{name}={quoteattr(value)}" for name, value in namespaces if value)

    lines = [XML_DECLARATION, f"<urlset {attrs}>"]
    for u in urlset.urls:
        lines.append("  <url>")
        lines.append(f"    <loc>{escape(u.loc)}</loc>")
        lastmod = _iso(u.lastmod)
        if lastmod:
            lines.append(f"    <lastmod>{escape(lastmod)}</lastmod>")
        if u.changefreq:
            lines.append(f"    <changefreq>{u.changefreq}</changefreq>")
        if u.priority is not None:
            lines.append(f"    <priority>{float(u.priority):.1f}</priority>")
        for link in u.links:
            lines.append(
                f"    <xhtml:link rel={quoteattr(link.rel)} "
                f"hreflang={quoteattr(link.hreflang)} href={quoteattr(link.href)}/>"
            )
        lines.append("  </url>")
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def render_document(doc: SitemapDocument) -> str:
    if isinstance(doc, SitemapIndex):
        return build_sitemap_index(doc)
    if isinstance(doc, UrlSet):
        return build_urlset(doc)
    raise TypeError(f"unsupported sitemap document: {type(doc).__name__}")
