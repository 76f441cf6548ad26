from __future__ import annotations

from datetime import date
from typing import Any

from .markup import json_ld_script


def build_schema_objects(
    page_title: str,
    description: str,
    brand_name: str,
    competitor_name: str,
    canonical_url: str | None = None,
    today: date | None = None,
) -> list[dict[str, Any]]:
    """Article, ItemList and BreadcrumbList objects for a comparison page.

    Names are passed through untouched; they are JSON encoded, not HTML escaped.
    """
    published = (today or date.today()).isoformat()
    organization = {"@type": "Organization", "name": brand_name, "url": canonical_url or "/"}

    article = {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": page_title,
        "description": description,
        "articleSection": "Product Comparison",
        "datePublished": published,
        "dateModified": published,
        "author": dict(organization),
        "publisher": dict(organization),
        "isAccessibleForFree": True,
        "inLanguage": "en-US",
    }
    item_list = {
        "@context": "https://schema.org",
        "@type": "ItemList",
        "name": f"{brand_name} vs {competitor_name} Comparison",
        "itemListElement": [
            {"@type": "ListItem", "position": 1, "name": brand_name},
            {"@type": "ListItem", "position": 2, "name": competitor_name},
        ],
    }
    breadcrumbs = {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": 1, "name": "Home", "item": "/"},
            {"@type": "ListItem", "position": 2, "name": "Alternatives", "item": "/alternatives"},
            {"@type": "ListItem", "position": 3, "name": f"vs {competitor_name}"},
        ],
    }
    return [article, item_list, breadcrumbs]


def build_schema_markup(
    page_title: str,
    description: str,
    brand_name: str,
    competitor_name: str,
    canonical_url: str | None = None,
    today: date | None = None,
) -> str:
    objects = build_schema_objects(page_title, description, brand_name, competitor_name, canonical_url, today)
    return "\n  ".join(json_ld_script(obj) for obj in objects)


__all__ = ["build_schema_markup", "build_schema_objects"]
