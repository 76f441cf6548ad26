import json
from datetime import date

import pytest
from bs4 import BeautifulSoup
from pydantic import ValidationError

from comparison_page_builder.constants import ACCENT_TOKENS
from comparison_page_builder.models.profiles import BrandProfile, CallToAction
from comparison_page_builder.models.sections import (
    Author,
    CtaSectionParams,
    FaqItem,
    FaqSectionParams,
    HeroSectionParams,
    PricingBrand,
    PricingCompetitor,
    PricingDetails,
    PricingPlan,
    PricingSectionParams,
    ProsConsBrand,
    ProsConsCompetitor,
    ProsConsSectionParams,
    ScreenshotBrand,
    ScreenshotCompetitor,
    ScreenshotsSectionParams,
    SectionId,
    TocEntry,
    TocSectionParams,
    UseCasesBrand,
    UseCasesCompetitor,
    UseCasesSectionParams,
)
from comparison_page_builder.sections.comparison import generate_comparison
from comparison_page_builder.sections.cta import generate_cta
from comparison_page_builder.sections.faq import generate_faq
from comparison_page_builder.sections.hero import format_display_date, generate_hero
from comparison_page_builder.sections.pricing import generate_pricing
from comparison_page_builder.sections.pros_cons import generate_pros_cons
from comparison_page_builder.sections.registry import SECTION_GENERATORS, generate_section
from comparison_page_builder.sections.screenshots import browser_domain, generate_screenshots
from comparison_page_builder.sections.toc import generate_toc
from comparison_page_builder.sections.use_cases import generate_use_cases
from comparison_page_builder.validator import is_valid_section_content

from conftest import FIXED_TODAY


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def accent_tokens_in(element) -> set[str]:
    """Accent classes on ``element`` or any of its descendants."""
    found = set(element.get("class") or []) & set(ACCENT_TOKENS)
    for child in element.find_all(True):
        found |= set(child.get("class") or []) & set(ACCENT_TOKENS)
    return found


def competitor_blocks(html: str):
    blocks = soup(html).select('[data-party="competitor"]')
    assert blocks, "expected at least one competitor block"
    return blocks


# Hero


def test_hero_defaults(acme, globex):
    result = generate_hero(HeroSectionParams(brand=acme, competitor=globex), today=lambda: FIXED_TODAY)
    doc = soup(result.html)

    assert result.section_id is SectionId.hero
    assert result.section_name == "Hero Section"
    cta = doc.select_one("a.btn-primary")
    assert cta.get_text(strip=True) == "Try Acme"
    assert cta["href"] == "/"
    assert doc.strong.get_text() == "Editorial Team"
    assert "Product Research" in doc.get_text()
    time = doc.find("time")
    assert time["datetime"] == "2024-03-05"
    assert time.get_text() == "Mar 5, 2024"


def test_hero_breadcrumb_and_heading(acme, globex):
    doc = soup(generate_hero(HeroSectionParams(brand=acme, competitor=globex), today=lambda: FIXED_TODAY).html)

    crumbs = doc.find("nav", attrs={"aria-label": "Breadcrumb"})
    assert [a.get_text() for a in crumbs.find_all("a")] == ["Home", "Alternatives"]
    assert crumbs.find("span").get_text() == "vs Globex"
    assert doc.h1.select_one("span.text-brand").get_text() == "Acme"


def test_hero_uses_explicit_values(acme, globex):
    params = HeroSectionParams(
        brand=acme,
        competitor=globex,
        seo_description="Why teams move",
        cta_primary=CallToAction(text="Start trial", url="https://acme.test/trial"),
        author=Author(name="Dana"),
        last_updated=date(2023, 12, 25),
    )
    doc = soup(generate_hero(params).html)

    assert doc.select_one("a.btn-primary")["href"] == "https://acme.test/trial"
    assert doc.strong.get_text() == "Dana"
    assert doc.find("time").get_text() == "Dec 25, 2023"
    assert "Why teams move" in doc.get_text()


def test_hero_escapes_names(globex):
    html = generate_hero(
        HeroSectionParams(brand=BrandProfile(name="<b>Acme</b>"), competitor=globex), today=lambda: FIXED_TODAY
    ).html

    assert "<b>Acme</b>" not in html
    assert "&lt;b&gt;Acme&lt;/b&gt;" in html


def test_hero_competitor_logo_is_neutral(acme, globex):
    doc = soup(generate_hero(HeroSectionParams(brand=acme, competitor=globex), today=lambda: FIXED_TODAY).html)
    glyphs = doc.find_all("div", attrs={"aria-label": "Globex"})

    assert glyphs
    assert all("bg-gray-600" in glyph["class"] for glyph in glyphs)
    assert "#00ff00" not in str(doc)


def test_format_display_date_has_no_padding():
    assert format_display_date(date(2024, 3, 5)) == "Mar 5, 2024"


# Table of contents


def test_toc_links_and_sticky_flag():
    entries = [TocEntry(id="verdict", label="Verdict", emoji="⚡"), TocEntry(id="faq", label="FAQ")]
    result = generate_toc(TocSectionParams(sections=entries))
    nav = soup(result.html).nav

    assert {"sticky", "top-0", "z-40"} <= set(nav["class"])
    assert [a["href"] for a in nav.select("a.toc-link")] == ["#verdict", "#faq"]
    assert result.metadata == {"section_count": 2}

    plain = soup(generate_toc(TocSectionParams(sections=entries, sticky=False)).html).nav
    assert "sticky" not in plain["class"]


# Verdict


def test_verdict_only_brand_card_has_cta(required_fragments):
    doc = soup(required_fragments["verdict"])

    brand_card = doc.select_one('[data-party="brand"]')
    link = brand_card.find("a")
    assert "text-brand" in link["class"]
    assert "Try Acme" in link.get_text()
    for block in competitor_blocks(required_fragments["verdict"]):
        assert block.find("a") is None
        assert accent_tokens_in(block) == set()


def test_verdict_renders_stats_and_bottom_line(required_fragments):
    text = soup(required_fragments["verdict"]).get_text()
    assert "$12" in text
    assert "Integrations" in text
    assert "Acme is the better default for most teams." in text


# Comparison table


def test_comparison_rows_follow_input(comparison_params):
    result = generate_comparison(comparison_params)
    rows = soup(result.html).select("tbody tr")

    assert result.metadata == {"feature_count": 5}
    assert len(rows) == 5
    assert [row.find("td").div.get_text() for row in rows] == ["SSO", "Audit log", "API", "Offline mode", "Templates"]


def test_comparison_duplicates_are_rendered(comparison_params):
    doubled = comparison_params.model_copy(update={"features": [*comparison_params.features, comparison_params.features[0]]})
    rows = soup(generate_comparison(doubled).html).select("tbody tr")
    assert len(rows) == 6


def test_comparison_competitor_cells_stay_neutral(comparison_params):
    doc = soup(generate_comparison(comparison_params).html)

    for cell in doc.select("td.competitor-cell"):
        assert accent_tokens_in(cell) == set()
    for block in doc.select('[data-party="competitor"]'):
        assert accent_tokens_in(block) == set()
    assert "#00ff00" not in str(doc)


def test_comparison_ticks_only_yes_cells(comparison_params):
    doc = soup(generate_comparison(comparison_params).html)

    brand_cells = doc.select("td.brand-cell span[data-status]")
    ticked = [cell["data-status"] for cell in brand_cells if cell.find("svg")]
    assert ticked == ["yes", "yes"]
    assert all("text-brand" in svg["class"] for cell in brand_cells for svg in cell.find_all("svg"))

    competitor_cells = doc.select("td.competitor-cell span[data-status]")
    assert [cell["data-status"] for cell in competitor_cells] == ["yes", "partial", "badge", "yes", "no"]
    assert all("text-gray-400" in svg["class"] for cell in competitor_cells for svg in cell.find_all("svg"))


def test_comparison_wins_cards(comparison_params):
    doc = soup(generate_comparison(comparison_params).html)
    brand_wins = doc.select_one('.wins-card[data-party="brand"]')
    competitor_wins = doc.select_one('.wins-card[data-party="competitor"]')

    assert [li.get_text() for li in brand_wins.find_all("li")] == ["Faster setup", "Better API", "Cheaper seats"]
    assert len(competitor_wins.find_all("li")) == 3


# Pricing


def pricing_params() -> PricingSectionParams:
    return PricingSectionParams(
        brand=PricingBrand(
            name="Acme",
            pricing=PricingDetails(
                free_tier=True,
                starting_price="$10/mo",
                billing_note="billed annually",
                plans=[
                    PricingPlan(name="Starter", price="$10", features=["5 seats"]),
                    PricingPlan(name="Team", price="$25", features=["SSO", "Audit log"], is_recommended=True),
                ],
            ),
        ),
        competitor=PricingCompetitor(
            name="Globex",
            primary_color="#00ff00",
            pricing=PricingDetails(
                starting_price="$15/mo",
                plans=[PricingPlan(name="Business", price="$30", features=["SSO"], is_recommended=True)],
            ),
        ),
        value_summary="Acme costs less per seat.",
    )


def test_pricing_recommended_badges_differ_by_party():
    result = generate_pricing(pricing_params())
    doc = soup(result.html)

    brand_column = doc.select_one('.pricing-column[data-party="brand"]')
    competitor_column = doc.select_one('.pricing-column[data-party="competitor"]')
    brand_badge = brand_column.find("span", string="Recommended")
    competitor_badge = competitor_column.find("span", string="Popular")

    assert "bg-brand" in brand_badge["class"]
    assert "bg-gray-500" in competitor_badge["class"]
    assert competitor_column.find("span", string="Recommended") is None
    assert accent_tokens_in(competitor_column) == set()
    assert result.metadata == {"plan_count": 3}


def test_pricing_free_tier_and_billing_note():
    doc = soup(generate_pricing(pricing_params()).html)
    brand_column = doc.select_one('.pricing-column[data-party="brand"]')
    competitor_column = doc.select_one('.pricing-column[data-party="competitor"]')

    assert brand_column.find("span", string="Free Tier") is not None
    assert competitor_column.find("span", string="Free Tier") is None
    assert "Starting from $10/mo • billed annually" in brand_column.get_text()


# Pros and cons / use cases


def test_pros_cons_cards():
    params = ProsConsSectionParams(
        brand=ProsConsBrand(name="Acme", pros=["Fast", "Cheap"], cons=["Young"]),
        competitor=ProsConsCompetitor(name="Globex", pros=["Mature"], cons=["Slow", "Pricey"]),
    )
    result = generate_pros_cons(params)
    doc = soup(result.html)

    assert doc.section["id"] == "pros-cons"
    assert result.section_name == "Pros & Cons Section"
    brand_card = doc.select_one('[data-party="brand"]')
    assert len(brand_card.find_all("li")) == 3
    for block in competitor_blocks(result.html):
        assert accent_tokens_in(block) == set()


def test_use_cases_pro_tip_is_optional():
    params = UseCasesSectionParams(
        brand=UseCasesBrand(name="Acme", use_cases=["Small teams"]),
        competitor=UseCasesCompetitor(name="Globex", use_cases=["Enterprises", "Regulated industries"]),
    )
    without_tip = generate_use_cases(params)
    with_tip = generate_use_cases(params.model_copy(update={"pro_tip": "Trial both for a week."}))

    assert soup(without_tip.html).section["id"] == "use-cases"
    assert "Pro Tip" not in without_tip.html
    assert "Trial both for a week." in with_tip.html
    for block in competitor_blocks(with_tip.html):
        assert accent_tokens_in(block) == set()
        assert "Choose Globex If..." in block.get_text()


# Screenshots


def test_browser_domain():
    assert browser_domain("Acme Corp") == "acmecorp.com"
    assert browser_domain("Globex") == "globex.com"


def test_screenshots_overlay_is_brand_only():
    params = ScreenshotsSectionParams(
        brand=ScreenshotBrand(name="Acme Corp", screenshot_url="https://acme.test/ui.png", cta_url="/signup"),
        competitor=ScreenshotCompetitor(name="Globex", screenshot_url="https://globex.test/ui.png"),
    )
    result = generate_screenshots(params)
    doc = soup(result.html)

    buttons = doc.select("a.btn-primary")
    assert len(buttons) == 1
    assert buttons[0]["href"] == "/signup"
    assert "acmecorp.com" in doc.get_text()
    for block in competitor_blocks(result.html):
        assert block.find("a") is None
        assert accent_tokens_in(block) == set()
    assert "See how Acme Corp and Globex compare visually." in doc.get_text()
    assert "Visual Design Philosophy" in doc.get_text()


# FAQ


def test_faq_embeds_faq_page_schema():
    params = FaqSectionParams(
        brand_name="Acme",
        competitor_name="Globex",
        faqs=[
            FaqItem(question="Is it <free>?", answer="Yes & no."),
            FaqItem(question="Migrate?", answer="Yes."),
        ],
    )
    result = generate_faq(params)
    doc = soup(result.html)

    assert result.metadata == {"faq_count": 2}
    assert len(doc.select(".faq-item")) == 2
    schema = json.loads(doc.find("script", type="application/ld+json").string)
    assert schema["@type"] == "FAQPage"
    assert schema["mainEntity"][0]["name"] == "Is it <free>?"
    assert schema["mainEntity"][0]["acceptedAnswer"]["text"] == "Yes & no."
    assert "Is it &lt;free&gt;?" in result.html


# CTA


def test_cta_buttons_and_badges():
    params = CtaSectionParams(
        brand_name="Acme",
        headline="Ready to switch?",
        description="Import your Globex workspace in minutes.",
        primary_cta=CallToAction(text="Start free", url="/signup"),
        secondary_cta=CallToAction(text="Book a demo", url="/demo"),
        trust_badges=["No credit card", "Cancel anytime"],
    )
    doc = soup(generate_cta(params).html)

    links = doc.find_all("a")
    assert [a["href"] for a in links] == ["/signup", "/demo"]
    assert "btn-primary" in links[0]["class"]
    assert "btn-primary" not in links[1]["class"]
    assert len(doc.select("svg.text-brand")) == 2


def test_cta_without_secondary():
    params = CtaSectionParams(
        brand_name="Acme",
        headline="Ready?",
        description="Go.",
        primary_cta=CallToAction(text="Start", url="/signup"),
    )
    doc = soup(generate_cta(params).html)
    assert len(doc.find_all("a")) == 1


# Registry


def test_every_section_has_a_generator():
    assert set(SECTION_GENERATORS) == set(SectionId)


def test_generated_fragments_pass_validation(required_fragments):
    for section_id, html in required_fragments.items():
        assert is_valid_section_content(html), section_id


def test_generate_section_validates_payload():
    result = generate_section(
        "faq",
        {
            "brand_name": "Acme",
            "competitor_name": "Globex",
            "faqs": [{"question": "Why?", "answer": "Because."}],
        },
    )
    assert result.section_id is SectionId.faq
    assert result.metadata["faq_count"] == 1


def test_generate_section_rejects_bad_payload():
    with pytest.raises(ValidationError):
        generate_section(SectionId.cta, {"brand_name": "Acme"})


def test_generate_section_rejects_unknown_id():
    with pytest.raises(ValueError):
        generate_section("testimonials", {})
