from __future__ import annotations

from datetime import date

import pytest

from comparison_page_builder.content_store import InMemoryContentStore, InMemorySectionStore
from comparison_page_builder.errors import StorageError
from comparison_page_builder.models.page import SectionMap, SeoMeta
from comparison_page_builder.models.profiles import BrandProfile, CallToAction, CompetitorProfile
from comparison_page_builder.models.sections import (
    ComparisonTableParams,
    CtaSectionParams,
    FaqItem,
    FaqSectionParams,
    FeatureRow,
    FeatureStatus,
    HeroSectionParams,
    Stat,
    Verdict,
    VerdictBrand,
    VerdictCompetitor,
    VerdictSectionParams,
)
from comparison_page_builder.sections.comparison import generate_comparison
from comparison_page_builder.sections.cta import generate_cta
from comparison_page_builder.sections.faq import generate_faq
from comparison_page_builder.sections.hero import generate_hero
from comparison_page_builder.sections.verdict import generate_verdict

FIXED_TODAY = date(2024, 3, 5)


def fragment(section_id: str) -> str:
    return (
        f'<section id="{section_id}"><p>marker-{section_id}: content comfortably longer '
        "than the fifty character minimum.</p></section>"
    )


class FailingStore:
    """Content store whose writes always fail."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or StorageError("Failed to save page: connection reset")
        self.calls = 0

    def create_item(self, *, title=None, item_id=None):
        raise self.exc

    def get_item(self, item_id):
        return None

    def update_item(self, item_id, *, generated_content=None, status=None):
        self.calls += 1
        raise self.exc


@pytest.fixture
def acme() -> BrandProfile:
    return BrandProfile(name="Acme", primary_color="#ff0000", tagline="Ship faster")


@pytest.fixture
def globex() -> CompetitorProfile:
    # A competitor colour is supplied on purpose; it must never be rendered.
    return CompetitorProfile(name="Globex", primary_color="#00ff00")


@pytest.fixture
def features() -> list[FeatureRow]:
    return [
        FeatureRow(
            name="SSO",
            brand_value="Included",
            brand_status=FeatureStatus.yes,
            competitor_value="Included",
            competitor_status=FeatureStatus.yes,
        ),
        FeatureRow(
            name="Audit log",
            description="Exportable activity history",
            brand_value="Yes",
            brand_status=FeatureStatus.yes,
            competitor_value="Enterprise only",
            competitor_status=FeatureStatus.partial,
        ),
        FeatureRow(
            name="API",
            brand_value="REST + GraphQL",
            brand_status=FeatureStatus.badge,
            competitor_value="REST",
            competitor_status=FeatureStatus.badge,
        ),
        FeatureRow(
            name="Offline mode",
            brand_value="No",
            brand_status=FeatureStatus.no,
            competitor_value="Yes",
            competitor_status=FeatureStatus.yes,
        ),
        FeatureRow(
            name="Templates",
            brand_value="Limited",
            brand_status=FeatureStatus.partial,
            competitor_value="None",
            competitor_status=FeatureStatus.no,
        ),
    ]


@pytest.fixture
def comparison_params(acme, globex, features) -> ComparisonTableParams:
    return ComparisonTableParams(
        brand=acme,
        competitor=globex,
        features=features,
        brand_wins=["Faster setup", "Better API", "Cheaper seats"],
        competitor_wins=["Offline mode", "Larger marketplace", "Older ecosystem"],
    )


@pytest.fixture
def required_fragments(acme, globex, comparison_params) -> dict[str, str]:
    hero = generate_hero(
        HeroSectionParams(brand=acme, competitor=globex, seo_description="Acme vs Globex compared."),
        today=lambda: FIXED_TODAY,
    )
    verdict = generate_verdict(
        VerdictSectionParams(
            brand=VerdictBrand(name="Acme", highlights=["Fast", "Simple"], best_for="Small teams"),
            competitor=VerdictCompetitor(name="Globex", highlights=["Mature"], best_for="Enterprises"),
            verdict=Verdict(headline="Acme wins for speed", summary="Pick Acme unless you need offline mode."),
            stats=[Stat(value="$12", label="Price/mo"), Stat(value="65+", label="Integrations")],
            bottom_line="Acme is the better default for most teams.",
        )
    )
    comparison = generate_comparison(comparison_params)
    faq = generate_faq(
        FaqSectionParams(
            brand_name="Acme",
            competitor_name="Globex",
            faqs=[
                FaqItem(question="Is Acme cheaper?", answer="Yes, for teams under fifty."),
                FaqItem(question="Can I migrate?", answer="Acme imports Globex projects."),
            ],
        )
    )
    cta = generate_cta(
        CtaSectionParams(
            brand_name="Acme",
            headline="Try Acme today",
            description="Start free, no card required.",
            primary_cta=CallToAction(text="Start free", url="https://acme.test/signup"),
        )
    )
    return {result.section_id.value: result.html for result in (hero, verdict, comparison, faq, cta)}


@pytest.fixture
def required_map() -> SectionMap:
    return SectionMap(**{section_id: fragment(section_id) for section_id in ("hero", "verdict", "comparison", "faq", "cta")})


@pytest.fixture
def seo() -> SeoMeta:
    return SeoMeta(meta_description="Acme vs Globex: features, pricing and verdict.")


@pytest.fixture
def content_store() -> InMemoryContentStore:
    store = InMemoryContentStore()
    store.create_item(title="Acme vs Globex", item_id="item-1")
    return store


@pytest.fixture
def section_store() -> InMemorySectionStore:
    return InMemorySectionStore()
