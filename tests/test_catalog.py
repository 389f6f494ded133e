from app.catalog import (
    ARCHIVE_CATEGORIES,
    BADGE_TITLES,
    CatalogStore,
    catalog_runtime,
    create_film,
)
from app.models import CuratedList, Film, Tier
from app.services.resolver import ListResolver


def _custom(list_id: str, title: str = "MINE") -> CuratedList:
    return CuratedList(
        id=list_id,
        title=title,
        is_custom=True,
        status="draft",
        tiers=[Tier(level=1, name="ONE", films=[Film(title="Heat")])],
    )


def test_catalog_exposes_every_category_list():
    catalog = CatalogStore()

    assert [category.title for category in catalog.categories] == [
        category.title for category in ARCHIVE_CATEGORIES
    ]
    assert "kubrick" in catalog
    assert "unknown" not in catalog
    assert catalog.get("unknown") is None


def test_catalog_ships_the_full_canonical_tree():
    catalog = CatalogStore()

    assert [category.title for category in catalog.categories] == [
        "THE GRANDMASTERS",
        "GENRES & UNIVERSES",
        "MOVEMENTS & WORLD",
        "THEMATIC",
    ]
    assert len(catalog.list_ids()) == 61
    assert sum(len(curated.all_films()) for curated in catalog) == 931
    assert len(BADGE_TITLES) == 55
    assert set(BADGE_TITLES) <= set(catalog.list_ids())
    assert "iranian" not in BADGE_TITLES


def test_catalog_films_carry_deterministic_runtimes():
    catalog = CatalogStore()

    assert catalog.find_film("the-shining").runtime == 88
    assert catalog.find_film("fear-and-desire").runtime == 177
    assert create_film("Heat", 1995).runtime == catalog_runtime("Heat") == 86
    assert all(85 <= film.runtime < 180 for film in catalog.all_films())


def test_catalog_returns_private_copies():
    catalog = CatalogStore()

    copy = catalog.get("kubrick")
    copy.tiers[0].films.clear()
    copy.title = "CHANGED"

    fresh = catalog.get("kubrick")
    assert fresh.title == "STANLEY KUBRICK"
    assert fresh.tiers[0].films


def test_shared_film_is_listed_under_every_containing_list():
    catalog = CatalogStore()

    lists = catalog.lists_containing_film("2001--a-space-odyssey")

    assert {entry["id"] for entry in lists} == {"kubrick", "machine"}
    assert catalog.find_film("2001--a-space-odyssey").year == 1968


def test_catalog_search_matches_titles_case_insensitively():
    catalog = CatalogStore()

    titles = [film.title for film in catalog.search_films("kill bill")]

    assert titles == ["Kill Bill: Vol. 1", "Kill Bill: Vol. 2"]
    assert catalog.search_films("   ") == []


def test_resolver_prefers_custom_then_override_then_canonical():
    catalog = CatalogStore()
    override = catalog.get("kubrick").model_copy(update={"title": "KUBRICK (EDITED)"})
    overrides = {"kubrick": override}
    custom_lists = {}
    resolver = ListResolver(catalog, overrides, custom_lists)

    assert resolver.resolve("nolan").title == "CHRISTOPHER NOLAN"
    assert resolver.resolve("kubrick").title == "KUBRICK (EDITED)"

    custom_lists["kubrick"] = _custom("kubrick", "SHADOWED")
    assert resolver.resolve("kubrick").title == "SHADOWED"
    assert resolver.resolve("missing") is None


def test_resolver_reads_live_mappings_without_caching():
    catalog = CatalogStore()
    overrides: dict[str, CuratedList] = {}
    resolver = ListResolver(catalog, overrides, {})

    assert resolver.resolve("nolan").title == "CHRISTOPHER NOLAN"
    overrides["nolan"] = catalog.get("nolan").model_copy(update={"title": "NEW NOLAN"})
    assert resolver.resolve("nolan").title == "NEW NOLAN"


def test_resolved_lists_do_not_alias_stored_state():
    catalog = CatalogStore()
    custom_lists = {"custom_1": _custom("custom_1")}
    resolver = ListResolver(catalog, {}, custom_lists)

    resolver.resolve("custom_1").tiers.clear()

    assert custom_lists["custom_1"].tiers


def test_home_categories_apply_overrides():
    catalog = CatalogStore()
    overrides = {
        "carpenter": catalog.get("carpenter").model_copy(update={"title": "THE HORROR MASTER"})
    }
    resolver = ListResolver(catalog, overrides, {})

    titles = [curated.title for category in resolver.home_categories() for curated in category.lists]

    assert "THE HORROR MASTER" in titles
    assert "CHRISTOPHER NOLAN" in titles


def test_vault_lists_append_unsaved_custom_lists():
    catalog = CatalogStore()
    custom_lists = {"custom_1": _custom("custom_1"), "custom_2": _custom("custom_2")}
    resolver = ListResolver(catalog, {}, custom_lists)

    lists = resolver.vault_lists(["nolan", "custom_2", "ghost", "nolan"])

    assert [curated.id for curated in lists] == ["nolan", "custom_2", "custom_1"]
