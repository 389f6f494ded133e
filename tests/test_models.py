import pytest
from pydantic import ValidationError

from app.models import CuratedList, Film, Tier, UserFilmLog


def test_film_derives_id_from_title_and_accepts_camel_case():
    film = Film.model_validate(
        {
            "title": "Blade Runner",
            "year": 1982,
            "posterUrl": "https://example.com/br.jpg",
            "rtScore": 89,
            "isCustomEntry": True,
        }
    )

    assert film.id == "blade-runner"
    assert film.poster_url == "https://example.com/br.jpg"
    dumped = film.model_dump(by_alias=True)
    assert dumped["posterUrl"] == "https://example.com/br.jpg"
    assert dumped["rtScore"] == 89
    assert dumped["isCustomEntry"] is True


def test_film_keeps_explicit_id_and_suffixes_external_ids():
    assert Film(id="custom-id", title="Heat").id == "custom-id"
    assert Film(title="Heat", tmdb_id=949).id == "heat-949"


def test_film_scores_are_bounded():
    with pytest.raises(ValidationError):
        Film(title="Heat", rt_score=101)
    with pytest.raises(ValidationError):
        Film(title="Heat", imdb_score=10.5)


def test_all_films_includes_series_tiers():
    curated = CuratedList(
        id="mixed",
        tiers=[Tier(level=1, name="A", films=[Film(title="Alien")])],
        series_tiers=[Tier(level=1, name="S", films=[Film(title="Fargo (S1)")])],
    )

    assert [film.id for film in curated.all_films()] == ["alien", "fargo"]
    assert curated.contains_film("fargo")


def test_to_content_omits_id_and_uses_wire_names():
    curated = CuratedList(
        id="custom_abc",
        title="MY LIST",
        is_custom=True,
        original_list_id="kubrick",
        sherpa_notes={"the-shining": "Start here."},
    )

    content = curated.to_content()

    assert "id" not in content
    assert content["isCustom"] is True
    assert content["originalListId"] == "kubrick"
    assert content["sherpaNotes"] == {"the-shining": "Start here."}


def test_from_custom_row_skips_malformed_entries():
    row = {
        "id": "custom_1",
        "title": "NIGHT SHIFT",
        "status": "bogus",
        "content": {
            "subtitle": "After hours",
            "tiers": [
                {"level": 1, "name": "OPENERS", "films": [{"title": "Collateral"}, "junk"]},
                "not-a-tier",
                {"name": "CLOSERS", "films": [{"year": 1999}]},
            ],
            "privacy": "private",
            "originalListId": "wild",
        },
    }

    curated = CuratedList.from_custom_row(row, author="NIGHTOWL")

    assert curated is not None
    assert curated.is_custom is True
    assert curated.author == "NIGHTOWL"
    assert curated.status == "draft"
    assert curated.privacy == "private"
    assert curated.original_list_id == "wild"
    assert [tier.name for tier in curated.tiers] == ["OPENERS", "CLOSERS"]
    assert [film.id for film in curated.tiers[0].films] == ["collateral"]
    assert curated.tiers[1].films == []
    assert curated.tiers[1].level == 3


def test_from_custom_row_requires_an_id():
    assert CuratedList.from_custom_row({"title": "No id"}) is None


def test_from_override_row_rebuilds_canonical_list():
    row = {
        "list_id": "kubrick",
        "content": {
            "title": "KUBRICK (REVISED)",
            "isCustom": True,
            "tiers": [{"level": 1, "name": "ONLY", "films": [{"title": "Barry Lyndon"}]}],
        },
    }

    curated = CuratedList.from_override_row(row)

    assert curated is not None
    assert curated.id == "kubrick"
    assert curated.is_custom is False
    assert curated.status == "published"
    assert curated.all_films()[0].id == "barry-lyndon"
    assert CuratedList.from_override_row({"list_id": "kubrick", "content": "??"}) is None


@pytest.mark.parametrize("rating", [0, 0.5, 3, 4.5, 5])
def test_user_film_log_accepts_half_point_ratings(rating):
    assert UserFilmLog(rating=rating).rating == rating


@pytest.mark.parametrize("rating", [-1, 2.3, 5.5])
def test_user_film_log_rejects_invalid_ratings(rating):
    with pytest.raises(ValidationError):
        UserFilmLog(rating=rating)
