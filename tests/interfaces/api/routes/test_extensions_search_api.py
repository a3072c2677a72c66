"""Integration tests for the marketplace compatible ``/extensions/search``."""

from __future__ import annotations

import pytest


def _names(response) -> list[str]:
    return [kit["name"] for kit in response.json()["data"]]


@pytest.fixture()
def marketplace(make_kit):
    """The three kits used by the marketplace examples."""

    make_kit(
        "Modern Business",
        category="Business",
        author="Acme",
        tags=["modern", "clean"],
        industries=["Technology"],
    )
    make_kit(
        "Creative Portfolio",
        category="Portfolio",
        author="Studio",
        tags=["creative"],
        industries=["Design"],
    )
    make_kit(
        "Old Business",
        category="Business",
        author="Acme",
        tags=["modern"],
        industries=["Technology"],
        is_active=False,
    )


def test_search_returns_active_kits_with_meta(client, marketplace):
    response = client.get("/extensions/search")

    assert response.status_code == 200
    body = response.json()
    assert _names(response) == ["Modern Business", "Creative Portfolio"]
    assert body["meta"] == {"current_page": 1, "total": 2, "per_page": 15, "last_page": 1}


def test_search_never_returns_inactive_kits(client, marketplace):
    response = client.get(
        "/extensions/search",
        params={"type": "wordpress", "categories": "Business", "tags": "modern"},
    )

    assert _names(response) == ["Modern Business"]
    assert response.json()["meta"]["total"] == 1


def test_search_end_to_end_example(client, marketplace):
    response = client.get(
        "/extensions/search",
        params={"type": "wordpress", "categories": "Business", "tags": "modern,vintage"},
    )

    assert _names(response) == ["Modern Business"]


def test_search_tags_match_any_listed_tag(client, make_kit):
    make_kit("Modern", tags=["modern"])
    make_kit("Vintage", tags=["vintage", "retro"])
    make_kit("Plain", tags=["minimal"])
    make_kit("Untagged")

    response = client.get("/extensions/search", params={"tags": "modern, vintage"})

    assert _names(response) == ["Modern", "Vintage"]


def test_search_tags_match_whole_elements_only(client, make_kit):
    make_kit("Modernist", tags=["modernist"])

    response = client.get("/extensions/search", params={"tags": "modern"})

    assert response.json()["meta"]["total"] == 0


def test_search_industries_accept_repeated_and_comma_separated(client, make_kit):
    make_kit("Tech", industries=["Technology"])
    make_kit("Food", industries=["Restaurant"])
    make_kit("Shop", industries=["Retail"])

    response = client.get(
        "/extensions/search",
        params=[("industries", "Technology,Restaurant"), ("industries", "Retail")],
    )

    assert _names(response) == ["Tech", "Food", "Shop"]


def test_search_accepts_bracket_parameters(client, make_kit):
    make_kit("Tech", industries=["Technology"], tags=["modern"])
    make_kit("Food", industries=["Restaurant"], tags=["modern"])

    response = client.get(
        "/extensions/search",
        params=[("industries[]", "Restaurant"), ("tags[]", "modern")],
    )

    assert _names(response) == ["Food"]


def test_search_categories_are_exact_and_ored(client, make_kit):
    make_kit("Biz", category="Business")
    make_kit("Folio", category="Portfolio")
    make_kit("Blog", category="Blog")

    response = client.get(
        "/extensions/search",
        params=[("categories", "Business"), ("categories", "Blog"), ("categories", "Port")],
    )

    assert _names(response) == ["Biz", "Blog"]


def test_search_category_with_comma_is_not_split(client, make_kit):
    make_kit("Combined", category="Food, Drink")
    make_kit("Food only", category="Food")

    response = client.get("/extensions/search", params={"categories": "Food, Drink"})

    assert _names(response) == ["Combined"]


@pytest.mark.parametrize("term", ["Business", "business", "BUSINESS"])
def test_search_terms_match_author_case_insensitively(client, make_kit, term):
    make_kit("Alpha", author="Business Co")
    make_kit("Beta", author="Someone Else")

    response = client.get("/extensions/search", params={"search_terms": term})

    assert _names(response) == ["Alpha"]


def test_search_terms_match_name_description_or_author(client, make_kit):
    make_kit("Landing Page", description="plain")
    make_kit("Plain", description="a landing layout")
    make_kit("Other", author="Landing Labs")
    make_kit("Unrelated")

    response = client.get("/extensions/search", params={"search_terms": "landing"})

    assert _names(response) == ["Landing Page", "Plain", "Other"]


def test_search_terms_treat_wildcards_literally(client, make_kit):
    make_kit("100% Responsive")
    make_kit("1000 Responsive")

    response = client.get("/extensions/search", params={"search_terms": "100%"})

    assert _names(response) == ["100% Responsive"]


def test_search_filters_combine_with_and(client, make_kit):
    make_kit("Match", category="Business", tags=["modern"], author="Acme")
    make_kit("Wrong tag", category="Business", tags=["retro"], author="Acme")
    make_kit("Wrong author", category="Business", tags=["modern"], author="Other")

    response = client.get(
        "/extensions/search",
        params={"categories": "Business", "tags": "modern", "search_terms": "acme"},
    )

    assert _names(response) == ["Match"]


def test_search_blank_filters_are_ignored(client, marketplace):
    response = client.get(
        "/extensions/search",
        params={"categories": "", "tags": " , ", "industries": "", "search_terms": "  "},
    )

    assert response.json()["meta"]["total"] == 2


def test_search_paginates_fifteen_per_page(client, make_kit):
    for index in range(17):
        make_kit(f"Kit {index:02d}")

    response = client.get("/extensions/search", params={"page": "2"})

    body = response.json()
    assert _names(response) == ["Kit 15", "Kit 16"]
    assert body["meta"] == {"current_page": 2, "total": 17, "per_page": 15, "last_page": 2}


@pytest.mark.parametrize(("raw", "expected"), [("999", 50), ("0", 1), ("-4", 1), ("abc", 1)])
def test_search_page_is_clamped(client, marketplace, raw, expected):
    response = client.get("/extensions/search", params={"page": raw})

    assert response.status_code == 200
    assert response.json()["meta"]["current_page"] == expected


def test_search_page_beyond_results_is_empty(client, marketplace):
    response = client.get("/extensions/search", params={"page": "999"})

    body = response.json()
    assert body["data"] == []
    assert body["meta"]["total"] == 2
    assert body["meta"]["last_page"] == 1


@pytest.mark.parametrize("extension_type", ["plugin", "WordPress", "theme"])
def test_unsupported_type_is_answered_without_the_store(
    client, marketplace, monkeypatch, extension_type
):
    from app.infrastructure.repositories import TemplateKitRepository

    def fail_paginate(self, kit_query):
        raise AssertionError("the store must not be queried")

    monkeypatch.setattr(TemplateKitRepository, "paginate", fail_paginate)

    response = client.get(
        "/extensions/search", params={"type": extension_type, "categories": "Business"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["meta"] == {"current_page": 1, "total": 0, "per_page": 15}
    assert "last_page" not in body["meta"]


def test_search_results_use_kit_representation(client, make_kit):
    make_kit("Priced", price="29.99", tags=["modern"], files=["index.html"])

    data = client.get("/extensions/search").json()["data"][0]

    assert data["price"] == "29.99"
    assert data["tags"] == ["modern"]
    assert data["files"] == ["index.html"]
    assert data["is_active"] is True


def test_search_tag_example_excludes_inactive_match(client, make_kit):
    make_kit("A", tags=["x", "y"])
    make_kit("B", tags=["y", "z"])
    make_kit("C", tags=["x"], is_active=False)

    response = client.get("/extensions/search", params={"type": "wordpress", "tags": "x"})

    assert _names(response) == ["A"]
    assert response.json()["meta"]["total"] == 1
