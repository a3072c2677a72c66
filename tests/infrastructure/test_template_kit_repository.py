"""Repository level checks of how query descriptors are folded into SQL."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy.dialects import mssql, mysql, postgresql

from app.domain.entities import TemplateKit
from app.domain.query import AnyOf, KitQuery, Operator, PageRequest, Predicate
from app.infrastructure.repositories import TemplateKitRepository
from app.infrastructure.repositories.template_kit_repository import escape_like


def _names(page) -> list[str]:
    return [kit.name for kit in page.items]


def test_escape_like_escapes_wildcards():
    assert escape_like("100%_\\") == "100\\%\\_\\\\"
    assert escape_like("[a]", dialect="mssql") == "\\[a]"
    assert escape_like("[a]") == "[a]"


def test_has_element_matches_json_array_members(make_kit, db_session):
    make_kit("Modern", tags=["modern", "minimal"])
    make_kit("Classic", tags=["classic"])
    make_kit("Untagged")

    repository = TemplateKitRepository(db_session)
    page = repository.paginate(
        KitQuery(criteria=(AnyOf((Predicate("tags", Operator.HAS_ELEMENT, "modern"),)),))
    )

    assert _names(page) == ["Modern"]
    assert page.total == 1


def test_has_element_is_exact_not_substring(make_kit, db_session):
    make_kit("Modernist", tags=["modernist"])

    page = TemplateKitRepository(db_session).paginate(
        KitQuery(criteria=(Predicate("tags", Operator.HAS_ELEMENT, "modern"),))
    )

    assert page.total == 0


def test_or_group_matches_any_value(make_kit, db_session):
    make_kit("Tech", industries=["Technology"])
    make_kit("Health", industries=["Healthcare"])
    make_kit("Retail", industries=["Retail"])

    group = AnyOf(
        (
            Predicate("industries", Operator.HAS_ELEMENT, "Technology"),
            Predicate("industries", Operator.HAS_ELEMENT, "Healthcare"),
        )
    )
    page = TemplateKitRepository(db_session).paginate(KitQuery(criteria=(group,)))

    assert _names(page) == ["Tech", "Health"]


def test_contains_is_case_insensitive(make_kit, db_session):
    make_kit("Business Template Kit")
    make_kit("Portfolio Template Kit")

    page = TemplateKitRepository(db_session).paginate(
        KitQuery(criteria=(Predicate("name", Operator.CONTAINS, "business"),))
    )

    assert _names(page) == ["Business Template Kit"]


@pytest.mark.parametrize(
    ("term", "expected"),
    [("100%", ["100% Responsive"]), ("a_b", ["a_b kit"]), ("%", ["100% Responsive"])],
)
def test_contains_treats_wildcards_literally(make_kit, db_session, term, expected):
    make_kit("100% Responsive")
    make_kit("1000 Responsive")
    make_kit("a_b kit")
    make_kit("axb kit")

    page = TemplateKitRepository(db_session).paginate(
        KitQuery(criteria=(Predicate("name", Operator.CONTAINS, term),))
    )

    assert _names(page) == expected


def test_criteria_are_combined_with_and(make_kit, db_session):
    make_kit("Active Business", category="Business", is_active=True)
    make_kit("Inactive Business", category="Business", is_active=False)
    make_kit("Active Blog", category="Blog", is_active=True)

    page = TemplateKitRepository(db_session).paginate(
        KitQuery(
            criteria=(
                Predicate("category", Operator.EQUALS, "Business"),
                Predicate("is_active", Operator.EQUALS, True),
            )
        )
    )

    assert _names(page) == ["Active Business"]


def test_paginate_slices_in_insertion_order(make_kit, db_session):
    for index in range(7):
        make_kit(f"Kit {index}")

    repository = TemplateKitRepository(db_session)
    second = repository.paginate(KitQuery(page=PageRequest(page=2, per_page=3)))
    beyond = repository.paginate(KitQuery(page=PageRequest(page=5, per_page=3)))

    assert _names(second) == ["Kit 3", "Kit 4", "Kit 5"]
    assert second.total == 7
    assert second.last_page == 3
    assert second.first_position == 4
    assert second.last_position == 6
    assert beyond.items == []
    assert beyond.total == 7
    assert beyond.first_position is None


def test_unknown_field_is_rejected(db_session, database):
    repository = TemplateKitRepository(db_session)

    with pytest.raises(ValueError):
        repository.paginate(
            KitQuery(criteria=(Predicate("files", Operator.HAS_ELEMENT, "index.html"),))
        )


def test_create_round_trips_lists_and_price(db_session, database):
    repository = TemplateKitRepository(db_session)

    saved = repository.create(
        TemplateKit(
            id=None,
            name="Stored",
            tags=["a", "b"],
            files=["index.html"],
            price=Decimal("12.50"),
        )
    )
    loaded = repository.get(saved.id)

    assert loaded is not None
    assert loaded.tags == ["a", "b"]
    assert loaded.industries is None
    assert loaded.files == ["index.html"]
    assert loaded.price == Decimal("12.50")
    assert loaded.is_active is True
    assert loaded.created_at is not None


def test_delete_removes_the_row(make_kit, db_session):
    kit = make_kit("Doomed")
    repository = TemplateKitRepository(db_session)

    repository.delete(kit.id)

    assert repository.get(kit.id) is None
    with pytest.raises(ValueError):
        repository.delete(kit.id)


class _DialectSession:
    """Session stand-in whose bind reports a given database dialect."""

    def __init__(self, dialect) -> None:
        self._bind = SimpleNamespace(dialect=dialect)

    def get_bind(self):
        return self._bind


def _compile(dialect, predicate):
    repository = TemplateKitRepository(_DialectSession(dialect))
    clause = repository._predicate_to_clause(predicate)
    return clause.compile(dialect=dialect)


def test_has_element_uses_jsonb_containment_on_postgresql():
    compiled = _compile(
        postgresql.dialect(), Predicate("tags", Operator.HAS_ELEMENT, "modern")
    )

    assert str(compiled) == "template_kit.tags @> %(tags_1)s"
    assert list(compiled.params.values()) == [["modern"]]


def test_has_element_uses_json_contains_on_mysql():
    compiled = _compile(
        mysql.dialect(), Predicate("industries", Operator.HAS_ELEMENT, "Retail")
    )

    sql = str(compiled)
    assert sql.startswith("json_contains(template_kit.industries, ")
    assert sql.endswith(") = %s")
    assert sorted(map(str, compiled.params.values())) == ['"Retail"', "1"]


def test_has_element_uses_openjson_on_mssql():
    compiled = _compile(
        mssql.dialect(), Predicate("tags", Operator.HAS_ELEMENT, "modern")
    )

    sql = " ".join(str(compiled).split())
    assert sql.startswith("EXISTS (SELECT ")
    assert "FROM openjson(template_kit.tags) AS " in sql
    assert " WHERE " in sql
    assert "modern" in compiled.params.values()


def test_contains_escapes_brackets_on_mssql():
    compiled = _compile(
        mssql.dialect(), Predicate("name", Operator.CONTAINS, "[beta]_kit")
    )

    sql = str(compiled)
    assert "LIKE" in sql
    assert "ESCAPE '\\'" in sql
    assert "%\\[beta]\\_kit%" in compiled.params.values()


def test_contains_keeps_brackets_on_postgresql():
    compiled = _compile(
        postgresql.dialect(), Predicate("name", Operator.CONTAINS, "[beta]")
    )

    assert "ILIKE" in str(compiled)
    assert "%[beta]%" in compiled.params.values()
