from decimal import Decimal

import pytest

from recordstore import (
    CatalogEntry,
    ClientEntry,
    ClientRegistry,
    ItemStore,
    RecordNotFoundError,
)


@pytest.fixture
def items() -> ItemStore:
    s = ItemStore()
    s.insert(CatalogEntry(1, "Friend", 1))
    s.insert(CatalogEntry(2, "Liver", 70000))
    s.insert(CatalogEntry(3, "Buy", 99999999))
    return s


def test_find_by_id_after_insert_returns_record() -> None:
    s = ClientRegistry()
    c = ClientEntry(7, "Smith", "Elm Street")
    s.insert(c)
    assert s.find_by_id(7) is c


def test_all_preserves_insertion_order(items: ItemStore) -> None:
    assert [r.identifier for r in items.all()] == [1, 2, 3]
    assert len(items) == 3


def test_lookup_found_and_not_found(items: ItemStore) -> None:
    found = items.find_by_id(2)
    assert found is not None
    assert found.name == "Liver"
    assert found.price == Decimal("70000")
    assert items.find_by_id(99) is None


def test_remove_then_lookup_is_not_found(items: ItemStore) -> None:
    liver = items.find_by_id(2)
    assert liver is not None
    assert items.remove(liver) is True
    assert items.find_by_id(2) is None
    assert [r.identifier for r in items.all()] == [1, 3]


def test_remove_matches_by_value() -> None:
    s = ItemStore()
    s.insert(CatalogEntry(1, "Friend", 1))
    assert s.remove(CatalogEntry(1, "Friend", Decimal("1"))) is True
    assert len(s) == 0


def test_remove_missing_record_is_noop(items: ItemStore) -> None:
    assert items.remove(CatalogEntry(42, "Nobody", 0)) is False
    assert len(items) == 3


def test_duplicate_identifiers_first_match_wins() -> None:
    s = ClientRegistry()
    first = ClientEntry(1, "Johnson", "Maple Street")
    second = ClientEntry(1, "Impostor", "Nowhere")
    s.insert(first)
    s.insert(second)
    assert s.find_by_id(1) is first
    assert s.all() == [first, second]

    s.remove(first)
    assert s.find_by_id(1) is second


def test_all_returns_snapshot(items: ItemStore) -> None:
    snapshot = items.all()
    snapshot.clear()
    assert len(items) == 3


def test_records_stay_mutable_in_store(items: ItemStore) -> None:
    entry = items[1]
    entry.name = "Best friend"
    entry.price = "2.50"
    assert items.find_by_id(1).name == "Best friend"  # type: ignore[union-attr]
    assert items[1].price == Decimal("2.50")


def test_identifier_is_read_only() -> None:
    entry = CatalogEntry(1, "Friend", 1)
    with pytest.raises(AttributeError):
        entry.identifier = 2  # type: ignore[misc]


def test_getitem_and_contains(items: ItemStore) -> None:
    assert items[3].name == "Buy"
    assert 3 in items
    assert 99 not in items
    with pytest.raises(RecordNotFoundError):
        _ = items[99]


def test_clear(items: ItemStore) -> None:
    items.clear()
    assert len(items) == 0
    assert items.find_by_id(1) is None


def test_repr_lists_identifiers(items: ItemStore) -> None:
    assert repr(items) == "ItemStore([1, 2, 3])"


def test_bulk_yields_store(items: ItemStore) -> None:
    with items.bulk() as s:
        s.insert(CatalogEntry(4, "Extra", "9.99"))
        s.remove(CatalogEntry(1, "Friend", 1))
    assert [r.identifier for r in items] == [2, 3, 4]
