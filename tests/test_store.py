import threading

import pytest

from portfolio_api.app.core.errors import DuplicateRecordError, RecordNotFoundError
from portfolio_api.app.core.store import SEED_ASSETS, Collection, Store
from portfolio_api.app.schemas.asset import Asset
from portfolio_api.app.schemas.contribution import Contribution


def make_asset(**fields):
    base = {"type": "A", "ticker": "AAA3", "price": 10.0, "percentage": 10.0, "score": 1, "quantity": 1}
    base.update(fields)
    return Asset(**base)


def test_append_then_list_preserves_order():
    store = Store()
    for i in range(5):
        store.contributions.append(Contribution(user_id=i, amount=i * 10.0, date=f"2024-01-0{i + 1}"))

    records = store.contributions.list_all()
    assert len(records) == 5
    assert [c.user_id for c in records] == [0, 1, 2, 3, 4]


def test_append_returns_record_unchanged():
    store = Store()
    contribution = Contribution(user_id=1, amount=50.0, date="2024-01-01")
    assert store.contributions.append(contribution) == contribution


def test_list_all_filters_by_field_and_keeps_relative_order():
    store = Store()
    store.assets.append(make_asset(id=1, type="A", ticker="A1"))
    store.assets.append(make_asset(id=2, type="B", ticker="B1"))
    store.assets.append(make_asset(id=3, type="A", ticker="A2"))

    filtered = store.assets.list_all(type="A")
    assert [a.ticker for a in filtered] == ["A1", "A2"]
    assert store.assets.list_all(type=None) == store.assets.list_all()
    assert store.assets.list_all(type="C") == []


def test_find_latest_returns_last_match():
    store = Store()
    store.contributions.append(Contribution(user_id=1, amount=100.0, date="2024-03-01"))
    store.contributions.append(Contribution(user_id=2, amount=200.0, date="2024-03-02"))
    store.contributions.append(Contribution(user_id=1, amount=300.0, date="2024-01-01"))

    latest = store.contributions.find_latest("user_id", 1)
    assert latest.amount == 300.0


def test_find_latest_without_match_returns_none():
    store = Store()
    store.contributions.append(Contribution(user_id=1, amount=100.0))
    assert store.contributions.find_latest("user_id", 99) is None


def test_replace_first_match_in_place():
    store = Store()
    store.assets.append(make_asset(id=1, ticker="A1"))
    store.assets.append(make_asset(id=2, ticker="B1"))

    replaced = store.assets.replace("id", 2, make_asset(id=2, ticker="B2", price=99.0))

    assert replaced.price == 99.0
    assert [a.ticker for a in store.assets.list_all()] == ["A1", "B2"]


def test_replace_keeps_key_from_lookup():
    store = Store()
    store.assets.append(make_asset(id=1, ticker="A1"))

    replaced = store.assets.replace("id", 1, make_asset(id=None, ticker="A9"))
    assert replaced.id == 1


def test_replace_missing_key_raises_and_leaves_collection_unchanged():
    store = Store()
    store.assets.append(make_asset(id=1, ticker="A1"))
    before = store.assets.list_all()

    with pytest.raises(RecordNotFoundError):
        store.assets.replace("id", 42, make_asset(id=42))

    assert store.assets.list_all() == before


def test_unique_key_rejects_duplicates():
    store = Store(asset_key="ticker")
    store.assets.append(make_asset(ticker="ITUB4"))

    with pytest.raises(DuplicateRecordError):
        store.assets.append(make_asset(ticker="ITUB4", price=1.0))
    assert store.assets.count() == 1


def test_unique_key_ignores_unset_values():
    store = Store(asset_key="id")
    store.assets.append(make_asset(id=None, ticker="X1"))
    store.assets.append(make_asset(id=None, ticker="X2"))
    assert store.assets.count() == 2


def test_collections_without_unique_key_accept_duplicates():
    store = Store()
    contribution = Contribution(user_id=1, amount=10.0)
    store.contributions.append(contribution)
    store.contributions.append(contribution)
    assert store.contributions.count() == 2


def test_seeded_store_contains_demo_assets():
    store = Store(seed=True)
    assert [a.ticker for a in store.assets.list_all()] == [a.ticker for a in SEED_ASSETS]


def test_seeded_stores_do_not_share_records():
    first = Store(seed=True)
    second = Store(seed=True)
    first.assets.replace("id", 1, make_asset(id=1, ticker="CHANGED"))
    assert second.assets.list_all()[0].ticker == "XPML11"


def test_clear_empties_collection():
    store = Store(seed=True)
    store.assets.clear()
    assert store.assets.count() == 0


def test_concurrent_appends_are_all_kept():
    collection = Collection("Contribution", threading.RLock())

    def worker(user_id):
        for _ in range(200):
            collection.append(Contribution(user_id=user_id, amount=1.0))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert collection.count() == 8 * 200
