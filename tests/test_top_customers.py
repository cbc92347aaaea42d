from __future__ import annotations

from app import crud
from app.crud.crud_customer import TOP_CUSTOMERS_LIMIT
from tests.helpers import add_customer, add_reservations


async def test_top_holders_are_capped_and_ranked(db):
    by_count = {}
    for count in range(1, 13):
        customer = await add_customer(db, f"Guest{count}", "Regular")
        await add_reservations(db, customer, count)
        by_count[count] = customer

    top = await crud.customer.get_top_reservation_holders(db)

    assert len(top) == TOP_CUSTOMERS_LIMIT == 10
    assert {c.id for c in top} == {by_count[n].id for n in range(3, 13)}
    assert top[0].id == by_count[12].id


async def test_counts_are_non_increasing(db):
    for i, count in enumerate([2, 5, 1, 5, 3]):
        customer = await add_customer(db, f"Guest{i}", "Regular")
        await add_reservations(db, customer, count)

    ranking = await crud.customer.get_reservation_counts(db)
    counts = [count for _, count in ranking]

    assert sorted(counts, reverse=True) == counts
    assert counts == [5, 5, 3, 2, 1]


async def test_customers_without_reservations_are_excluded(db):
    regular = await add_customer(db, "Jane", "Smith")
    await add_customer(db, "John", "Smithson")
    await add_reservations(db, regular, 1)

    top = await crud.customer.get_top_reservation_holders(db)

    assert [c.id for c in top] == [regular.id]


async def test_no_reservations_means_empty_ranking(db):
    await add_customer(db, "Jane", "Smith")
    assert await crud.customer.get_top_reservation_holders(db) == []


async def test_ranking_returns_full_records(db):
    customer = await add_customer(db, "Jane", "Smith", phone="555-0199", notes="Window seat")
    await add_reservations(db, customer, 2)

    [(record, count)] = await crud.customer.get_reservation_counts(db)

    assert count == 2
    assert record == customer
