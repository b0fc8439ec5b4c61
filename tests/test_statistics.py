from __future__ import annotations

from decimal import Decimal

from customer_mgmt.db.seed import seed_sample_data
from customer_mgmt.models.customer import Customer
from customer_mgmt.models.order import Order
from customer_mgmt.repositories.customer_repository import CustomerRepository
from customer_mgmt.repositories.order_repository import OrderRepository
from customer_mgmt.services.statistics import StatisticsAggregator


def test_empty_store_reports_zeroes(uow):
    stats = StatisticsAggregator(uow)

    assert stats.total_customers() == 0
    assert stats.active_customers() == 0
    assert stats.inactive_customers() == 0
    assert stats.total_orders() == 0
    assert stats.total_revenue() == Decimal("0")
    assert isinstance(stats.total_revenue(), Decimal)
    assert stats.customer_type_breakdown() == []


def test_full_statistics_over_sample_data(uow):
    seed_sample_data(uow)

    snapshot = StatisticsAggregator(uow).full_statistics()

    assert snapshot.total_customers == 3
    assert snapshot.active_customers == 3
    assert snapshot.inactive_customers == 0
    assert snapshot.total_orders == 2
    assert snapshot.total_revenue == Decimal("449.49")
    assert [(row.customer_type, row.count) for row in snapshot.customer_type_breakdown] == [
        ("Business", 1),
        ("Individual", 1),
        ("Premium", 1),
    ]


def test_revenue_is_sum_of_all_order_amounts(uow):
    repo = OrderRepository(uow)
    amounts = ["10.10", "20.20", "0.00", "0.05", "1999.99"]
    for index, amount in enumerate(amounts):
        repo.create(Order(order_number=f"ORD-{index}", total_amount=Decimal(amount)))
    repo.commit()

    expected = sum(Decimal(a) for a in amounts)
    assert StatisticsAggregator(uow).total_revenue() == expected
    assert StatisticsAggregator(uow).total_orders() == len(amounts)


def test_inactive_customers_are_counted_but_not_broken_down(uow):
    seed_sample_data(uow)
    customers = CustomerRepository(uow)
    acme = customers.get_by_email("contact@acme.com")
    customers.soft_delete(acme.id)
    customers.commit()

    stats = StatisticsAggregator(uow)
    assert stats.total_customers() == 3
    assert stats.active_customers() == 2
    assert stats.inactive_customers() == 1
    assert [row.customer_type for row in stats.customer_type_breakdown()] == [
        "Individual",
        "Premium",
    ]


def test_missing_customer_type_is_bucketed_as_unknown(uow):
    repo = CustomerRepository(uow)
    untyped = repo.create(Customer(first_name="No", last_name="Type", email="none@x.com"))
    literal = repo.create(
        Customer(first_name="Lit", last_name="Eral", email="lit@x.com", customer_type="Unknown")
    )
    repo.create(Customer(first_name="Ind", last_name="Ividual", email="ind@x.com"))
    repo.commit()

    # Inserts fall back to the column default, so clear the type afterwards.
    untyped.customer_type = None
    repo.commit()
    assert literal.customer_type == "Unknown"

    breakdown = StatisticsAggregator(uow).customer_type_breakdown()
    assert [(row.customer_type, row.count) for row in breakdown] == [
        ("Individual", 1),
        ("Unknown", 2),
    ]


def test_statistics_do_not_mutate_state(uow):
    seed_sample_data(uow)
    StatisticsAggregator(uow).full_statistics()

    assert not uow.has_pending_changes
