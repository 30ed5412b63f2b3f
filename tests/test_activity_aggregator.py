"""Unit tests for the recent activity aggregator."""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone

import pytest

from atelier_crm.application.use_cases.activity import aggregate_recent_activity
from atelier_crm.domain.entities import Client, Sale, Task

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _at(day: int, hour: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, tzinfo=timezone.utc)


def test_all_sources_empty_yield_empty_feed() -> None:
    assert aggregate_recent_activity([], [], [], now=NOW) == []


def test_missing_sources_are_treated_as_empty() -> None:
    """A provider still loading hands over ``None`` instead of a list."""

    clients = [Client(id="c1", first_name="Ana", created_at=_at(2))]

    feed = aggregate_recent_activity(clients, None, None, now=NOW)

    assert [activity.kind for activity in feed] == ["client"]


def test_client_projection_uses_full_name_and_email_fallback() -> None:
    client = {
        "id": "c1",
        "first_name": "Jane",
        "last_name": "Doe",
        "email": None,
        "created_at": "2024-01-01T00:00:00Z",
    }

    (activity,) = aggregate_recent_activity([client], [], [], now=NOW)

    assert activity.kind == "client"
    assert activity.title == "New Client: Jane Doe"
    assert activity.description == "No email"
    assert activity.timestamp == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert activity.link == "/clients/c1"


def test_client_without_names_is_unnamed() -> None:
    client = Client(id="c1", first_name="", last_name="", email="a@b.co", created_at=_at(1))

    (activity,) = aggregate_recent_activity([client], [], [], now=NOW)

    assert activity.title == "New Client: Unnamed Client"
    assert activity.description == "a@b.co"


def test_task_projection_replaces_underscore_and_uses_creation_time() -> None:
    task = {
        "id": "t1",
        "title": "Follow up",
        "status": "in_progress",
        "due_date": None,
        "created_at": "2024-02-01T00:00:00Z",
    }

    (activity,) = aggregate_recent_activity([], [task], [], now=NOW)

    assert activity.title == "Task: Follow up"
    assert activity.description == "Status: in progress"
    assert activity.timestamp == datetime(2024, 2, 1, tzinfo=timezone.utc)
    assert activity.link == "/tasks/t1"


def test_task_status_only_first_underscore_is_replaced() -> None:
    task = Task(id="t1", title="Quote", status="needs_quote_review", created_at=_at(3))

    (activity,) = aggregate_recent_activity([], [task], [], now=NOW)

    assert activity.description == "Status: needs quote_review"


def test_task_due_date_takes_precedence_over_creation_time() -> None:
    task = Task(id="t1", title="Measure", due_date=_at(20), created_at=_at(3))

    (activity,) = aggregate_recent_activity([], [task], [], now=NOW)

    assert activity.timestamp == _at(20)


def test_task_fallbacks_for_missing_title_and_status() -> None:
    task = Task(id="t1", title=None, status=None, created_at=_at(3))

    (activity,) = aggregate_recent_activity([], [task], [], now=NOW)

    assert activity.title == "Task: Untitled"
    assert activity.description == "No status"


def test_sale_projection_formats_amount_with_two_decimals() -> None:
    sale = {"id": "s1", "amount": 1234.5, "created_at": "2024-03-01T00:00:00Z"}

    (activity,) = aggregate_recent_activity([], [], [sale], now=NOW)

    assert activity.title == "New Sale: $1234.50"
    assert activity.description == "No client"
    assert activity.link == "/sales/s1"


def test_sale_without_amount_counts_as_zero() -> None:
    sale = Sale(id="s1", amount=None, client_name="Jane Doe", created_at=_at(4))

    (activity,) = aggregate_recent_activity([], [], [sale], now=NOW)

    assert activity.title == "New Sale: $0.00"
    assert activity.description == "Jane Doe"


def test_per_source_caps_and_global_order() -> None:
    """Six clients, six tasks and three sales collapse to a 3/5/2 feed of ten."""

    clients = [
        Client(id=f"c{index}", first_name=f"C{index}", created_at=_at(1, index))
        for index in range(6)
    ]
    clients.reverse()  # providers return clients newest first
    tasks = [
        Task(id=f"t{index}", title=f"T{index}", created_at=_at(2, index))
        for index in range(6)
    ]
    sales = [
        Sale(id=f"s{index}", amount=index, created_at=_at(3, index)) for index in range(3)
    ]

    feed = aggregate_recent_activity(clients, tasks, sales, now=NOW)

    assert len(feed) == 10
    assert [a.id for a in feed if a.kind == "client"] == ["c5", "c4", "c3"]
    assert [a.id for a in feed if a.kind == "task"] == ["t5", "t4", "t3", "t2", "t1"]
    assert [a.id for a in feed if a.kind == "sale"] == ["s2", "s1"]
    timestamps = [activity.timestamp for activity in feed]
    assert timestamps == sorted(timestamps, reverse=True)
    assert feed[0].id == "s2"


def test_clients_keep_input_order_without_resorting() -> None:
    clients = [
        Client(id="old", created_at=_at(1)),
        Client(id="new", created_at=_at(9)),
        Client(id="mid", created_at=_at(5)),
        Client(id="newest", created_at=_at(10)),
    ]

    feed = aggregate_recent_activity(clients, [], [], now=NOW)

    assert {activity.id for activity in feed} == {"old", "new", "mid"}


def test_equal_timestamps_keep_client_task_sale_order() -> None:
    moment = _at(5)
    clients = [Client(id="c1", created_at=moment), Client(id="c2", created_at=moment)]
    tasks = [Task(id="t1", created_at=moment)]
    sales = [Sale(id="s1", created_at=moment)]

    feed = aggregate_recent_activity(clients, tasks, sales, now=NOW)

    assert [activity.id for activity in feed] == ["c1", "c2", "t1", "s1"]


def test_limit_truncates_after_merge() -> None:
    tasks = [Task(id=f"t{index}", created_at=_at(index + 1)) for index in range(5)]

    feed = aggregate_recent_activity([], tasks, [], limit=2, now=NOW)

    assert [activity.id for activity in feed] == ["t4", "t3"]


@pytest.mark.parametrize("client_count,task_count,sale_count", [(0, 0, 1), (2, 7, 0), (5, 1, 4)])
def test_length_is_min_of_cap_and_projected(client_count, task_count, sale_count) -> None:
    clients = [Client(id=f"c{i}", created_at=_at(1)) for i in range(client_count)]
    tasks = [Task(id=f"t{i}", created_at=_at(2)) for i in range(task_count)]
    sales = [Sale(id=f"s{i}", created_at=_at(3)) for i in range(sale_count)]

    feed = aggregate_recent_activity(clients, tasks, sales, now=NOW)

    projected = min(client_count, 3) + min(task_count, 5) + min(sale_count, 2)
    assert len(feed) == min(10, projected)


def test_missing_timestamps_fall_back_to_now() -> None:
    client = Client(id="c1", created_at=None)
    task = Task(id="t1", due_date=None, created_at=None)
    sale = Sale(id="s1", created_at="not a date")

    feed = aggregate_recent_activity([client], [task], [sale], now=NOW)

    assert [activity.timestamp for activity in feed] == [NOW, NOW, NOW]
    assert [activity.kind for activity in feed] == ["client", "task", "sale"]


def test_undated_tasks_sort_as_oldest_before_capping() -> None:
    tasks = [Task(id="undated", created_at=None)] + [
        Task(id=f"t{index}", created_at=_at(index + 1)) for index in range(5)
    ]

    feed = aggregate_recent_activity([], tasks, [], now=NOW)

    assert "undated" not in {activity.id for activity in feed}


def test_inputs_are_not_mutated() -> None:
    clients = [Client(id="c1", created_at=_at(1))]
    tasks = [Task(id=f"t{index}", created_at=_at(index + 1)) for index in range(7)]
    sales = [Sale(id=f"s{index}", created_at=_at(index + 1)) for index in range(3)]
    snapshot = copy.deepcopy((clients, tasks, sales))

    aggregate_recent_activity(clients, tasks, sales, now=NOW)

    assert (clients, tasks, sales) == snapshot


def test_same_inputs_same_instant_are_idempotent() -> None:
    clients = [Client(id="c1", first_name="Ana")]
    tasks = [Task(id="t1", title="Call", status="not_started", created_at=_at(2))]
    sales = [Sale(id="s1", amount=10)]

    first = aggregate_recent_activity(clients, tasks, sales, now=NOW)
    second = aggregate_recent_activity(clients, tasks, sales, now=NOW)

    assert first == second


def test_duplicate_ids_across_kinds_are_kept_with_distinct_keys() -> None:
    client = Client(id="shared", created_at=_at(1))
    task = Task(id="shared", created_at=_at(1))

    feed = aggregate_recent_activity([client], [task], [], now=NOW)

    assert [activity.id for activity in feed] == ["shared", "shared"]
    assert feed[0].key != feed[1].key


def test_null_records_degrade_instead_of_raising() -> None:
    feed = aggregate_recent_activity([None], [None], [None], now=NOW)

    assert [activity.title for activity in feed] == [
        "New Client: Unnamed Client",
        "Task: Untitled",
        "New Sale: $0.00",
    ]
    assert all(activity.timestamp == NOW for activity in feed)


def test_naive_timestamps_are_comparable_with_aware_ones() -> None:
    client = Client(id="c1", created_at=datetime(2024, 1, 1))
    sale = Sale(id="s1", created_at=datetime(2024, 1, 2, tzinfo=timezone.utc))

    feed = aggregate_recent_activity([client], [], [sale], now=NOW - timedelta(days=1))

    assert [activity.id for activity in feed] == ["s1", "c1"]


@pytest.mark.parametrize(
    "created_at", ["0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"]
)
def test_out_of_range_timestamps_fall_back_to_now(created_at: str) -> None:
    client = {"id": "c1", "created_at": created_at}
    sale = {"id": "s1", "amount": 5, "created_at": created_at}
    dated_sale = Sale(id="s2", created_at=_at(1))

    feed = aggregate_recent_activity([client], [], [sale, dated_sale], now=NOW)

    assert [activity.id for activity in feed] == ["c1", "s1", "s2"]
    assert [activity.timestamp for activity in feed[:2]] == [NOW, NOW]
