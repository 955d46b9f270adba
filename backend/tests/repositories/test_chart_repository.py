import dataclasses
import threading

import pytest

from chartboard_backend.models.chart import ChartDisplayOptions, ChartDraft, DataPoint
from chartboard_backend.repositories.chart_repository import InMemoryChartRepository


@pytest.fixture
def repo():
    return InMemoryChartRepository()


def _draft(**overrides):
    values = {
        "title": "T",
        "chart_type": "line",
        "data": [DataPoint("A", 1), DataPoint("B", 3)],
    }
    values.update(overrides)
    return ChartDraft(**values)


def test_seeded_store_holds_sample_chart(repo):
    charts = repo.list()
    assert len(charts) == 1
    seed = charts[0]
    assert seed.id == 1
    assert seed.title == "Sales Performance Q4 2024"
    assert seed.chart_type == "bar"
    assert len(seed.data) == 12
    assert [p.label for p in seed.data][:3] == ["Jan", "Feb", "Mar"]
    assert seed.options == ChartDisplayOptions(
        show_grid=True, show_legend=True, show_data_labels=False, enable_animation=True
    )


def test_unseeded_store_is_empty():
    assert InMemoryChartRepository(seed=False).list() == []


def test_create_assigns_next_id_and_timestamp(repo):
    chart = repo.create(_draft())
    assert chart.id == 2
    assert chart.created_at
    assert chart.x_axis_label == ""
    assert chart.color_theme == "blue"
    assert repo.get(chart.id) == chart


def test_ids_are_never_reused(repo):
    first = repo.create(_draft())
    assert repo.delete(first.id) is True
    second = repo.create(_draft())
    third = repo.create(_draft())
    assert first.id < second.id < third.id
    assert repo.get(first.id) is None


def test_create_does_not_validate_enumerations(repo):
    chart = repo.create(_draft(chart_type="unknown-xyz", color_theme="neon"))
    assert repo.get(chart.id).chart_type == "unknown-xyz"
    assert repo.get(chart.id).color_theme == "neon"


def test_list_keeps_insertion_order(repo):
    a = repo.create(_draft(title="a"))
    b = repo.create(_draft(title="b"))
    assert [c.id for c in repo.list()] == [1, a.id, b.id]


def test_get_missing_returns_none(repo):
    assert repo.get(999) is None


def test_update_overwrites_supplied_fields_only(repo):
    chart = repo.create(_draft(x_axis_label="x", options=ChartDisplayOptions(show_grid=True)))
    updated = repo.update(chart.id, {"title": "Renamed", "data": [DataPoint("Z", 9)]})
    assert updated is not None
    assert updated.title == "Renamed"
    assert updated.data == [DataPoint("Z", 9)]
    assert updated.x_axis_label == "x"
    assert updated.options.show_grid is True
    assert repo.get(chart.id) == updated


def test_update_replaces_options_wholesale(repo):
    chart = repo.create(_draft(options=ChartDisplayOptions(show_grid=True, show_legend=True)))
    updated = repo.update(chart.id, {"options": ChartDisplayOptions(show_legend=False)})
    assert updated.options == ChartDisplayOptions(show_legend=False)
    assert updated.options.show_grid is None


def test_update_ignores_identity_fields(repo):
    chart = repo.create(_draft())
    updated = repo.update(chart.id, {"id": 42, "created_at": "yesterday", "title": "New"})
    assert updated.id == chart.id
    assert updated.created_at == chart.created_at
    assert repo.get(42) is None


def test_empty_update_leaves_record_unchanged(repo):
    chart = repo.create(_draft())
    assert repo.update(chart.id, {}) == chart


def test_update_missing_returns_none(repo):
    assert repo.update(999, {"title": "x"}) is None


def test_delete_reports_whether_removed(repo):
    chart = repo.create(_draft())
    assert repo.delete(chart.id) is True
    assert repo.get(chart.id) is None
    assert repo.delete(chart.id) is False


def test_returned_records_do_not_alias_the_store(repo):
    chart = repo.create(_draft())
    with pytest.raises(dataclasses.FrozenInstanceError):
        chart.id = 99
    chart.data.append(DataPoint("C", 5))
    repo.get(chart.id).data.clear()
    repo.list()[-1].data.clear()
    assert repo.get(chart.id).data == [DataPoint("A", 1), DataPoint("B", 3)]


def test_concurrent_creates_get_unique_ids(repo):
    workers = 16
    barrier = threading.Barrier(workers)
    ids = []

    def worker():
        barrier.wait()
        ids.append(repo.create(_draft()).id)

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(ids)) == workers
    assert len(repo.list()) == workers + 1
    assert sorted(ids) == list(range(2, workers + 2))
