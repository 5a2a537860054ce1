import threading
from pathlib import Path

import pytest

from lightningsearch.engine import BATCH_SIZE, SearchEngine
from lightningsearch.filters import ContentsFilter, NameFilter
from lightningsearch.query import SearchObserver, SearchQuery


class _Collector(SearchObserver):
    def __init__(self):
        self._lock = threading.Lock()
        self.paths = []

    def on_file_matched(self, path):
        with self._lock:
            self.paths.append(Path(path))


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "sub" / "deeper").mkdir(parents=True)
    (tmp_path / "a.txt").write_text("alpha", encoding="utf-8")
    (tmp_path / "b.log").write_text("beta", encoding="utf-8")
    (tmp_path / "sub" / "c.txt").write_text("gamma alpha", encoding="utf-8")
    (tmp_path / "sub" / "deeper" / "d.txt").write_text("delta", encoding="utf-8")
    return tmp_path


def _run(query, workers=2):
    collector = _Collector()
    query.add_result_observer(collector)
    with SearchEngine(query, num_workers=workers) as engine:
        engine.perform_search()
        assert engine.wait(timeout=30)
        counts = (
            engine.total_files_to_search,
            engine.total_files_searched,
            engine.total_matches,
            engine.pending_operations,
        )
    return collector, counts


def test_no_filters_matches_every_file(tree):
    collector, (to_search, searched, matches, pending) = _run(
        SearchQuery(directories=[tree])
    )
    expected = {p for p in tree.rglob("*") if p.is_file()}
    assert set(collector.paths) == expected
    assert to_search == searched == matches == len(expected)
    assert pending == 0


def test_filters_must_all_match(tree):
    query = SearchQuery(
        directories=[tree],
        filters=[NameFilter(".txt"), ContentsFilter("alpha")],
    )
    collector, (to_search, searched, matches, _) = _run(query)
    assert sorted(collector.paths) == sorted([tree / "a.txt", tree / "sub" / "c.txt"])
    assert matches == len(collector.paths)
    assert to_search == searched


def test_no_match_reports_nothing(tree):
    query = SearchQuery(directories=[tree], filters=[NameFilter("nothing-like-this")])
    collector, (to_search, searched, matches, _) = _run(query)
    assert collector.paths == []
    assert matches == 0
    assert searched == to_search


def test_missing_directory_finds_nothing(tmp_path):
    collector, (to_search, searched, matches, pending) = _run(
        SearchQuery(directories=[tmp_path / "does-not-exist"])
    )
    assert collector.paths == []
    assert (to_search, searched, matches, pending) == (0, 0, 0, 0)


def test_many_files_are_batched_and_all_searched(tmp_path):
    count = 3 * BATCH_SIZE + 5
    for n in range(count):
        (tmp_path / f"file{n}.dat").write_text("x", encoding="utf-8")
    collector, (to_search, searched, matches, _) = _run(
        SearchQuery(directories=[tmp_path]), workers=4
    )
    assert to_search == count
    assert searched == count
    assert matches == count
    assert len(set(collector.paths)) == count


def test_multiple_directories(tree, tmp_path_factory):
    other = tmp_path_factory.mktemp("other")
    (other / "e.txt").write_text("alpha", encoding="utf-8")
    query = SearchQuery(directories=[tree / "sub", other], filters=[ContentsFilter("alpha")])
    collector, _ = _run(query)
    assert sorted(collector.paths) == sorted([tree / "sub" / "c.txt", other / "e.txt"])


def test_counters_start_at_zero(tree):
    with SearchEngine(SearchQuery(directories=[tree]), num_workers=1) as engine:
        assert engine.pending_operations == 0
        assert engine.total_files_to_search == 0
        assert engine.total_matches == 0
        assert engine.wait(timeout=1) is True


def test_search_after_close_raises(tree):
    engine = SearchEngine(SearchQuery(directories=[tree]), num_workers=1)
    engine.close()
    with pytest.raises(RuntimeError):
        engine.perform_search()
    assert engine.pending_operations == 0