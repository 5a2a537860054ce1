from pathlib import Path
from types import SimpleNamespace

import pytest

from lightningsearch.cli import build_filters, build_parser, main, status_message
from lightningsearch.engine import SearchEngine
from lightningsearch.filters import ContentsFilter, NameFilter
from lightningsearch.query import SearchQuery


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "notes.txt").write_text("hello world", encoding="utf-8")
    (tmp_path / "sub" / "Report.TXT").write_text("goodbye", encoding="utf-8")
    (tmp_path / "sub" / "image.png").write_text("binary", encoding="utf-8")
    return tmp_path


def test_parser_collects_options():
    args = build_parser().parse_args(["d1", "d2", "-n", "a", "-n", "b", "-C", "c", "-w"])
    assert args.directories == ["d1", "d2"]
    assert args.name == ["a", "b"]
    assert args.contents == ["c"]
    assert args.whole_match is True
    assert args.case_sensitive is False


def test_parser_requires_directory():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args([])
    assert info.value.code == 2


def test_build_filters_defaults_to_case_insensitive():
    args = build_parser().parse_args(["d", "-n", "abc", "-C", "xyz"])
    filters = build_filters(args)
    assert [type(f) for f in filters] == [NameFilter, ContentsFilter]
    assert all(f.case_insensitive for f in filters)
    assert [f.match_text for f in filters] == ["abc", "xyz"]


def test_build_filters_case_sensitive_regex():
    args = build_parser().parse_args(["d", "-n", "a.c", "-c", "-r"])
    (name_filter,) = build_filters(args)
    assert name_filter.case_insensitive is False
    assert name_filter.is_regex is True
    assert name_filter.text() == "Name contains (use regex)"


def test_status_message_ready():
    assert status_message(None) == "Ready"


def test_status_message_while_searching():
    engine = SimpleNamespace(
        pending_operations=3,
        total_files_to_search=10,
        total_files_searched=4,
        total_matches=2,
    )
    assert status_message(engine) == "Searching... Total files: 10 | Searched: 4 | Matches: 2"


def test_status_message_after_search(tree):
    query = SearchQuery(directories=[tree], filters=[NameFilter("txt", True)])
    with SearchEngine(query, 2) as engine:
        engine.perform_search()
        assert engine.wait(10)
        message = status_message(engine)
    assert message == (
        f"Search completed! Searched: {engine.total_files_searched} | "
        f"Matches: {engine.total_matches}"
    )
    assert message.startswith("Search completed!")


def test_main_prints_matching_files(tree, capsys):
    assert main([str(tree), "-n", "txt"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert {Path(line) for line in out} == {
        tree / "notes.txt",
        tree / "sub" / "Report.TXT",
    }


def test_main_case_sensitive_contents(tree, capsys):
    assert main([str(tree), "-C", "hello", "-c"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert [Path(line) for line in out] == [tree / "notes.txt"]


def test_main_without_filters_lists_every_file(tree, capsys):
    assert main([str(tree)]) == 0
    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 3
    assert "Search completed!" in captured.err


def test_main_rejects_zero_workers(tree):
    with pytest.raises(SystemExit) as info:
        main([str(tree), "-j", "0"])
    assert info.value.code == 2