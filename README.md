# lightningsearch

Search one or more directory trees for files by name, by contents, or by
both. The work is spread over a pool of worker threads, one per CPU core by
default.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Command line

The package installs a `lightningsearch` command:

```
lightningsearch [options] DIRECTORY [DIRECTORY ...]
```

Options:

- `-n TEXT`, `--name TEXT`: add a file name filter. May be given more than
  once.
- `-C TEXT`, `--contents TEXT`: add a file contents filter. May be given
  more than once.
- `-c`, `--case-sensitive`: match case exactly. Without it, matching ignores
  case.
- `-w`, `--whole-match`: the whole name or contents must match, not just a
  part of it.
- `-r`, `--regex`: treat the filter text as a regular expression.
- `-j N`, `--workers N`: number of worker threads. The default is the number
  of CPUs. It must be at least 1.
- `-p`, `--progress`: print a progress line on standard error every half
  second while the search runs.

The `-c`, `-w` and `-r` switches apply to every filter given on the command
line. A file is reported only when it passes every filter. With no filters,
every regular file is reported.

When the search has finished, the matching files are printed one per line on
standard output. A final status line goes to standard error, for example
`Search completed! Searched: 120 | Matches: 3`. Progress lines have the form
`Searching... Total files: N | Searched: N | Matches: N`.

For the full help text:

```
lightningsearch --help
```

## Filters

Each filter (`lightningsearch.filters`) has three options:

- `case_insensitive`: in plain-text mode both sides are compared in lower
  case. In regex mode the expression is compiled with `re.IGNORECASE`.
- `whole_match`: in regex mode the expression must match all of the text
  (`fullmatch`). In plain-text mode the text is compared chunk by chunk with
  the match text. Text that is longer than the match text, or differs from
  it, fails. Text that stops partway through the match text still passes.
- `is_regex`: the match text is a regular expression. An invalid expression
  raises `ValueError` when the filter is created.

The filter classes:

- `NameFilter` checks a file's name, which is the last path component only.
- `ContentsFilter` checks a file's contents. The file is read as UTF-8, and
  undecodable bytes are replaced. A file that cannot be opened never
  matches. Plain-text searches read the file in chunks of up to 1,000,000
  characters. The end of each chunk is carried over to the next, so a match
  that straddles a chunk boundary is still found. Regex searches read the
  whole file at once.
- `CombinedFilter` groups other filters, added with `add_filter()`, under a
  `CombineMode`. With `CombineMode.AND` every filter must match. With
  `CombineMode.OR` one match is enough. An empty combined filter accepts
  every file.

Every filter has `filter_file(path)` and `text()`. `text()` returns a short
description such as `Name contains (case insensitive)` or
`File content matches (use regex)`.

## Using the library

```python
from lightningsearch.engine import SearchEngine
from lightningsearch.filters import NameFilter
from lightningsearch.models import SearchResultModel
from lightningsearch.query import SearchQuery

results = SearchResultModel()
query = SearchQuery(directories=["."], filters=[NameFilter(".py")])
query.add_result_observer(results)

with SearchEngine(query) as engine:
    engine.perform_search()
    engine.wait()
    print(engine.total_matches, "matches")

for path in results.results():
    print(path)
```

Modules:

- `lightningsearch.searchers`: `TextSearcher` (plain text, read in chunks of
  `max_buffer_size` characters) and `RegexSearcher`. Both are
  `StreamSearcher` objects whose `search_text(stream)` reads a text stream
  and returns a bool.
- `lightningsearch.filters`: the filters described above.
- `lightningsearch.query`: `SearchQuery` is a dataclass with `directories`,
  `filters` and `result_observers`. A `SearchObserver` has its
  `on_file_matched(path)` called for each match.
- `lightningsearch.engine`: `SearchEngine(query, num_workers=None)` runs a
  query on a thread pool. `perform_search()` starts one enumeration task
  for each directory. Files found are handed to search tasks in batches.
  `wait(timeout=None)` blocks until no task is pending and returns `False`
  on timeout. The properties `pending_operations`, `total_files_to_search`,
  `total_files_searched` and `total_matches` report progress. `close()`, or
  leaving the `with` block, lets queued work finish and stops the threads.
  Directory errors are logged as warnings and skipped.
- `lightningsearch.models`: `SearchResultModel` is a thread-safe observer
  that keeps matched paths as rows with two columns, `Filename` and `Path`.
  `FilterListModel` holds an ordered list of filters. Its `data(row)`
  returns the filter's `text()`, and `extract_filters()` empties it.
- `lightningsearch.threadpool`: `ThreadPool(num_workers)`. `submit()`
  returns a `concurrent.futures.Future`. After `shutdown()` the tasks
  already queued still run, and new submissions raise `RuntimeError`.
- `lightningsearch.stringutil`: `lower()` and `upper()`. These change case
  without changing the length of the text.

Observers are called from worker threads, so they must be safe to call from
more than one thread at a time.

## What it does not do

There is no graphical interface. Searches are run from the command line or
from Python code. Results are not saved anywhere; the command prints them
once the search has finished.