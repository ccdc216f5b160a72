"""Main solver module for the five-words search."""

import sys
from collections.abc import Iterable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from time import time
from typing import TextIO

from fivewords.registry import CandidateRegistry
from fivewords.solver.config import config as solver_config
from fivewords.solver.results import Reporter, ResultCollector, Selection
from fivewords.solver.search import SearchEngine, SearchNode
from fivewords.util import int_comma, time_str
from fivewords.wordlist import iter_tokens, load_candidates

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


@dataclass(kw_only=True)
class SolveResult:
    """Everything produced by one run of the search."""

    registry: CandidateRegistry
    """The frozen candidate registry."""

    engine: SearchEngine
    """The engine, holding the node cache."""

    root: SearchNode
    """Root of the search DAG."""

    selections: list[Selection]
    """Complete combinations found."""

    start_time: float
    """Timestamp when the run started, in seconds since the epoch."""


def solve(
    tokens: Iterable[str], *, logf: TextIO, report_interval: int | None = None
) -> SolveResult:
    """Find every combination of five words with 25 distinct letters.

    Args:
        tokens (Iterable[str]): Input tokens, in input order.  Invalid tokens are skipped.
        logf: File object for diagnostics.
        report_interval (int | None): Progress report interval.  If None, uses the configured value.
    """
    start_time = time()
    start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)

    registry = load_candidates(tokens)
    print(
        f"Loaded {int_comma(registry.n_words)} words into "
        f"{int_comma(len(registry))} unique letter masks.",
        file=logf,
        flush=True,
    )

    if report_interval is None:
        report_interval = solver_config.report_interval
    collector = ResultCollector()
    engine = SearchEngine(registry.groups, collector, report_interval=report_interval, logf=logf)
    root = engine.run()
    print(
        f"Search cached {int_comma(engine.n_nodes)} nodes "
        f"({int_comma(len(collector.leaves))} complete leaves).",
        file=logf,
        flush=True,
    )

    selections = collector.collect(root)
    print(f"Found {int_comma(len(selections))} valid 5-word combinations.", file=logf, flush=True)

    return SolveResult(
        registry=registry,
        engine=engine,
        root=root,
        selections=selections,
        start_time=start_time,
    )


def open_log(log_path: str | None) -> AbstractContextManager[TextIO]:
    """Open the diagnostic stream: the given file, or standard error if None."""
    if log_path is None:
        return nullcontext(sys.stderr)
    logfile = Path(log_path)
    logfile.parent.mkdir(parents=True, exist_ok=True)
    return open(logfile, "w", encoding="utf-8")


def run(
    word_list_path: str | None = None,
    *,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """Run the solver and write the results.

    Args:
        word_list_path (str | None): Word list to read.  If None, uses the configured path, and
            failing that reads `stdin`.
        stdin: Stream to read when there is no word list path.  Defaults to standard input,
            read as UTF-8 with undecodable bytes replaced.
        out: Stream for results.  Defaults to standard output.

    Returns:
        The number of result lines written.

    Raises:
        FileNotFoundError: If the word list file does not exist.
    """
    if word_list_path is None:
        word_list_path = solver_config.word_list_path
    out = sys.stdout if out is None else out
    if stdin is None and word_list_path is None:
        # Undecodable bytes become U+FFFD, which `is_valid_token` rejects.
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")
        stdin = sys.stdin

    with open_log(solver_config.log_path) as logf:
        try:
            if word_list_path is None:
                result = solve(iter_tokens(stdin), logf=logf)
            else:
                path = Path(word_list_path)
                if not path.is_file():
                    raise FileNotFoundError(f"Word list file not found: {path}")
                print(f"Reading words from {path.resolve()}", file=logf, flush=True)
                with path.open("r", encoding="utf-8", errors="replace") as f:
                    result = solve(iter_tokens(f), logf=logf)

            reporter = Reporter(
                result.registry.groups, expand_anagrams=solver_config.expand_anagrams
            )
            # Nothing reaches `out` until every line is formatted.
            lines = list(reporter.lines(result.selections))
            n_lines = reporter.write_lines(lines, out)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            sys.exit(1)
        except MemoryError:
            print("Out of memory: search aborted.", file=logf, flush=True)
            sys.exit(1)

        print(f"Time taken: {time_str(time() - result.start_time)}", file=logf, flush=True)
    return n_lines
