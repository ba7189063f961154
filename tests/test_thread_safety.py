"""Thread safety tests for socialscan.

parse() keeps all state in a per-call Lexer and accumulator, so
concurrent calls on independent inputs must not interfere.

These tests use real threading to catch actual concurrency bugs.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from socialscan import ParseResult, parse
from socialscan.profiling import profiled_scan


def _message(i: int) -> tuple[str, ParseResult]:
    source = f"hi @user{i} see https://example.com/{i}#frag +alt{i} #tag{i}#more"
    expected = ParseResult(
        tags=(f"#tag{i}", "#more"),
        mentions=(f"@user{i}", f"+alt{i}"),
        links=(f"https://example.com/{i}#frag",),
    )
    return source, expected


class TestConcurrentParse:
    """Verify concurrent parse calls are independent."""

    def test_thread_pool(self) -> None:
        cases = [_message(i) for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda case: parse(case[0]), cases))

        for (_, expected), result in zip(cases, results):
            assert result == expected

    def test_raw_threads(self) -> None:
        errors: list[str] = []
        barrier = threading.Barrier(8)

        def worker(thread_id: int) -> None:
            barrier.wait()
            for i in range(50):
                source, expected = _message(thread_id * 100 + i)
                result = parse(source)
                if result != expected:
                    errors.append(f"Thread {thread_id}: {result!r}")

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10.0)

        assert not errors, f"Thread errors: {errors}"

    def test_profiling_is_per_thread(self) -> None:
        counts: dict[int, int] = {}
        lock = threading.Lock()

        def worker(thread_id: int) -> None:
            with profiled_scan() as acc:
                for _ in range(thread_id + 1):
                    parse("#a")
            with lock:
                counts[thread_id] = acc.scan_calls

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10.0)

        assert counts == {0: 1, 1: 2, 2: 3, 3: 4}
