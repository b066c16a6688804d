"""Thread safety tests for classification and highlighting.

Grammars, matchers and registries are shared, immutable module state.
These tests run many classifications concurrently and check that every
thread sees exactly the single-threaded result.
"""

from concurrent.futures import ThreadPoolExecutor
from itertools import zip_longest

from decklight import HighlightConfig, classify, highlight, highlight_config_context

SOURCES = [
    "message Person { required string name = 1; }",
    'optional string greeting = "hello";',
    "repeated int64 ids = 4 [packed = true];",
    '"unterminated\nmessage x = -1.5e3;',
    "",
]


def _snapshot(source: str) -> list[tuple[str, str, int, int]]:
    return [(s.category.value, s.text, s.start_offset, s.end_offset) for s in classify(source)]


class TestConcurrentClassification:
    """Concurrent classify() calls are independent."""

    def test_structurally_identical_results(self) -> None:
        expected = {source: _snapshot(source) for source in SOURCES}
        work = SOURCES * 50

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(_snapshot, work))

        for source, result in zip(work, results):
            assert result == expected[source]

    def test_interleaved_generators(self) -> None:
        """Generators advanced alternately do not share state."""
        a = classify(SOURCES[0])
        b = classify(SOURCES[1])
        collected_a, collected_b = [], []
        for span_a, span_b in zip_longest(a, b):
            if span_a is not None:
                collected_a.append(span_a)
            if span_b is not None:
                collected_b.append(span_b)
        assert collected_a == list(classify(SOURCES[0]))
        assert collected_b == list(classify(SOURCES[1]))


class TestConcurrentHighlighting:
    """Per-thread config does not leak between highlight() calls."""

    def test_thread_local_prefixes(self) -> None:
        def render(i: int) -> str:
            with highlight_config_context(HighlightConfig(class_prefix=f"t{i}-")):
                return highlight("message", "protobuf")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(render, range(64)))

        for i, html in enumerate(results):
            assert f'<span class="t{i}-keyword">message</span>' in html
