"""Benchmark classification and highlighting throughput.

Run with:
    python benchmarks/benchmark_classify.py
"""

import time

from decklight import classify, highlight

FIELD_TYPES = ["int32", "int64", "string", "boolean", "Nested"]
LABELS = ["required", "optional", "repeated"]


def make_document(messages: int = 200, fields: int = 12) -> str:
    """Generate a protobuf-style document (~100KB at the defaults)."""
    lines = []
    for m in range(messages):
        lines.append(f"message Message{m} {{")
        for f in range(fields):
            label = LABELS[f % len(LABELS)]
            ftype = FIELD_TYPES[f % len(FIELD_TYPES)]
            default = f' [default = "value {f}"]' if ftype == "string" else ""
            lines.append(f"  {label} {ftype} field_{f} = {f + 1}{default};")
        lines.append("}")
        lines.append("")
    return "\n".join(lines)


def benchmark(fn, iterations: int = 10) -> float:
    """Return mean seconds per call after one warmup call."""
    fn()
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) / iterations


def main() -> None:
    doc = make_document()
    size_kb = len(doc) / 1024

    classify_time = benchmark(lambda: sum(1 for _ in classify(doc)))
    highlight_time = benchmark(lambda: highlight(doc, "protobuf"))
    span_count = sum(1 for _ in classify(doc))

    print(f"Document: {size_kb:.1f} KB, {span_count} spans")
    print(f"classify:  {classify_time * 1000:8.2f} ms  ({size_kb / classify_time:,.0f} KB/s)")
    print(f"highlight: {highlight_time * 1000:8.2f} ms  ({size_kb / highlight_time:,.0f} KB/s)")


if __name__ == "__main__":
    main()
