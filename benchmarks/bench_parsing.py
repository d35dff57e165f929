"""
Benchmarks for configuration parsing.

Measures:
- parse_line() time for typical line shapes
- parse_string() time for small/medium/large files
- parse_file() time including filesystem reads

Run with: python -m benchmarks.bench_parsing
"""

import statistics
import time
from pathlib import Path
from typing import NamedTuple

from configster import parse_file, parse_line, parse_string


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark."""

    name: str
    iterations: int
    mean_ms: float
    std_ms: float
    min_ms: float
    max_ms: float


def _time_ms(func, iterations: int = 100, name: str | None = None) -> BenchmarkResult:
    """Time a function over multiple iterations."""
    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = (time.perf_counter() - start) * 1000
        times.append(elapsed)

    return BenchmarkResult(
        name=name or (func.__name__ if hasattr(func, "__name__") else "anonymous"),
        iterations=iterations,
        mean_ms=statistics.mean(times),
        std_ms=statistics.stdev(times) if len(times) > 1 else 0,
        min_ms=min(times),
        max_ms=max(times),
    )


SMALL_CONF = """\
ExampleOption = 12
ExampleOption2 = /home/foo/bar, optional, attribute, list, for, value
example_option3 = Hello

# Option = commented_out_using_hashtag
DefaultFeatureFooDisabled
"""

MEDIUM_CONF = SMALL_CONF + "\n".join(
    f"color = shade_{i}, light, shiny" for i in range(50)
)


def _generate_large_conf(num_options: int = 2000) -> str:
    """Generate a large config with every line shape mixed in."""
    lines = []
    for i in range(num_options):
        if i % 10 == 0:
            lines.append(f"# section {i}")
        elif i % 10 == 1:
            lines.append("")
        elif i % 10 == 2:
            lines.append(f"Flag{i}")
        elif i % 10 == 3:
            lines.append(f"Bad option {i}")
        else:
            lines.append(f"option_{i} = /srv/data/{i} , a{i},  b{i} , c{i}")
    return "\n".join(lines)


LARGE_CONF = _generate_large_conf()


def bench_parse_line(iterations: int = 5000) -> BenchmarkResult:
    """Benchmark parse_line with several attributes."""
    def parse():
        parse_line("Option=/home/foo , another  ,   test,1,2,3", ",")

    return _time_ms(parse, iterations=iterations, name="parse_line")


def bench_parse_small(iterations: int = 1000) -> BenchmarkResult:
    def parse():
        parse_string(SMALL_CONF)

    return _time_ms(parse, iterations=iterations, name="parse_small")


def bench_parse_medium(iterations: int = 200) -> BenchmarkResult:
    def parse():
        parse_string(MEDIUM_CONF)

    return _time_ms(parse, iterations=iterations, name="parse_medium")


def bench_parse_large(iterations: int = 20) -> BenchmarkResult:
    """Benchmark parsing a 2000-line config."""
    def parse():
        parse_string(LARGE_CONF)

    return _time_ms(parse, iterations=iterations, name="parse_large")


def bench_parse_from_file(tmp_path: Path, iterations: int = 200) -> BenchmarkResult:
    """Benchmark parsing from filesystem."""
    conf_file = tmp_path / "benchmark.conf"
    conf_file.write_text(MEDIUM_CONF)

    def parse():
        parse_file(conf_file)

    return _time_ms(parse, iterations=iterations, name="parse_from_file")


def run_all(tmp_path: Path | None = None, quick: bool = False) -> list[BenchmarkResult]:
    """Run all parsing benchmarks."""
    scale = 10 if quick else 1
    results = [
        bench_parse_line(5000 // scale),
        bench_parse_small(1000 // scale),
        bench_parse_medium(200 // scale),
        bench_parse_large(max(2, 20 // scale)),
    ]

    if tmp_path:
        results.append(bench_parse_from_file(tmp_path, 200 // scale))

    return results


if __name__ == "__main__":
    import tempfile

    with tempfile.TemporaryDirectory() as tmp:
        results = run_all(Path(tmp))
        print("\n=== Parsing Benchmarks ===\n")
        for r in results:
            print(f"{r.name}:")
            print(f"  mean: {r.mean_ms:.3f}ms (±{r.std_ms:.3f}ms)")
            print(f"  range: [{r.min_ms:.3f}ms, {r.max_ms:.3f}ms]")
            print(f"  iterations: {r.iterations}")
            print()
