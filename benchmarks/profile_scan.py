"""cProfile wrapper for loxscan scanning.

Run with:
    python -m cProfile -o profile.prof benchmarks/profile_scan.py
    python -m snakeviz profile.prof

Or for direct profiling:
    python benchmarks/profile_scan.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys
import time


def build_corpus(functions: int = 500) -> str:
    """Generate a Lox program touching every lexeme class."""
    parts = []
    for i in range(functions):
        parts.append(f"""
// function {i}
fun compute_{i}(a, b) {{
  var total = a * {i}.5 + b / 2;
  if (total >= 100 and !(a == b)) {{
    print "big\nvalue";
  }} else {{
    return nil;
  }}
  while (total <= {i}) total = total - 1;
  return this.value != super.value or true;
}}
""")
    return "".join(parts)


def scan_corpus(source: str, iterations: int = 10) -> int:
    """Scan the corpus multiple times; returns the token count of one scan."""
    from loxscan import scan

    count = 0
    for _ in range(iterations):
        count = len(scan(source))
    return count


def main() -> None:
    """Run profiling and print results."""
    print("loxscan Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    source = build_corpus()
    iterations = 10
    print(f"\nScanning {len(source):,} chars {iterations}x...")

    start = time.perf_counter()
    tokens = scan_corpus(source, 1)
    elapsed = time.perf_counter() - start
    print(f"Single scan: {tokens:,} tokens in {elapsed * 1000:.1f} ms")

    profiler = cProfile.Profile()
    profiler.enable()

    scan_corpus(source, iterations)

    profiler.disable()

    print("\n" + "=" * 60)
    print("TOP 20 FUNCTIONS BY TOTAL (SELF) TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.TIME)
    ps.print_stats(20)
    print(s.getvalue())


if __name__ == "__main__":
    main()
