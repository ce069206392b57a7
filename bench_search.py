"""
bench_search.py

Quick-and-dirty benchmark for the prefix Searcher.
Measures latency for prefix AND-search and per-keystroke autocomplete on random queries.

By default, queries are sampled from the dictionary: each term is cut down to a
random prefix (>= 2 chars) so the benchmark exercises prefix expansion.
You can also pass a file with one query per line.

Run examples:
  python bench_search.py
  python bench_search.py --data data --mode autocomplete --num-queries 500
  python bench_search.py --queries queries.txt --mode search
"""

import argparse
import random
import time
import statistics

from prefix_search.errors import SearchError
from prefix_search.paths import DATA_DIR
from prefix_search.searcher import Searcher


def load_queries(path):
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def sample_queries(words, n=100, terms_per_q=2, seed=1234):
    rng = random.Random(seed)
    queries = []
    for _ in range(n):
        qs = rng.sample(words, min(terms_per_q, len(words)))
        qs = [w[:rng.randint(min(2, len(w)), len(w))] for w in qs]
        queries.append(" ".join(qs))
    return queries


def bench(searcher, queries, mode):
    times = []
    count = 0
    for q in queries:
        t0 = time.perf_counter()
        if mode == "search":
            try:
                _ = searcher.search(q)
            except SearchError:
                pass  # NoMatch/NoResults still count as answered queries
        else:
            _ = searcher.autocomplete(q, len(q))
        dt = (time.perf_counter() - t0) * 1000  # ms
        times.append(dt)
        count += 1
    return {
        "n": count,
        "avg_ms": statistics.mean(times),
        "p50_ms": statistics.median(times),
        "p95_ms": statistics.quantiles(times, n=20)[18] if len(times) >= 20 else max(times),
        "max_ms": max(times),
    }


def main(args):
    s = Searcher(args.data)
    if args.queries:
        queries = load_queries(args.queries)
    else:
        queries = sample_queries(list(s.corpus.words), n=args.num_queries, terms_per_q=args.terms_per_query)

    modes = ["search", "autocomplete"] if args.mode == "both" else [args.mode]
    for mode in modes:
        stats = bench(s, queries, mode=mode)
        print(f"Mode={mode.upper()}  Queries={stats['n']}  "
              f"avg={stats['avg_ms']:.2f}ms  p50={stats['p50_ms']:.2f}ms  "
              f"p95={stats['p95_ms']:.2f}ms  max={stats['max_ms']:.2f}ms")


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--data", type=str, default=DATA_DIR, help="corpus directory or base URL")
    ap.add_argument("--queries", type=str, default=None, help="file with one query per line")
    ap.add_argument("--mode", type=str, default="both", choices=["search", "autocomplete", "both"], help="benchmark mode")
    ap.add_argument("--num-queries", type=int, default=200, help="number of sampled queries if --queries not provided")
    ap.add_argument("--terms-per-query", type=int, default=2, help="how many terms per sampled query")
    args = ap.parse_args()
    main(args)
