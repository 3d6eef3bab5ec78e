"""
Benchmark harness for the lowercase trie.

Builds workloads with `WorkLoad`, times each trie operation a few times and
keeps the median, and returns a tidy `pandas.DataFrame` (one row per
size/operation) that the dashboard plots directly.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np
import pandas as pd

from components.workload import WorkLoad
from tries.lowercase_trie import Trie

log = logging.getLogger("trie_bench.bench")

OPERATIONS = ("insert", "batch_insert", "contains_hit", "contains_miss", "words")
COLUMNS = ["n_words", "operation", "seconds", "ops_per_sec", "nodes", "avg_branch_factor"]


## === Config Class === ##

@dataclass
class BenchConfig:
  """
  Configuration for run_benchmark
      sizes: tuple, workload sizes (number of words) to benchmark
      p_freq: float, prefix frequency passed to the workload generator
      repeats: int, timed runs per operation (median is reported)
      seed: int, seed for the workload generator
      unique: bool, generate words without duplicates
  """
  sizes: Tuple[int, ...] = (1_000, 5_000, 10_000)
  p_freq: float = 0.0
  repeats: int = 3
  seed: Optional[int] = None
  unique: bool = False

  def __post_init__(self):
    self.sizes = tuple(self.sizes)
    if not self.sizes:
      raise ValueError("sizes must not be empty")
    if any(n <= 0 for n in self.sizes):
      raise ValueError("sizes must be positive")
    if self.repeats < 1:
      raise ValueError("repeats must be >= 1")
    if not 0 <= self.p_freq <= 1:
      raise ValueError("p_freq must be between 0 and 1")


def time_operation(fn: Callable[[], object], repeats: int) -> float:
  """Median wall time of `repeats` calls to `fn`, in seconds."""
  if repeats < 1:
    raise ValueError("repeats must be >= 1")
  times = []
  for _ in range(repeats):
    start = time.perf_counter()
    fn()
    times.append(time.perf_counter() - start)
  return float(np.median(times))


def _insert_each(words):
  t = Trie()
  for w in words:
    t.insert(w)
  return t


def _misses(workload, n, present):
  probe = workload.words(n)
  return [w for w in probe if w not in present]


def run_benchmark(config: BenchConfig) -> pd.DataFrame:
  rows = []
  miss_seed = None if config.seed is None else config.seed + 1

  for n in config.sizes:
    words = WorkLoad(config.seed).words(n, p_freq=config.p_freq, unique=config.unique)
    trie = Trie().batch_insert(words)
    misses = _misses(WorkLoad(miss_seed), n, set(words))
    nodes = trie.count_nodes()
    branch = trie.count_nodes(get_avg_branch_factor=True)

    jobs = {
      "insert": (lambda: _insert_each(words), len(words)),
      "batch_insert": (lambda: Trie().batch_insert(words), len(words)),
      "contains_hit": (lambda: [trie.contains(w) for w in words], len(words)),
      "contains_miss": (lambda: [trie.contains(w) for w in misses], len(misses)),
      "words": (trie.words, len(trie)),
    }
    for op in OPERATIONS:
      fn, n_ops = jobs[op]
      seconds = time_operation(fn, config.repeats)
      rows.append({
        "n_words": n,
        "operation": op,
        "seconds": seconds,
        "ops_per_sec": (n_ops / seconds) if seconds > 0 else float("inf"),
        "nodes": nodes,
        "avg_branch_factor": branch,
      })
    log.info("benchmarked %d words: %d nodes, branch factor %.2f", n, nodes, branch)

  return pd.DataFrame(rows, columns=COLUMNS)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
  """Seconds per operation (columns) for each workload size (index)."""
  return df.pivot_table(index="n_words", columns="operation", values="seconds", aggfunc="median")
