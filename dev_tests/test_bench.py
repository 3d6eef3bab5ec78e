import os
import sys
import unittest

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from components.bench import (  # noqa: E402
    COLUMNS,
    OPERATIONS,
    BenchConfig,
    run_benchmark,
    summarize,
    time_operation,
)


class TestBenchConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = BenchConfig()
        self.assertEqual(cfg.sizes, (1_000, 5_000, 10_000))
        self.assertEqual(cfg.repeats, 3)

    def test_sizes_coerced_to_tuple(self):
        self.assertEqual(BenchConfig(sizes=[10, 20]).sizes, (10, 20))

    def test_invalid_config_raises(self):
        for kwargs in ({"sizes": ()}, {"sizes": (0,)}, {"repeats": 0}, {"p_freq": 2.0}):
            with self.assertRaises(ValueError):
                BenchConfig(**kwargs)


class TestTiming(unittest.TestCase):
    def test_time_operation_calls_fn_repeats_times(self):
        calls = []
        seconds = time_operation(lambda: calls.append(1), 5)
        self.assertEqual(len(calls), 5)
        self.assertGreaterEqual(seconds, 0.0)

    def test_time_operation_rejects_zero_repeats(self):
        with self.assertRaises(ValueError):
            time_operation(lambda: None, 0)


class TestRunBenchmark(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.config = BenchConfig(sizes=(50, 200), p_freq=0.3, repeats=1, seed=21)
        cls.df = run_benchmark(cls.config)

    def test_shape(self):
        self.assertEqual(list(self.df.columns), COLUMNS)
        self.assertEqual(len(self.df), len(self.config.sizes) * len(OPERATIONS))
        self.assertEqual(set(self.df["operation"]), set(OPERATIONS))
        self.assertEqual(sorted(set(self.df["n_words"])), [50, 200])

    def test_values_are_sane(self):
        self.assertTrue((self.df["seconds"] >= 0).all())
        self.assertTrue((self.df["nodes"] > 1).all())
        self.assertTrue((self.df["avg_branch_factor"] >= 1.0).all())
        # larger workloads never build smaller tries for the same seed
        nodes = self.df.drop_duplicates("n_words").set_index("n_words")["nodes"]
        self.assertLessEqual(nodes[50], nodes[200])

    def test_summarize(self):
        table = summarize(self.df)
        self.assertEqual(list(table.index), [50, 200])
        self.assertEqual(set(table.columns), set(OPERATIONS))


if __name__ == "__main__":
    unittest.main(verbosity=2)
