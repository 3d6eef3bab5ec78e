#!/usr/bin/env python3
import logging

from components.work_loads.word_generator import (
  FakerWordGenerator,
  WordConfig,
  gen_words_with_prefix_freq,
  generate_random_words,
)

log = logging.getLogger("trie_bench.workload")


class WorkLoad:
  def __init__(self, seed=None, min_len=3, max_len=10):
    self.seed = seed
    self.config = WordConfig(min_len=min_len, max_len=max_len, seed=seed)

  def words(self, num_words, p_freq=0, unique=False):
    log.debug("workload: %d words (p_freq=%s, unique=%s)", num_words, p_freq, unique)
    if p_freq > 0:
      return gen_words_with_prefix_freq(num_words, p_freq, self.seed, unique,
                                        self.config.min_len, self.config.max_len)
    else:
      return generate_random_words(num_words, self.seed, unique,
                                   self.config.min_len, self.config.max_len)

  def natural_words(self, num_words):
    return FakerWordGenerator(self.config).batch(num_words)
