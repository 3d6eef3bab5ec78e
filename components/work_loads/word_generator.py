import math
import random
import string
from dataclasses import dataclass
from typing import List, Optional

from faker import Faker

from tries.lowercase_trie import Trie

ALPHABET = string.ascii_lowercase
PREFIX_LEN = 2


## === Config Class === ##

@dataclass
class WordConfig:
  """
  Configuration for word generators
      min_len: int, shortest word produced
      max_len: int, longest word produced
      seed: int, seed for random number generators
  """
  min_len: int = 3
  max_len: int = 10
  seed: Optional[int] = None

  def __post_init__(self):
    if self.min_len < 1:
      raise ValueError("min_len must be >= 1")
    if self.max_len < self.min_len:
      raise ValueError(f"max_len must be >= min_len ({self.min_len})")


def _space(min_len, max_len):
  """Number of distinct words of length min_len..max_len over a..z."""
  return sum(len(ALPHABET) ** n for n in range(min_len, max_len + 1))


def _rand_word(rng, min_len, max_len, prefix=""):
  n = rng.randint(max(min_len, len(prefix)), max_len) - len(prefix)
  return prefix + "".join(rng.choices(ALPHABET, k=n))


### ================= Synthetic Word Generation ================= ###

def generate_random_words(num_words, seed=None, unique=False, min_len=3, max_len=10):
  """
  Return n uniformly random lowercase words.
  - unique=False: sample with replacement (fast, allows duplicates)
  - unique=True: no duplicates (requires n well below the number of possible words)
  """
  cfg = WordConfig(min_len, max_len, seed)
  max_unique = _space(cfg.min_len, cfg.max_len) // 1.1
  if num_words < 1 or (unique is True and num_words > max_unique):
    raise ValueError(f"num_words must be between 1 and {max_unique}")
  rng = random.Random(cfg.seed)

  if not unique:
    return [_rand_word(rng, cfg.min_len, cfg.max_len) for _ in range(num_words)]

  out = []
  seen = set()
  while len(out) < num_words:
    w = _rand_word(rng, cfg.min_len, cfg.max_len)
    if w in seen:
      continue
    seen.add(w)
    out.append(w)
  return out


def _p_eff_log(x, max_mean=100) -> float:
  # Logarithmic mapping of prefix frequency to effective prefix frequency
  if x < 0 or x > 1:
    raise ValueError("Prefix frequency must be between 0 and 1")
  x = max(0.0, min(0.999999, x))
  k = math.log(max_mean)
  p = 1.0 - math.exp(-k * x)
  return min(p, 0.999999)


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False,
                               min_len=3, max_len=10):
  """Generates a list of words with a given prefix frequency.
  A higher prefix_freq means more consecutive words share a two-letter prefix.
  Prefix frequency is applied logarithmically
  prefix_freq: 0 -> 0.999...
  """
  p_cont = _p_eff_log(prefix_freq)
  cfg = WordConfig(min_len, max_len, seed)
  plen = min(PREFIX_LEN, cfg.min_len)

  max_unique = _space(cfg.min_len, cfg.max_len) // 1.1
  if num_words < 1 or (unique is True and num_words > max_unique):
    raise ValueError(f"num_words must be between 1 and {max_unique}")
  rng = random.Random(cfg.seed)

  rand_words_list = []
  seen = set()

  while len(rand_words_list) < num_words:
    prefix = "".join(rng.choices(ALPHABET, k=plen))
    sample_word = _rand_word(rng, cfg.min_len, cfg.max_len, prefix)
    if unique and sample_word in seen:
      continue
    rand_words_list.append(sample_word)
    seen.add(sample_word)

    trigger = rng.random()
    while trigger < p_cont and len(rand_words_list) < num_words:
      new_word = _rand_word(rng, cfg.min_len, cfg.max_len, prefix)
      if unique and new_word in seen:
        # cluster ends once it starts repeating
        break
      rand_words_list.append(new_word)
      seen.add(new_word)
      trigger = rng.random()
  return rand_words_list


### ================= Natural Word Generation ================= ###

class FakerWordGenerator:
  """Natural-language words from Faker's lorem provider, restricted to a..z."""

  MAX_ATTEMPTS = 1000

  def __init__(self, config: WordConfig):
    self.config = config
    self.fake = Faker()
    if self.config.seed is not None:
      self.fake.seed_instance(self.config.seed)

  def _accept(self, w):
    return (w and Trie.is_lowercase(w)
            and self.config.min_len <= len(w) <= self.config.max_len)

  def single(self) -> str:
    for _ in range(self.MAX_ATTEMPTS):
      w = self.fake.word().lower()
      if self._accept(w):
        return w
    raise ValueError(
      f"no lowercase word of length {self.config.min_len}..{self.config.max_len} "
      f"after {self.MAX_ATTEMPTS} attempts")

  def batch(self, n) -> List[str]:
    if n <= 0:
      raise ValueError("n must be positive")
    return [self.single() for _ in range(n)]
