import numba
from typing import Optional

from ...config import get_config


@numba.njit(cache=True, inline='always')
def _within_epsilon(a, b, epsilon):
  return abs(a - b) <= epsilon


def float_equals(a: float, b: float, epsilon: Optional[float] = None) -> bool:
  """Epsilon-tolerant equality of two floating values.

  Falls back to the configured epsilon when none is given.
  """
  if epsilon is None:
    epsilon = get_config().epsilon
  return bool(_within_epsilon(float(a), float(b), float(epsilon)))


def is_one(value: float) -> bool:
  return float_equals(value, 1.0)


def is_minus_one(value: float) -> bool:
  return float_equals(value, -1.0)
