"""
Samples from statistical distributions.

Uniform draws are pushed through the upper-tail quantile function (inverse
survival function) of the chosen distribution from scipy.stats.
"""

import logging
import random
from typing import List, Optional

from scipy import stats

from .options import DistributionOptions

logger = logging.getLogger(__name__)

DISTRIBUTIONS = {
    "u": "normal",
    "c": "chi-squared",
    "s": "student-t",
    "f": "F",
}


def quantile(kind: str, probability: float, numerator: int = 2, denominator: int = 1) -> float:
    """
    Value exceeded with the given upper-tail probability.

    Unknown ``kind`` codes use the standard normal distribution.
    """
    if kind == "c":
        return float(stats.chi2.isf(probability, numerator))
    if kind == "s":
        return float(stats.t.isf(probability, numerator))
    if kind == "f":
        return float(stats.f.isf(probability, numerator, denominator))
    return float(stats.norm.isf(probability))


def _uniform(rng: random.Random) -> float:
    # isf(0) is infinite, so draw from the open interval (0, 1).
    value = rng.random()
    while value == 0.0:
        value = rng.random()
    return value


def distributor(options=None, rng: Optional[random.Random] = None, **overrides) -> List[float]:
    """
    Return ``n + 1`` samples rounded to ``prec`` decimals.

    ``type`` is ``u`` (normal), ``c`` (chi-squared), ``s`` (Student's t) or
    ``f`` (F). ``dof`` is an integer, or ``"num/den"`` for F where the
    denominator defaults to 1.
    """
    opts = DistributionOptions.parse(options, **overrides)
    rng = opts.make_rng(rng)
    numerator, denominator = opts.degrees_of_freedom
    logger.debug(
        "Drawing %d %s samples (dof=%s)", opts.n + 1, DISTRIBUTIONS[opts.type], opts.dof
    )

    return [
        round(quantile(opts.type, _uniform(rng), numerator, denominator), opts.prec)
        for _ in range(opts.n + 1)
    ]
