"""
Range generators: random dates, random times and numbers.

Every generator produces ``n + 1`` values (slots ``0..n`` inclusive), the
convention shared by the whole package.
"""

import logging
import math
import random
from datetime import time, timedelta
from typing import List, Optional, Union

from .errors import GenerationFailed
from .options import DateOptions, NumberOptions, TimeOptions

logger = logging.getLogger(__name__)


def date_ranger(options=None, rng: Optional[random.Random] = None, **overrides) -> List[str]:
    """
    Return ``n + 1`` random ``YYYY-MM-DD`` dates within ``[start, end]``.

    Defaults: start 1970-01-01, end today, n 9.
    """
    opts = DateOptions.parse(options, **overrides)
    rng = opts.make_rng(rng)

    # Inclusive day count of the range.
    length = (opts.end - opts.start).days + 1
    logger.debug("Generating %d dates between %s and %s", opts.n + 1, opts.start, opts.end)

    results = []
    for _ in range(opts.n + 1):
        offset = rng.randrange(length)
        results.append((opts.start + timedelta(days=offset)).isoformat())
    return results


def _seconds(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def _stamp(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def time_ranger(options=None, rng: Optional[random.Random] = None, **overrides) -> List[Union[str, int]]:
    """
    Return ``n + 1`` random times of day between ``start`` and ``end``.

    With ``stamp`` set (the default) each value is an ``HH:MM:SS`` string,
    otherwise the number of seconds since midnight.
    """
    opts = TimeOptions.parse(options, **overrides)
    rng = opts.make_rng(rng)

    start = _seconds(opts.start)
    span = _seconds(opts.end) - start
    logger.debug("Generating %d times between %s and %s", opts.n + 1, opts.start, opts.end)

    results = []
    for _ in range(opts.n + 1):
        value = start + rng.randint(0, span)
        results.append(_stamp(value) if opts.stamp else value)
    return results


def _truncate(value: float, prec: Optional[int]) -> float:
    if prec is None:
        return value
    scale = 10 ** prec
    return math.floor(value * scale) / scale


def number_ranger(options=None, rng: Optional[random.Random] = None, **overrides) -> List[Union[int, float]]:
    """
    Return random or sequential numbers within a range.

    In random mode ``n + 1`` values are drawn uniformly from ``[0, end)`` and
    rejected until they reach ``start``, so every value satisfies
    ``start <= v < end``. Otherwise the integer sequence ``start..end`` is
    returned and ``n`` is ignored.
    """
    opts = NumberOptions.parse(options, **overrides)

    if not opts.random:
        return list(range(int(opts.start), int(opts.end) + 1))

    rng = opts.make_rng(rng)
    logger.debug("Drawing %d numbers in [%s, %s)", opts.n + 1, opts.start, opts.end)

    results = []
    for _ in range(opts.n + 1):
        for _attempt in range(opts.max_retries):
            candidate = _truncate(rng.random() * opts.end, opts.prec)
            if opts.start <= candidate < opts.end:
                results.append(candidate)
                break
        else:
            logger.warning(
                "No value in [%s, %s) after %d draws", opts.start, opts.end, opts.max_retries
            )
            raise GenerationFailed(
                f"Could not draw a number in [{opts.start}, {opts.end}) "
                f"after {opts.max_retries} attempts"
            )
    return results
