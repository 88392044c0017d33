"""
Shuffled token lists and random password-like strings.
"""

import logging
import random
import string
from typing import Any, List, Optional

from .options import ShuffleOptions, StringOptions

logger = logging.getLogger(__name__)

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"

CHARSETS = {
    "default": string.ascii_letters + string.digits,
    "ascii": "".join(chr(code) for code in range(33, 127)),
    "base64": string.ascii_letters + string.digits + "+/",
    "simple": string.ascii_lowercase + string.digits,
    "hex": "0123456789abcdef",
    "alpha": string.ascii_lowercase,
    "numeric": string.digits,
    "binary": "01",
    "morse": ".-",
}


def shuffler(options=None, rng: Optional[random.Random] = None, **overrides) -> List[Any]:
    """
    Return a random permutation of ``items`` (default: the tokens a..j).

    ``n`` is accepted for symmetry with the other generators but the output
    always has the length of ``items``.
    """
    opts = ShuffleOptions.parse(options, **overrides)
    rng = opts.make_rng(rng)
    tokens = opts.tokens
    return rng.sample(tokens, len(tokens))


def _pronounceable(rng: random.Random, length: int) -> str:
    # Alternate consonants and vowels from a random starting class.
    pools = [CONSONANTS, VOWELS]
    offset = rng.randrange(2)
    return "".join(rng.choice(pools[(i + offset) % 2]) for i in range(length))


def stringer(options=None, rng: Optional[random.Random] = None, **overrides) -> List[str]:
    """Return ``n + 1`` random strings of ``length`` characters drawn from ``kind``."""
    opts = StringOptions.parse(options, **overrides)
    rng = opts.make_rng(rng)
    logger.debug("Generating %d %s strings of length %d", opts.n + 1, opts.kind, opts.length)

    results = []
    for _ in range(opts.n + 1):
        if opts.kind == "pron":
            results.append(_pronounceable(rng, opts.length))
        else:
            results.append("".join(rng.choices(CHARSETS[opts.kind], k=opts.length)))
    return results
