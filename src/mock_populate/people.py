"""
Person names and email addresses.

Names come from Faker using the locale mapped from a country code; emails are
derived from names by transliterating them to lower-case ASCII.
"""

import logging
import random
import re
from typing import Iterable, List, Optional, Tuple

from faker import Faker
from faker.decode import unidecode

from .errors import InvalidConfiguration
from .options import EmailOptions, PersonOptions

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def _full_name(fake: Faker, sex: str) -> Tuple[str, str, str]:
    """First, middle and last name for the given sex. Last names may contain spaces."""
    if sex == "female":
        first, middle = fake.first_name_female(), fake.first_name_female()
    else:
        first, middle = fake.first_name_male(), fake.first_name_male()
    return first, middle, fake.last_name()


def personify(options=None, rng: Optional[random.Random] = None, **overrides) -> List[str]:
    """
    Return ``n + 1`` random person names.

    ``gender`` is ``f``, ``m`` or ``b`` (both: odd slots are female, even
    slots male). ``names`` keeps the last name only (1), first and last (2) or
    the full name (3 or more).
    """
    opts = PersonOptions.parse(options, **overrides)
    rng = opts.make_rng(rng)

    fake = Faker(opts.locale)
    fake.seed_instance(rng.getrandbits(32))
    logger.debug("Generating %d %s names (gender=%s)", opts.n + 1, opts.locale, opts.gender)

    results = []
    for i in range(opts.n + 1):
        if (opts.gender == "b" and i % 2) or opts.gender == "f":
            first, middle, last = _full_name(fake, "female")
        else:
            first, middle, last = _full_name(fake, "male")

        if opts.names == 1:
            results.append(last)
        elif opts.names == 2:
            results.append(f"{first} {last}")
        else:
            results.append(f"{first} {middle} {last}")
    return results


def _email_tokens(name: str) -> List[str]:
    tokens = []
    for token in name.split():
        token = _NON_ALNUM.sub("", unidecode(token).lower())
        if token:
            tokens.append(token)
    return tokens


def emailify(people: Iterable[str], options=None, rng: Optional[random.Random] = None, **overrides) -> List[str]:
    """
    Turn each name into an ``@example.<tld>`` address.

    "Jane Q. Doe" becomes ``jane.doe@example.org`` (first and last token
    joined by a dot); a single token is used on its own. One address is
    returned per input name; there is no count option.
    """
    opts = EmailOptions.parse(options, **overrides)
    rng = opts.make_rng(rng)

    results = []
    for name in people:
        tokens = _email_tokens(str(name))
        if not tokens:
            raise InvalidConfiguration(f"Cannot derive an email address from {name!r}")
        local = tokens[0] if len(tokens) == 1 else f"{tokens[0]}.{tokens[-1]}"
        results.append(f"{local}@example.{rng.choice(opts.tlds)}")

    logger.debug("Generated %d email addresses", len(results))
    return results
