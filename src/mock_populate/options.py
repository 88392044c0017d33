"""
Option models for the mock data generators.

Each generator takes one of these models (or the equivalent keyword
arguments). Unset fields fall back to the documented defaults; an explicit
``0`` or empty value is kept as given and validated like any other value.
"""

import logging
import random
from datetime import date, datetime, time
from typing import Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

EPOCH = date(1970, 1, 1)
DEFAULT_TOKENS = list("abcdefghij")
TOP_LEVEL_DOMAINS = ("com", "net", "org", "edu")

# Country code -> Faker locale used for person names.
COUNTRY_LOCALES = {
    "us": "en_US",
    "gb": "en_GB",
    "uk": "en_GB",
    "ie": "en_IE",
    "ca": "en_CA",
    "au": "en_AU",
    "nz": "en_NZ",
    "in": "en_IN",
    "de": "de_DE",
    "at": "de_AT",
    "ch": "de_CH",
    "fr": "fr_FR",
    "es": "es_ES",
    "mx": "es_MX",
    "it": "it_IT",
    "nl": "nl_NL",
    "pl": "pl_PL",
    "pt": "pt_PT",
    "br": "pt_BR",
    "se": "sv_SE",
    "dk": "da_DK",
    "no": "no_NO",
    "fi": "fi_FI",
    "cz": "cs_CZ",
    "ru": "ru_RU",
}

StringKind = Literal[
    "default", "ascii", "base64", "simple", "hex", "alpha", "numeric", "binary", "morse", "pron"
]


class RandomOptions(BaseModel):
    """Seeding and parsing shared by every generator."""

    model_config = ConfigDict(extra="forbid")

    seed: Optional[int] = Field(None, description="Seed for a private random generator")

    @classmethod
    def parse(cls, options: Any = None, **overrides):
        """Build options from a model, a mapping, keyword overrides, or any mix of them."""
        if isinstance(options, cls) and not overrides:
            return options
        if isinstance(options, BaseModel):
            data = options.model_dump(exclude_unset=True)
        else:
            data = dict(options or {})
        data.update(overrides)
        try:
            return cls(**data)
        except ValidationError as e:
            raise InvalidConfiguration(f"Invalid {cls.__name__}: {e}") from e

    def make_rng(self, rng: Optional[random.Random] = None) -> random.Random:
        """Return the caller's generator, or a fresh one seeded from ``seed``."""
        if rng is not None:
            return rng
        return random.Random(self.seed)


class GeneratorOptions(RandomOptions):
    """Options of generators that produce n + 1 values."""

    n: int = Field(9, ge=0, description="Highest slot index; n + 1 values are produced")


class DateOptions(GeneratorOptions):
    start: date = EPOCH
    end: Optional[date] = Field(None, description="Defaults to today")

    @model_validator(mode="after")
    def check_range(self):
        if self.end is None:
            self.end = date.today()
        if self.start >= self.end:
            raise ValueError(f"start {self.start} must be before end {self.end}")
        return self


class TimeOptions(GeneratorOptions):
    start: time = time(0, 0, 0)
    end: Optional[time] = Field(None, description="Defaults to the current time")
    stamp: bool = Field(True, description="HH:MM:SS strings when true, seconds since midnight otherwise")

    @model_validator(mode="after")
    def check_range(self):
        if self.end is None:
            self.end = datetime.now().time().replace(microsecond=0)
        if self.start >= self.end:
            raise ValueError(f"start {self.start} must be before end {self.end}")
        return self


class NumberOptions(GeneratorOptions):
    start: Union[int, float] = 0
    end: Union[int, float] = 9
    prec: Optional[int] = Field(2, ge=0, description="Decimal places kept in random mode")
    random: bool = Field(False, description="Random draws instead of the integer sequence")
    max_retries: int = Field(10_000, ge=1)

    @model_validator(mode="after")
    def check_range(self):
        if self.start >= self.end:
            raise ValueError(f"start {self.start} must be below end {self.end}")
        if not self.random and (self.start != int(self.start) or self.end != int(self.end)):
            raise ValueError("sequential mode needs integer bounds")
        return self


class PersonOptions(GeneratorOptions):
    gender: Literal["f", "m", "b"] = "b"
    names: int = Field(2, ge=1, description="1: last name, 2: first and last, 3+: full name")
    country: str = "us"

    @field_validator("country")
    @classmethod
    def known_country(cls, value: str) -> str:
        value = value.lower()
        if value not in COUNTRY_LOCALES:
            raise ValueError(f"unknown country {value!r}, expected one of {sorted(COUNTRY_LOCALES)}")
        return value

    @property
    def locale(self) -> str:
        return COUNTRY_LOCALES[self.country]


class EmailOptions(RandomOptions):
    """No count: one address is derived per input name."""

    tlds: Tuple[str, ...] = Field(TOP_LEVEL_DOMAINS, min_length=1)


class ShuffleOptions(GeneratorOptions):
    items: Optional[List[Any]] = Field(None, description="Defaults to the tokens a..j")

    @property
    def tokens(self) -> List[Any]:
        return list(DEFAULT_TOKENS if self.items is None else self.items)


class StringOptions(GeneratorOptions):
    kind: StringKind = "default"
    length: int = Field(8, ge=1)


class ImageOptions(GeneratorOptions):
    size: int = Field(8, ge=1, description="Payload repeats are drawn from [0, size - 1]")


class DistributionOptions(GeneratorOptions):
    type: Literal["u", "c", "s", "f"] = "u"
    prec: int = Field(2, ge=0)
    dof: Union[int, str] = 2

    @model_validator(mode="after")
    def check_dof(self):
        numerator, denominator = self.degrees_of_freedom
        if numerator < 1 or denominator < 1:
            raise ValueError(f"degrees of freedom must be positive, got {self.dof!r}")
        return self

    @property
    def degrees_of_freedom(self) -> Tuple[int, int]:
        """Numerator and denominator; the denominator is only used by the F distribution."""
        text = str(self.dof).strip()
        if self.type == "f":
            numerator, _, denominator = text.partition("/")
        else:
            numerator, denominator = text, ""
        try:
            return int(numerator), int(denominator) if denominator else 1
        except ValueError:
            raise ValueError(f"malformed degrees of freedom {self.dof!r}") from None
