"""
Handy mock data creation.

Generators for dates, times, numbers, names, emails, distribution samples,
shuffled lists, random strings and tiny images, plus ``collate`` to turn the
resulting columns into rows.
"""

from .collate import collate
from .config import ConfigLoader, DatasetConfig, load_config
from .dataset import build_columns, build_dataset, to_frame
from .errors import GenerationFailed, InvalidConfiguration, MockPopulateError
from .images import imager
from .people import emailify, personify
from .ranges import date_ranger, number_ranger, time_ranger
from .stats import distributor
from .tokens import shuffler, stringer

__version__ = "0.1.0"

__all__ = [
    "ConfigLoader",
    "DatasetConfig",
    "GenerationFailed",
    "InvalidConfiguration",
    "MockPopulateError",
    "build_columns",
    "build_dataset",
    "collate",
    "date_ranger",
    "distributor",
    "emailify",
    "imager",
    "load_config",
    "number_ranger",
    "personify",
    "shuffler",
    "stringer",
    "time_ranger",
    "to_frame",
]
