"""
Dataset assembly.

Runs the generators declared in a dataset configuration and collates their
columns into rows, or hands them to pandas as a DataFrame.
"""

import logging
import random
from itertools import zip_longest
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from .collate import collate
from .config import DatasetConfig
from .images import imager
from .people import emailify, personify
from .ranges import date_ranger, number_ranger, time_ranger
from .stats import distributor
from .tokens import shuffler, stringer

logger = logging.getLogger(__name__)

GENERATORS = {
    "dates": date_ranger,
    "times": time_ranger,
    "numbers": number_ranger,
    "people": personify,
    "emails": emailify,
    "shuffle": shuffler,
    "strings": stringer,
    "images": imager,
    "stats": distributor,
}


def _as_config(config: Union[DatasetConfig, Dict[str, Any]]) -> DatasetConfig:
    if isinstance(config, DatasetConfig):
        return config
    return DatasetConfig.from_dict(config)


def build_columns(config, rng: Optional[random.Random] = None) -> Dict[str, List[Any]]:
    """Generate every declared column, keyed by column name in declaration order."""
    config = _as_config(config)
    rng = rng if rng is not None else random.Random(config.seed)

    columns: Dict[str, List[Any]] = {}
    for column in config.columns:
        if column.kind == "emails":
            values = GENERATORS["emails"](columns[column.source], column.options, rng=rng)
        else:
            values = GENERATORS[column.kind](column.options, rng=rng)
        logger.debug("Column %s (%s): %d values", column.name, column.kind, len(values))
        columns[column.name] = values

    logger.info("Generated %d columns", len(columns))
    return columns


def build_dataset(config, rng: Optional[random.Random] = None) -> List[List[Any]]:
    """Generate the declared columns and collate them into rows."""
    return collate(*build_columns(config, rng=rng).values())


def _is_config(data: Any) -> bool:
    if isinstance(data, DatasetConfig):
        return True
    columns = data.get("columns") if isinstance(data, dict) else None
    return isinstance(columns, list) and bool(columns) and all(isinstance(c, dict) for c in columns)


def to_frame(data, rng: Optional[random.Random] = None) -> pd.DataFrame:
    """
    Return generated columns as a DataFrame.

    ``data`` is either a dataset configuration (columns are generated first)
    or a mapping of column name to values. A mapping counts as a
    configuration only when its ``columns`` entry is a list of column
    declarations. Shorter columns are padded with ``None``.
    """
    if _is_config(data):
        data = build_columns(data, rng=rng)
    rows = list(zip_longest(*data.values(), fillvalue=None))
    return pd.DataFrame(rows, columns=list(data))
