"""Shared logging helpers."""

import logging
from typing import Union


def configure_logging(level: Union[int, str] = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger once with a terse format.

    Pass ``force=True`` to reconfigure from tests or alternative entry points.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
