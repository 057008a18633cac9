"""Common base for the sample data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

DEFAULT_LOCALE = "hr_HR"


class BaseGenerator(ABC):
    """Holds the Faker instance shared by a generator's helpers.

    Seeding reseeds both Faker and the ``random`` module, since the
    generators draw amounts, models and digits from ``random`` directly.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale used for names, streets and cities.
    """

    def __init__(self, seed: int | None = None, locale: str = DEFAULT_LOCALE) -> None:
        self.fake = Faker(locale)
        self.seed = seed
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)
