#
# Copyright (C) 2021 The Delta Lake Project Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

import logging
from typing import List, Optional, Sequence

import numpy as np
from bookgen.rows import (
    AUTHOR_AGE_RANGE,
    PAGES_RANGE,
    PUBLICATION_DATE_RANGE,
    Book,
)

logger = logging.getLogger("bookgen")


def _randint(rng: np.random.Generator, bounds) -> int:
    low, high = bounds
    return int(rng.integers(low, high, endpoint=True))


def generate(
    countries: Sequence[str],
    items_per_country: int,
    rng: Optional[np.random.Generator] = None,
) -> List[Book]:
    """
    Produce ``items_per_country`` books for every country, in country order.

    Book ids count up from 0 in generation order. The author nationality is
    drawn from ``countries`` independently of the publication country.
    """
    assert len(countries) > 0, "'countries' must not be empty"
    assert (
        isinstance(items_per_country, int) and items_per_country >= 0
    ), "'items_per_country' must be a non-negative int"

    if rng is None:
        rng = np.random.default_rng()

    books = []
    total = 0
    for country in countries:
        for _ in range(items_per_country):
            books.append(
                Book(
                    publication_country=country,
                    book_id=total,
                    author_age=_randint(rng, AUTHOR_AGE_RANGE),
                    pages=_randint(rng, PAGES_RANGE),
                    publication_date=_randint(rng, PUBLICATION_DATE_RANGE),
                    author_nationality=str(countries[rng.integers(len(countries))]),
                )
            )
            total += 1
    logger.debug(f"generated {total} books for {len(countries)} countries")
    return books


def shuffle(
    rows: Sequence[Book], rng: Optional[np.random.Generator] = None
) -> List[Book]:
    """Return the rows in a uniformly random order, leaving ``rows`` as is."""
    if rng is None:
        rng = np.random.default_rng()
    return [rows[i] for i in rng.permutation(len(rows))]
