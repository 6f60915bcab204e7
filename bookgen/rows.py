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

from dataclasses import dataclass
from typing import Tuple

COUNTRIES: Tuple[str, ...] = ("PL", "UK", "UA", "IT", "DE", "US")

COLUMNS: Tuple[str, ...] = (
    "PublicationCountry",
    "BookId",
    "AuthorAge",
    "Pages",
    "PublicationDate",
    "AuthorNationality",
)

# closed intervals
AUTHOR_AGE_RANGE = (0, 10)
PAGES_RANGE = (1, 100)
PUBLICATION_DATE_RANGE = (500, 1000)


@dataclass(frozen=True)
class Book:
    publication_country: str
    book_id: int
    author_age: int
    pages: int
    publication_date: int
    author_nationality: str

    def values(self) -> tuple:
        """Field values in ``COLUMNS`` order."""
        return (
            self.publication_country,
            self.book_id,
            self.author_age,
            self.pages,
            self.publication_date,
            self.author_nationality,
        )
