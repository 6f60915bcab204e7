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

import sys
from typing import IO, Iterable, Optional

import pandas as pd
from bookgen.rows import COLUMNS, Book

SEPARATOR = ", "


def format_header() -> str:
    return SEPARATOR.join(COLUMNS)


def format_row(book: Book) -> str:
    return SEPARATOR.join(str(value) for value in book.values())


def write(rows: Iterable[Book], out: Optional[IO[str]] = None):
    """
    :param rows: books in output order
    :param out: text stream, standard output when omitted
    """
    if out is None:
        out = sys.stdout
    lines = [format_header()]
    lines.extend(format_row(book) for book in rows)
    out.write("\n".join(lines) + "\n")
    out.flush()


def to_pandas(rows: Iterable[Book]) -> pd.DataFrame:
    return pd.DataFrame([book.values() for book in rows], columns=list(COLUMNS))
