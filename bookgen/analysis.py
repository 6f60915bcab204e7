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
import time
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Sequence, Tuple, Union

import fsspec
import pandas as pd
from bookgen.rows import COLUMNS

logger = logging.getLogger("bookgen")

NUMERIC_COLUMNS = ["BookId", "AuthorAge", "Pages", "PublicationDate"]


@dataclass(frozen=True)
class Stats:
    min: int
    max: int
    mean: int
    med: int
    p95: int


@dataclass(frozen=True)
class CountryStats:
    country: str
    most_common_nationality: Tuple[str, int]
    author_age: Stats
    pages: Stats
    publication_date: Stats


def read_data(path: Union[str, IO, Path]) -> pd.DataFrame:
    if isinstance(path, str):
        infile = fsspec.open(path, mode="rt").open()
    elif isinstance(path, Path):
        infile = fsspec.open(path.as_uri(), mode="rt").open()
    else:
        infile = path
    try:
        df = pd.read_csv(infile, skipinitialspace=True, keep_default_na=False)
    finally:
        infile.close()

    missing = [col for col in COLUMNS if col not in df.columns]
    if len(missing) > 0:
        raise ValueError(f"Missing columns in {path}: {', '.join(missing)}")
    return df.astype({col: "int64" for col in NUMERIC_COLUMNS})[list(COLUMNS)]


def analyse_prop(values: Sequence[int]) -> Stats:
    values = sorted(int(v) for v in values)
    if len(values) == 0:
        raise ValueError("Cannot compute stats of an empty column")
    return Stats(
        min=values[0],
        max=values[-1],
        mean=sum(values) // len(values),
        med=values[len(values) // 2],
        p95=values[int(len(values) * 0.95)],
    )


def _most_common(nationalities: pd.Series) -> Tuple[str, int]:
    # ties go to the smallest code
    counts = nationalities.value_counts().sort_index()
    return (str(counts.idxmax()), int(counts.max()))


def analyse(df: pd.DataFrame) -> List[CountryStats]:
    results = []
    for country, group in df.groupby("PublicationCountry", sort=True):
        results.append(
            CountryStats(
                country=str(country),
                most_common_nationality=_most_common(group["AuthorNationality"]),
                author_age=analyse_prop(group["AuthorAge"]),
                pages=analyse_prop(group["Pages"]),
                publication_date=analyse_prop(group["PublicationDate"]),
            )
        )
    return results


def format_stats(stats: CountryStats) -> str:
    nationality, count = stats.most_common_nationality
    return (
        f"{stats.country} stats: "
        f"most common nationality: ({nationality}, {count}) "
        f"author_age: {stats.author_age} "
        f"pages: {stats.pages} "
        f"publication_date: {stats.publication_date}"
    )


def analyse_file(path: Union[str, IO, Path]) -> List[CountryStats]:
    """Read a generated CSV and compute per-country stats, logging timings."""
    total = time.perf_counter()
    start = time.perf_counter()
    df = read_data(path)
    logger.info(f"read data: {time.perf_counter() - start:.6f}s ({len(df)} rows)")

    start = time.perf_counter()
    results = analyse(df)
    logger.info(f"analyse: {time.perf_counter() - start:.6f}s")
    logger.info(f"total: {time.perf_counter() - total:.6f}s")
    return results
