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

from bookgen.analysis import (
    CountryStats,
    Stats,
    analyse,
    analyse_file,
    analyse_prop,
    format_stats,
    read_data,
)
from bookgen.config import GeneratorConfig
from bookgen.generator import generate, shuffle
from bookgen.helpers import parse_item_count, parse_seed
from bookgen.rows import COLUMNS, COUNTRIES, Book
from bookgen.version import __version__
from bookgen.writer import format_row, to_pandas, write

__all__ = [
    "Book",
    "COLUMNS",
    "COUNTRIES",
    "CountryStats",
    "GeneratorConfig",
    "Stats",
    "analyse",
    "analyse_file",
    "analyse_prop",
    "format_row",
    "format_stats",
    "generate",
    "parse_item_count",
    "parse_seed",
    "read_data",
    "shuffle",
    "to_pandas",
    "write",
    "__version__",
]
