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

import argparse
import logging
import os
import sys
from typing import Mapping, Optional, Sequence

import numpy as np
from bookgen.analysis import analyse_file, format_stats
from bookgen.config import GeneratorConfig
from bookgen.generator import generate, shuffle
from bookgen.writer import write


def _setup_logging():
    logging.basicConfig(
        format="%(asctime)s:%(levelname)s:%(message)s",
        datefmt="%Y/%m/%d %I:%M:%S %p",
        level=os.getenv("LOGLEVEL", "INFO").upper(),
    )


def generate_main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
):
    parser = argparse.ArgumentParser(
        prog="bookgen-generate",
        description="Print shuffled synthetic book rows as CSV",
    )
    parser.add_argument(
        "-n",
        "--items-per-country",
        help="rows per country (overrides ITEM_PER_COUNTRY)",
        type=int,
    )
    parser.add_argument(
        "--seed", help="random seed (overrides BOOKGEN_SEED)", type=int
    )
    args = parser.parse_args(argv)
    _setup_logging()

    try:
        config = GeneratorConfig.from_env(
            environ, items_per_country=args.items_per_country, seed=args.seed
        )
    except ValueError as e:
        parser.error(str(e))

    rng = np.random.default_rng(config.seed)
    books = generate(config.countries, config.items_per_country, rng)
    write(shuffle(books, rng), sys.stdout)


def analyse_main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(
        prog="bookgen-analyse",
        description="Print per-country stats of a generated CSV",
    )
    parser.add_argument("-i", "--input", help="input filename", default="data.csv")
    args = parser.parse_args(argv)
    _setup_logging()

    for stats in analyse_file(args.input):
        print(format_stats(stats))
