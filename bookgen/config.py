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

import os
from dataclasses import dataclass, field
from typing import ClassVar, Mapping, Optional, Tuple

from bookgen.helpers import DEFAULT_ITEM_PER_COUNTRY, parse_item_count, parse_seed
from bookgen.rows import COUNTRIES


@dataclass(frozen=True)
class GeneratorConfig:
    ITEM_PER_COUNTRY_ENV: ClassVar[str] = "ITEM_PER_COUNTRY"
    SEED_ENV: ClassVar[str] = "BOOKGEN_SEED"

    items_per_country: int = DEFAULT_ITEM_PER_COUNTRY
    seed: Optional[int] = None
    countries: Tuple[str, ...] = field(default=COUNTRIES)

    def __post_init__(self):
        if self.items_per_country < 0:
            raise ValueError(
                f"'items_per_country' must be non-negative, got {self.items_per_country}"
            )
        if len(self.countries) == 0:
            raise ValueError("'countries' must not be empty")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"'seed' must be non-negative, got {self.seed}")

    @staticmethod
    def from_env(
        environ: Optional[Mapping[str, str]] = None,
        items_per_country: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> "GeneratorConfig":
        """
        Build a config from ``ITEM_PER_COUNTRY`` and ``BOOKGEN_SEED``.

        Explicit arguments take precedence over the environment.
        """
        if environ is None:
            environ = os.environ
        if items_per_country is None:
            items_per_country = parse_item_count(
                environ.get(GeneratorConfig.ITEM_PER_COUNTRY_ENV)
            )
        if seed is None:
            seed = parse_seed(environ.get(GeneratorConfig.SEED_ENV))
        return GeneratorConfig(items_per_country=items_per_country, seed=seed)
