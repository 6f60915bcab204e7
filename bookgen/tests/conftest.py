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

from pathlib import Path

import numpy as np
import pytest
from bookgen.generator import generate, shuffle
from bookgen.rows import COUNTRIES
from bookgen.writer import write


@pytest.fixture
def countries():
    return COUNTRIES


@pytest.fixture
def seed() -> int:
    return 20230315


@pytest.fixture
def rng(seed) -> np.random.Generator:
    return np.random.default_rng(seed)


@pytest.fixture
def data_path(tmp_path: Path, countries, rng) -> Path:
    path = tmp_path / "data.csv"
    with path.open("w") as out:
        write(shuffle(generate(countries, 50, rng), rng), out)
    return path
