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

import pytest
from bookgen.config import GeneratorConfig
from bookgen.helpers import parse_item_count, parse_seed
from bookgen.rows import COUNTRIES


@pytest.mark.parametrize(
    "value, expected",
    [(None, 3), ("", 3), ("  ", 3), ("0", 0), ("1", 1), (" 12 ", 12)],
)
def test_parse_item_count(value, expected):
    assert parse_item_count(value) == expected


@pytest.mark.parametrize("value", ["abc", "3.5", "-1", "1e3"])
def test_parse_item_count_invalid(value):
    with pytest.raises(ValueError, match="ITEM_PER_COUNTRY"):
        parse_item_count(value)


def test_parse_seed():
    assert parse_seed(None) is None
    assert parse_seed("42") == 42
    assert parse_seed("0") == 0
    with pytest.raises(ValueError, match="BOOKGEN_SEED"):
        parse_seed("forty-two")
    with pytest.raises(ValueError, match="BOOKGEN_SEED"):
        parse_seed("-1")


def test_config_defaults():
    config = GeneratorConfig.from_env({})

    assert config.items_per_country == 3
    assert config.seed is None
    assert config.countries == COUNTRIES


def test_config_from_env():
    config = GeneratorConfig.from_env({"ITEM_PER_COUNTRY": "5", "BOOKGEN_SEED": "7"})

    assert config == GeneratorConfig(items_per_country=5, seed=7)


def test_config_overrides_win():
    config = GeneratorConfig.from_env(
        {"ITEM_PER_COUNTRY": "5"}, items_per_country=1, seed=3
    )

    assert config.items_per_country == 1
    assert config.seed == 3


def test_config_reads_os_environ(monkeypatch):
    monkeypatch.setenv("ITEM_PER_COUNTRY", "9")
    monkeypatch.delenv("BOOKGEN_SEED", raising=False)

    assert GeneratorConfig.from_env().items_per_country == 9


def test_config_invalid():
    with pytest.raises(ValueError):
        GeneratorConfig(items_per_country=-2)
    with pytest.raises(ValueError):
        GeneratorConfig(countries=())
    with pytest.raises(ValueError, match="seed"):
        GeneratorConfig(seed=-5)
