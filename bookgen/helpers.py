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

from typing import Optional

DEFAULT_ITEM_PER_COUNTRY = 3


def parse_item_count(value: Optional[str], default: int = DEFAULT_ITEM_PER_COUNTRY) -> int:
    """
    :param value: the raw ``ITEM_PER_COUNTRY`` value, or None when unset
    :param default: count used when the value is unset or blank
    :return: a non-negative number of rows per country
    """
    if value is None or len(value.strip()) == 0:
        return default
    try:
        count = int(value.strip(), 10)
    except ValueError:
        raise ValueError(f"Invalid 'ITEM_PER_COUNTRY': {value!r}") from None
    if count < 0:
        raise ValueError(f"Invalid 'ITEM_PER_COUNTRY': {value!r}")
    return count


def parse_seed(value: Optional[str]) -> Optional[int]:
    if value is None or len(value.strip()) == 0:
        return None
    try:
        seed = int(value.strip(), 10)
    except ValueError:
        raise ValueError(f"Invalid 'BOOKGEN_SEED': {value!r}") from None
    if seed < 0:
        raise ValueError(f"Invalid 'BOOKGEN_SEED': {value!r}")
    return seed
