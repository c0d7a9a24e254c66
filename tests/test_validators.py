#    Copyright (C) 2020 Presidenza del Consiglio dei Ministri.
#    Please refer to the AUTHORS file for more information.
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#    GNU Affero General Public License for more details.
#    You should have received a copy of the GNU Affero General Public License
#    along with this program. If not, see <https://www.gnu.org/licenses/>.

from typing import List

import pytest
from marshmallow import ValidationError
from pytest import raises

from exposure_submission.core import config
from exposure_submission.helpers.rolling_interval import midnight_rolling_interval_number
from exposure_submission.models.dataclasses import SubmittedKey
from exposure_submission.models.validators import SubmissionPayloadValidator, SubmittedKeyValidator
from tests.fixtures.core import mock_config
from tests.fixtures.submission import build_key, generate_random_key_data


@pytest.fixture()
def keys() -> List[SubmittedKey]:
    return [
        build_key(
            generate_random_key_data(),
            midnight_rolling_interval_number(days_ago=day),
            transmission_risk_level=day % 9,
        )
        for day in range(14)
    ]


def test_key_validator_pass_with_correct_key(keys: List[SubmittedKey]) -> None:
    assert SubmittedKeyValidator()(keys[0]) == keys[0]


@pytest.mark.parametrize("length", (0, 1, 15, 17, 32))
def test_key_validator_fails_on_wrong_key_data_length(length: int) -> None:
    key = build_key(generate_random_key_data(length), 12345, 3)
    with raises(ValidationError) as err:
        SubmittedKeyValidator()(key)

    assert err.value.messages[0] == f"Invalid key_data length (actual: {length}, expected: 16)."


@pytest.mark.parametrize("rolling_period", (-1, 0, 1, 143, 145, 1024))
def test_key_validator_fails_on_unexpected_rolling_period(rolling_period: int) -> None:
    key = build_key(generate_random_key_data(), 12345, 3, rolling_period=rolling_period)
    with raises(ValidationError) as err:
        SubmittedKeyValidator()(key)

    assert err.value.messages[0] == (
        f"Invalid rolling_period (actual: {rolling_period}, expected: 144)."
    )


@pytest.mark.parametrize("transmission_risk_level", (-1, 9, 100, 999))
def test_key_validator_fails_on_out_of_range_transmission_risk_level(
    transmission_risk_level: int,
) -> None:
    key = build_key(generate_random_key_data(), 12345, transmission_risk_level)
    with raises(ValidationError) as err:
        SubmittedKeyValidator()(key)

    assert err.value.messages[0] == (
        f"Some transmission_risk_level values are not in [0,8] (e.g., {transmission_risk_level})."
    )


@pytest.mark.parametrize("transmission_risk_level", range(9))
def test_key_validator_pass_on_bounded_transmission_risk_level(
    transmission_risk_level: int,
) -> None:
    SubmittedKeyValidator()(build_key(generate_random_key_data(), 12345, transmission_risk_level))


@mock_config(config, "MAX_TRANSMISSION_RISK_LEVEL", 4)
def test_key_validator_uses_configured_transmission_risk_level() -> None:
    with raises(ValidationError):
        SubmittedKeyValidator()(build_key(generate_random_key_data(), 12345, 5))


def test_key_validator_fails_on_negative_rolling_start_interval_number() -> None:
    with raises(ValidationError) as err:
        SubmittedKeyValidator()(build_key(generate_random_key_data(), -144, 3))

    assert err.value.messages[0] == (
        "Some rolling_start_interval_number values are negative (e.g., -144)."
    )


def test_payload_validator_pass_if_empty() -> None:
    assert SubmissionPayloadValidator()([]) == []


def test_payload_validator_pass_with_correct_keys(keys: List[SubmittedKey]) -> None:
    assert SubmissionPayloadValidator()(keys) == keys


@pytest.mark.parametrize("key_index", range(14))
def test_payload_validator_fails_on_any_invalid_key(
    keys: List[SubmittedKey], key_index: int
) -> None:
    keys[key_index] = build_key(
        keys[key_index].key_data, keys[key_index].rolling_start_interval_number, 999
    )
    with raises(ValidationError):
        SubmissionPayloadValidator()(keys)


@mock_config(config, "MAX_KEYS_PER_SUBMISSION", 3)
def test_payload_validator_fails_if_too_many_keys(keys: List[SubmittedKey]) -> None:
    with raises(ValidationError) as err:
        SubmissionPayloadValidator()(keys)

    assert err.value.messages[0] == f"Too many keys. (actual: {len(keys)}, max_allowed: 3)."
