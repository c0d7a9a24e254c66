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

import logging
from typing import List

from marshmallow import ValidationError
from marshmallow.validate import Validator

from exposure_submission.core import config
from exposure_submission.models.dataclasses import SubmittedKey

_LOGGER = logging.getLogger(__name__)


class SubmittedKeyValidator(Validator):
    """
    A validator for a single submitted key.
    """

    def __call__(self, key: SubmittedKey) -> SubmittedKey:
        """
        Perform the structural validation of the given key.

        :param key: the key to be validated.
        :raises ValidationError: in case the key is deemed invalid.
        :return: the valid key.
        """
        if (length := len(key.key_data)) != config.KEY_DATA_LENGTH:
            raise ValidationError(
                f"Invalid key_data length (actual: {length}, expected: {config.KEY_DATA_LENGTH})."
            )

        if key.rolling_period != config.EXPECTED_ROLLING_PERIOD:
            raise ValidationError(
                f"Invalid rolling_period (actual: {key.rolling_period}, "
                f"expected: {config.EXPECTED_ROLLING_PERIOD})."
            )

        if not (
            config.MIN_TRANSMISSION_RISK_LEVEL
            <= key.transmission_risk_level
            <= config.MAX_TRANSMISSION_RISK_LEVEL
        ):
            raise ValidationError(
                f"Some transmission_risk_level values are not in "
                f"[{config.MIN_TRANSMISSION_RISK_LEVEL},{config.MAX_TRANSMISSION_RISK_LEVEL}] "
                f"(e.g., {key.transmission_risk_level})."
            )

        if key.rolling_start_interval_number < 0:
            raise ValidationError(
                f"Some rolling_start_interval_number values are negative "
                f"(e.g., {key.rolling_start_interval_number})."
            )

        return key


class SubmissionPayloadValidator(Validator):
    """
    A validator for the whole list of submitted keys.
    """

    def __call__(self, keys: List[SubmittedKey]) -> List[SubmittedKey]:
        """
        Perform the validation of a given list of keys, both as a whole and on each single key.
        A single invalid key invalidates the whole list.

        :param keys: the list of keys to be validated.
        :raises ValidationError: in case at least one key is deemed invalid.
        :return: the list of valid keys.
        """
        n_keys = len(keys)
        _LOGGER.info("Validating submitted keys.", extra=dict(n_keys=n_keys))

        if n_keys > config.MAX_KEYS_PER_SUBMISSION:
            raise ValidationError(
                f"Too many keys. (actual: {n_keys}, max_allowed: {config.MAX_KEYS_PER_SUBMISSION})."
            )

        key_validator = SubmittedKeyValidator()
        for key in keys:
            key_validator(key)

        return keys
