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

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from marshmallow import ValidationError

from exposure_submission.helpers.persistence import save_diagnosis_keys
from exposure_submission.helpers.rolling_interval import is_in_window
from exposure_submission.models.dataclasses import DiagnosisKeyRecord, SubmittedKey
from exposure_submission.models.enums import SubmissionOutcome
from exposure_submission.models.validators import SubmissionPayloadValidator
from exposure_submission.monitoring.api import KEYS_DROPPED, KEYS_STORED

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """
    The outcome of processing a batch of submitted keys, with the records handed to storage.
    """

    outcome: SubmissionOutcome
    accepted: List[DiagnosisKeyRecord] = field(default_factory=list)
    reason: Optional[str] = None


def process_submission(keys: List[SubmittedKey], now: int) -> SubmissionResult:
    """
    Validate the whole batch of submitted keys, filter out the outdated ones and store the rest.

    A single invalid key rejects the whole batch, and nothing is stored.
    Outdated keys are silently left out, and the storage is invoked even if none is left.

    :param keys: the submitted keys.
    :param now: the current rolling interval number.
    :return: the SubmissionResult.
    """
    try:
        SubmissionPayloadValidator()(keys)
    except ValidationError as error:
        reason = " ".join(error.messages)
        _LOGGER.warning("Rejecting submission with invalid keys.", extra=dict(error=reason))
        return SubmissionResult(outcome=SubmissionOutcome.REJECTED, reason=reason)

    in_window_keys = [key for key in keys if is_in_window(key, now)]

    if n_dropped := len(keys) - len(in_window_keys):
        _LOGGER.info(
            "Dropping keys outside the acceptance window.",
            extra=dict(n_keys=len(keys), n_dropped=n_dropped),
        )
        KEYS_DROPPED.inc(n_dropped)

    accepted = [DiagnosisKeyRecord.from_submission(key) for key in in_window_keys]
    save_diagnosis_keys(accepted)
    KEYS_STORED.inc(len(accepted))

    return SubmissionResult(outcome=SubmissionOutcome.ACCEPTED, accepted=accepted)
