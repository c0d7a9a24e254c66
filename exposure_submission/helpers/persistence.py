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
from datetime import datetime, timezone
from typing import Collection

from mongoengine import OperationError
from mongoengine import ValidationError as DocumentValidationError
from pymongo.errors import PyMongoError

from exposure_submission.core.exceptions import PersistenceException
from exposure_submission.models.dataclasses import DiagnosisKeyRecord
from exposure_submission.models.diagnosis_key import DiagnosisKey

_LOGGER = logging.getLogger(__name__)

_ONE_HOUR_IN_SECONDS = 3600


def _submission_timestamp() -> int:
    return int(datetime.utcnow().replace(tzinfo=timezone.utc).timestamp() / _ONE_HOUR_IN_SECONDS)


def save_diagnosis_keys(records: Collection[DiagnosisKeyRecord]) -> None:
    """
    Store the given diagnosis key records, all of them or none.

    :param records: the records to store.
    :raises: PersistenceException if the records could not be stored.
    """
    if not records:
        _LOGGER.info("No diagnosis keys to store.")
        return

    submission_timestamp = _submission_timestamp()
    documents = [DiagnosisKey.from_record(record, submission_timestamp) for record in records]

    try:
        DiagnosisKey.objects.insert(documents, load_bulk=False)
    except (OperationError, DocumentValidationError, PyMongoError) as error:
        _LOGGER.error(
            "Could not store diagnosis keys.", extra=dict(n_keys=len(records), error=str(error))
        )
        raise PersistenceException() from error

    _LOGGER.info("Stored diagnosis keys.", extra=dict(n_keys=len(documents)))
