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

from exposure_submission.celery import celery_app
from exposure_submission.core import config
from exposure_submission.helpers.rolling_interval import midnight_rolling_interval_number
from exposure_submission.models.diagnosis_key import DiagnosisKey
from exposure_submission.monitoring.celery import KEYS_DELETED

_LOGGER = logging.getLogger(__name__)


@celery_app.task
def delete_old_keys() -> None:
    """
    Periodically (default: every day, at midnight) delete diagnosis keys older than RETENTION_DAYS
    days (default: 14).
    """
    reference_interval_number = midnight_rolling_interval_number(days_ago=config.RETENTION_DAYS)

    keys_deleted = DiagnosisKey.delete_older_than(reference_interval_number)
    _LOGGER.info(
        "DiagnosisKey documents deletion completed.",
        extra=dict(n_deleted=keys_deleted, started_before=reference_interval_number),
    )

    KEYS_DELETED.inc(keys_deleted)
