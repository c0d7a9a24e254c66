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
from typing import Callable

from croniter import croniter
from decouple import config

_LOGGER = logging.getLogger(__name__)


def validate_crontab(name: str) -> Callable[[str], str]:
    """
    Build a decouple cast function ensuring the given value is a valid crontab string.

    :param name: the name of the configuration variable, used in the error message.
    :return: the cast function.
    """

    def _cast(value: str) -> str:
        if not croniter.is_valid(value):
            raise ValueError(f"{name} is not a valid crontab string (i.e., {value}).")
        return value

    return _cast


API_HOST: str = config("API_HOST", default="0.0.0.0")
API_PORT: int = config("API_PORT", cast=int, default=5000)
API_WORKERS: int = config("API_WORKERS", cast=int, default=1)
LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")

SUBMISSION_MONGO_URL: str = config(
    "SUBMISSION_MONGO_URL", default="mongodb://localhost:27017/exposure-submission-dev"
)

CELERY_BROKER_REDIS_URL: str = config("CELERY_BROKER_REDIS_URL", default="redis://localhost:6379/0")
CELERY_ALWAYS_EAGER: bool = config("CELERY_ALWAYS_EAGER", cast=bool, default=False)

DELETE_OLD_KEYS_CRONTAB: str = config(
    "DELETE_OLD_KEYS_CRONTAB", cast=validate_crontab("DELETE_OLD_KEYS_CRONTAB"), default="0 0 * * *"
)

# Number of days a key is deemed epidemiologically relevant, both on submission and in storage.
RETENTION_DAYS: int = config("RETENTION_DAYS", cast=int, default=14)

# 144 ten-minutes intervals per day.
MAX_KEY_AGE_INTERVALS: int = config(
    "MAX_KEY_AGE_INTERVALS", cast=int, default=RETENTION_DAYS * 144
)

KEY_DATA_LENGTH: int = config("KEY_DATA_LENGTH", cast=int, default=16)
EXPECTED_ROLLING_PERIOD: int = config("EXPECTED_ROLLING_PERIOD", cast=int, default=144)
MIN_TRANSMISSION_RISK_LEVEL: int = config("MIN_TRANSMISSION_RISK_LEVEL", cast=int, default=0)
MAX_TRANSMISSION_RISK_LEVEL: int = config("MAX_TRANSMISSION_RISK_LEVEL", cast=int, default=8)

# [14 days before keys + (possibly) 1 current day key = 15 keys]
# Yet, since the submission could fail and be repeated, some slack is given here.
MAX_KEYS_PER_SUBMISSION: int = config("MAX_KEYS_PER_SUBMISSION", cast=int, default=30)

SUBMISSION_CONTENT_TYPE: str = config("SUBMISSION_CONTENT_TYPE", default="application/x-protobuf")

FAKE_REQUEST_DELAY_MILLIS: int = config("FAKE_REQUEST_DELAY_MILLIS", cast=int, default=150)
FAKE_REQUEST_DELAY_SIGMA: int = config("FAKE_REQUEST_DELAY_SIGMA", cast=int, default=20)

TAN_VERIFICATION_URL: str = config("TAN_VERIFICATION_URL", default="")
TAN_SERVICE_CERTIFICATE: str = config("TAN_SERVICE_CERTIFICATE", default="")
TAN_SERVICE_CA_BUNDLE: str = config("TAN_SERVICE_CA_BUNDLE", default="")
TAN_VERIFICATION_TIMEOUT_SECONDS: float = config(
    "TAN_VERIFICATION_TIMEOUT_SECONDS", cast=float, default=5.0
)
