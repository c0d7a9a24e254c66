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

from datetime import datetime, timedelta, timezone
from typing import Optional

from exposure_submission.core import config
from exposure_submission.models.dataclasses import AcceptanceWindow, SubmittedKey

_TEN_MINUTES_IN_SECONDS = 600


def now_rolling_interval_number() -> int:
    """
    Compute the rolling interval number as of now.

    :return: the rolling interval number corresponding to the current time.
    """
    return datetime_to_rolling_interval_number(datetime.utcnow())


def midnight_rolling_interval_number(days_ago: int = 0) -> int:
    """
    Compute the rolling interval number at midnight of the given number of days ago.

    :param days_ago: how many days before today to consider.
    :return: the rolling interval number corresponding to that day at midnight.
    """
    return datetime_to_rolling_interval_number(
        datetime.utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
        - timedelta(days=days_ago)
    )


def datetime_to_rolling_interval_number(_datetime: datetime) -> int:
    """
    Given a naive UTC datetime, return the corresponding rolling interval number.

    :param _datetime: the datetime whose rolling interval number is to be calculated.
    :return: the rolling interval number corresponding to the given datetime.
    """
    return int(_datetime.replace(tzinfo=timezone.utc).timestamp() / _TEN_MINUTES_IN_SECONDS)


def acceptance_window(now: int, max_age: Optional[int] = None) -> AcceptanceWindow:
    """
    Compute the window of rolling start interval numbers accepted at the given time.

    :param now: the current rolling interval number.
    :param max_age: the maximum age, in intervals, of an accepted key. Defaults to the configured
      MAX_KEY_AGE_INTERVALS.
    :return: the acceptance window.
    """
    if max_age is None:
        max_age = config.MAX_KEY_AGE_INTERVALS
    return AcceptanceWindow(oldest=now - max_age, newest=now)


def is_in_window(key: SubmittedKey, now: int) -> bool:
    """
    Assess whether the given key started recently enough to be stored.

    :param key: the submitted key.
    :param now: the current rolling interval number.
    :return: True if the key's rolling start interval number lies in the acceptance window.
    """
    return key.rolling_start_interval_number in acceptance_window(now)
