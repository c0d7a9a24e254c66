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

import asyncio
from typing import Any

from celery import Celery
from celery.schedules import crontab
from celery.signals import worker_process_init, worker_process_shutdown

from exposure_submission.core import config
from exposure_submission.core.managers import managers


def string_to_crontab(value: str) -> crontab:
    """
    Convert a crontab string into the corresponding Celery schedule.

    :param value: the crontab string (i.e., minute hour day_of_month month_of_year day_of_week).
    :return: the Celery crontab schedule.
    """
    minute, hour, day_of_month, month_of_year, day_of_week = value.split()
    return crontab(
        minute=minute,
        hour=hour,
        day_of_month=day_of_month,
        month_of_year=month_of_year,
        day_of_week=day_of_week,
    )


@worker_process_init.connect
def worker_process_init_listener(**kwargs: Any) -> None:
    """
    Callback on worker initialization.
    """
    asyncio.run(managers.initialize())


@worker_process_shutdown.connect
def worker_process_shutdown_listener(**kwargs: Any) -> None:
    """
    Callback on worker shutdown.
    """
    asyncio.run(managers.teardown())


celery_app = Celery(
    "exposure_submission",
    broker=config.CELERY_BROKER_REDIS_URL,
    include=("exposure_submission.tasks.delete_old_keys",),
)
celery_app.conf.update(
    task_always_eager=config.CELERY_ALWAYS_EAGER,
    beat_schedule={
        "delete_old_keys": dict(
            task="exposure_submission.tasks.delete_old_keys.delete_old_keys",
            schedule=string_to_crontab(config.DELETE_OLD_KEYS_CRONTAB),
        ),
    },
)
