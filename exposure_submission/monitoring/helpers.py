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

from functools import wraps
from typing import Any, Callable, Coroutine

from sanic.response import HTTPResponse

from exposure_submission.core.exceptions import ApiException
from exposure_submission.models.dataclasses import SubmissionHeaders
from exposure_submission.monitoring.api import SUBMISSION_REQUESTS


def monitor_submission(f: Callable[..., Coroutine[Any, Any, HTTPResponse]]) -> Callable:
    """
    Decorator to monitor the metrics relative to the submission request.
    :param f: the submission function to decorate.
    :return: the decorated function.
    """

    @wraps(f)
    async def _wrapper(*args: Any, headers: SubmissionHeaders, **kwargs: Any) -> HTTPResponse:
        try:
            response = await f(*args, headers=headers, **kwargs)
            SUBMISSION_REQUESTS.labels(headers.fake, response.status).inc()
        except ApiException as error:
            SUBMISSION_REQUESTS.labels(headers.fake, error.status_code.value).inc()
            raise
        return response

    return _wrapper
