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
import logging
import random
from functools import wraps
from http import HTTPStatus
from typing import Any, Awaitable, Callable, Iterable

from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sanic import Blueprint, Sanic
from sanic.request import Request
from sanic.response import HTTPResponse, json, raw

from exposure_submission.core import config
from exposure_submission.core.exceptions import ApiException
from exposure_submission.core.managers import Managers
from exposure_submission.models.dataclasses import SubmissionHeaders

_LOGGER = logging.getLogger(__name__)


async def wait_configured_time(mu: int, sigma: int) -> None:
    """
    Sleep for a random time, normally distributed around the given mean.

    :param mu: the mean of the sleeping time, in milliseconds.
    :param sigma: the standard deviation of the sleeping time, in milliseconds.
    """
    await asyncio.sleep(max(random.normalvariate(mu, sigma), 0) / 1000)


def handle_fake_requests(status: HTTPStatus) -> Callable:
    """
    Decorator to answer fake requests without processing them.
    The response mimics the one of a successful real request, after a delay emulating the time
    the real request would take.

    :param status: the status of the successful real response.
    :return: the decorator.
    """

    def _decorator(f: Callable[..., Awaitable[HTTPResponse]]) -> Callable:
        @wraps(f)
        async def _wrapper(
            request: Request, *args: Any, headers: SubmissionHeaders, **kwargs: Any
        ) -> HTTPResponse:
            if headers.fake:
                await wait_configured_time(
                    mu=config.FAKE_REQUEST_DELAY_MILLIS, sigma=config.FAKE_REQUEST_DELAY_SIGMA
                )
                return HTTPResponse(status=status.value)
            return await f(request, *args, headers=headers, **kwargs)

        return _wrapper

    return _decorator


async def _handle_api_exception(request: Request, exception: ApiException) -> HTTPResponse:
    return json(
        dict(error_code=exception.error_code, message=exception.error_message),
        status=exception.status_code.value,
    )


async def _metrics(request: Request) -> HTTPResponse:
    return raw(generate_latest(), content_type=CONTENT_TYPE_LATEST)


def create_app(
    api_title: str, api_description: str, blueprints: Iterable[Blueprint], managers: Managers,
) -> Sanic:
    """
    Create the Sanic application, with its blueprints, error handling and lifecycle listeners.

    :param api_title: the title of the API, for documentation purposes.
    :param api_description: the description of the API, for documentation purposes.
    :param blueprints: the blueprints to register.
    :param managers: the managers to initialize on startup and tear down on shutdown.
    :return: the Sanic application.
    """
    app = Sanic("exposure_submission")
    # Only the declared methods are served, anything else is answered with 405.
    app.config.HTTP_AUTO_HEAD = False
    app.config.HTTP_AUTO_OPTIONS = False
    app.config.HTTP_AUTO_TRACE = False
    app.ext.openapi.describe(api_title, version="1.0.0", description=api_description)

    for blueprint in blueprints:
        app.blueprint(blueprint)

    app.error_handler.add(ApiException, _handle_api_exception)
    app.add_route(_metrics, "/metrics", methods=["GET"], name="metrics")

    @app.listener("before_server_start")
    async def _initialize_managers(*args: Any) -> None:
        await managers.initialize()

    @app.listener("after_server_stop")
    async def _teardown_managers(*args: Any) -> None:
        await managers.teardown()

    return app


def run_app(app: Sanic) -> None:
    """
    Run the given Sanic application with the configured host, port and workers.

    :param app: the Sanic application.
    """
    logging.basicConfig(level=config.LOG_LEVEL)
    _LOGGER.info("Starting server.", extra=dict(host=config.API_HOST, port=config.API_PORT))
    app.run(host=config.API_HOST, port=config.API_PORT, workers=config.API_WORKERS)
