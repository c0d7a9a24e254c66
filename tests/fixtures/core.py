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

from contextlib import contextmanager
from typing import Any, Iterator
from unittest.mock import patch

import mongomock
from mongoengine import connect, disconnect
from pytest import fixture
from sanic import Sanic
from sanic_testing.testing import SanicASGITestClient

from exposure_submission.core import config
from exposure_submission.models.diagnosis_key import DiagnosisKey


@contextmanager
def config_set(name: str, value: Any) -> Iterator[None]:
    old_value = getattr(config, name)
    setattr(config, name, value)
    try:
        yield
    finally:
        setattr(config, name, old_value)


def mock_config(module: Any, name: str, value: Any) -> Any:
    """
    Patch the given configuration value for the duration of the decorated test.
    """
    return patch.object(module, name, value)


@fixture
def sanic() -> Sanic:
    from exposure_submission.sanic import sanic_app

    return sanic_app


@fixture
def client(sanic: Sanic) -> SanicASGITestClient:
    return sanic.asgi_client


@fixture
def mongo() -> Iterator[None]:
    disconnect()
    connect(
        "exposure-submission-test",
        host="mongodb://localhost",
        mongo_client_class=mongomock.MongoClient,
    )
    try:
        yield
    finally:
        DiagnosisKey.drop_collection()
        disconnect()
