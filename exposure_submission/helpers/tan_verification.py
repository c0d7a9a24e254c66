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
from http import HTTPStatus

import requests

from exposure_submission.core import config
from exposure_submission.core.exceptions import ApiException

_LOGGER = logging.getLogger(__name__)


def verify_tan(tan: str) -> bool:
    """
    Verify the given TAN through the external verification service.
    The request should use mutual TLS authentication.

    :param tan: the TAN the submission is authenticated with.
    :return: True if the TAN is valid, False otherwise.
    :raises: ApiException if the verification service cannot be reached or answers unexpectedly.
    """
    remote_url = f"https://{config.TAN_VERIFICATION_URL}"

    _LOGGER.info("Requesting TAN verification with external service.")

    try:
        response = requests.post(
            remote_url,
            json=dict(tan=tan),
            verify=config.TAN_SERVICE_CA_BUNDLE or True,
            cert=config.TAN_SERVICE_CERTIFICATE or None,
            timeout=config.TAN_VERIFICATION_TIMEOUT_SECONDS,
        )
    except requests.exceptions.RequestException as error:
        _LOGGER.error("Could not reach the TAN verification service.", extra=dict(error=str(error)))
        raise ApiException from error

    if response.status_code == HTTPStatus.NOT_FOUND:
        _LOGGER.info("TAN rejected by the verification service.")
        return False

    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError as error:
        _LOGGER.error(error)
        raise ApiException from error

    if response.status_code != HTTPStatus.OK:
        _LOGGER.error(
            "Response %d received from the TAN verification service.", response.status_code
        )
        raise ApiException

    _LOGGER.info("TAN verified.")
    return True
