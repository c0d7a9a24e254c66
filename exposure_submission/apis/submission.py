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
from http import HTTPStatus

from sanic import Blueprint
from sanic.request import Request
from sanic.response import HTTPResponse
from sanic_ext import openapi

from exposure_submission.core.exceptions import SchemaValidationException, UnauthorizedTanException
from exposure_submission.helpers.api import parse_submission_payload, resolve_submission_headers
from exposure_submission.helpers.rolling_interval import now_rolling_interval_number
from exposure_submission.helpers.sanic import handle_fake_requests
from exposure_submission.helpers.submission import process_submission
from exposure_submission.helpers.tan_verification import verify_tan
from exposure_submission.models.dataclasses import SubmissionHeaders
from exposure_submission.models.enums import SubmissionOutcome
from exposure_submission.models.swagger import (
    HeaderContentTypeProtobuf,
    HeaderExposureAuthorization,
    HeaderExposureFake,
)
from exposure_submission.monitoring.helpers import monitor_submission

_LOGGER = logging.getLogger(__name__)

bp = Blueprint("submission", url_prefix="version/v1")


@bp.route("/diagnosis-keys", methods=["POST"])
@openapi.summary("Submit diagnosis keys (caller: Mobile Client).")
@openapi.description(
    "Once the user has been diagnosed, the Mobile Client submits its Temporary Exposure Keys, "
    "authenticating the request with a TAN. "
    "Keys older than the retention period are silently ignored, while a single malformed key "
    "causes the whole submission to be rejected. "
    "Using the dedicated request header, the Mobile Client can indicate to the server that the "
    "call it is making is a fake one. "
    "The server will ignore the content of such calls."
)
@openapi.parameter(parameter=HeaderExposureFake())
@openapi.parameter(parameter=HeaderExposureAuthorization())
@openapi.parameter(parameter=HeaderContentTypeProtobuf())
@openapi.response(HTTPStatus.OK.value, description="Submission completed successfully.")
@openapi.response(
    HTTPStatus.BAD_REQUEST.value, description=SchemaValidationException.error_message
)
@openapi.response(HTTPStatus.FORBIDDEN.value, description=UnauthorizedTanException.error_message)
@resolve_submission_headers
@monitor_submission
@handle_fake_requests(HTTPStatus.OK)
async def submit_diagnosis_keys(request: Request, headers: SubmissionHeaders) -> HTTPResponse:
    """
    Allow Mobile Clients to submit their diagnosis keys.

    :param request: the HTTP request object.
    :param headers: the resolved submission headers.
    :return: 200 on successful submission, 400 on SchemaValidationException, 403 on
      UnauthorizedTanException.
    """
    if not verify_tan(headers.tan):
        raise UnauthorizedTanException()

    keys = parse_submission_payload(request.body)

    result = process_submission(keys, now=now_rolling_interval_number())
    if result.outcome == SubmissionOutcome.REJECTED:
        raise SchemaValidationException()

    _LOGGER.info(
        "Diagnosis keys submitted.", extra=dict(n_keys=len(keys), n_accepted=len(result.accepted))
    )
    return HTTPResponse(status=HTTPStatus.OK.value)
