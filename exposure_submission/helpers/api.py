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
from functools import wraps
from typing import Any, Callable, List

from google.protobuf.message import DecodeError
from marshmallow import ValidationError
from sanic.request import Request

from exposure_submission.core.exceptions import SchemaValidationException
from exposure_submission.models.dataclasses import SubmittedKey
from exposure_submission.models.schemas import SubmissionHeadersSchema
from exposure_submission.protobuf.models.submission_payload import SubmissionPayload

_LOGGER = logging.getLogger(__name__)


def resolve_submission_headers(f: Callable) -> Callable:
    """
    Decorator to resolve the submission headers once, passing them to the decorated function as
    the "headers" keyword argument.

    :param f: the decorated function.
    :return: the decorator.
    :raises: SchemaValidationException if any header is missing or malformed.
    """
    schema = SubmissionHeadersSchema()

    @wraps(f)
    def _wrapper(request: Request, *args: Any, **kwargs: Any) -> Any:
        data = {
            field.data_key: request.headers[field.data_key]
            for field in schema.fields.values()
            if field.data_key in request.headers
        }
        try:
            headers = schema.load(data)
        except ValidationError as error:
            _LOGGER.warning(
                "Submission headers not compliant with the defined schema.",
                extra=dict(error=error.messages),
            )
            raise SchemaValidationException() from error

        return f(request, *args, headers=headers, **kwargs)

    return _wrapper


def parse_submission_payload(body: bytes) -> List[SubmittedKey]:
    """
    Deserialize the submission request body.

    :param body: the raw request body.
    :return: the list of submitted keys.
    :raises: SchemaValidationException if the body is not a valid SubmissionPayload.
    """
    try:
        payload = SubmissionPayload.FromString(body)
    except DecodeError as error:
        _LOGGER.warning(
            "Could not deserialize the submission payload.", extra=dict(error=str(error))
        )
        raise SchemaValidationException() from error

    return [SubmittedKey.from_protobuf(key) for key in payload.keys]
