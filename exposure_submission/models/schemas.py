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

from typing import Any, Dict

from marshmallow import Schema, ValidationError, fields, post_load
from marshmallow.validate import Length, Validator

from exposure_submission.core import config
from exposure_submission.models.dataclasses import SubmissionHeaders
from exposure_submission.models.swagger import (
    HeaderExposureAuthorization,
    HeaderExposureFake,
)


class ContentTypeValidator(Validator):
    """
    Ensure a Content-Type header declares the expected media type, ignoring its parameters.
    """

    def __call__(self, value: str) -> str:
        media_type = value.split(";", 1)[0].strip().lower()
        if media_type != config.SUBMISSION_CONTENT_TYPE.lower():
            raise ValidationError(f"Unsupported content type (i.e., {value}).")
        return value


class SubmissionHeadersSchema(Schema):
    """
    Schema of the headers every submission request shall carry.
    """

    content_type = fields.String(
        required=True, data_key="Content-Type", validate=ContentTypeValidator()
    )
    tan = fields.String(
        required=True, data_key=HeaderExposureAuthorization.DATA_KEY, validate=Length(min=1)
    )
    # Only "0" and "1" are allowed.
    fake = fields.Boolean(
        required=True, data_key=HeaderExposureFake.DATA_KEY, truthy={"1"}, falsy={"0"}
    )

    @post_load
    def make_headers(self, data: Dict[str, Any], **kwargs: Any) -> SubmissionHeaders:
        return SubmissionHeaders(**data)
