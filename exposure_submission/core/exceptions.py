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

from http import HTTPStatus


class SubmissionException(Exception):
    """
    Base exception of the Exposure Submission Service.
    """


class ApiException(SubmissionException):
    """
    Base exception for errors to be returned to the caller.
    Subclasses override the status code, the message and the code returned in the response.
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    error_message = "Something went wrong."
    error_code = 1000


class SchemaValidationException(ApiException):
    """
    Raised when the request headers or body are not compliant with the defined schema.
    """

    status_code = HTTPStatus.BAD_REQUEST
    error_message = "Request not compliant with the defined schema."
    error_code = 1100


class UnauthorizedTanException(ApiException):
    """
    Raised when the TAN the request is authenticated with is rejected by the verification service.
    """

    status_code = HTTPStatus.FORBIDDEN
    error_message = "Unauthorized TAN."
    error_code = 1101


class PersistenceException(ApiException):
    """
    Raised when the accepted diagnosis keys could not be stored.
    """

    error_message = "Could not store the submitted keys."
    error_code = 1200
