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

from sanic_ext.extensions.openapi.definitions import Parameter


class HeaderExposureAuthorization(Parameter):
    """
    Documentation class for the Exposure-Authorization: <TAN> header.
    """

    DATA_KEY = "Exposure-Authorization"

    def __init__(self) -> None:
        super().__init__(
            self.DATA_KEY,
            str,
            location="header",
            required=True,
            description="The TAN proving the user is entitled to submit their keys.",
        )


class HeaderExposureFake(Parameter):
    """
    Documentation class for the Exposure-Fake header.
    """

    DATA_KEY = "Exposure-Fake"

    def __init__(self) -> None:
        super().__init__(
            self.DATA_KEY,
            str,
            location="header",
            required=True,
            description="Whether the current request is fake (1) or not (0). "
            "Fake requests are ignored.",
        )


class HeaderContentTypeProtobuf(Parameter):
    """
    Documentation class for the Content-Type: application/x-protobuf header.
    """

    DATA_KEY = "Content-Type"

    def __init__(self) -> None:
        super().__init__(
            self.DATA_KEY,
            str,
            location="header",
            required=True,
            description="application/x-protobuf",
        )
