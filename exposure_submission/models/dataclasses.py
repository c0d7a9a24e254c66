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

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SubmittedKey:
    """
    A Temporary Exposure Key as submitted by the Mobile Client, before any validation.
    It only lives for the duration of the submission request.
    """

    key_data: bytes
    rolling_start_interval_number: int
    rolling_period: int
    transmission_risk_level: int

    @classmethod
    def from_protobuf(cls, message: Any) -> SubmittedKey:
        """
        Build a SubmittedKey from its protobuf representation.

        :param message: the TemporaryExposureKey protobuf message.
        :return: the corresponding SubmittedKey.
        """
        return cls(
            key_data=bytes(message.key_data),
            rolling_start_interval_number=message.rolling_start_interval_number,
            rolling_period=message.rolling_period,
            transmission_risk_level=message.transmission_risk_level,
        )


@dataclass(frozen=True)
class DiagnosisKeyRecord:
    """
    An accepted diagnosis key, ready to be stored.
    Two records are equal if their content is equal.
    """

    key_data: bytes
    rolling_start_interval_number: int
    rolling_period: int
    transmission_risk_level: int

    @classmethod
    def from_submission(cls, key: SubmittedKey) -> DiagnosisKeyRecord:
        """
        Map an accepted SubmittedKey to the record to be stored.

        :param key: the accepted SubmittedKey.
        :return: the corresponding DiagnosisKeyRecord.
        """
        return cls(
            key_data=key.key_data,
            rolling_start_interval_number=key.rolling_start_interval_number,
            rolling_period=key.rolling_period,
            transmission_risk_level=key.transmission_risk_level,
        )


@dataclass(frozen=True)
class SubmissionHeaders:
    """
    The request preconditions of a submission, resolved once from the request headers.
    """

    content_type: str
    tan: str
    fake: bool


@dataclass(frozen=True)
class AcceptanceWindow:
    """
    The closed range of rolling start interval numbers accepted at submission time.
    """

    oldest: int
    newest: int

    def __contains__(self, rolling_start_interval_number: int) -> bool:
        return self.oldest <= rolling_start_interval_number <= self.newest
