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

from mongoengine import BinaryField, Document, IntField

from exposure_submission.models.dataclasses import DiagnosisKeyRecord


class DiagnosisKey(Document):
    """
    Model of a stored diagnosis key, ready to be distributed to the Mobile Clients.
    """

    key_data = BinaryField(required=True)
    rolling_start_interval_number = IntField(required=True, min_value=0)
    rolling_period = IntField(required=True)
    transmission_risk_level = IntField(required=True)
    # Hours since the Unix epoch at the time of storage.
    submission_timestamp = IntField(required=True)

    meta = {"collection": "diagnosis_key"}

    @classmethod
    def from_record(cls, record: DiagnosisKeyRecord, submission_timestamp: int) -> DiagnosisKey:
        """
        Build the document to be stored for the given record.

        :param record: the accepted DiagnosisKeyRecord.
        :param submission_timestamp: the hours since the Unix epoch at the time of storage.
        :return: the DiagnosisKey document, not yet saved.
        """
        return cls(
            key_data=record.key_data,
            rolling_start_interval_number=record.rolling_start_interval_number,
            rolling_period=record.rolling_period,
            transmission_risk_level=record.transmission_risk_level,
            submission_timestamp=submission_timestamp,
        )

    def to_record(self) -> DiagnosisKeyRecord:
        """
        :return: the DiagnosisKeyRecord with the same content as this document.
        """
        return DiagnosisKeyRecord(
            key_data=bytes(self.key_data),
            rolling_start_interval_number=self.rolling_start_interval_number,
            rolling_period=self.rolling_period,
            transmission_risk_level=self.transmission_risk_level,
        )

    @classmethod
    def delete_older_than(cls, rolling_start_interval_number: int) -> int:
        """
        Delete all diagnosis keys that started before the given rolling interval number.

        :param rolling_start_interval_number: the rolling interval number to check against.
        :return: the number of deleted documents.
        """
        return cls.objects.filter(
            rolling_start_interval_number__lt=rolling_start_interval_number
        ).delete()
