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

"""
Protobuf models of the submission request body.

The message classes are built from a file descriptor mirroring
exposure_submission/protobuf/proto/submission_payload.proto, so that no generated code needs to be
kept in the repository.
"""

from google.protobuf import descriptor_pb2, descriptor_pool
from google.protobuf.message_factory import GetMessageClass

_PACKAGE = "exposure_submission"

_FieldDescriptorProto = descriptor_pb2.FieldDescriptorProto


def _file_descriptor_proto() -> descriptor_pb2.FileDescriptorProto:
    """
    Describe the submission payload protobuf file.

    :return: the FileDescriptorProto of the submission payload.
    """
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="exposure_submission/submission_payload.proto", package=_PACKAGE, syntax="proto2",
    )

    key = file_proto.message_type.add(name="TemporaryExposureKey")
    key.field.add(
        name="key_data",
        number=1,
        type=_FieldDescriptorProto.TYPE_BYTES,
        label=_FieldDescriptorProto.LABEL_OPTIONAL,
    )
    key.field.add(
        name="transmission_risk_level",
        number=2,
        type=_FieldDescriptorProto.TYPE_INT32,
        label=_FieldDescriptorProto.LABEL_OPTIONAL,
    )
    key.field.add(
        name="rolling_start_interval_number",
        number=3,
        type=_FieldDescriptorProto.TYPE_INT32,
        label=_FieldDescriptorProto.LABEL_OPTIONAL,
    )
    key.field.add(
        name="rolling_period",
        number=4,
        type=_FieldDescriptorProto.TYPE_INT32,
        label=_FieldDescriptorProto.LABEL_OPTIONAL,
        default_value="144",
    )

    payload = file_proto.message_type.add(name="SubmissionPayload")
    payload.field.add(
        name="keys",
        number=1,
        type=_FieldDescriptorProto.TYPE_MESSAGE,
        label=_FieldDescriptorProto.LABEL_REPEATED,
        type_name=f".{_PACKAGE}.TemporaryExposureKey",
    )
    payload.field.add(
        name="padding",
        number=2,
        type=_FieldDescriptorProto.TYPE_BYTES,
        label=_FieldDescriptorProto.LABEL_OPTIONAL,
    )

    return file_proto


_POOL = descriptor_pool.DescriptorPool()
_POOL.AddSerializedFile(_file_descriptor_proto().SerializeToString())

TemporaryExposureKey = GetMessageClass(
    _POOL.FindMessageTypeByName(f"{_PACKAGE}.TemporaryExposureKey")
)
SubmissionPayload = GetMessageClass(_POOL.FindMessageTypeByName(f"{_PACKAGE}.SubmissionPayload"))
