"""
Directory Schema
================

Protobuf schema of the remote font directory. The schema is a versioned
contract with the directory host; it is declared here as descriptors and
registered in a private descriptor pool, equivalent to::

    syntax = "proto2";
    package fonts;

    message IntRange   { optional int32 start = 1; optional int32 end = 2; }
    message FloatRange { optional float start = 1; optional float end = 2; }
    message FileSpec {
      optional string filename = 1;
      optional bytes hash = 2;
      optional int32 file_size = 3;
    }
    message Font {
      optional FileSpec file = 1;
      optional IntRange weight = 2;
      optional FloatRange width = 3;
      optional FloatRange italic = 4;
    }
    message FontFamily {
      optional string name = 1;
      optional int32 version = 2;
      repeated Font fonts = 3;
    }
    message Directory {
      repeated FontFamily family = 1;
      optional int32 version = 2;
    }
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

SCHEMA_PACKAGE = "fonts"

_Field = descriptor_pb2.FieldDescriptorProto

_MESSAGES: dict[str, list[tuple[str, int, int, int, str | None]]] = {
    "IntRange": [
        ("start", 1, _Field.TYPE_INT32, _Field.LABEL_OPTIONAL, None),
        ("end", 2, _Field.TYPE_INT32, _Field.LABEL_OPTIONAL, None),
    ],
    "FloatRange": [
        ("start", 1, _Field.TYPE_FLOAT, _Field.LABEL_OPTIONAL, None),
        ("end", 2, _Field.TYPE_FLOAT, _Field.LABEL_OPTIONAL, None),
    ],
    "FileSpec": [
        ("filename", 1, _Field.TYPE_STRING, _Field.LABEL_OPTIONAL, None),
        ("hash", 2, _Field.TYPE_BYTES, _Field.LABEL_OPTIONAL, None),
        ("file_size", 3, _Field.TYPE_INT32, _Field.LABEL_OPTIONAL, None),
    ],
    "Font": [
        ("file", 1, _Field.TYPE_MESSAGE, _Field.LABEL_OPTIONAL, "FileSpec"),
        ("weight", 2, _Field.TYPE_MESSAGE, _Field.LABEL_OPTIONAL, "IntRange"),
        ("width", 3, _Field.TYPE_MESSAGE, _Field.LABEL_OPTIONAL, "FloatRange"),
        ("italic", 4, _Field.TYPE_MESSAGE, _Field.LABEL_OPTIONAL, "FloatRange"),
    ],
    "FontFamily": [
        ("name", 1, _Field.TYPE_STRING, _Field.LABEL_OPTIONAL, None),
        ("version", 2, _Field.TYPE_INT32, _Field.LABEL_OPTIONAL, None),
        ("fonts", 3, _Field.TYPE_MESSAGE, _Field.LABEL_REPEATED, "Font"),
    ],
    "Directory": [
        ("family", 1, _Field.TYPE_MESSAGE, _Field.LABEL_REPEATED, "FontFamily"),
        ("version", 2, _Field.TYPE_INT32, _Field.LABEL_OPTIONAL, None),
    ],
}


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="fonts/directory.proto", package=SCHEMA_PACKAGE, syntax="proto2"
    )
    for message_name, fields in _MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for field_name, number, field_type, label, type_name in fields:
            field = message.field.add(name=field_name, number=number, type=field_type, label=label)
            if type_name:
                field.type_name = f".{SCHEMA_PACKAGE}.{type_name}"
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{SCHEMA_PACKAGE}.{name}"))


IntRange = _message_class("IntRange")
FloatRange = _message_class("FloatRange")
FileSpec = _message_class("FileSpec")
Font = _message_class("Font")
FontFamily = _message_class("FontFamily")
Directory = _message_class("Directory")

__all__ = [
    "Directory",
    "FileSpec",
    "FloatRange",
    "Font",
    "FontFamily",
    "IntRange",
]
