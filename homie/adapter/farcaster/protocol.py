"""Farcaster protocol message types.

Only the part of the hub schema needed to publish a CastAdd is declared.
Field numbers match the hub's ``message.proto``, so serialized messages
are wire compatible. The classes are built at import time from a
``FileDescriptorProto`` in a private descriptor pool.
"""

from datetime import datetime, timezone

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

# Seconds between the Unix epoch and the Farcaster epoch (2021-01-01T00:00:00Z)
FARCASTER_EPOCH = 1609459200

HASH_SCHEME_BLAKE3 = 1
SIGNATURE_SCHEME_ED25519 = 1
MESSAGE_TYPE_CAST_ADD = 1
FARCASTER_NETWORK_MAINNET = 1

_PACKAGE = "homie.farcaster"

_Field = descriptor_pb2.FieldDescriptorProto


def _enum(name: str, values: list[str]) -> descriptor_pb2.EnumDescriptorProto:
    enum = descriptor_pb2.EnumDescriptorProto(name=name)
    for number, value in enumerate(values):
        enum.value.add(name=value, number=number)
    return enum


def _message(name: str, fields: list[tuple]) -> descriptor_pb2.DescriptorProto:
    message = descriptor_pb2.DescriptorProto(name=name)
    for field_name, number, field_type, *rest in fields:
        field = message.field.add(
            name=field_name,
            number=number,
            type=field_type,
            label=_Field.LABEL_REPEATED if "repeated" in rest else _Field.LABEL_OPTIONAL,
        )
        type_name = next((r for r in rest if r != "repeated"), None)
        if type_name:
            field.type_name = f".{_PACKAGE}.{type_name}"
    return message


def _file() -> descriptor_pb2.FileDescriptorProto:
    proto = descriptor_pb2.FileDescriptorProto(
        name="homie/farcaster/message.proto", package=_PACKAGE, syntax="proto3"
    )
    proto.enum_type.extend(
        [
            _enum("HashScheme", ["HASH_SCHEME_NONE", "HASH_SCHEME_BLAKE3"]),
            _enum(
                "SignatureScheme",
                [
                    "SIGNATURE_SCHEME_NONE",
                    "SIGNATURE_SCHEME_ED25519",
                    "SIGNATURE_SCHEME_EIP712",
                ],
            ),
            _enum("MessageType", ["MESSAGE_TYPE_NONE", "MESSAGE_TYPE_CAST_ADD"]),
            _enum(
                "FarcasterNetwork",
                [
                    "FARCASTER_NETWORK_NONE",
                    "FARCASTER_NETWORK_MAINNET",
                    "FARCASTER_NETWORK_TESTNET",
                    "FARCASTER_NETWORK_DEVNET",
                ],
            ),
        ]
    )
    proto.message_type.extend(
        [
            _message(
                "CastId",
                [("fid", 1, _Field.TYPE_UINT64), ("hash", 2, _Field.TYPE_BYTES)],
            ),
            _message(
                "Embed",
                [
                    ("url", 1, _Field.TYPE_STRING),
                    ("cast_id", 2, _Field.TYPE_MESSAGE, "CastId"),
                ],
            ),
            _message(
                "CastAddBody",
                [
                    ("embeds_deprecated", 1, _Field.TYPE_STRING, "repeated"),
                    ("mentions", 2, _Field.TYPE_UINT64, "repeated"),
                    ("parent_cast_id", 3, _Field.TYPE_MESSAGE, "CastId"),
                    ("text", 4, _Field.TYPE_STRING),
                    ("mentions_positions", 5, _Field.TYPE_UINT32, "repeated"),
                    ("embeds", 6, _Field.TYPE_MESSAGE, "repeated", "Embed"),
                    ("parent_url", 7, _Field.TYPE_STRING),
                ],
            ),
            _message(
                "MessageData",
                [
                    ("type", 1, _Field.TYPE_ENUM, "MessageType"),
                    ("fid", 2, _Field.TYPE_UINT64),
                    ("timestamp", 3, _Field.TYPE_UINT32),
                    ("network", 4, _Field.TYPE_ENUM, "FarcasterNetwork"),
                    ("cast_add_body", 5, _Field.TYPE_MESSAGE, "CastAddBody"),
                ],
            ),
            _message(
                "Message",
                [
                    ("data", 1, _Field.TYPE_MESSAGE, "MessageData"),
                    ("hash", 2, _Field.TYPE_BYTES),
                    ("hash_scheme", 3, _Field.TYPE_ENUM, "HashScheme"),
                    ("signature", 4, _Field.TYPE_BYTES),
                    ("signature_scheme", 5, _Field.TYPE_ENUM, "SignatureScheme"),
                    ("signer", 6, _Field.TYPE_BYTES),
                ],
            ),
        ]
    )
    return proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_file().SerializeToString())

MessageData = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{_PACKAGE}.MessageData")
)
Message = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{_PACKAGE}.Message")
)


def farcaster_timestamp(now: datetime | None = None) -> int:
    """Seconds since the Farcaster epoch."""
    moment = now or datetime.now(timezone.utc)
    return int(moment.timestamp()) - FARCASTER_EPOCH
