from objkit.serialization.codec import decode, from_json, to_json
from objkit.serialization.errors import CodecError, DecodeError, EncodeError

__all__ = [
    "to_json",
    "decode",
    "from_json",
    "CodecError",
    "DecodeError",
    "EncodeError",
]
