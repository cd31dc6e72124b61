# wallpaper_server/models/types.py

import uuid
from sqlalchemy.types import TypeDecorator, LargeBinary


class BinaryUUID(TypeDecorator):
    """
    Stores a UUID in a fixed-width 16-byte binary column.
    Python side always sees ``uuid.UUID``; strings are accepted on the way in.
    """
    impl = LargeBinary(16)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return value.bytes

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return uuid.UUID(bytes=bytes(value))
