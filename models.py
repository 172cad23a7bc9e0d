import json
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from encoding import encode_id, decode_id
from obfuscation import obfuscate, deobfuscate


class ObfuscatedID:
    """
    A sequential integer ID that is only ever shown to the outside world in its
    obfuscated form.

    The raw value is plain data assigned by whoever persists the record. Callers
    must keep it within [0, 2**53 - 1]; larger values do not survive the round trip.

    Equality and hashing follow the raw value, so an ID can key a dict; do not
    decode() into an ID while it is stored as a key.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        self._value = int(value)

    def value(self) -> int:
        """Returns the raw integer value."""
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def to_text(self) -> str:
        return encode_id(self._value)

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def parse(cls, s: str) -> "ObfuscatedID":
        """Inverse of str(); raises IDDecodeError or IDFormatError on bad input."""
        return cls(decode_id(s))

    # --- Raw obfuscated integer, bypassing the text codec ---

    def encode(self) -> int:
        return obfuscate(self._value)

    def decode(self, n: int) -> None:
        self._value = deobfuscate(n)

    # --- JSON hooks ---

    def marshal_json(self) -> str:
        return json.dumps(self.to_text())

    def unmarshal_json(self, data: str | bytes) -> None:
        """
        Parses a quoted JSON string into this ID.

        On any failure the ID is reset to zero before the error is raised, so a
        failed parse never leaves the previous value in place.
        """
        try:
            s = json.loads(data)
            if not isinstance(s, str):
                raise ValueError(f"id must be a JSON string, got {type(s).__name__}")
            self._value = decode_id(s)
        except (ValueError, TypeError):
            self._value = 0
            raise

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        from_text = core_schema.chain_schema([
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(cls.parse),
        ])
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(cls),
                from_text,
            ]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema(), when_used="json"
            ),
        )

    # --- Value semantics ---

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObfuscatedID):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"ObfuscatedID({self._value})"
