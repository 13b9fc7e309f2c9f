# application/schemas/nano_id_schema.py
import re
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from application.mappers.nano_id_mapper import decode_nano_id, encode_nano_id
from core_domain.value_objects.nano_id import ALPHABET, NanoID

NANO_ID_PATTERN = f"^[{re.escape(ALPHABET)}]*$"


def _validate_nano_id(value: Any) -> NanoID:
    if isinstance(value, NanoID):
        return value
    return decode_nano_id(value)


class _NanoIDPydanticAnnotation:
    """
    Custom core schema so a NanoID field validates from and serializes to a
    bare string instead of the dataclass' keyed form.
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, _source_type: Any, _handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_nano_id,
            serialization=core_schema.plain_serializer_function_ser_schema(
                encode_nano_id,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return handler(core_schema.str_schema(pattern=NANO_ID_PATTERN))


NanoIDField = Annotated[NanoID, _NanoIDPydanticAnnotation]
