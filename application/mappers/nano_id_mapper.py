import json
from typing import Any, Iterable, Optional

import structlog

from core_domain.exceptions import DataCorruptedError, TypeMismatchError
from core_domain.value_objects.nano_id import NanoID


log = structlog.get_logger(__name__)


# --- Hooks de valor único (NanoID <-> str) ---
def encode_nano_id(nano_id: NanoID) -> str:
    """Representação serializada: a própria string, nunca um objeto."""
    return str(nano_id)


def decode_nano_id(raw: Any) -> NanoID:
    """
    Converte um escalar serializado em NanoID.
    Levanta TypeMismatchError se não for string e DataCorruptedError se
    contiver caracteres fora do alfabeto.
    """
    type_name = NanoID.__name__
    if not isinstance(raw, str):
        log.warning("NanoID decode rejected non-string scalar", raw_type=type(raw).__name__, type_name=type_name)
        raise TypeMismatchError(raw, type_name)

    nano_id = NanoID.try_parse(raw)
    if nano_id is None:
        log.warning("NanoID decode rejected invalid string", candidate=raw, type_name=type_name)
        raise DataCorruptedError(raw, type_name)
    return nano_id


# --- json padrão ---
class NanoIDJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, NanoID):
            return encode_nano_id(o)
        return super().default(o)


def dumps(obj: Any, **kwargs) -> str:
    """json.dumps compacto que sabe serializar NanoID aninhados."""
    kwargs.setdefault("separators", (",", ":"))
    return json.dumps(obj, cls=NanoIDJSONEncoder, **kwargs)


def loads(data: str | bytes, nano_id_fields: Optional[Iterable[str]] = None) -> Any:
    """
    json.loads que converte as chaves indicadas em `nano_id_fields` para NanoID,
    em qualquer nível de aninhamento.
    """
    fields = frozenset(nano_id_fields or ())
    if not fields:
        return json.loads(data)

    def _hook(obj: dict) -> dict:
        for key in fields.intersection(obj):
            obj[key] = decode_nano_id(obj[key])
        return obj

    return json.loads(data, object_hook=_hook)
