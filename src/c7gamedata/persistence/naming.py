"""Field-name casing for the persisted format.

Model ``to_dict`` forms use Python snake_case names; the file stores them in
camelCase (first letter lower-cased). Dicts in the persisted tree are records
of field names and are converted wholesale. The exception is a collection
keyed by game data (early saves stored unit prototypes keyed by name): the
fields named in ``data_keyed`` keep their mapping keys as written.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Any

_UPPER = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head[:1].lower() + head[1:] + "".join(part[:1].upper() + part[1:] for part in rest)


def to_snake_case(name: str) -> str:
    return _UPPER.sub("_", name).lower()


def camelize_keys(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {to_camel_case(k): camelize_keys(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [camelize_keys(v) for v in obj]
    return obj


def snakify_keys(obj: Any, data_keyed: AbstractSet[str] = frozenset()) -> Any:
    if isinstance(obj, dict):
        converted = {}
        for k, v in obj.items():
            name = to_snake_case(k)
            if name in data_keyed and isinstance(v, dict):
                converted[name] = {dk: snakify_keys(dv, data_keyed) for dk, dv in v.items()}
            else:
                converted[name] = snakify_keys(v, data_keyed)
        return converted
    if isinstance(obj, list):
        return [snakify_keys(v, data_keyed) for v in obj]
    return obj
