from typing import Type
from pydantic import BaseModel

SCHEMA_REGISTRY : dict[str, dict[str, Type[BaseModel]]] = {}


def register(module_name, name):
    def wrapper(cls):
        SCHEMA_REGISTRY.setdefault(module_name, {})
        SCHEMA_REGISTRY[module_name][name] = cls
        return cls
    return wrapper


def load_schema(module_name: str, version: str) -> Type[BaseModel]:
    return SCHEMA_REGISTRY[module_name][version]


def load_max_schema(module_name: str) -> Type[BaseModel]:
    max_version = max(map(_parse_version, SCHEMA_REGISTRY[module_name].keys()))
    return load_schema(module_name, _format_version(max_version))


def _parse_version(version: str) -> int:
    return int(version.lstrip('v'))

def _format_version(version: int) -> str:
    return f'v{version}'
