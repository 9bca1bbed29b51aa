# src/release_values/core/sources/__init__.py

"""
Fontes de values do Release Values.

Este pacote descreve as referências externas (ConfigMaps e Secrets)
usadas por `valuesFrom` e `set[].valueFrom`, e fornece um resolver em
memória que implementa o colaborador `fetch` do composer.
"""

from .resolver import MappingSourceResolver
from .types import (
    DEFAULT_SET_KEY,
    DEFAULT_VALUES_FROM_KEY,
    DataKeySelector,
    FetchFn,
    SetOverride,
    ValueFromSource,
    ValuesSpec,
)

__all__ = [
    "DEFAULT_SET_KEY",
    "DEFAULT_VALUES_FROM_KEY",
    "DataKeySelector",
    "FetchFn",
    "MappingSourceResolver",
    "SetOverride",
    "ValueFromSource",
    "ValuesSpec",
]
