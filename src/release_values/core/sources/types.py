# src/release_values/core/sources/types.py
"""
Tipos canônicos de fontes e overrides de values.

Este módulo define as estruturas que descrevem *de onde* vêm os values
de uma release, sem realizar nenhuma busca:

    - DataKeySelector → referência a uma chave de ConfigMap/Secret
    - ValueFromSource → uma fonte externa (ConfigMap ou Secret)
    - SetOverride     → um override `--set` (literal ou via fonte)
    - ValuesSpec      → a declaração completa (valuesFrom + values + set)

Constantes de chave padrão:
    - DEFAULT_VALUES_FROM_KEY ("values.yaml") para fontes `valuesFrom`
    - DEFAULT_SET_KEY ("value") para overrides com `valueFrom`

Invariantes:
    - Tipos não executam I/O
    - `values` é sempre texto YAML bruto (pode ser vazio)
    - A ordem das listas define a precedência da composição
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional


DEFAULT_VALUES_FROM_KEY = "values.yaml"
DEFAULT_SET_KEY = "value"


@dataclass(frozen=True)
class DataKeySelector:
    """Seleciona uma chave de dados de um objeto nomeado (ConfigMap/Secret).

    Quando `key` é vazio, o chamador decide a chave padrão.
    Quando `optional` é verdadeiro, objeto ou chave ausentes resolvem
    para string vazia em vez de erro.
    """

    name: str
    namespace: str = ""
    key: str = ""
    optional: bool = False

    def resolve_key(self, default_key: str) -> str:
        return self.key or default_key


@dataclass(frozen=True)
class ValueFromSource:
    """Referência a uma fonte externa de texto bruto."""

    config_map_key_ref: Optional[DataKeySelector] = None
    secret_key_ref: Optional[DataKeySelector] = None

    def describe(self) -> str:
        if self.config_map_key_ref is not None:
            ref = self.config_map_key_ref
            return f"configmap {ref.namespace}/{ref.name}"
        if self.secret_key_ref is not None:
            ref = self.secret_key_ref
            return f"secret {ref.namespace}/{ref.name}"
        return "empty source"


@dataclass(frozen=True)
class SetOverride:
    """Um override `--set`: destino `name` e valor literal ou via fonte.

    Quando `value_from` está definido, ele tem precedência sobre `value`.
    """

    name: str
    value: str = ""
    value_from: Optional[ValueFromSource] = None


@dataclass
class ValuesSpec:
    """Declaração completa dos values de uma release."""

    values_from: List[ValueFromSource] = field(default_factory=list)
    values: str = ""
    set: List[SetOverride] = field(default_factory=list)


# fetch(ref, default_key) -> texto bruto
FetchFn = Callable[[ValueFromSource, str], str]
