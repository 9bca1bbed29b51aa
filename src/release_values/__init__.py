# src/release_values/__init__.py
"""
Release Values — composição de values em camadas para releases helm.

Este pacote raiz define o namespace público do Release Values, que
compõe um documento final de values a partir de:

    - fontes `valuesFrom` (texto YAML obtido externamente)
    - um bloco inline de values (YAML)
    - overrides `set` endereçados por path (`a.b[0].c`)

seguindo a mesma semântica de `--values` / `--set` do helm.

Limites explícitos:
    - Não acessa API ou rede (a busca de fontes é um colaborador)
    - Não valida schema do documento resultante
    - Não renderiza charts nem instala releases
"""
# src/release_values/__init__.py
from .core.composer import compose_values
from .core.config.merge import merge_maps
from .core.context import ComposeContext
from .core.path import PathSegment, parse_path, parse_segment, set_value

__all__ = [
    "ComposeContext",
    "PathSegment",
    "compose_values",
    "merge_maps",
    "parse_path",
    "parse_segment",
    "set_value",
]
