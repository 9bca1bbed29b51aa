# src/release_values/core/path/parser.py
"""
Parser canônico de paths de override.

Este módulo converte um path textual no formato `segment(.segment)*`,
onde `segment := name | name[índice]`, em uma sequência ordenada de
segmentos tipados (`PathSegment`).

Exemplos:
    - "image.tag"                          → [image, tag]
    - "containers[0].resources.limits.cpu" → [containers[0], resources, limits, cpu]

Política de parse (v1):
    - o path é dividido em `.` (não existe escape de pontos literais)
    - um token no formato `<nome>[<dígitos>]` gera um segmento indexado
    - qualquer outro token é tratado como nome literal, sem índice
    - conteúdo de colchetes que não casa com dígitos é literal
      (ex.: "a[]", "a[x]" e "a[-1]" são nomes, não erros)

Invariantes:
    - Um path sempre possui ao menos um segmento
    - Índices nunca são negativos
    - O regex é compilado uma única vez e não mantém estado
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import MalformedPath


PATH_SEPARATOR = "."

_SEGMENT_PATTERN = re.compile(r"(.+)\[([0-9]+)\]")


@dataclass(frozen=True)
class PathSegment:
    """
    Um salto de um path de override.

    Campos:
    - name: chave no nó atual
    - index: quando presente, o valor em `name` é uma lista e o salto
      acessa (ou cria) o elemento nesse índice
    """

    name: str
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.index is not None and self.index < 0:
            raise MalformedPath(
                f"negative {self.index} index not allowed",
                details={"name": self.name, "index": self.index},
                hint="Use apenas índices não negativos em paths de --set.",
            )

    @property
    def indexed(self) -> bool:
        return self.index is not None

    def __str__(self) -> str:
        if self.index is None:
            return self.name
        return f"{self.name}[{self.index}]"


def parse_segment(raw: str) -> PathSegment:
    """
    Converte um token (sem pontos) em um `PathSegment`.

    Args:
        raw (str): Token delimitado por pontos.

    Returns:
        PathSegment: Segmento com nome e índice opcional.

    Raises:
        MalformedPath: Se o índice resultante for negativo.
    """
    match = _SEGMENT_PATTERN.fullmatch(raw)
    if match is None:
        return PathSegment(name=raw)
    return PathSegment(name=match.group(1), index=int(match.group(2)))


def parse_path(path: str) -> List[PathSegment]:
    """Divide `path` em `.` e converte cada token em um segmento."""
    return [parse_segment(token) for token in path.split(PATH_SEPARATOR)]
