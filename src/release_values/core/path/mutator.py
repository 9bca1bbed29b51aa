# src/release_values/core/path/mutator.py
"""
Mutação de documentos endereçada por path.

Este módulo aplica um override `--set` sobre um documento: percorre
(ou cria) os containers intermediários descritos pelo path e escreve
um valor escalar (string) no segmento terminal.

Política de travessia (v1):
    - segmento sem índice: desce no dict existente ou cria `{}`
    - segmento com índice: obtém (ou cria) a lista, cresce até conter
      o índice e desce no dict do elemento (criando `{}` em slot vazio)
    - chave com valor `None` é tratada como ausente

Política do segmento terminal (v1):
    - sem índice: sobrescreve o valor existente, inclusive containers
    - com índice: obtém (ou cria) a lista, cresce e sobrescreve o elemento

Crescimento de listas:
    - elementos existentes mantêm seus índices
    - slots novos são preenchidos com `None` (nunca com string vazia)
    - escritas fora de ordem (ex.: índice 5 antes do 0) são válidas

Invariantes:
    - `root` é mutado in-place; nada é retornado
    - um valor escalar existente nunca é substituído por um container
      durante a travessia: isso é um `TypeConflict`

Limites explícitos:
    - Não realiza coerção de tipos (o valor é sempre escrito como string)
    - Não suporta escape de pontos em nomes de chave
    - Não é seguro para mutação concorrente do mesmo documento
    - Não limita o tamanho dos índices: `a[99999999999]` tenta alocar
      uma lista com esse número de slots antes de escrever o valor
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..exceptions import TypeConflict
from .parser import PathSegment, parse_path


Document = Dict[str, Any]


def _grow(items: List[Any], size: int) -> List[Any]:
    if len(items) < size:
        items.extend([None] * (size - len(items)))
    return items


def _existing_list(node: Document, segment: PathSegment) -> List[Any]:
    current = node.get(segment.name)
    if current is None:
        return []
    if not isinstance(current, list):
        raise TypeConflict(
            f"cannot index into '{segment}': value is {type(current).__name__}, not a list",
            details={"segment": str(segment), "found": type(current).__name__},
        )
    return current


def _traverse(node: Document, segment: PathSegment) -> Document:
    if segment.index is None:
        current = node.get(segment.name)
        if current is None:
            child: Document = {}
            node[segment.name] = child
            return child
        if not isinstance(current, dict):
            raise TypeConflict(
                f"cannot traverse '{segment}': value is {type(current).__name__}, not a map",
                details={"segment": str(segment), "found": type(current).__name__},
            )
        return current

    items = _grow(_existing_list(node, segment), segment.index + 1)
    element = items[segment.index]
    if element is None:
        element = {}
        items[segment.index] = element
    elif not isinstance(element, dict):
        raise TypeConflict(
            f"cannot traverse '{segment}': element is {type(element).__name__}, not a map",
            details={"segment": str(segment), "found": type(element).__name__},
        )
    node[segment.name] = items
    return element


def _assign(node: Document, segment: PathSegment, value: str) -> None:
    if segment.index is None:
        node[segment.name] = value
        return

    items = _grow(_existing_list(node, segment), segment.index + 1)
    items[segment.index] = value
    node[segment.name] = items


def set_value(path: str, root: Document, value: str) -> None:
    """
    Escreve `value` em `root` no endereço descrito por `path`.

    Args:
        path (str): Path de override (ex.: "containers[0].image.tag").
        root (Document): Documento mutado in-place.
        value (str): Valor escalar escrito no segmento terminal.

    Raises:
        MalformedPath: Se o path contiver um segmento inválido.
        TypeConflict: Se a travessia encontrar um escalar onde esperava
            um container.
    """
    segments = parse_path(path)
    node = root
    for segment in segments[:-1]:
        node = _traverse(node, segment)
    _assign(node, segments[-1], value)
