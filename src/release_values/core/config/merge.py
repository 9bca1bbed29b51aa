# src/release_values/core/config/merge.py
"""
Utilitário canônico de deep-merge de documentos de values.

Este módulo implementa a política de merge utilizada para empilhar as
fontes `valuesFrom` e o bloco inline de values, no mesmo modelo de
precedência do helm (`--values` aplicado da esquerda para a direita).

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total (sem merge elemento a elemento)
    - escalar     → sobrescrita direta
    - tipos diferentes → o valor da direita substitui, sem erro

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - O resultado não compartilha containers com os inputs

Invariantes:
    - merge_maps(a, {}) == a e merge_maps({}, a) == a
    - Chaves não sobrescritas são preservadas
    - O lado direito vence, exceto no aprofundamento dict + dict

Limites explícitos:
    - Não decodifica YAML
    - Não valida schema do documento
    - Não concatena listas
"""

from copy import deepcopy
from typing import Any, Dict

from ..exceptions import TypeConflict


def merge_maps(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza o deep-merge de dois documentos, com precedência de `b`.

    Listas nunca são mescladas elemento a elemento, mesmo quando os dois
    lados possuem listas na mesma chave: a lista de `b` substitui a de `a`.

    Args:
        a (Dict[str, Any]): Documento base.
        b (Dict[str, Any]): Documento de maior precedência.

    Returns:
        Dict[str, Any]: Novo documento resultante do merge.

    Raises:
        TypeConflict: Se algum dos lados não for um dicionário no nível raiz.
    """

    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeConflict(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(a).__name__} vs {type(b).__name__}",
            details={"left": type(a).__name__, "right": type(b).__name__},
        )

    result: Dict[str, Any] = deepcopy(a)

    for key, value in b.items():
        current = result.get(key)

        # dict -> merge recursivo
        if isinstance(value, dict) and isinstance(current, dict):
            result[key] = merge_maps(current, value)
            continue

        result[key] = deepcopy(value)

    return result
