# src/release_values/core/codec.py
"""
Codec YAML de documentos de values.

Este módulo converte texto YAML bruto em um documento genérico
(dict de chaves string) e serializa documentos compostos de volta
para YAML.

Política de decodificação (v1):
    - PyYAML `SafeLoader` (nenhuma tag arbitrária é construída)
    - documento vazio ou `null` → `{}`
    - raiz que não seja mapa → `DecodeFailed`
    - chaves não textuais são convertidas para string já na construção
      de cada mapa, em todos os níveis
      (`1` → "1", `true` → "true", `null` → "null")

Limites explícitos:
    - Não valida schema
    - Não converte tipos de valores escalares
"""

from __future__ import annotations

from typing import Any, Dict, Union

import yaml  # PyYAML

from .exceptions import DecodeFailed


def _key_to_str(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader que converte chaves para string durante a construção do mapa.

    A conversão acontece antes da inserção no dict: em Python `1 == True`,
    então converter depois colapsaria as chaves `1` e `true` em uma só.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> Dict[str, Any]:
        self.flatten_mapping(node)
        result: Dict[str, Any] = {}
        for key_node, value_node in node.value:
            key = _key_to_str(self.construct_object(key_node, deep=True))
            result[key] = self.construct_object(value_node, deep=deep)
        return result


def decode_document(raw: Union[str, bytes]) -> Dict[str, Any]:
    """
    Decodifica texto YAML em um documento.

    Args:
        raw (str | bytes): Texto YAML bruto.

    Returns:
        Dict[str, Any]: Documento decodificado (vazio para entrada vazia).

    Raises:
        DecodeFailed: Se o YAML for inválido ou a raiz não for um mapa.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeFailed("values text is not valid UTF-8") from e

    try:
        data = yaml.load(raw, Loader=_DocumentLoader)
    except yaml.YAMLError as e:
        raise DecodeFailed(
            f"invalid YAML: {e}",
            hint="Corrija a sintaxe YAML da fonte ou do bloco inline.",
        ) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise DecodeFailed(
            f"values root deve ser dict, recebido: {type(data).__name__}",
            details={"root_type": type(data).__name__},
        )

    return data


def encode_document(document: Dict[str, Any]) -> str:
    """Serializa um documento como YAML, preservando a ordem das chaves."""
    return yaml.safe_dump(
        document,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
