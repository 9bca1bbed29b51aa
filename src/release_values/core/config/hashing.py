# src/release_values/core/config/hashing.py
"""
Hashing canônico de documentos de values.

Este módulo gera um hash determinístico do documento composto, usado
como identidade estrutural no log de composição.

Política de hashing (v1):
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Documentos estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - O hash é independente da ordem original das chaves

Limites explícitos:
    - Não persiste o hash
    - Não compõe nem valida documentos
"""


import json
import hashlib
from typing import Dict, Any


def compute_values_hash(document: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de um documento de values.

    Valores não serializáveis em JSON nativo (ex.: datas decodificadas
    pelo YAML) são convertidos via `str` antes do hashing.

    Args:
        document (Dict[str, Any]): Documento composto.

    Returns:
        str: Hash SHA-256 hexadecimal do documento.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(document, dict):
        raise TypeError(
            f"Documento para hashing deve ser dict, recebido: {type(document).__name__}"
        )

    canonical_json = json.dumps(
        document,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
