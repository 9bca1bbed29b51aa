"""
Release Values — Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do Release Values.

Erros de composição fazem parte do contrato operacional do sistema,
devendo ser:
- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhum documento parcial acompanha um erro: o payload descreve apenas
o estágio que falhou e o motivo.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValuesErrorPayload:
    """
    Payload canônico de erro do Release Values.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Paths de override
MALFORMED_PATH = "MALFORMED_PATH"
TYPE_CONFLICT = "TYPE_CONFLICT"

# Fontes e decodificação
SOURCE_FETCH_FAILED = "SOURCE_FETCH_FAILED"
DECODE_FAILED = "DECODE_FAILED"

# Overrides (--set)
MISSING_OVERRIDE_VALUE = "MISSING_OVERRIDE_VALUE"
SET_FAILED = "SET_FAILED"

ERROR_KINDS = (
    MALFORMED_PATH,
    TYPE_CONFLICT,
    SOURCE_FETCH_FAILED,
    DECODE_FAILED,
    MISSING_OVERRIDE_VALUE,
    SET_FAILED,
)
