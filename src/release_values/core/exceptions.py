"""
Release Values — Canonical Exceptions (v1)

Este módulo define exceções tipadas da composição de values.

Objetivo:
- Permitir que parser, mutator, merger e composer levantem exceções
  semânticas tipadas
- Facilitar o mapeamento determinístico para ValuesErrorPayload
- Evitar ValueError/RuntimeError genéricos em falhas de composição

Regras:
- Cada exceção corresponde a exatamente um tipo do catálogo em `errors`.
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Falhas internas são encadeadas via `raise ... from ...`, preservando a causa.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from . import errors
from .errors import ValuesErrorPayload


class ValuesError(Exception):
    """Base class para exceções da composição de values.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    kind: str = "VALUES_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ValuesErrorPayload:
        return ValuesErrorPayload(
            type=self.kind,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Paths de override
# ---------------------------------------------------------------------------

class MalformedPath(ValuesError):
    """Path de override com sintaxe inválida (ex.: índice negativo)."""

    kind = errors.MALFORMED_PATH


class TypeConflict(ValuesError):
    """Travessia encontrou um valor incompatível onde esperava um container."""

    kind = errors.TYPE_CONFLICT


# ---------------------------------------------------------------------------
# Fontes e decodificação
# ---------------------------------------------------------------------------

class SourceFetchFailed(ValuesError):
    """Falha ao obter o texto bruto de uma fonte externa."""

    kind = errors.SOURCE_FETCH_FAILED


class DecodeFailed(ValuesError):
    """Texto YAML de uma fonte ou do bloco inline não pôde ser decodificado."""

    kind = errors.DECODE_FAILED


# ---------------------------------------------------------------------------
# Overrides (--set)
# ---------------------------------------------------------------------------

class MissingOverrideValue(ValuesError):
    """Override resolvido para string vazia (valor não fornecido)."""

    kind = errors.MISSING_OVERRIDE_VALUE


class SetFailed(ValuesError):
    """Falha de parse ou mutação ao aplicar um override."""

    kind = errors.SET_FAILED
