# src/release_values/core/context.py
"""
ComposeContext — contexto de observabilidade de uma composição.

Este módulo define o **ComposeContext**, a estrutura passada ao composer
para registrar, de forma estruturada, o que aconteceu em cada estágio
da composição (`values_from`, `values`, `set`, `compose`).

Princípios fundamentais:
- Logs são eventos estruturados, não texto livre
- Cada composição possui seu próprio contexto (nenhum estado global)
- Warnings são sinais não fatais e não interrompem a composição
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ComposeContext:
    """
    Contexto de execução de uma composição de values.

    Campos canônicos:
    - compose_id: identificador único da composição
    - created_at: timestamp UTC de criação do contexto
    - warnings: warnings por estágio
    - events: log estruturado de eventos
    """

    compose_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: str = field(default_factory=_utc_now)

    warnings: Dict[str, List[str]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "compose_id": self.compose_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": _utc_now(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)

    def events_for(self, stage: str) -> List[Dict[str, Any]]:
        return [ev for ev in self.events if ev["stage"] == stage]
