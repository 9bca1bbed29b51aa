# src/release_values/core/composer.py
"""
Composer canônico de values de uma release.

Este módulo produz o documento final de values a partir de um
`ValuesSpec`, na mesma ordem de precedência do helm:

    1. `valuesFrom`: cada fonte é buscada (chave padrão "values.yaml"),
       decodificada e mesclada na ordem da lista
    2. `values`: o bloco inline é decodificado e mesclado por último,
       vencendo todas as fontes `valuesFrom`
    3. `set`: cada override é aplicado via path, na ordem da lista,
       com a maior precedência de todas

Política de overrides (v1):
    - `valueFrom` tem precedência sobre o literal `value`
    - o texto de `valueFrom` (chave padrão "value") é usado como está,
      sem decodificação YAML
    - valor resolvido vazio é tratado como "não fornecido" e gera
      `MissingOverrideValue`; um valor vazio desejado não é expressável
    - o valor é sempre escrito como string (sem coerção de tipo)

Política de erros (v1):
    - busca → `SourceFetchFailed`
    - decodificação → `DecodeFailed`
    - parse/mutação de override → `SetFailed` (causa encadeada)
    - qualquer falha aborta a composição; nenhum resultado parcial

Invariantes:
    - O resultado depende apenas da ordem das listas do spec
    - Nenhum estado é mantido entre chamadas
    - Valores de overrides nunca são registrados no log de eventos
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from .codec import decode_document
from .config.hashing import compute_values_hash
from .config.merge import merge_maps
from .context import ComposeContext
from .exceptions import (
    DecodeFailed,
    MalformedPath,
    MissingOverrideValue,
    SetFailed,
    SourceFetchFailed,
    TypeConflict,
)
from .path import set_value
from .sources.types import (
    DEFAULT_SET_KEY,
    DEFAULT_VALUES_FROM_KEY,
    FetchFn,
    ValueFromSource,
    ValuesSpec,
)


Document = Dict[str, Any]
DecodeFn = Callable[[str], Document]


def _fetch(
    fetch: FetchFn,
    source: ValueFromSource,
    default_key: str,
    ctx: ComposeContext,
    *,
    stage: str,
    position: int,
) -> str:
    try:
        raw = fetch(source, default_key)
    except SourceFetchFailed as e:
        ctx.log(stage=stage, level="ERROR", message=str(e), position=position, kind=e.kind)
        raise
    except Exception as e:  # noqa: BLE001
        ctx.log(stage=stage, level="ERROR", message=str(e), position=position, kind=SourceFetchFailed.kind)
        raise SourceFetchFailed(
            f"failed to get value from source: {e}",
            details={"stage": stage, "position": position, "source": source.describe()},
        ) from e

    if not isinstance(raw, str):
        ctx.log(
            stage=stage,
            level="ERROR",
            message=f"source returned {type(raw).__name__}, expected text",
            position=position,
            kind=SourceFetchFailed.kind,
        )
        raise SourceFetchFailed(
            f"source returned {type(raw).__name__}, expected text",
            details={"stage": stage, "position": position, "source": source.describe()},
        )
    return raw


def _decode(decode: DecodeFn, raw: str, ctx: ComposeContext, *, stage: str, **where: Any) -> Document:
    try:
        document = decode(raw)
    except DecodeFailed as e:
        ctx.log(stage=stage, level="ERROR", message=str(e), kind=e.kind, **where)
        raise
    except Exception as e:  # noqa: BLE001
        ctx.log(stage=stage, level="ERROR", message=str(e), kind=DecodeFailed.kind, **where)
        raise DecodeFailed(
            f"failed to unmarshal desired values: {e}",
            details={"stage": stage, **where},
        ) from e

    if not isinstance(document, dict):
        ctx.log(
            stage=stage,
            level="ERROR",
            message=f"root is {type(document).__name__}, not a map",
            kind=DecodeFailed.kind,
            **where,
        )
        raise DecodeFailed(
            f"failed to unmarshal desired values: root is {type(document).__name__}, not a map",
            details={"stage": stage, **where},
        )
    return document


def compose_values(
    spec: ValuesSpec,
    fetch: FetchFn,
    *,
    decode: DecodeFn = decode_document,
    ctx: Optional[ComposeContext] = None,
) -> Document:
    """
    Compõe o documento final de values descrito por `spec`.

    Args:
        spec (ValuesSpec): Fontes, bloco inline e overrides.
        fetch (FetchFn): Colaborador que resolve uma fonte em texto bruto.
        decode (DecodeFn): Colaborador que decodifica texto YAML.
        ctx (Optional[ComposeContext]): Contexto de eventos; criado se omitido.

    Returns:
        Document: Documento composto, novo a cada chamada.

    Raises:
        SourceFetchFailed: Se uma fonte não puder ser obtida.
        DecodeFailed: Se uma fonte ou o bloco inline não for YAML válido.
        MissingOverrideValue: Se um override resolver para string vazia.
        SetFailed: Se um override não puder ser aplicado.
    """
    if ctx is None:
        ctx = ComposeContext()

    base: Document = {}

    for position, source in enumerate(spec.values_from):
        raw = _fetch(fetch, source, DEFAULT_VALUES_FROM_KEY, ctx, stage="values_from", position=position)
        if raw == "":
            ctx.add_warning(
                stage="values_from",
                message=f"{source.describe()} resolved to empty values",
            )
        current = _decode(decode, raw, ctx, stage="values_from", position=position)
        base = merge_maps(base, current)
        ctx.log(
            stage="values_from",
            level="INFO",
            message="source merged",
            position=position,
            source=source.describe(),
            keys=list(current),
        )

    inline = _decode(decode, spec.values or "", ctx, stage="values")
    base = merge_maps(base, inline)
    ctx.log(stage="values", level="INFO", message="inline values merged", keys=list(inline))

    for position, override in enumerate(spec.set):
        value = override.value
        if override.value_from is not None:
            value = _fetch(fetch, override.value_from, DEFAULT_SET_KEY, ctx, stage="set", position=position)

        if value == "":
            ctx.log(
                stage="set",
                level="ERROR",
                message="missing value for --set",
                position=position,
                name=override.name,
                kind=MissingOverrideValue.kind,
            )
            raise MissingOverrideValue(
                "missing value for --set",
                details={"name": override.name, "position": position},
                hint="Defina `value` ou aponte `valueFrom` para uma chave não vazia.",
            )

        try:
            set_value(override.name, base, value)
        except (MalformedPath, TypeConflict) as e:
            ctx.log(
                stage="set",
                level="ERROR",
                message=str(e),
                position=position,
                name=override.name,
                kind=e.kind,
            )
            raise SetFailed(
                f"failed parsing --set data: {e}",
                details={"name": override.name, "position": position, "cause": e.kind},
            ) from e

        ctx.log(stage="set", level="INFO", message="override applied", position=position, name=override.name)

    ctx.log(
        stage="compose",
        level="INFO",
        message="values composed",
        values_hash=compute_values_hash(base),
    )
    return base
