# src/release_values/core/sources/resolver.py
"""
Resolver em memória de fontes `valueFrom`.

Este módulo fornece uma implementação de referência do colaborador
`fetch(ref, default_key) -> str` consumido pelo composer. Os objetos
(ConfigMaps e Secrets) são mantidos em dicionários indexados por
`(namespace, name)`; cada objeto é um mapa chave → texto.

Política de resolução (v1):
    - exatamente um seletor deve estar definido na fonte
    - a chave do seletor tem precedência sobre a chave padrão do chamador
    - dados de Secret em `bytes` são decodificados como UTF-8
    - objeto ou chave ausentes → "" se o seletor for `optional`,
      caso contrário `SourceFetchFailed`

Limites explícitos:
    - Não acessa API ou rede
    - Não faz cache entre chamadas
    - Não decodifica YAML
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple, Union

from ..exceptions import SourceFetchFailed
from .types import DataKeySelector, ValueFromSource


ObjectKey = Tuple[str, str]
ObjectData = Mapping[str, Union[str, bytes]]


class MappingSourceResolver:
    """Resolve fontes a partir de ConfigMaps e Secrets mantidos em memória."""

    def __init__(
        self,
        config_maps: Optional[Dict[ObjectKey, ObjectData]] = None,
        secrets: Optional[Dict[ObjectKey, ObjectData]] = None,
    ) -> None:
        self._config_maps: Dict[ObjectKey, ObjectData] = dict(config_maps or {})
        self._secrets: Dict[ObjectKey, ObjectData] = dict(secrets or {})

    def fetch(self, ref: ValueFromSource, default_key: str) -> str:
        """
        Retorna o texto bruto apontado por `ref`.

        Args:
            ref (ValueFromSource): Fonte a resolver.
            default_key (str): Chave usada quando o seletor não define uma.

        Returns:
            str: Texto bruto (vazio para fontes opcionais ausentes).

        Raises:
            SourceFetchFailed: Se a fonte for inválida ou, não sendo
                opcional, o objeto ou a chave não existirem.
        """
        has_cm = ref.config_map_key_ref is not None
        has_secret = ref.secret_key_ref is not None
        if has_cm == has_secret:
            raise SourceFetchFailed(
                "source must set exactly one of configMapKeyRef or secretKeyRef",
                details={"source": ref.describe()},
            )

        if has_cm:
            return self._lookup("configmap", self._config_maps, ref.config_map_key_ref, default_key)
        return self._lookup("secret", self._secrets, ref.secret_key_ref, default_key)

    def _lookup(
        self,
        kind: str,
        store: Dict[ObjectKey, ObjectData],
        selector: DataKeySelector,
        default_key: str,
    ) -> str:
        key = selector.resolve_key(default_key)
        details = {
            "kind": kind,
            "namespace": selector.namespace,
            "name": selector.name,
            "key": key,
        }

        data = store.get((selector.namespace, selector.name))
        if data is None:
            if selector.optional:
                return ""
            raise SourceFetchFailed(
                f"{kind} {selector.namespace}/{selector.name} not found",
                details=details,
            )

        if key not in data:
            if selector.optional:
                return ""
            raise SourceFetchFailed(
                f"key '{key}' not found in {kind} {selector.namespace}/{selector.name}",
                details=details,
            )

        raw = data[key]
        if isinstance(raw, bytes):
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise SourceFetchFailed(
                    f"{kind} {selector.namespace}/{selector.name} key '{key}' is not valid UTF-8",
                    details=details,
                ) from e
        return raw
