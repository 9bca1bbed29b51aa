# src/release_values/core/config/loader.py
"""
Loader canônico de values spec do Release Values.

Este módulo carrega, a partir de um arquivo YAML ou JSON, a declaração
de values de uma release e a converte em um `ValuesSpec` tipado.

Formato do arquivo (v1):

    valuesFrom:
      - configMapKeyRef: {name: base, namespace: apps, key: values.yaml}
      - secretKeyRef: {name: creds, namespace: apps, optional: true}
    values:
      replicaCount: 2
    set:
      - name: image.tag
        value: "1.4.0"
      - name: auth.password
        valueFrom:
          secretKeyRef: {name: creds, namespace: apps, key: password}

Responsabilidades do módulo:
    - Carregar arquivos de spec em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz, tipos de campos)
    - Converter `values` (mapa ou texto) em texto YAML bruto

Invariantes:
    - O resultado é sempre um `ValuesSpec`
    - Overrides `set` carregam apenas valores textuais

Limites explícitos:
    - Não busca fontes externas
    - Não compõe values
    - Não valida schema do documento final
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import json

import yaml  # PyYAML

from ..codec import encode_document
from ..sources.types import (
    DataKeySelector,
    SetOverride,
    ValueFromSource,
    ValuesSpec,
)
from .errors import (
    InvalidSpecError,
    InvalidSpecRootTypeError,
    SpecNotFoundError,
    UnsupportedSpecFormatError,
)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de spec e valida sua estrutura básica.

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como dicionários vazios
        - Formatos não suportados geram erro explícito

    Raises:
        SpecNotFoundError: Se o arquivo não existir.
        UnsupportedSpecFormatError: Se o formato do arquivo não for suportado.
        InvalidSpecRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise SpecNotFoundError(f"Arquivo de values spec não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedSpecFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidSpecRootTypeError(
            f"Values spec root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _require_mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise InvalidSpecError(f"{where} deve ser dict, recebido: {type(value).__name__}")
    return value


def _require_list(value: Any, where: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidSpecError(f"{where} deve ser lista, recebido: {type(value).__name__}")
    return value


def _selector(data: Any, where: str) -> DataKeySelector:
    data = _require_mapping(data, where)

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise InvalidSpecError(f"{where}.name é obrigatório")

    namespace = data.get("namespace", "")
    key = data.get("key", "")
    optional = data.get("optional", False)
    if not isinstance(namespace, str) or not isinstance(key, str):
        raise InvalidSpecError(f"{where}.namespace e {where}.key devem ser strings")
    if not isinstance(optional, bool):
        raise InvalidSpecError(f"{where}.optional deve ser bool")

    return DataKeySelector(name=name, namespace=namespace, key=key, optional=optional)


def _value_from(data: Any, where: str) -> ValueFromSource:
    data = _require_mapping(data, where)

    cm = data.get("configMapKeyRef")
    secret = data.get("secretKeyRef")
    if (cm is None) == (secret is None):
        raise InvalidSpecError(
            f"{where} deve definir exatamente um de configMapKeyRef ou secretKeyRef"
        )

    if cm is not None:
        return ValueFromSource(config_map_key_ref=_selector(cm, f"{where}.configMapKeyRef"))
    return ValueFromSource(secret_key_ref=_selector(secret, f"{where}.secretKeyRef"))


def _set_override(data: Any, where: str) -> SetOverride:
    data = _require_mapping(data, where)

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise InvalidSpecError(f"{where}.name é obrigatório")

    value = data.get("value", "")
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise InvalidSpecError(
            f"{where}.value deve ser string, recebido: {type(value).__name__}"
        )

    value_from: Optional[ValueFromSource] = None
    if data.get("valueFrom") is not None:
        value_from = _value_from(data["valueFrom"], f"{where}.valueFrom")

    return SetOverride(name=name, value=value, value_from=value_from)


def _inline_values(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return encode_document(value) if value else ""
    raise InvalidSpecError(
        f"values deve ser dict ou texto YAML, recebido: {type(value).__name__}"
    )


def values_spec_from_dict(data: Dict[str, Any]) -> ValuesSpec:
    """
    Converte um mapa já decodificado em `ValuesSpec`.

    Args:
        data (Dict[str, Any]): Conteúdo do spec (chaves camelCase).

    Returns:
        ValuesSpec: Spec tipado.

    Raises:
        InvalidSpecRootTypeError: Se `data` não for um dicionário.
        InvalidSpecError: Se algum campo tiver tipo ou forma inválida.
    """
    if not isinstance(data, dict):
        raise InvalidSpecRootTypeError(
            f"Values spec root deve ser dict, recebido: {type(data).__name__}"
        )

    values_from = [
        _value_from(item, f"valuesFrom[{i}]")
        for i, item in enumerate(_require_list(data.get("valuesFrom"), "valuesFrom"))
    ]
    overrides = [
        _set_override(item, f"set[{i}]")
        for i, item in enumerate(_require_list(data.get("set"), "set"))
    ]

    return ValuesSpec(
        values_from=values_from,
        values=_inline_values(data.get("values")),
        set=overrides,
    )


def load_values_spec(path: str) -> ValuesSpec:
    """
    Carrega um values spec a partir de um arquivo YAML ou JSON.

    Args:
        path (str): Caminho para o arquivo de spec.

    Returns:
        ValuesSpec: Spec tipado.

    Raises:
        SpecNotFoundError: Se o arquivo não existir.
        UnsupportedSpecFormatError: Se o formato do arquivo não for suportado.
        InvalidSpecRootTypeError: Se o conteúdo não for um dicionário.
        InvalidSpecError: Se algum campo tiver tipo ou forma inválida.
    """
    return values_spec_from_dict(_load_file(Path(path)))
