# tests/conftest.py
"""
Fixtures compartilhados para testes do Release Values.

Este módulo define fixtures reutilizáveis que fornecem:
- textos YAML de fontes `valuesFrom` e do bloco inline
- um resolver em memória com ConfigMaps e Secrets determinísticos
- um contexto de composição isolado (ComposeContext)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Nenhuma fixture realiza I/O de rede ou filesystem
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Dados retornados são determinísticos e isolados por teste
"""

import pytest


@pytest.fixture
def base_values_yaml() -> str:
    """
    Fixture que fornece o YAML de uma fonte `valuesFrom` típica.

    Returns:
        str: Conteúdo YAML de values base de um chart.
    """
    return """\
replicaCount: 1
image:
  repository: nginx
  tag: "1.25"
service:
  type: ClusterIP
  ports:
    - 80
"""


@pytest.fixture
def env_values_yaml() -> str:
    """Fixture com o YAML de uma fonte de ambiente (sobrepõe a base)."""
    return """\
replicaCount: 3
image:
  tag: "1.26"
service:
  ports:
    - 8080
"""


@pytest.fixture
def resolver(base_values_yaml, env_values_yaml):
    """
    Fixture que fornece um `MappingSourceResolver` com objetos em memória.

    Objetos disponíveis:
        - configmap apps/base   → chave padrão "values.yaml"
        - configmap apps/env    → chave customizada "prod.yaml"
        - configmap apps/tags   → chave padrão "value"
        - secret    apps/creds  → chave "password" (bytes)
        - configmap apps/blank  → chave "value" vazia
    """
    from release_values.core.sources import MappingSourceResolver

    return MappingSourceResolver(
        config_maps={
            ("apps", "base"): {"values.yaml": base_values_yaml},
            ("apps", "env"): {"prod.yaml": env_values_yaml},
            ("apps", "tags"): {"value": "2.0.1"},
            ("apps", "blank"): {"value": ""},
        },
        secrets={
            ("apps", "creds"): {"password": b"s3cr3t"},
        },
    )


@pytest.fixture
def compose_ctx():
    """Fixture que fornece um ComposeContext com identificador fixo."""
    from release_values.core.context import ComposeContext

    return ComposeContext(compose_id="compose_test_001", created_at="2026-01-01T00:00:00+00:00")


@pytest.fixture
def literal_fetch():
    """
    Fixture que fornece um `fetch` trivial: a fonte é identificada pelo
    nome do ConfigMap e o texto retornado é o próprio conteúdo mapeado.
    """

    def _make(texts: dict):
        def _fetch(ref, default_key):
            return texts[ref.config_map_key_ref.name]

        return _fetch

    return _make
