"""
Exceções canônicas da camada de configuração do Release Values.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento e a validação estrutural de um values spec (o documento
que declara `valuesFrom`, `values` e `set`).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa falha de composição
      (essas vivem em `release_values.core.exceptions`)
"""


class ConfigError(Exception):
    """
    Exceção base para erros de carregamento de values spec.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre spec inválido e falha de composição
    """


class SpecNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de values spec não existe.

    Limites explícitos:
        - Não tenta inferir ou criar um spec vazio automaticamente
    """


class UnsupportedSpecFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidSpecRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do spec não é um dicionário.
    """


class InvalidSpecError(ConfigError):
    """
    Exceção levantada quando um campo do spec possui tipo ou forma inválida.

    Exemplos:
        - entrada de `set` sem `name`
        - `value` não textual (overrides são sempre strings)
        - `valueFrom` sem seletor, ou com dois seletores ao mesmo tempo
    """
