# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Release Values.

Este módulo garante apenas que:
- o ambiente de testes (pytest) está funcional
- o pacote raiz pode ser importado e expõe sua API pública

Limites explícitos:
    - Não testar lógica de composição
    - Não acumular asserts funcionais
"""


def test_smoke():
    """
    Smoke test mínimo do repositório: o namespace público importa sem falhas.
    """
    import release_values

    assert callable(release_values.compose_values)
    assert callable(release_values.set_value)
    assert callable(release_values.merge_maps)
