# src/release_values/core/__init__.py
"""
Core do Release Values.

Este pacote contém a implementação canônica da composição de values,
independente de controllers, API ou rede.

Componentes principais:
    - path     → parser de paths de override e mutação in-place de documentos
    - config   → deep-merge, hashing e carregamento de values specs
    - sources  → referências a ConfigMaps/Secrets e resolver em memória
    - codec    → decodificação e serialização YAML
    - composer → composição final (valuesFrom → values → set)
    - context  → log estruturado de eventos da composição

Princípios fundamentais:
    - Nenhuma decisão silenciosa: toda falha é tipada e propagada
    - Nenhum estado global entre composições

Limites explícitos:
    - Não agenda nem repete composições
    - Não persiste o documento composto
"""
