# src/release_values/core/config/__init__.py

"""
Camada de configuração do Release Values.

Este pacote contém as estruturas e utilitários responsáveis por carregar
values specs, mesclar documentos de values e identificar o documento
composto.

Responsabilidades do pacote:
    - Carregamento de values specs (YAML/JSON) em tipos explícitos
    - Deep-merge determinístico de documentos (precedência da direita)
    - Geração de hash canônico para rastreabilidade

Princípios fundamentais:
    - Nenhuma heurística implícita durante merge
    - Overrides são sempre explícitos
    - A mesma entrada sempre produz o mesmo documento final

Limites explícitos:
    - Não busca fontes externas
    - Não valida schema do documento composto
"""
