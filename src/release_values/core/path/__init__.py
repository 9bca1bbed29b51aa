# src/release_values/core/path/__init__.py

"""
Endereçamento por path do Release Values.

Este pacote contém o parser de paths de override (`a.b[0].c`) e o
mutator que aplica um valor escalar em um documento a partir desse path.

Limites explícitos:
    - Não realiza merge de documentos
    - Não busca fontes externas
    - Não decodifica YAML
"""

from .mutator import set_value
from .parser import PathSegment, parse_path, parse_segment

__all__ = ["PathSegment", "parse_path", "parse_segment", "set_value"]
