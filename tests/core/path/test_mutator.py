# tests/core/path/test_mutator.py
"""
Testes do mutator de documentos endereçado por path.

Este módulo valida `set_value`, responsável por aplicar overrides
`--set` sobre um documento, criando containers intermediários sob
demanda.

Os testes asseguram que:
- dicts intermediários são criados e reaproveitados
- listas crescem com `None` em slots não escritos
- escritas fora de ordem preservam elementos existentes
- o segmento terminal sobrescreve qualquer valor (last write wins)
- escalares encontrados durante a travessia geram TypeConflict

Invariantes:
    - O documento é mutado in-place
    - O valor é sempre escrito como string
"""

import pytest

try:
    from release_values.core.path.mutator import set_value
    from release_values.core.exceptions import MalformedPath, TypeConflict
except Exception as e:  # noqa: BLE001
    set_value = None
    MalformedPath = None
    TypeConflict = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing path mutator API. Implement:"
            "- src/release_values/core/path/mutator.py (set_value)"
            f"Import error: {_IMPORT_ERR}"
        )


def test_creates_nested_maps():
    _require_imports()
    doc = {}
    assert set_value("a.b.c", doc, "v") is None
    assert doc == {"a": {"b": {"c": "v"}}}


def test_reuses_existing_maps():
    _require_imports()
    doc = {"image": {"repository": "nginx", "tag": "1.25"}}
    set_value("image.tag", doc, "1.26")
    assert doc == {"image": {"repository": "nginx", "tag": "1.26"}}


def test_terminal_index_fills_placeholders():
    """
    Verifica que escrever em um índice além do fim preenche slots com None.

    Slots nunca escritos permanecem ausentes (None), não string vazia.
    """
    _require_imports()
    doc = {}
    set_value("list[2]", doc, "v")
    assert doc == {"list": [None, None, "v"]}


def test_out_of_order_index_writes():
    _require_imports()
    doc = {}
    set_value("list[5]", doc, "five")
    set_value("list[0]", doc, "zero")
    assert doc == {"list": ["zero", None, None, None, None, "five"]}


def test_terminal_index_overwrites_existing_element():
    _require_imports()
    doc = {"ports": ["80", "443"]}
    set_value("ports[1]", doc, "8443")
    assert doc == {"ports": ["80", "8443"]}


def test_traversal_index_creates_map_element():
    _require_imports()
    doc = {}
    set_value("containers[1].image.tag", doc, "latest")
    assert doc == {"containers": [None, {"image": {"tag": "latest"}}]}


def test_traversal_index_grows_existing_list_and_keeps_elements():
    _require_imports()
    doc = {"containers": [{"name": "app"}]}
    set_value("containers[0].image", doc, "nginx")
    set_value("containers[2].name", doc, "sidecar")
    assert doc == {
        "containers": [
            {"name": "app", "image": "nginx"},
            None,
            {"name": "sidecar"},
        ]
    }


def test_terminal_write_replaces_container():
    _require_imports()
    doc = {"a": {"b": "x"}}
    set_value("a", doc, "flat")
    assert doc == {"a": "flat"}


def test_null_key_is_treated_as_missing():
    _require_imports()
    doc = {"a": None, "l": None}
    set_value("a.b", doc, "v")
    set_value("l[1]", doc, "w")
    assert doc == {"a": {"b": "v"}, "l": [None, "w"]}


def test_value_is_written_as_string():
    _require_imports()
    doc = {}
    set_value("replicas", doc, "3")
    set_value("enabled", doc, "true")
    assert doc == {"replicas": "3", "enabled": "true"}


def test_scalar_in_traversal_is_type_conflict():
    """
    Verifica que um escalar existente não é substituído por um path mais profundo.
    """
    _require_imports()
    doc = {"a": "scalar"}
    with pytest.raises(TypeConflict):
        set_value("a.b", doc, "v")
    assert doc == {"a": "scalar"}


def test_indexing_a_non_list_is_type_conflict():
    _require_imports()
    with pytest.raises(TypeConflict):
        set_value("a[0].b", {"a": {"b": "x"}}, "v")
    with pytest.raises(TypeConflict):
        set_value("a[0]", {"a": "scalar"}, "v")


def test_scalar_list_element_in_traversal_is_type_conflict():
    _require_imports()
    with pytest.raises(TypeConflict) as excinfo:
        set_value("ports[0].number", {"ports": ["80"]}, "8080")
    assert excinfo.value.details["segment"] == "ports[0]"


def test_traversing_a_list_without_index_is_type_conflict():
    _require_imports()
    with pytest.raises(TypeConflict):
        set_value("ports.first", {"ports": ["80"]}, "v")
