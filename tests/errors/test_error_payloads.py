# tests/errors/test_error_payloads.py
"""
Testes do mapeamento de exceções de composição para payloads canônicos.

Os testes asseguram que:
- cada exceção expõe um `kind` estável do catálogo
- `to_payload()` produz um ValuesErrorPayload serializável
- `details` e `hint` são preservados sem perda
"""

import json

import pytest

try:
    from release_values.core import errors
    from release_values.core.exceptions import (
        DecodeFailed,
        MalformedPath,
        MissingOverrideValue,
        SetFailed,
        SourceFetchFailed,
        TypeConflict,
        ValuesError,
    )
except Exception as e:  # noqa: BLE001
    errors = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing error catalog. Implement:\n"
            "- src/release_values/core/errors.py (ValuesErrorPayload, kinds)\n"
            "- src/release_values/core/exceptions.py (ValuesError hierarchy)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_every_kind_has_one_exception():
    _require_imports()
    classes = [MalformedPath, TypeConflict, SourceFetchFailed, DecodeFailed, MissingOverrideValue, SetFailed]
    assert sorted(cls.kind for cls in classes) == sorted(errors.ERROR_KINDS)
    assert all(issubclass(cls, ValuesError) for cls in classes)


def test_payload_is_serializable():
    _require_imports()
    exc = MissingOverrideValue(
        "missing value for --set",
        details={"name": "image.tag", "position": 0},
        hint="Defina `value`.",
    )
    payload = exc.to_payload().to_dict()
    assert payload == {
        "type": "MISSING_OVERRIDE_VALUE",
        "message": "missing value for --set",
        "details": {"name": "image.tag", "position": 0},
        "hint": "Defina `value`.",
    }
    json.dumps(payload)


def test_str_is_message_and_details_default_empty():
    _require_imports()
    exc = DecodeFailed("invalid YAML")
    assert str(exc) == "invalid YAML"
    assert exc.details == {}
    assert exc.to_payload().hint is None
