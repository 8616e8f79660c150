# tests/modules/purchasing/presentation/test_cli.py
"""
Tests para: CLI (Presentation)
Tipo: Integración ligera (argv -> stdout / exit code)
"""
import json

import pytest

from purchase_packages.modules.purchasing.presentation.cli import main


@pytest.fixture(autouse=True)
def _isolate_logging(restore_root_logger):
    """main() reconfigura el logging raíz."""
    yield


@pytest.fixture
def offering_file(tmp_path):
    payload = {
        "offering_identifier": "main",
        "products": [
            {
                "product_identifier": "com.myapp.monthly",
                "price": "4.99",
                "currency_code": "USD",
                "introductory_price": "0.99",
            },
            {"product_identifier": "com.myapp.gold", "price": 49.99},
        ],
        "packages": [
            {"identifier": "$rc_monthly", "platform_product_identifier": "com.myapp.monthly"},
            {"identifier": "gold", "platform_product_identifier": "com.myapp.gold"},
            {"identifier": "$rc_weekly", "platform_product_identifier": "com.myapp.ghost"},
        ],
    }
    path = tmp_path / "offering.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


# === classify ===


def test_classify_json_output(capsys):
    # Act
    main(["classify", "$rc_monthly", "$rc_decade", "com.myapp.gold_package", "--json"])

    # Assert
    rows = json.loads(capsys.readouterr().out)
    assert rows == [
        {"value": "$rc_monthly", "package_type": "MONTHLY", "canonical_string": "$rc_monthly"},
        {"value": "$rc_decade", "package_type": "UNKNOWN", "canonical_string": None},
        {
            "value": "com.myapp.gold_package",
            "package_type": "CUSTOM",
            "canonical_string": None,
        },
    ]


def test_classify_empty_string_is_custom(capsys):
    main(["classify", "", "--json"])

    rows = json.loads(capsys.readouterr().out)
    assert rows[0]["package_type"] == "CUSTOM"


def test_classify_table_output(capsys):
    main(["classify", "$rc_annual"])

    out = capsys.readouterr().out
    assert "ANNUAL" in out
    assert "$rc_annual" in out


# === canonical ===


def test_canonical_lists_seven_types(capsys):
    main(["canonical", "--json"])

    rows = json.loads(capsys.readouterr().out)
    assert [row["package_type"] for row in rows] == [
        "LIFETIME",
        "ANNUAL",
        "SIX_MONTH",
        "THREE_MONTH",
        "TWO_MONTH",
        "MONTHLY",
        "WEEKLY",
    ]
    assert all(row["value"] == row["canonical_string"] for row in rows)


# === build ===


def test_build_offering_from_payload(offering_file, capsys):
    """
    Given: Un payload con 3 paquetes, uno sin producto
    When: Se construye la oferta
    Then: Se listan 2 paquetes con precios localizados
    """
    main(["build", str(offering_file), "--json"])

    rows = json.loads(capsys.readouterr().out)
    assert [row["identifier"] for row in rows] == ["$rc_monthly", "gold"]
    assert rows[0]["package_type"] == "MONTHLY"
    assert rows[0]["price"] == "$4.99"
    assert rows[0]["introductory_price"] == "$0.99"
    assert rows[1]["package_type"] == "CUSTOM"
    assert rows[1]["price"] == "$49.99"
    assert rows[1]["introductory_price"] is None
    assert {row["offering_identifier"] for row in rows} == {"main"}


def test_build_missing_file_exits_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["build", str(tmp_path / "ghost.json")])

    assert exc.value.code == 1
    assert "no existe" in capsys.readouterr().err


def test_build_invalid_json_exits_2(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["build", str(path)])

    assert exc.value.code == 2
    assert "JSON inválido" in capsys.readouterr().err


def test_build_malformed_package_exits_2(tmp_path, capsys):
    path = tmp_path / "bad_package.json"
    path.write_text(
        json.dumps({"offering_identifier": "main", "packages": [{"identifier": "gold"}]}),
        encoding="utf-8",
    )

    with pytest.raises(SystemExit) as exc:
        main(["build", str(path)])

    assert exc.value.code == 2


def test_build_invalid_price_exits_2(tmp_path):
    path = tmp_path / "bad_price.json"
    path.write_text(
        json.dumps({"products": [{"product_identifier": "p", "price": "gratis"}]}),
        encoding="utf-8",
    )

    with pytest.raises(SystemExit) as exc:
        main(["build", str(path)])

    assert exc.value.code == 2


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 2


def test_build_non_utf8_file_exits_2(tmp_path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"offering_identifier": "m\xff"}')

    with pytest.raises(SystemExit) as exc:
        main(["build", str(path)])

    assert exc.value.code == 2
    assert "JSON inválido" in capsys.readouterr().err


@pytest.mark.parametrize(
    "payload",
    [
        {"products": 5},
        {"packages": 5},
        {"packages": {"identifier": "gold"}},
        {"offering_identifier": 7},
        {"products": [{"product_identifier": 3, "price": "1.99"}]},
        {"products": [{"price": "1.99"}]},
        {"products": ["com.myapp.monthly"]},
        {"products": [{"product_identifier": "p", "price": "Infinity"}]},
        {"products": [{"product_identifier": "p", "price": "1", "currency_code": 840}]},
    ],
)
def test_build_malformed_payload_shapes_exit_2(tmp_path, capsys, payload):
    """Cualquier payload mal formado es un error de catálogo, nunca un error crítico."""
    path = tmp_path / "malformed.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["build", str(path)])

    assert exc.value.code == 2
    assert "Error de Catálogo" in capsys.readouterr().err


def test_build_large_price_is_rendered(tmp_path, capsys):
    path = tmp_path / "large.json"
    path.write_text(
        json.dumps(
            {
                "offering_identifier": "main",
                "products": [{"product_identifier": "p", "price": "1e30"}],
                "packages": [{"identifier": "$rc_lifetime", "platform_product_identifier": "p"}],
            }
        ),
        encoding="utf-8",
    )

    main(["build", str(path), "--json"])

    rows = json.loads(capsys.readouterr().out)
    assert rows[0]["price"] == "$1" + "0" * 30 + ".00"
