"""
Модульные тесты для barcodegen/__init__.py
Тестирует метаданные, логирование, конфигурацию и публичный API.
"""

import json
import logging
import re
from pathlib import Path
from unittest import mock

import pytest

import barcodegen


class TestVersionMetadata:
    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", barcodegen.__version__)

    def test_version_components(self) -> None:
        expected = (
            f"{barcodegen.VERSION_MAJOR}."
            f"{barcodegen.VERSION_MINOR}."
            f"{barcodegen.VERSION_PATCH}"
        )
        assert barcodegen.__version__ == expected

    def test_metadata_attributes(self) -> None:
        for attr in ("__author__", "__description__", "__license__", "__python_requires__"):
            value = getattr(barcodegen, attr)
            assert isinstance(value, str) and value, f"{attr} должен быть непустой строкой"


class TestPublicAPI:
    def test_all_exports_exist(self) -> None:
        for name in barcodegen.__all__:
            assert hasattr(barcodegen, name), f"Имя '{name}' из __all__ не существует"

    def test_no_duplicate_exports(self) -> None:
        assert len(barcodegen.__all__) == len(set(barcodegen.__all__))

    def test_core_names_exported(self) -> None:
        for name in ("BarcodeGenerator", "EAN13", "Code128", "BarcodeError", "get_config"):
            assert name in barcodegen.__all__


class TestLogging:
    def test_get_logger_name_format(self) -> None:
        assert barcodegen.get_logger("plugin").name == "barcodegen.plugin"

    def test_get_logger_with_qualified_name(self) -> None:
        assert barcodegen.get_logger("barcodegen.sym.ean").name == "barcodegen.sym.ean"
        assert barcodegen.get_logger("barcodegen").name == "barcodegen"

    def test_get_logger_with_main(self) -> None:
        assert barcodegen.get_logger("__main__").name == "barcodegen.main"

    def test_get_logger_strips_leading_dots(self) -> None:
        assert barcodegen.get_logger(".relative").name == "barcodegen.relative"

    def test_package_logger_configured(self) -> None:
        package_logger = logging.getLogger("barcodegen")
        assert package_logger.handlers
        assert package_logger.propagate is False

    def test_setup_logging_idempotent(self) -> None:
        package_logger = logging.getLogger("barcodegen")
        before = list(package_logger.handlers)
        barcodegen._setup_logging()
        assert package_logger.handlers == before


class TestConfig:
    @pytest.fixture
    def package_logger(self):
        with mock.patch.object(logging.getLogger("barcodegen"), "warning") as warning:
            yield warning

    def test_missing_file_returns_defaults(self, tmp_path: Path, package_logger) -> None:
        config = barcodegen.load_config(tmp_path / "absent.json")
        assert config == barcodegen._DEFAULT_CONFIG
        package_logger.assert_not_called()

    def test_defaults_not_shared(self, tmp_path: Path) -> None:
        config = barcodegen.load_config(tmp_path / "absent.json")
        config["height"] = 1
        assert barcodegen._DEFAULT_CONFIG["height"] == 80

    def test_user_values_override(self, tmp_path: Path) -> None:
        path = tmp_path / "barcodegen.json"
        path.write_text(json.dumps({"height": 40, "image_format": "GIF"}), encoding="utf-8")
        config = barcodegen.load_config(path)
        assert config["height"] == 40
        assert config["image_format"] == "GIF"
        assert config["xdim"] == barcodegen._DEFAULT_CONFIG["xdim"]

    def test_unknown_keys_warn(self, tmp_path: Path, package_logger) -> None:
        path = tmp_path / "barcodegen.json"
        path.write_text(json.dumps({"colour": "red"}), encoding="utf-8")
        barcodegen.load_config(path)
        package_logger.assert_called_once()
        assert "colour" in package_logger.call_args[0][0]

    def test_invalid_json(self, tmp_path: Path, package_logger) -> None:
        path = tmp_path / "barcodegen.json"
        path.write_text("{not json", encoding="utf-8")
        assert barcodegen.load_config(path) == barcodegen._DEFAULT_CONFIG
        package_logger.assert_called_once()

    def test_non_object_json(self, tmp_path: Path, package_logger) -> None:
        path = tmp_path / "barcodegen.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert barcodegen.load_config(path) == barcodegen._DEFAULT_CONFIG
        package_logger.assert_called_once()

    def test_reload_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(barcodegen, "_config", barcodegen.get_config())
        path = tmp_path / "barcodegen.json"
        path.write_text(json.dumps({"xdim": 3}), encoding="utf-8")
        reloaded = barcodegen.reload_config(path)
        assert reloaded["xdim"] == 3
        assert barcodegen.get_config() is reloaded

    def test_wrong_type_keeps_default(self, tmp_path: Path, package_logger) -> None:
        path = tmp_path / "barcodegen.json"
        path.write_text(json.dumps({"height": "tall", "xdim": 2, "svg_xmlns": 1}), encoding="utf-8")
        config = barcodegen.load_config(path)
        assert config["height"] == 80
        assert config["xdim"] == 2
        assert config["svg_xmlns"] is True
        assert package_logger.call_count == 2


class TestParseLevel:
    @pytest.mark.parametrize(
        "name,expected",
        [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("error", logging.ERROR)],
    )
    def test_known(self, name: str, expected: int) -> None:
        assert barcodegen._parse_level(name) == expected

    def test_unknown(self) -> None:
        assert barcodegen._parse_level("LOUD") is None
