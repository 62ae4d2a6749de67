"""Tests for the command-line entry point."""

import pytest

from profsearch.main import build_parser, main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every CLI test where no default config file exists."""
    monkeypatch.chdir(tmp_path)


def output_lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestParser:
    """Argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_repeatable_options(self):
        args = build_parser().parse_args(["suggest", "ucv", "--option", "UCV", "--option", "UCAB"])
        assert args.options == ["UCV", "UCAB"]


class TestStandaloneCommands:
    """Commands that do not need a catalog."""

    def test_normalize(self, capsys):
        assert main(["normalize", "  Ingeniería   Civil! "]) == 0
        assert output_lines(capsys) == ["ingenieria civil"]

    def test_distance(self, capsys):
        assert main(["distance", "Jaun Pérez", "juan perez"]) == 0
        assert output_lines(capsys) == ["2"]

    def test_suggest_with_options(self, capsys):
        assert main(["suggest", "ucv", "--option", "UCV", "--option", "UCAB", "--option", "ucv-maracay"]) == 0
        assert output_lines(capsys) == ["UCV", "ucv-maracay", "UCAB"]

    def test_suggest_explain(self, capsys):
        assert main(["suggest", "ucv", "--option", "UCV", "--option", "UCAB", "--explain"]) == 0
        lines = output_lines(capsys)
        assert lines[:2] == ["UCV", "UCAB"]
        assert "# exact: UCV" in lines
        assert "# prefix: UCV" in lines
        assert "# fuzzy: UCV, UCAB" in lines


class TestCatalogCommands:
    """Commands that read the catalog snapshot."""

    def test_search_exact(self, capsys, catalog_path):
        assert main(["--catalog", str(catalog_path), "search", "jose garcia"]) == 0
        assert output_lines(capsys) == [
            "1 match(es) [exact]",
            "José García | Universidad Central de Venezuela | Física",
        ]

    def test_search_with_typo(self, capsys, catalog_path):
        assert main(["--catalog", str(catalog_path), "search", "Maria Gonzales"]) == 0
        assert output_lines(capsys) == [
            "1 match(es) [fuzzy]",
            "María González | Universidad Metropolitana | Economía",
        ]

    def test_search_expand_abbreviation(self, capsys, catalog_path):
        assert main(["--catalog", str(catalog_path), "search", "UCAB", "--expand"]) == 0
        assert output_lines(capsys) == [
            "2 match(es) [exact]",
            "Juan Pérez | Universidad Católica Andrés Bello | Ingeniería Informática",
            "Ana Rodríguez | Universidad Católica Andrés Bello | Administración",
        ]

    def test_search_without_expand_finds_nothing(self, capsys, catalog_path):
        assert main(["--catalog", str(catalog_path), "search", "UCAB"]) == 0
        assert output_lines(capsys) == ["No teachers found"]

    def test_suggest_defaults_to_catalog_universities(self, capsys, catalog_path):
        assert main(["--catalog", str(catalog_path), "suggest", "universidad c"]) == 0
        assert output_lines(capsys) == [
            "Universidad Católica Andrés Bello",
            "Universidad Central de Venezuela",
        ]

    def test_quick_with_university(self, capsys, catalog_path):
        assert main(["--catalog", str(catalog_path), "quick", "a", "--university", "ucab"]) == 0
        assert output_lines(capsys) == [
            "Ana Rodríguez | Universidad Católica Andrés Bello | Administración",
            "Juan Pérez | Universidad Católica Andrés Bello | Ingeniería Informática",
        ]

    def test_quick_limit(self, capsys, catalog_path):
        assert main(["--catalog", str(catalog_path), "quick", "a", "--limit", "1"]) == 0
        assert output_lines(capsys) == [
            "Ana Rodríguez | Universidad Católica Andrés Bello | Administración",
        ]

    def test_catalog_from_environment(self, capsys, catalog_path, monkeypatch):
        monkeypatch.setenv("PROFSEARCH_CATALOG", str(catalog_path))

        assert main(["search", "fisica"]) == 0
        assert output_lines(capsys)[0] == "1 match(es) [exact]"

    def test_config_threshold_applied(self, capsys, catalog_path, tmp_path):
        config_file = tmp_path / "profsearch.yaml"
        config_file.write_text(f"matching:\n  max_distance: 0\ncatalog_path: {catalog_path}\n")

        assert main(["search", "Maria Gonzales"]) == 0
        assert output_lines(capsys) == ["No teachers found"]


class TestErrors:
    """Configuration and catalog failures exit with code 1."""

    def test_missing_catalog_file(self, capsys, tmp_path):
        assert main(["--catalog", str(tmp_path / "missing.yaml"), "search", "x"]) == 1
        assert "Catalog Error: Catalog file not found" in capsys.readouterr().err

    def test_no_catalog_configured(self, capsys):
        assert main(["search", "x"]) == 1
        assert "No catalog file configured" in capsys.readouterr().err

    def test_missing_config_file(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "nope.yaml"), "normalize", "x"]) == 1
        assert "Configuration Error" in capsys.readouterr().err

    def test_invalid_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert main(["normalize", "x"]) == 1
        assert "Invalid LOG_LEVEL" in capsys.readouterr().err
