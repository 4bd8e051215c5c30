"""Unit tests for the language registry."""

import pytest

from domain.exceptions import ConfigError
from domain.models import FileLayout
from infrastructure.language_registry import LanguageRegistry


def test_default_registry_loads():
    registry = LanguageRegistry()

    languages = registry.load()

    assert {"python", "ruby", "javascript", "go"} <= set(languages)
    assert registry.get("go").layout is FileLayout.COMBINED
    assert registry.get("python").solution_filename(2) == "part2.py"
    assert "package.json" in registry.get("javascript").project_files


def test_registry_is_read_only():
    registry = LanguageRegistry()

    with pytest.raises(TypeError):
        registry.load()["cobol"] = registry.get("python")
    with pytest.raises(TypeError):
        registry.get("go").project_files["extra"] = ""


def test_load_is_cached(tmp_path):
    path = tmp_path / "languages.yml"
    path.write_text("lua:\n  extension: lua\n  run_command: lua\n  solution_template: ''\n")
    registry = LanguageRegistry(path)

    first = registry.load()
    path.unlink()

    assert registry.load() is first


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        LanguageRegistry(tmp_path / "missing.yml").load()


def test_malformed_yaml(tmp_path):
    path = tmp_path / "languages.yml"
    path.write_text("python: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        LanguageRegistry(path).load()


@pytest.mark.parametrize(
    "content",
    [
        "- python\n- ruby\n",
        "python:\n  extension: py\n",
        "go:\n  extension: go\n  run_command: go run\n  solution_template: ''\n  layout: combined\n",
        "py:\n  extension: py\n  run_command: python3\n  solution_template: ''\n  filename: main.py\n",
    ],
)
def test_invalid_entries(tmp_path, content):
    path = tmp_path / "languages.yml"
    path.write_text(content)

    with pytest.raises(ConfigError):
        LanguageRegistry(path).load()


def test_unknown_language():
    with pytest.raises(ConfigError, match="Unknown language 'cobol'"):
        LanguageRegistry().get("cobol")


def test_build_command_appends_or_substitutes_file():
    registry = LanguageRegistry()

    assert registry.get("python").build_command("/w/part1.py", 1) == "python3 /w/part1.py"
    assert registry.get("go").build_command("/w/main.go", 2) == "go run /w/main.go 2"
