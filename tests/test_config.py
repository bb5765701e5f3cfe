from __future__ import annotations

from pathlib import Path

import pytest

from tagcards.config import SEPARATOR_ENV, load_config
from tagcards.errors import ConfigError


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_config(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
tagcards:
  input_file: cards/B1-K1.txt
  output_file: out/result.json
  default_separator: " -> "
  languages:
    original: de
    translate: ru
""",
    )

    cfg = load_config(path)

    assert cfg.input_file == Path("cards/B1-K1.txt")
    assert cfg.output_file == Path("out/result.json")
    assert cfg.default_separator == "->"
    assert cfg.languages.original == "de"
    assert cfg.languages.translate == "ru"


def test_defaults(tmp_path: Path) -> None:
    cfg = load_config(_write_config(tmp_path, "tagcards:\n  input_file: a.txt\n"))

    assert cfg.output_file == Path("result.json")
    assert cfg.default_separator == "::"
    assert (cfg.languages.original, cfg.languages.translate) == ("ru", "de")


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yaml")


def test_missing_file_allowed_with_overrides(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.yaml", overrides={"input_file": "x.txt"}, required=False)

    assert cfg.input_file == Path("x.txt")


def test_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "tagcards:\n  input_file: a.txt\n  output_file: b.json\n")

    cfg = load_config(path, overrides={"input_file": "c.txt", "output_file": None})

    assert cfg.input_file == Path("c.txt")
    assert cfg.output_file == Path("b.json")


def test_environment_overrides_separator(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SEPARATOR_ENV, " | ")
    path = _write_config(tmp_path, "tagcards:\n  input_file: a.txt\n  default_separator: '::'\n")

    assert load_config(path).default_separator == "|"


def test_missing_input_file_is_invalid(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(_write_config(tmp_path, "tagcards:\n  output_file: b.json\n"))


def test_blank_separator_is_invalid(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "tagcards:\n  input_file: a.txt\n  default_separator: '   '\n")

    with pytest.raises(ConfigError, match="default_separator"):
        load_config(path)


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "tagcards: [unclosed\n"))


def test_section_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="must be a mapping"):
        load_config(_write_config(tmp_path, "tagcards: just a string\n"))
