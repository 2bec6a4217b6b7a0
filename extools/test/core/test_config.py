from __future__ import annotations

from pathlib import Path

import pytest

from extools.core.config import Config, ConfigError, load_config
from extools.core.result import Err, Ok


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_default_file_gives_empty_config(tmp_path: Path) -> None:
    assert load_config(cwd=tmp_path) == Ok(Config())


def test_default_file_in_cwd_is_loaded(tmp_path: Path) -> None:
    _write(tmp_path / "extools.toml", '[platform]\nos_name = "SunOS"\n')

    match load_config(cwd=tmp_path):
        case Ok(cfg):
            assert cfg.os_name == "SunOS"
            assert cfg.env == {}
        case Err(e):
            pytest.fail(e.message)


def test_explicit_missing_file_is_an_error(tmp_path: Path) -> None:
    result = load_config(tmp_path / "nope.toml")

    assert isinstance(result, Err)
    assert result.error.kind == "not_found"
    assert result.error.path == tmp_path / "nope.toml"


def test_env_section_is_parsed(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "custom.toml",
        '[platform]\nos_name = "Windows 10"\n\n[env]\nMSYSTEM = "MINGW64"\nSHELL = "/bin/bash"\n',
    )

    result = load_config(path)

    assert result == Ok(Config(os_name="Windows 10", env={"MSYSTEM": "MINGW64", "SHELL": "/bin/bash"}))


@pytest.mark.parametrize(
    ("text", "fragment"),
    [
        ("this is = = not toml", "invalid TOML"),
        ('platform = "x"\n', "[platform] must be a table"),
        ("[platform]\nos_name = 3\n", "os_name must be a string"),
        ('env = ["a"]\n', "[env] must be a table"),
        ("[env]\nTERM = 1\n", "env.TERM must be a string"),
    ],
)
def test_invalid_files(tmp_path: Path, text: str, fragment: str) -> None:
    path = _write(tmp_path / "bad.toml", text)

    result = load_config(path)

    assert isinstance(result, Err)
    error: ConfigError = result.error
    assert error.kind == "invalid"
    assert fragment in error.message


def test_getenv_prefers_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM", "xterm")
    monkeypatch.setenv("SHELL", "/bin/zsh")
    cfg = Config(env={"SHELL": "/bin/bash"})

    assert cfg.getenv("SHELL") == "/bin/bash"
    assert cfg.getenv("TERM") == "xterm"
    assert cfg.getenv("EXTOOLS_DEFINITELY_UNSET") is None
