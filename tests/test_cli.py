import hashlib
import os

from hashqr import FORCE_SAVE_ENV
from hashqr.cli import main, main_svg
from hashqr.storage import content_hash


def test_main_without_flag_prints_only(workdir, capsys):
    assert main(["hashqr", "hello", "world"]) == 0
    out = capsys.readouterr().out
    assert "█" in out
    assert "Image saved as" not in out
    assert not (workdir / "img").exists()


def test_main_with_flag_saves_png(workdir, capsys):
    assert main(["hashqr", "hello", "--png", "world"]) == 0
    expected = workdir / "img" / f"{content_hash('hello world')}.png"
    assert expected.exists()
    assert "Input: hello world" in capsys.readouterr().out


def test_main_env_override(workdir, monkeypatch):
    monkeypatch.setenv(FORCE_SAVE_ENV, "")
    assert main(["hashqr", "forced"]) == 0
    assert (workdir / "img" / f"{content_hash('forced')}.png").exists()


def test_main_no_arguments_encodes_empty_payload(workdir, monkeypatch):
    monkeypatch.setenv(FORCE_SAVE_ENV, "1")
    assert main(["hashqr"]) == 0
    assert (workdir / "img" / f"{content_hash('')}.png").exists()


def test_main_svg_env_override(workdir, monkeypatch):
    monkeypatch.setenv(FORCE_SAVE_ENV, "1")
    assert main_svg(["hashqr-svg", "vector", "text"]) == 0
    assert (workdir / "img" / f"{content_hash('vector text')}.svg").exists()


def test_main_svg_flag_does_not_save(workdir):
    assert main_svg(["hashqr-svg", "vector", "--png"]) == 0
    assert not (workdir / "img").exists()


def test_main_svg_keeps_png_token_in_payload(workdir, monkeypatch):
    monkeypatch.setenv(FORCE_SAVE_ENV, "1")
    assert main_svg(["hashqr-svg", "vector", "--png"]) == 0
    assert (workdir / "img" / f"{content_hash('vector --png')}.svg").exists()



def test_main_svg_no_arguments_is_empty_payload(workdir, monkeypatch):
    monkeypatch.setenv(FORCE_SAVE_ENV, "1")
    assert main_svg(["hashqr-svg"]) == 0
    assert (workdir / "img" / f"{content_hash('')}.svg").exists()


def test_main_encoding_error(workdir, capsys):
    assert main(["hashqr", "x" * 3000, "--png"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("ERROR:")
    assert not (workdir / "img").exists()


def test_main_directory_creation_error(workdir, capsys):
    (workdir / "img").write_text("in the way")
    assert main(["hashqr", "blocked", "--png"]) == 1
    assert "ERROR: Unable to create 'img' folder" in capsys.readouterr().err


def test_main_too_long_payload_reports_error(capsys):
    assert main(["hashqr", "x" * 3000]) == 1
    assert "ERROR: Payload too long" in capsys.readouterr().err


def test_main_raw_argv_bytes(workdir, monkeypatch, capsys):
    monkeypatch.setenv(FORCE_SAVE_ENV, "1")
    raw = b"caf\xe9"
    assert main(["hashqr", os.fsdecode(raw)]) == 0
    assert (workdir / "img" / f"{hashlib.sha256(raw).hexdigest()}.png").exists()
    assert "Input: caf\ufffd" in capsys.readouterr().out
