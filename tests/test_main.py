import importlib
import io
import sys

import pytest

from pyht import config
from pyht.debug import dump_table
from pyht.main import CommandError, CommandOk, execute, main
from pyht.table import new_table


def test_execute(capsys):
    t = new_table()
    assert execute(t, "set cat felix") == CommandOk()
    assert execute(t, "set dog fido\n") == CommandOk()
    assert execute(t, "get cat") == CommandOk()
    assert execute(t, "del cat") == CommandOk()
    assert execute(t, "get cat") == CommandOk()
    assert execute(t, "get dog") == CommandOk()
    assert execute(t, "stats") == CommandOk()

    assert capsys.readouterr().out == "felix\n(not found)\nfido\n1 53 1%\n"


def test_execute_ignores_blank_and_comment_lines(capsys):
    t = new_table()
    assert execute(t, "") == CommandOk()
    assert execute(t, "   ") == CommandOk()
    assert execute(t, "# set cat felix") == CommandOk()
    assert t.count == 0
    assert capsys.readouterr().out == ""


def test_execute_errors(capsys):
    t = new_table()
    assert execute(t, "put cat felix") == CommandError()
    assert execute(t, "set cat") == CommandError()
    assert execute(t, "get") == CommandError()

    err = capsys.readouterr().err
    assert "Unknown command 'put'." in err
    assert "Wrong number of arguments to 'set'." in err
    assert "Wrong number of arguments to 'get'." in err
    assert t.count == 0


def test_dump_table(capsys):
    t = new_table()
    t.insert("cat", "felix")
    t.insert("dog", "fido")
    t.delete("dog")
    dump_table(t, "pets")

    out = capsys.readouterr().out
    assert out.startswith("== pets (count 1, size 53, base 50) ==\n")
    assert " cat = felix\n" in out
    assert " <deleted>\n" in out
    assert "dog" not in out


def test_run_file(tmp_path, monkeypatch, capsys):
    script = tmp_path / "pets.txt"
    script.write_text("set cat felix\nset dog fido\nget cat\ndel cat\nget cat\n")
    monkeypatch.setattr(sys, "argv", ["pyht", str(script)])

    main()
    assert capsys.readouterr().out == "felix\n(not found)\n"


def test_run_file_unknown_command(tmp_path, monkeypatch):
    script = tmp_path / "bad.txt"
    script.write_text("set cat felix\nfly cat\nget cat\n")
    monkeypatch.setattr(sys, "argv", ["pyht", str(script)])

    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 65


def test_repl(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["pyht"])
    monkeypatch.setattr(sys, "stdin", io.StringIO("set cat felix\nfly\nget cat\n"))

    main()
    captured = capsys.readouterr()
    assert captured.out == "felix\n"
    assert "Unknown command 'fly'." in captured.err


def test_usage(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["pyht", "a", "b"])

    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 64
    assert capsys.readouterr().out == "Usage: pyht [path]\n"


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("PYHT_LOG_LEVEL", "debug")
    importlib.reload(config)
    assert config.LOGGING["loggers"]["pyht"]["level"] == "DEBUG"

    monkeypatch.delenv("PYHT_LOG_LEVEL")
    importlib.reload(config)
    assert config.LOGGING["loggers"]["pyht"]["level"] == "WARNING"
