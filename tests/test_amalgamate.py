import pytest

from fnoverride.amalgamate import AmalgamationError, Amalgamator, amalgamate, main

RULE = "//" + "=" * 65


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path.as_posix()


def test_single_file_is_framed_by_header(tmp_path):
    entry = _write(tmp_path / "a.hpp", "int a;\n")
    assert amalgamate(entry) == f"{RULE}\n//{entry}\n{RULE}\nint a;\n"


def test_include_is_replaced_by_contents(tmp_path):
    _write(tmp_path / "b.hpp", "int b;\n")
    entry = _write(tmp_path / "a.hpp", 'before\n#include "./b.hpp"\nafter\n')
    text = amalgamate(entry)
    lines = text.splitlines()
    assert "#include" not in text
    assert lines.index("before") < lines.index("int b;") < lines.index("after")
    assert lines[lines.index("int b;") + 1] == ""


def test_file_included_twice_appears_once(tmp_path):
    _write(tmp_path / "b.hpp", "int b;\n")
    entry = _write(
        tmp_path / "a.hpp", '#include "./b.hpp"\n#include "b.hpp"\nend\n'
    )
    text = amalgamate(entry)
    assert text.splitlines().count("int b;") == 1
    assert text.count(f"//{(tmp_path / 'b.hpp').as_posix()}\n") == 1


def test_parent_relative_include(tmp_path):
    _write(tmp_path / "c.hpp", "int c;\n")
    entry = _write(tmp_path / "sub" / "a.hpp", '#include "../c.hpp"\n')
    assert "int c;" in amalgamate(entry).splitlines()


def test_missing_file_raises(tmp_path):
    missing = (tmp_path / "nope.hpp").as_posix()
    with pytest.raises(AmalgamationError, match="Error opening file"):
        amalgamate(missing)


def test_missing_include_raises(tmp_path):
    entry = _write(tmp_path / "a.hpp", '#include "./gone.hpp"\n')
    with pytest.raises(AmalgamationError):
        amalgamate(entry)


def test_path_without_directory_cannot_resolve_include(tmp_path, monkeypatch):
    _write(tmp_path / "a.hpp", '#include "b.hpp"\n')
    monkeypatch.chdir(tmp_path)
    with pytest.raises(AmalgamationError, match="Failed to find base path"):
        amalgamate("a.hpp")


def test_amalgamator_tracks_included_files(tmp_path):
    _write(tmp_path / "b.hpp", "x\n")
    entry = _write(tmp_path / "a.hpp", '#include "./b.hpp"\n')
    import io

    out, log = io.StringIO(), io.StringIO()
    amalgamator = Amalgamator(out=out, log=log)
    amalgamator.process_file(entry)
    assert amalgamator.included_files == {entry, (tmp_path / "b.hpp").as_posix()}
    assert f"Including: {(tmp_path / 'b.hpp').as_posix()}" in log.getvalue()


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_main_writes_merged_text(tmp_path, capsys):
    entry = _write(tmp_path / "a.hpp", "int a;\n")
    assert main([entry]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "int a;"


def test_main_reports_errors_on_stderr(tmp_path, capsys):
    assert main([(tmp_path / "nope.hpp").as_posix()]) == 0
    assert "Error opening file" in capsys.readouterr().err