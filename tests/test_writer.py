import json

import pytest

from code2snippets.config import SnippetConfig
from code2snippets.exception_handler import WriteError
from code2snippets.snippet import SnippetStore
from code2snippets.writer import SnippetWriter


def _store():
    store = SnippetStore()
    store.add_record("go", "greet", 'fmt.Println("hi")\n')
    store.add_record("py", "greet", "print('hi')\n")
    return store


def test_write_creates_missing_output_dir_with_parents(tmp_path):
    output_dir = tmp_path / "deep" / "er" / "out"
    writer = SnippetWriter(SnippetConfig(output_dir=str(output_dir), show_progress=False))

    written = writer.write(_store())

    assert output_dir.is_dir()
    assert written == [output_dir / "go.json", output_dir / "py.json"]
    assert json.loads((output_dir / "py.json").read_text(encoding="utf-8")) == {
        "greet": {"prefix": "greet", "description": "", "body": ["print('hi')"]}
    }


def test_write_uses_default_four_space_indent(tmp_path):
    writer = SnippetWriter(SnippetConfig(output_dir=str(tmp_path), show_progress=False))

    writer.write(_store())

    assert (tmp_path / "go.json").read_text(encoding="utf-8") == (
        "{\n"
        '    "greet": {\n'
        '        "prefix": "greet",\n'
        '        "description": "",\n'
        '        "body": [\n'
        '            "fmt.Println(\\"hi\\")"\n'
        "        ]\n"
        "    }\n"
        "}\n"
    )


def test_write_with_tab_indent_only_changes_whitespace(tmp_path):
    spaces_dir = tmp_path / "spaces"
    tabs_dir = tmp_path / "tabs"
    SnippetWriter(SnippetConfig(output_dir=str(spaces_dir), show_progress=False)).write(_store())
    SnippetWriter(
        SnippetConfig(indent="\t", output_dir=str(tabs_dir), show_progress=False)
    ).write(_store())

    tabbed = (tabs_dir / "py.json").read_text(encoding="utf-8")
    spaced = (spaces_dir / "py.json").read_text(encoding="utf-8")

    assert '\n\t"greet": {\n\t\t"prefix"' in tabbed
    assert "    " not in tabbed
    assert json.loads(tabbed) == json.loads(spaced)


def test_write_keeps_non_ascii_text(tmp_path):
    store = SnippetStore()
    store.add_record("txt", "hello", "héllo ✓\n")

    SnippetWriter(SnippetConfig(output_dir=str(tmp_path), show_progress=False)).write(store)

    assert "héllo ✓" in (tmp_path / "txt.json").read_text(encoding="utf-8")


def test_write_overwrites_existing_file(tmp_path):
    (tmp_path / "py.json").write_text('{"stale": true}\n', encoding="utf-8")

    SnippetWriter(SnippetConfig(output_dir=str(tmp_path), show_progress=False)).write(_store())

    assert "stale" not in (tmp_path / "py.json").read_text(encoding="utf-8")


def test_write_is_idempotent(tmp_path):
    writer = SnippetWriter(SnippetConfig(output_dir=str(tmp_path), show_progress=False))

    writer.write(_store())
    first = {path.name: path.read_bytes() for path in tmp_path.iterdir()}
    writer.write(_store())
    second = {path.name: path.read_bytes() for path in tmp_path.iterdir()}

    assert first == second


def test_write_extensionless_group_to_dot_json(tmp_path):
    store = SnippetStore()
    store.add_record("", "Makefile", "all:\n")

    written = SnippetWriter(
        SnippetConfig(output_dir=str(tmp_path), show_progress=False)
    ).write(store)

    assert written == [tmp_path / ".json"]
    assert json.loads((tmp_path / ".json").read_text(encoding="utf-8"))["Makefile"]["body"] == [
        "all:"
    ]


def test_output_dir_that_is_a_file_raises_write_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    writer = SnippetWriter(SnippetConfig(output_dir=str(blocker / "out"), show_progress=False))

    with pytest.raises(WriteError) as exc_info:
        writer.write(_store())

    assert str(exc_info.value).startswith(f"creating {blocker / 'out'}: ")


def test_failed_file_stops_loop_and_keeps_earlier_files(tmp_path):
    (tmp_path / "py.json").mkdir()
    writer = SnippetWriter(SnippetConfig(output_dir=str(tmp_path), show_progress=False))

    with pytest.raises(WriteError) as exc_info:
        writer.write(_store())

    assert str(exc_info.value).startswith(f"creating {tmp_path / 'py.json'}: ")
    assert (tmp_path / "go.json").is_file()


def test_failed_write_clears_progress_bar(tmp_path, capsys):
    (tmp_path / "py.json").mkdir()
    writer = SnippetWriter(SnippetConfig(output_dir=str(tmp_path), show_progress=True))

    with pytest.raises(WriteError):
        writer.write(_store())

    assert "\n" not in capsys.readouterr().err
