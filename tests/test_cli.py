import pytest
import yaml

from hawkeyedit.cli import Severity, format_message, main
from hawkeyedit.editor import Editor


@pytest.mark.parametrize(
    "severity, prefix",
    [
        (Severity.TRACE, "[Trace] "),
        (Severity.DEBUG, "[Debug] "),
        (Severity.INFO, "[Info] "),
        (Severity.WARN, "[Warn] "),
        (Severity.ERROR, "[Error] "),
        (Severity.FATAL, "[Fatal] "),
    ],
)
def test_format_message_prefixes(severity, prefix):
    assert format_message("hello", severity) == prefix + "hello"


def test_format_message_accepts_severity_name():
    assert format_message("x", "Warn") == format_message("x", Severity.WARN)


def test_format_message_rejects_unknown_severity():
    with pytest.raises(ValueError):
        format_message("x", "Loud")


def test_main_without_changes_writes_nothing(tmp_path):
    path = tmp_path / "graph.yml"
    assert main([str(path)]) == 0
    assert not path.exists()


def test_main_adds_nodes(tmp_path):
    path = tmp_path / "graph.yml"
    assert main([str(path), "--add-input", "1", "2", "--add-rasterized", "3", "4"]) == 0
    editor = Editor(path)
    editor.load()
    assert [n.kind for n in editor.nodes] == ["input", "rasterized"]
    assert [n.position for n in editor.nodes] == [(1.0, 2.0), (3.0, 4.0)]


def test_main_connects_existing_pins(tmp_path, capsys):
    path = tmp_path / "graph.yml"
    main([str(path), "--add-input", "0", "0", "--add-output", "5", "0"])
    editor = Editor(path)
    editor.load()
    source, sink = editor.nodes
    capsys.readouterr()
    code = main([str(path), "--connect", str(source.output_id(0)), str(sink.input_id(0))])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("[Info] ")


def test_main_reports_rejected_link(tmp_path, capsys):
    path = tmp_path / "graph.yml"
    assert main([str(path), "--connect", "5", "5"]) == 1
    assert capsys.readouterr().out.startswith("[Error] ")


def test_main_reports_bad_file(tmp_path, capsys):
    path = tmp_path / "graph.yml"
    path.write_text(yaml.safe_dump({"nodes": [{"type": "bogus", "meta": {"x": 0, "y": 0}}]}))
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.startswith("[Fatal] ")


def test_main_lists_nodes(tmp_path, capsys):
    path = tmp_path / "graph.yml"
    main([str(path), "--add-output", "0", "0"])
    editor = Editor(path)
    editor.load()
    node = editor.nodes[0]
    capsys.readouterr()
    assert main([str(path), "--list"]) == 0
    out = capsys.readouterr().out
    assert node.id_str in out
    assert str(node.input_id(0)) in out