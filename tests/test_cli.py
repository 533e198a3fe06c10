#!/usr/bin/env python3
"""
Tests for the lingtex-interlinear command line.
"""

import io
import json

import pytest
from lingtex.cli import main
from lingtex.template import build_input_template, TEMPLATE_MARKER


@pytest.fixture
def write_input(tmp_path):
    """Write text to a temporary input file and return its path as str."""
    def _write(text, name="input.tsv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


class TestOutput:
    """Test what the command prints."""

    def test_single_shape(self, write_input, simple_tsv, capsys):
        assert main([write_input(simple_tsv), "--shape", "single"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("\n% Single example")
        assert "\\gll pa ɾi \\\\" in out

    def test_all_single_shapes(self, write_input, simple_tsv, capsys):
        assert main([write_input(simple_tsv)]) == 0

        out = capsys.readouterr().out
        assert out.startswith("===== (1) Single example =====")
        assert "===== (2) Start list example (this as first item) =====" in out
        assert "===== (3) List item (to add into existing xlist) =====" in out

    def test_all_multi_shapes(self, write_input, two_examples_tsv, capsys):
        assert main([write_input(two_examples_tsv)]) == 0

        out = capsys.readouterr().out
        assert "===== (1) List example =====" in out
        assert "===== (2) Items for an existing list =====" in out
        assert "===== (3) Interlinear text (sequence) =====" in out

    def test_label_option(self, write_input, simple_tsv, capsys):
        main([write_input(simple_tsv), "--shape", "single", "--label", "ex:pa"])
        assert "\\ex \\label{ex:pa}" in capsys.readouterr().out

    def test_stdin_input(self, simple_tsv, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(simple_tsv))
        assert main(["--shape", "list-item"]) == 0
        assert "\\ex % \\label{ex:KEY-?}" in capsys.readouterr().out

    def test_output_file(self, write_input, simple_tsv, tmp_path, capsys):
        target = tmp_path / "out.tex"
        assert main([write_input(simple_tsv), "--shape", "single", "-o", str(target)]) == 0

        assert "\\begin{exe}" in target.read_text(encoding="utf-8")
        assert capsys.readouterr().out == ""


class TestOptions:
    """Test conversion options."""

    def test_wrap_glosses(self, write_input, simple_tsv, capsys):
        main([write_input(simple_tsv), "--shape", "single", "--wrap-glosses"])
        assert "\\gl{det} \\gl{2sg} \\\\" in capsys.readouterr().out

    def test_custom_gloss(self, write_input, capsys):
        text = "Morphemes\twa\tto\nLex. Gloss\tword-Pl\tgo\nFree\twords go"
        main([write_input(text), "--shape", "single", "--wrap-glosses", "--gloss", "Pl"])
        assert "word-\\gl{pl} go \\\\" in capsys.readouterr().out

    def test_no_merge_breaks(self, write_input, kara_tsv, capsys):
        main([write_input(kara_tsv), "--shape", "single", "--no-merge-breaks"])
        assert "kaɾa =tɛ =hi uː" in capsys.readouterr().out

    def test_max_lines(self, write_input, kara_tsv, capsys):
        main([write_input(kara_tsv), "--shape", "single", "--max-lines", "2"])

        out = capsys.readouterr().out
        assert "\\gll kaɾa=tɛ=hi uː \\\\" in out
        assert "at~Kara" not in out

    def test_tag_languages(self, write_input, kara_tsv, capsys):
        main([write_input(kara_tsv), "--shape", "single", "--tag-languages"])
        assert "\\glt [Eng] There is a tree at Kara." in capsys.readouterr().out

    def test_config_file(self, write_input, kara_tsv, capsys):
        config = write_input(json.dumps({"lingtex.interlinear.maxLines": 2}), name="settings.json")
        main([write_input(kara_tsv), "--shape", "single", "--config", config])
        assert "\\gll kaɾa" in capsys.readouterr().out

    def test_command_line_beats_config_file(self, write_input, kara_tsv, capsys):
        config = write_input(json.dumps({"maxAlignedLines": 2}), name="settings.json")
        main([write_input(kara_tsv), "--shape", "single", "--config", config, "--max-lines", "3"])
        assert "\\glll kaɾa" in capsys.readouterr().out

    def test_invalid_shape(self, write_input, simple_tsv):
        with pytest.raises(SystemExit) as excinfo:
            main([write_input(simple_tsv), "--shape", "poster"])
        assert excinfo.value.code == 2


class TestTemplate:
    """Test template output and template input."""

    def test_print_template(self, capsys):
        assert main(["--template", "--label", "ex:kara"]) == 0

        out = capsys.readouterr().out
        assert out.startswith(TEMPLATE_MARKER)
        assert "Label: ex:kara" in out

    def test_template_input_uses_its_label(self, write_input, capsys):
        path = write_input(build_input_template(label="ex:sample"), name="input.txt")
        assert main([path, "--shape", "single"]) == 0
        assert "\\ex \\label{ex:sample}" in capsys.readouterr().out

    def test_default_template_label_is_not_applied(self, write_input, capsys):
        path = write_input(build_input_template(), name="input.txt")
        assert main([path, "--shape", "single"]) == 0

        out = capsys.readouterr().out
        assert "\\ex % \\label{ex:KEY}" in out
        assert "interlinear-example" not in out

    def test_label_option_beats_template(self, write_input, capsys):
        path = write_input(build_input_template(label="ex:sample"), name="input.txt")
        main([path, "--shape", "single", "--label", "ex:other"])

        out = capsys.readouterr().out
        assert "\\label{ex:other}" in out
        assert "ex:sample" not in out


class TestExitCodes:
    """Test failure exit codes."""

    def test_no_examples(self, write_input, capsys):
        assert main([write_input("# nothing here\n")]) == 1
        assert capsys.readouterr().out == ""

    def test_missing_input(self, tmp_path):
        assert main([str(tmp_path / "missing.tsv")]) == 1

    def test_bad_config(self, write_input, simple_tsv):
        config = write_input("[1, 2]", name="settings.json")
        assert main([write_input(simple_tsv), "--config", config]) == 1

    def test_ill_typed_config(self, write_input, simple_tsv):
        config = write_input(json.dumps({"maxAlignedLines": "many"}), name="settings.json")
        assert main([write_input(simple_tsv), "--config", config]) == 1
