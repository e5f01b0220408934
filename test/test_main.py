"""
Command line tests: output channels and exit status
"""

import pytest
from main import main


class TestScriptMode:
  """simplify FILE"""

  def test_values_and_diagnostics(self, write_input, capsys):
    path = write_input("(simplify (+ 2 (* 3 4)))", "(simplify (+ 2 @))", "(simplify 7)", "(simplify )")
    assert main([str(path)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "14\n7\n"
    errors = captured.err.splitlines()
    assert len(errors) == 2
    assert errors[0].startswith("Error in line 2: (simplify (+ 2 @)) - Lex error")
    assert errors[1].startswith("Error in line 4: (simplify ) - Parse error")

  def test_keyword_option(self, write_input, capsys):
    path = write_input("(simplify 1)", "(other 2)")
    assert main([str(path), "--keyword", "simplify"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "expected 'simplify'" in captured.err

  def test_overflow_option(self, write_input, capsys):
    path = write_input("(simplify (+ 2147483647 1))")
    assert main([str(path), "--overflow", "wrap"]) == 0
    assert capsys.readouterr().out == "(- 2147483648)\n"

  def test_parse_option(self, write_input, capsys):
    path = write_input("(simplify (- 5 3))")
    main([str(path), "--parse"])
    out = capsys.readouterr().out
    assert "BinaryOp(SUBTRACT)" in out
    assert out.endswith("2\n")

  def test_jobs_option(self, write_input, capsys):
    path = write_input(*[f"(simplify (- {i}))" for i in range(1, 21)])
    main([str(path), "--jobs", "3"])
    assert capsys.readouterr().out.splitlines() == [f"(- {i})" for i in range(1, 21)]

  def test_debug_summary(self, write_input, capsys):
    path = write_input("(simplify 1)", "(simplify @)")
    main([str(path), "--debug"])
    err = capsys.readouterr().err
    assert "Tokens: [" in err
    assert "1 succeeded, 1 lex error" in err

  def test_huge_literal_does_not_abort_run(self, write_input, capsys):
    path = write_input("(simplify " + "1" * 5000 + ")", "(simplify 7)")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "7\n"
    assert "Error in line 1:" in captured.err


class TestInvocationErrors:
  """Failures detected before any line is processed"""

  def test_missing_file(self, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
      main([str(tmp_path / "nope.txt")])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not found" in captured.err

  def test_undecodable_file(self, tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"(simplify 1)\n\xff\xfe\n")
    with pytest.raises(SystemExit) as excinfo:
      main([str(path)])
    assert excinfo.value.code == 1
    assert capsys.readouterr().out == ""

  def test_no_input(self, capsys):
    with pytest.raises(SystemExit) as excinfo:
      main([])
    assert excinfo.value.code == 2
    assert "usage:" in capsys.readouterr().err

  def test_too_many_arguments(self, write_input):
    path = write_input("(simplify 1)")
    with pytest.raises(SystemExit) as excinfo:
      main([str(path), str(path)])
    assert excinfo.value.code == 2

  def test_invalid_int_bits(self, write_input):
    path = write_input("(simplify 1)")
    with pytest.raises(SystemExit) as excinfo:
      main([str(path), "--int-bits", "1"])
    assert excinfo.value.code == 2

  def test_int_bits_too_wide(self, write_input):
    path = write_input("(simplify 1)")
    with pytest.raises(SystemExit) as excinfo:
      main([str(path), "--int-bits", "5000"])
    assert excinfo.value.code == 2


class TestGenerateMode:

  def test_generated_file_evaluates(self, tmp_path, capsys):
    output = tmp_path / "generated.txt"
    assert main(["--generate", "20", str(output), "--depth", "2", "--seed", "3"]) == 0
    capsys.readouterr()

    assert main([str(output), "--int-bits", "64", "--keyword", "simplify"]) == 0
    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 20
    assert captured.err == ""

  def test_generate_uses_keyword(self, tmp_path, capsys):
    output = tmp_path / "generated.txt"
    assert main(["--generate", "5", str(output), "--keyword", "reduce", "--seed", "1"]) == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 5
    assert all(line.startswith("(reduce ") for line in lines)

  def test_bad_count(self, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
      main(["--generate", "many", str(tmp_path / "x.txt")])
    assert excinfo.value.code == 2


class TestInteractiveMode:

  def test_session(self, monkeypatch, capsys):
    import main as main_module
    monkeypatch.setattr(main_module, "READLINE_AVAILABLE", False)
    replies = iter(["(simplify (- 2 9))", "", ":parse (simplify 4)", "(simplify %)", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(replies))

    assert main(["-i"]) == 0
    out = capsys.readouterr().out
    assert "(- 7)\n" in out
    assert "Number(4)\n4\n" in out
    assert "Lex error at column 11" in out
