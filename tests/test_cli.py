from pngmeta.scripts import extract_folder


def test_cli_with_argument(tmp_path, capsys, png, text):
	(tmp_path / "img.png").write_bytes(png(text(b"parameters", b"seed: 42")))
	(tmp_path / "other.png").write_bytes(b"nope")
	assert extract_folder.main([str(tmp_path), "--log-level", "WARNING"]) == 0
	out = capsys.readouterr().out
	assert "\rProcessed: 2 | Metadata found: 1" in out
	assert "Finished! Scanned 2 PNG files, extracted metadata from 1." in out
	assert (tmp_path / "img.txt").read_bytes() == b"parameters: seed: 42"


def test_cli_prompts_for_folder(tmp_path, monkeypatch, capsys, png, text):
	(tmp_path / "img.png").write_bytes(png(text(b"k", b"v")))
	monkeypatch.setattr("builtins.input", lambda prompt="": f'"{tmp_path}"')
	assert extract_folder.main(["--log-level", "WARNING"]) == 0
	out = capsys.readouterr().out
	assert "Paste or type the full path to your PNG folder:" in out
	assert (tmp_path / "img.txt").read_bytes() == b"k: v"


def test_cli_empty_input(monkeypatch, capsys):
	monkeypatch.setattr("builtins.input", lambda prompt="": "")
	assert extract_folder.main([]) == 1
	assert "No path provided." in capsys.readouterr().err


def test_cli_invalid_folder(tmp_path, capsys):
	assert extract_folder.main([str(tmp_path / "missing")]) == 1
	assert "Error: Invalid or inaccessible folder path." in capsys.readouterr().err
