import cli
from codec import decompress


def test_compress_and_decompress_files(tmp_path, capsys):
    src = tmp_path / "notes.txt"
    src.write_bytes("first line\r\nsecond line, café\n".encode("utf-8"))
    packed = tmp_path / "notes.bin"
    restored = tmp_path / "restored.txt"

    assert cli.main(["compress", str(src), str(packed)]) == 0
    out = capsys.readouterr().out
    assert f"Original size:   {len(src.read_bytes())} bytes" in out
    assert f"Compressed size: {len(packed.read_bytes())} bytes" in out

    assert cli.main(["decompress", str(packed), str(restored)]) == 0
    out = capsys.readouterr().out
    assert "Restored size:" in out
    assert restored.read_bytes() == src.read_bytes()


def test_compress_file_stats(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("aaab", encoding="utf-8")
    stats = cli.compress_file(src, tmp_path / "out.bin")

    assert stats["original_bytes"] == 4
    assert stats["compressed_bytes"] == len((tmp_path / "out.bin").read_bytes())
    assert stats["unique_symbols"] == 3
    assert stats["trash_bits"] == 1
    assert decompress((tmp_path / "out.bin").read_bytes()) == "aaab"


def test_compress_empty_file(tmp_path):
    src = tmp_path / "empty.txt"
    src.write_text("", encoding="utf-8")
    stats = cli.compress_file(src, tmp_path / "empty.bin")
    assert stats["compression_ratio"] is None

    cli.decompress_file(tmp_path / "empty.bin", tmp_path / "back.txt")
    assert (tmp_path / "back.txt").read_bytes() == b""


def test_codes_flag_prints_table(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("aaab", encoding="utf-8")

    assert cli.main(["compress", str(src), str(tmp_path / "out.bin"), "--codes"]) == 0
    out = capsys.readouterr().out
    assert "Codes (3 symbols):" in out
    assert "EOF" in out
    assert "'a'  1" in out


def test_decompress_garbage_reports_error(tmp_path, capsys):
    bad = tmp_path / "bad.bin"
    bad.write_bytes(b"\xff\xff\xff\xff\x00")

    assert cli.main(["decompress", str(bad), str(tmp_path / "out.txt")]) == 1
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "out.txt").exists()


def test_missing_input_reports_error(tmp_path, capsys):
    assert cli.main(["compress", str(tmp_path / "nope.txt"), str(tmp_path / "out.bin")]) == 1
    assert "error:" in capsys.readouterr().err


def test_decompress_unencodable_text_reports_error(tmp_path, capsys):
    # tree: internal, leaf U+D800 (lone surrogate), leaf EOF; bits "01"
    tree = b"\x00" + b"\x01\x00\xd8\x00\x00" + b"\x01\xa1\x25\x00\x00"
    bad = tmp_path / "surrogate.bin"
    bad.write_bytes(len(tree).to_bytes(4, "little") + tree + b"\x40" + b"\x06")
    out = tmp_path / "out.txt"

    assert cli.main(["decompress", str(bad), str(out)]) == 1
    assert "error:" in capsys.readouterr().err
    assert not out.exists()
