from nane.filesystem import FileSystem, combine_path, default_path, is_dir


def test_combine_path_uses_slash():
    assert combine_path("roms", "game.nes") == "roms/game.nes"


def test_is_dir(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    assert is_dir(str(tmp_path)) is True
    assert is_dir(str(file_path)) is False
    assert is_dir(str(tmp_path / "missing")) is False


def test_default_path_strips_trailing_separators():
    assert default_path("/opt/emulator/") == "/opt/emulator"
    assert default_path("C:\\games\\") == "C:\\games"


def test_default_path_falls_back_to_root():
    assert default_path("///") == "/"


def test_default_constructor_uses_default_path():
    assert FileSystem().current_path == default_path()


def test_list_files_includes_entries_and_dot_dirs(tmp_path):
    (tmp_path / "a.nes").write_text("")
    (tmp_path / "sub").mkdir()
    listing = FileSystem(str(tmp_path)).list_files(str(tmp_path))
    assert sorted(listing) == sorted([".", "..", "a.nes", "sub"])


def test_list_files_missing_directory_is_empty(tmp_path):
    assert FileSystem(str(tmp_path)).list_files(str(tmp_path / "missing")) == []


def test_write_file_round_trip(tmp_path):
    fs = FileSystem(str(tmp_path))
    written = fs.write_file("dump.txt", "LDA #$01\n")
    assert written == combine_path(str(tmp_path), "dump.txt")
    assert (tmp_path / "dump.txt").read_text() == "LDA #$01\n"


def test_current_path_can_change(tmp_path):
    fs = FileSystem("/")
    fs.current_path = str(tmp_path)
    fs.write_file("out.txt", "data")
    assert (tmp_path / "out.txt").read_text() == "data"