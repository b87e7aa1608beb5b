import os
import stat
import time

import pytest

from stdtour.fsinfo import (
    create_sample_tree,
    describe_path,
    directory_size,
    file_time_string,
    lexical_relative,
    list_tree,
    main,
    permissions_string,
    symlink_demo,
)


def test_describe_regular_file(tmp_path):
    content = "The answer is 42\n"
    target = tmp_path / "data.txt"
    target.write_text(content)
    assert describe_path(target) == f'"{target}" exists with {len(content)} bytes\n'


def test_describe_directory_lists_entries(tmp_path):
    (tmp_path / "one").write_text("1")
    (tmp_path / "two").mkdir()
    lines = describe_path(tmp_path).splitlines()
    assert lines[0] == f'"{tmp_path}" is a directory containing:'
    assert lines[1:] == [
        f'  "{os.path.join(str(tmp_path), "one")}"',
        f'  "{os.path.join(str(tmp_path), "two")}"',
    ]


def test_describe_missing_path(tmp_path):
    missing = tmp_path / "nothing"
    assert describe_path(missing) == f'path "{missing}" does not exist\n'


def test_permissions_full_and_none():
    assert permissions_string(0o777) == "rwxrwxrwx"
    assert permissions_string(0) == "---------"


@pytest.mark.parametrize("position", range(9))
def test_permissions_single_bit(position):
    bit = 1 << (8 - position)
    text = permissions_string(bit)
    assert len(text) == 9
    assert text[position] == "rwx"[position % 3]
    assert text.count("-") == 8


def test_permissions_ignore_file_type_bits():
    mode = stat.S_IFREG | 0o640
    assert permissions_string(mode) == permissions_string(0o640)
    assert permissions_string(0o640)[:3] == "rw-"


def test_file_time_string_round_trip():
    stamp = 1_000_000_000
    text = file_time_string(stamp)
    assert not text.endswith("\n")
    parsed = time.strptime(text, "%a %b %d %H:%M:%S %Y")
    assert parsed[:6] == time.localtime(stamp)[:6]


def test_directory_size_counts_entries_and_bytes(tmp_path):
    (tmp_path / "a.txt").write_text("hello")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("The answer is 42\n")
    count, total = directory_size(tmp_path)
    assert count == 3
    assert total == len("hello") + len("The answer is 42\n")


def test_directory_size_empty(tmp_path):
    assert directory_size(tmp_path) == (0, 0)


def test_directory_size_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        directory_size(tmp_path / "missing")


def test_create_sample_tree_and_list(tmp_path):
    data_file = create_sample_tree(tmp_path)
    assert data_file.read_text() == "The answer is 42\n"
    assert os.readlink(tmp_path / "tmp" / "slink") == "test"
    listed = list(list_tree(tmp_path))
    base = str(tmp_path)
    assert os.path.join(base, "tmp", "test", "data.txt") in listed
    assert os.path.join(base, "tmp", "slink", "data.txt") in listed
    assert all(path == os.path.normpath(path) for path in listed)


def test_create_sample_tree_twice_fails(tmp_path):
    create_sample_tree(tmp_path)
    with pytest.raises(FileExistsError):
        create_sample_tree(tmp_path)


def test_list_tree_survives_link_cycle(tmp_path):
    (tmp_path / "d").mkdir()
    os.symlink(str(tmp_path), tmp_path / "d" / "loop", target_is_directory=True)
    listed = list(list_tree(tmp_path))
    assert os.path.join(str(tmp_path), "d", "loop") in listed
    assert len(listed) == len(set(listed))


def test_lexical_relative_sibling():
    assert lexical_relative("/top/a/x", "/top/a/y") == os.path.join("..", "x")


def test_lexical_relative_same_and_descendant():
    assert lexical_relative("a/b", "a/b") == "."
    assert lexical_relative("a/b/c", "a") == os.path.join("b", "c")


def test_lexical_relative_mixed_absolute_is_empty():
    assert lexical_relative("a/x", "/a") == ""
    assert lexical_relative("/a/x", "a") == ""


def test_symlink_demo(tmp_path):
    lines = symlink_demo(tmp_path)
    up_x = f'"{os.path.join("..", "x")}"'
    a_x = f'"{os.path.join("a", "x")}"'
    assert lines[0] == f'"{tmp_path}"'
    assert lines[2] == up_x
    assert lines[3] == up_x
    assert lines[4] == a_x
    assert lines[5] == up_x
    assert lines[9] == up_x
    assert lines[10] == a_x
    link = tmp_path / "a" / "s"
    assert os.path.islink(link)
    assert lines[8] == f' -> "{tmp_path}"'


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("Usage: ")


def test_main_with_path(tmp_path, capsys):
    target = tmp_path / "f"
    target.write_text("xyz")
    assert main([str(target)]) == 0
    assert capsys.readouterr().out == describe_path(target)