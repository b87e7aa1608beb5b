"""Inspect paths, permissions, directory trees and symbolic links."""

from __future__ import annotations

import os
import stat
import sys
import time
from pathlib import Path, PurePath
from typing import Iterator, Sequence

StrPath = "str | os.PathLike[str]"

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def _quote(path: "str | os.PathLike[str]") -> str:
    """Quote a path the way a path is streamed: in double quotes, escaped."""
    text = os.fspath(path).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def describe_path(path: "str | os.PathLike[str]") -> str:
    """Describe what ``path`` is: a regular file, a directory, something else, or nothing."""
    p = Path(path)
    name = os.fspath(path)
    try:
        mode = p.stat().st_mode
    except FileNotFoundError:
        return f'path "{name}" does not exist\n'
    if stat.S_ISREG(mode):
        return f'"{name}" exists with {p.stat().st_size} bytes\n'
    if stat.S_ISDIR(mode):
        lines = [f'"{name}" is a directory containing:']
        for entry in sorted(os.listdir(p)):
            lines.append(f'  "{os.path.join(name, entry)}"')
        return "\n".join(lines) + "\n"
    return f'"{name}" is a special file\n'


def permissions_string(mode: int) -> str:
    """Render the nine permission bits of ``mode`` as ``rwxrwxrwx`` with dashes."""
    return "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)


def file_time_string(timestamp: float) -> str:
    """Render a file timestamp as local calendar time without a trailing newline."""
    return time.ctime(timestamp).rstrip("\n")


def _walk_no_follow(root: str) -> Iterator[str]:
    with os.scandir(root) as entries:
        children = sorted(entries, key=lambda e: e.name)
    for entry in children:
        yield entry.path
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_no_follow(entry.path)


def directory_size(root: "str | os.PathLike[str]") -> tuple[int, int]:
    """Return the number of entries below ``root`` and the total size of its regular files.

    Raises ``OSError`` (for example ``FileNotFoundError``) if ``root`` cannot be listed.
    """
    paths = list(_walk_no_follow(os.fspath(root)))
    total = sum(os.path.getsize(p) for p in paths if os.path.isfile(p))
    return len(paths), total


def create_sample_tree(base: "str | os.PathLike[str]") -> Path:
    """Create ``tmp/test/data.txt`` and a link ``tmp/slink`` -> ``test`` below ``base``.

    Returns the path of the data file. Raises ``FileExistsError`` if the link exists.
    """
    test_dir = Path(base) / "tmp" / "test"
    test_dir.mkdir(parents=True, exist_ok=True)
    data_file = test_dir / "data.txt"
    data_file.write_text("The answer is 42\n")
    os.symlink("test", test_dir.parent / "slink", target_is_directory=True)
    return data_file


def list_tree(root: "str | os.PathLike[str]" = ".") -> Iterator[str]:
    """Yield every path below ``root``, lexically normalised, following directory links."""
    start = os.fspath(root)

    def walk(directory: str, ancestors: frozenset[str]) -> Iterator[str]:
        for name in sorted(os.listdir(directory)):
            full = os.path.join(directory, name)
            yield os.path.normpath(full)
            if os.path.isdir(full):
                real = os.path.realpath(full)
                if real not in ancestors:
                    yield from walk(full, ancestors | {real})

    yield from walk(start, frozenset({os.path.realpath(start)}))


def lexical_relative(
    path: "str | os.PathLike[str]", start: "str | os.PathLike[str]"
) -> str:
    """Return ``path`` relative to ``start`` by path text alone.

    Returns an empty string when no such relative path exists.
    """
    a = PurePath(path)
    b = PurePath(start)
    if a.drive != b.drive or a.is_absolute() != b.is_absolute():
        return ""
    if not a.root and b.root:
        return ""
    a_parts, b_parts = a.parts, b.parts
    common = 0
    for left, right in zip(a_parts, b_parts):
        if left != right:
            break
        common += 1
    if common == len(a_parts) and common == len(b_parts):
        return "."
    ups = sum(
        -1 if part == ".." else 1
        for part in b_parts[common:]
        if part not in (".", "")
    )
    if ups < 0:
        return ""
    rest = a_parts[common:]
    if ups == 0 and not rest:
        return "."
    return str(PurePath(*([".."] * ups), *rest))


def _relative(path: str, base: str) -> str:
    return lexical_relative(os.path.realpath(path), os.path.realpath(base))


def symlink_demo(top: "str | os.PathLike[str]") -> list[str]:
    """Contrast lexical and filesystem relative paths around a link ``a/s`` -> ``top``.

    Creates ``top``, ``top/a/x``, ``top/a/y`` and the link ``top/a/s``. Paths that
    the filesystem resolves relative to the current directory are resolved
    relative to ``top`` instead. Returns the report lines.
    """
    top_path = os.path.abspath(os.fspath(top))
    Path(top_path).mkdir(exist_ok=True)
    px = os.path.join(top_path, "a", "x")
    py = os.path.join(top_path, "a", "y")
    ps = os.path.join(top_path, "a", "s")

    px_pure = PurePath(px)
    lines = [
        _quote(top_path),
        _quote(str(px_pure.relative_to(px_pure.anchor))),
        _quote(lexical_relative(px, py)),
        _quote(_relative(px, py)),
        _quote(_relative(px, top_path)),
        _quote(lexical_relative(px, ps)),
        _quote(_relative(px, ps)),
    ]

    os.makedirs(px, exist_ok=True)
    os.makedirs(py, exist_ok=True)
    if not os.path.islink(ps):
        os.symlink(top_path, ps, target_is_directory=True)
    lines.append(f"ps: {_quote(ps)}")
    lines.append(f" -> {_quote(os.readlink(ps))}")
    lines.append(_quote(lexical_relative(px, ps)))
    lines.append(_quote(_relative(px, ps)))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Print what the path given on the command line is."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: checkpath <path> ")
        return 1
    sys.stdout.write(describe_path(args[0]))
    return 0