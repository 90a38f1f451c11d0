"""Upward path resolution relative to the current working directory."""

from __future__ import annotations

from pathlib import Path

from recorder.errors import ConfigError, PathNotFoundError


def resolve_upward(fragment: str | Path, start: Path | None = None) -> Path:
    """
    Find ``fragment`` in the working directory or the nearest ancestor.

    Given a cwd of ``/home/user/project/build`` and ``test/recordings``,
    the candidates are tried in this order:

    - ``/home/user/project/build/test/recordings``
    - ``/home/user/project/test/recordings``
    - ``/home/user/test/recordings``
    - ``/home/test/recordings``
    - ``/test/recordings``

    Absolute fragments are returned verbatim without any check.

    Raises:
        PathNotFoundError: No candidate exists. The error lists every
            candidate in search order.
    """
    fragment = Path(fragment)
    if fragment.is_absolute():
        return fragment

    current = Path.cwd() if start is None else Path(start).absolute()
    searched_paths: list[Path] = []

    while True:
        candidate = current / fragment
        searched_paths.append(candidate)
        if candidate.exists():
            return candidate

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise PathNotFoundError(fragment, searched_paths)


def resolve_recording_dir(path: str | Path) -> Path:
    """
    Resolve a recording directory argument to an absolute path.

    A bare name (no directory component) is taken relative to the cwd and
    is not searched for; anything with a directory component is searched
    upward with :func:`resolve_upward`. An empty path is rejected, and
    since pathlib normalizes it to ``"."`` so is ``"."``.
    """
    path = Path(path)
    if path == Path(""):
        raise ConfigError("Recording path must not be empty")
    if path.is_absolute():
        return path

    cwd = Path.cwd()
    if path.parent == Path("."):
        return cwd / path.name

    return resolve_upward(path, start=cwd)
