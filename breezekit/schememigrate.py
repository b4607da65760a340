"""Switch a user from the old Breeze colour scheme to Breeze Light."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

_DEFAULT_GROUP = ""
_SCHEME_FILE = Path("color-schemes") / "BreezeLight.colors"

Groups = dict[str, dict[str, str]]


def _parse(text: str) -> Groups:
    groups: Groups = {_DEFAULT_GROUP: {}}
    current = groups[_DEFAULT_GROUP]
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            current = groups.setdefault(line[1:-1], {})
            continue
        key, sep, value = line.partition("=")
        if sep:
            current[key.strip()] = value.strip()
    return groups


def _serialize(groups: Groups) -> str:
    chunks = []
    default = groups.get(_DEFAULT_GROUP, {})
    if default:
        chunks.append("".join(f"{key}={value}\n" for key, value in default.items()))
    for name, entries in groups.items():
        if name == _DEFAULT_GROUP:
            continue
        body = "".join(f"{key}={value}\n" for key, value in entries.items())
        chunks.append(f"[{name}]\n{body}")
    return "\n".join(chunks)


def _read(path: Path) -> Groups:
    try:
        return _parse(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {_DEFAULT_GROUP: {}}


def _config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def _data_dirs() -> list[Path]:
    home = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    system = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    return [home] + [Path(entry) for entry in system.split(":") if entry]


def _find_scheme() -> Path | None:
    for directory in _data_dirs():
        candidate = directory / _SCHEME_FILE
        if candidate.is_file():
            return candidate
    return None


def migrate(globals_path: str | os.PathLike | None = None,
            scheme_path: str | os.PathLike | None = None) -> bool:
    """Copy the Breeze Light scheme into the globals file if it uses Breeze.

    Returns True when the globals file was rewritten.
    """
    globals_file = Path(globals_path) if globals_path is not None else _config_home() / "kdeglobals"
    settings = _read(globals_file)
    if settings.get("General", {}).get("ColorScheme", "") != "Breeze":
        return False

    scheme_file = Path(scheme_path) if scheme_path is not None else _find_scheme()
    if scheme_file is None or not scheme_file.is_file():
        return False

    scheme = _read(scheme_file)
    for name, entries in scheme.items():
        if name == _DEFAULT_GROUP:
            continue
        settings.setdefault(name, {}).update(entries)

    globals_file.parent.mkdir(parents=True, exist_ok=True)
    globals_file.write_text(_serialize(settings), encoding="utf-8")
    return True


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; always exits successfully."""
    parser = argparse.ArgumentParser(
        description="Replace the Breeze colour scheme with Breeze Light in kdeglobals."
    )
    parser.add_argument("--globals", dest="globals_path", help="path of the kdeglobals file")
    parser.add_argument("--scheme", dest="scheme_path", help="path of BreezeLight.colors")
    args = parser.parse_args(argv)
    migrate(args.globals_path, args.scheme_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())