import os
from pathlib import Path

ROOT_ENV = "BUILTIN_EXTENSIONS_ROOT"

_root = Path(os.environ.get(ROOT_ENV, Path.cwd())).resolve()


def set_root(path):
    """Point every location below at a different checkout."""
    global _root
    _root = Path(path).resolve()


def root(*parts):
    return _root.joinpath(*parts)


def vscode(*parts):
    return root("vscode", *parts)


def extensions(*parts):
    return vscode("extensions", *parts)


def dist(*parts):
    return root("dist", *parts)
