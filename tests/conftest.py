import json
import subprocess
from pathlib import Path

import pytest

from builtin_extensions import paths, tools


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")


@pytest.fixture()
def workspace(tmp_path):
    """A root with vscode/package.json, a LICENSE and an empty extensions dir."""
    previous = paths.root()
    paths.set_root(tmp_path)
    write_json(paths.vscode("package.json"), {"name": "code-oss-dev", "version": "1.4.0"})
    paths.vscode("LICENSE.txt").write_text("MIT License\n", encoding="utf-8")
    paths.extensions().mkdir(parents=True, exist_ok=True)
    yield tmp_path
    paths.set_root(previous)


@pytest.fixture()
def add_extension(workspace):
    def _add(name, manifest=None, nls=None):
        ext_dir = paths.extensions(name)
        ext_dir.mkdir(parents=True, exist_ok=True)
        if manifest is not None:
            write_json(ext_dir / "package.json", manifest)
        if nls is not None:
            write_json(ext_dir / "package.nls.json", nls)
        return ext_dir
    return _add


class FakeTools:
    """Records tool invocations; commands run in a failing dir exit non-zero."""

    def __init__(self, revision="abc1234"):
        self.calls = []
        self.failing = set()
        self.revision = revision
        self.on_call = None

    def __call__(self, command, args, cwd):
        self.calls.append((str(command), list(args), Path(cwd)))
        if self.on_call:
            self.on_call(command, args, Path(cwd))
        if args == ["bin"]:
            return "/opt/yarn/bin\n"
        if args[:2] == ["rev-parse", "--short"]:
            return self.revision + "\n"
        if Path(cwd).name in self.failing:
            raise subprocess.CalledProcessError(1, [str(command), *args], stderr="boom")
        return ""


@pytest.fixture()
def fake_tools(monkeypatch):
    fake = FakeTools()
    monkeypatch.setattr(tools, "run", fake)
    return fake
