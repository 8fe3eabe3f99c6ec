import json

from builtin_extensions import paths, republish
from builtin_extensions.archiving import ARCHIVE_NAME


def test_republish_scopes_name_and_restores(add_extension, fake_tools):
    ext = add_extension("git", {"name": "git", "version": "1.0.0", "scripts": {"prepublish": "x"}})
    original = (ext / "package.json").read_bytes()
    published = {}

    def on_call(command, args, cwd):
        published["command"] = [str(command), *args]
        published["pck"] = json.loads((cwd / "package.json").read_text(encoding="utf-8"))

    fake_tools.on_call = on_call
    results = republish.republish_all()

    assert [r.line() for r in results] == ["@theia/vscode-builtin-git: sucessfully published"]
    assert published["command"] == ["yarn", "publish", "--access", "public", "--ignore-scripts"]
    assert published["pck"]["name"] == "@theia/vscode-builtin-git"
    assert published["pck"]["version"] == republish.DEFAULT_VERSION
    assert (ext / "package.json").read_bytes() == original


def test_marketplace_and_manifestless_dirs_are_skipped(add_extension, fake_tools):
    add_extension("ms-vscode.node-debug", {"name": "node-debug"})
    add_extension("node_modules")
    add_extension("ini", {"name": "ini"})

    results = republish.republish_all("1.0.0")

    assert [r.name for r in results] == ["@theia/vscode-builtin-ini"]
    assert [cwd.name for _, _, cwd in fake_tools.calls] == ["ini"]


def test_node_modules_archived_before_publish(add_extension, fake_tools):
    ext = add_extension("npm", {"name": "npm"})
    (ext / "node_modules" / "dep").mkdir(parents=True)
    (ext / "node_modules" / "dep" / "index.js").write_text("", encoding="utf-8")

    seen = []
    fake_tools.on_call = lambda command, args, cwd: seen.append((cwd / ARCHIVE_NAME).exists())
    republish.republish_all()

    assert seen == [True]
    assert (ext / ARCHIVE_NAME).exists()


def test_failed_archive_skips_only_that_extension(add_extension, fake_tools, monkeypatch):
    add_extension("git", {"name": "git"})
    add_extension("npm", {"name": "npm"})

    def archive(extension_dir):
        if extension_dir.name == "git":
            raise OSError("disk full")
        return None

    monkeypatch.setattr(republish, "archive_node_modules", archive)
    results = republish.republish_all()

    assert [r.name for r in results] == ["@theia/vscode-builtin-npm"]


def test_publish_failure_is_reported(add_extension, fake_tools, capsys):
    add_extension("git", {"name": "git"})
    add_extension("npm", {"name": "npm"})
    fake_tools.failing.add("npm")

    republish.main(["--root", str(paths.root())])

    lines = capsys.readouterr().out.rstrip().splitlines()
    assert lines[-2:] == [
        "@theia/vscode-builtin-git: sucessfully published",
        "@theia/vscode-builtin-npm: failed to publish",
    ]
