import shutil

from . import paths

TS_EXTENSION = "typescript-language-features"
DEPS_DIR = "deps"
ORIGINAL_REFERENCE = '"vscode.typescript-language-features",["..","node_modules"]'
PATCHED_REFERENCE = '"vscode.typescript-language-features",[".","deps"]'


def patch_entry_file(path, original=ORIGINAL_REFERENCE, patched=PATCHED_REFERENCE):
    """Rewrite the module path reference in a compiled entry file.

    Only touches the file while the original reference is still there,
    so running it again is a no-op. Returns True if the file was changed.
    """
    # newline="" keeps CRLF endings untouched
    with path.open("r", encoding="utf-8", newline="") as f:
        content = f.read()
    if original not in content:
        print("TS language extension is already patched")
        return False
    print("TS language compiled extension is original - patching")
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(content.replace(original, patched))
    return True


def bundle_typescript_deps():
    """Ship extensions/node_modules inside typescript-language-features.

    The TS language server is resolved from ../node_modules at runtime,
    which does not exist once the extension is a standalone .vsix.
    """
    node_modules = paths.extensions("node_modules")
    ts_extension = paths.extensions(TS_EXTENSION)
    if not (node_modules.exists() and ts_extension.exists()):
        return False
    print(f"Copying node_modules under {TS_EXTENSION}")
    shutil.copytree(node_modules, ts_extension / DEPS_DIR, dirs_exist_ok=True)
    patch_entry_file(ts_extension / "dist" / "extension.js")
    return True
