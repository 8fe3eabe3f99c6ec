import os
import zipfile
from pathlib import Path

NODE_MODULES = "node_modules"
ARCHIVE_NAME = "vscode_node_modules.zip"

# Raised by archive creation; the extension is skipped, not the run
ARCHIVE_ERRORS = (OSError, zipfile.BadZipFile, zipfile.LargeZipFile)


def zip_directory(source, target):
    """Zip everything below `source` into `target`, paths relative to `source`."""
    source = Path(source)
    with zipfile.ZipFile(target, "w", zipfile.ZIP_DEFLATED) as zipf:
        for root, dirs, files in os.walk(source, followlinks=True):
            dirs.sort()
            for file in sorted(files):
                abs_path = os.path.join(root, file)
                zipf.write(abs_path, os.path.relpath(abs_path, source))
    return Path(target).stat().st_size


def archive_node_modules(extension_dir):
    """Zip the extension's node_modules next to its manifest, if it has any."""
    extension_dir = Path(extension_dir)
    node_modules = extension_dir / NODE_MODULES
    if not node_modules.exists():
        return None
    target = extension_dir / ARCHIVE_NAME
    size = zip_directory(node_modules, target)
    print(f"{size} total bytes")
    print(f"Archived {node_modules} to {target}")
    return target
