"""Republish built-in VS Code extensions to npm under the @theia/vscode-builtin- scope."""
import argparse
import sys
from pathlib import Path

from . import paths, tools
from .archiving import ARCHIVE_ERRORS, archive_node_modules
from .manifest import MANIFEST, run_cycle, summarize
from .metadata import rewrite_for_republish

DEFAULT_VERSION = "0.2.1"
# marketplace extensions are not ours to republish
SKIPPED_PREFIXES = ("ms-vscode",)
PUBLISH_ARGS = ["publish", "--access", "public", "--ignore-scripts"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Republish built-in VS Code extensions to npm.")
    parser.add_argument("--version", default=DEFAULT_VERSION,
                        help=f"version to publish under (default: {DEFAULT_VERSION})")
    parser.add_argument("--root", type=Path, default=None,
                        help=f"checkout containing vscode/ (default: ${paths.ROOT_ENV} or cwd)")
    return parser.parse_args(argv)


def republish_extension(extension, version):
    """Publish one extension; None when it is skipped."""
    if extension.startswith(SKIPPED_PREFIXES):
        return None
    extension_dir = paths.extensions(extension)
    pck_path = extension_dir / MANIFEST
    if not pck_path.exists():
        return None

    try:
        archive_node_modules(extension_dir)
    except ARCHIVE_ERRORS as e:
        print(f"Error: could not archive node_modules of {extension}: {e}")
        return None

    def transform(pck):
        return rewrite_for_republish(pck, version=version)

    def action(pck):
        tools.run("yarn", PUBLISH_ARGS, extension_dir)

    return run_cycle(pck_path, transform, action,
                     success_format="{name}: sucessfully published",
                     failure_format="{name}: failed to publish",
                     label="{name} : publishing...")


def republish_all(version=DEFAULT_VERSION):
    results = []
    for extension in sorted(p.name for p in paths.extensions().iterdir() if p.is_dir()):
        result = republish_extension(extension, version)
        if result is not None:
            results.append(result)
    return results


def main(argv=None):
    args = parse_args(argv)
    if args.root is not None:
        paths.set_root(args.root)
    print(summarize(republish_all(args.version)))


if __name__ == "__main__":
    sys.exit(main())
