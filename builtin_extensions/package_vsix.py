"""Package each built-in VS Code extension as its own .vsix."""
import argparse
import sys
from pathlib import Path

from . import paths, tools
from .manifest import MANIFEST, read_overlay, run_cycle, summarize
from .metadata import LICENSE_FILE, generate_readme, rewrite_for_packaging
from .patching import bundle_typescript_deps
from .versioning import TAGS, reference_version, resolve_version

SUCCESS_FORMAT = "sucessfully packaged: {name}"
FAILURE_FORMAT = "failed to packaged: {name}"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Package built-in VS Code extensions as .vsix files.")
    parser.add_argument("--tag", choices=TAGS, required=True,
                        help="latest reuses the VS Code version, next derives a pre-release from HEAD")
    parser.add_argument("--root", type=Path, default=None,
                        help=f"checkout containing vscode/ (default: ${paths.ROOT_ENV} or cwd)")
    return parser.parse_args(argv)


def package_extension(extension, version, tag, vsce):
    """Package one extension directory; None when it has no manifest."""
    extension_dir = paths.extensions(extension)
    pck_path = extension_dir / MANIFEST
    if not pck_path.exists():
        return None

    nls = read_overlay(extension_dir)
    scratch = {
        extension_dir / "README.md": generate_readme(extension),
        extension_dir / LICENSE_FILE: paths.vscode("LICENSE.txt"),
    }

    def transform(pck):
        return rewrite_for_packaging(pck, nls, extension=extension, version=version, tag=tag)

    def action(pck):
        tools.run(vsce, ["package", "--yarn", "-o", str(paths.dist())], extension_dir)

    return run_cycle(pck_path, transform, action, scratch=scratch,
                     success_format=SUCCESS_FORMAT, failure_format=FAILURE_FORMAT,
                     label="packaging vsix: {name} ...")


def package_all(tag):
    """Package every extension and return the per-extension results."""
    reference = reference_version(paths.vscode(MANIFEST))
    vsce = tools.vsce_path()
    version = resolve_version(tag, reference, tools.short_revision)
    print(f"Packaging builtins from VS Code version: {version}\n")

    bundle_typescript_deps()
    paths.dist().mkdir(parents=True, exist_ok=True)

    results = []
    for extension in sorted(p.name for p in paths.extensions().iterdir() if p.is_dir()):
        result = package_extension(extension, version, tag, vsce)
        if result is not None:
            results.append(result)
    return results


def main(argv=None):
    args = parse_args(argv)
    if args.root is not None:
        paths.set_root(args.root)
    results = package_all(args.tag)
    print(summarize(results))


if __name__ == "__main__":
    sys.exit(main())
