from .manifest import read_manifest

TAGS = ("latest", "next")
DEFAULT_VERSION = "0.0.1"


def reference_version(path):
    """Version of the VS Code checkout; a missing field falls back to the default."""
    return read_manifest(path).get("version") or DEFAULT_VERSION


def next_version(version, revision):
    parts = version.split(".")
    if len(parts) < 2 or not parts[1].isdigit():
        raise ValueError(
            f"cannot derive a next version from {version!r} in vscode/package.json: "
            "expected <major>.<minor>[.<patch>]")
    major, minor = parts[:2]
    return f"{major}.{int(minor) + 1}.0-next.{revision}"


def resolve_version(tag, reference, revision_lookup):
    """Version stamped on every extension for this run.

    `latest` reuses the reference version as is; `next` asks
    `revision_lookup` for the short commit once and derives a pre-release.
    """
    if tag not in TAGS:
        raise ValueError(f"unknown tag {tag!r}, expected one of {', '.join(TAGS)}")
    if tag == "next":
        return next_version(reference, revision_lookup())
    return reference
