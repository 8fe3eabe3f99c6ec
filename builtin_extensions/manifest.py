import json
import os
import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .tools import TOOL_ERRORS, describe_failure

MANIFEST = "package.json"
NLS = "package.nls.json"


class RestoreError(Exception):
    """The original manifest could not be put back."""


class Outcome(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ItemResult:
    """Outcome of processing one extension, rendered as a summary line."""
    name: str
    outcome: Outcome
    success_format: str
    failure_format: str

    @property
    def succeeded(self):
        return self.outcome is Outcome.SUCCEEDED

    def line(self):
        fmt = self.success_format if self.succeeded else self.failure_format
        return fmt.format(name=self.name)


def summarize(results):
    return os.linesep.join(result.line() for result in results)


def read_manifest(path):
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def read_overlay(extension_dir):
    """Localized strings for an extension, empty when it ships none."""
    nls_path = Path(extension_dir) / NLS
    if not nls_path.exists():
        return {}
    return read_manifest(nls_path)


def write_manifest(path, data):
    with Path(path).open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def _write_scratch(target, source):
    if isinstance(source, Path):
        shutil.copyfile(source, target)
    else:
        target.write_text(source, encoding="utf-8")


@contextmanager
def mutated_manifest(path, transform, scratch=None):
    """Keep `transform(manifest)` on disk for the duration of the block.

    `scratch` maps extra file paths to either text content or a Path to
    copy from. On exit, however the block ends, the manifest gets its
    original bytes back and scratch files are removed (or restored when
    something was already there).
    """
    path = Path(path)
    original = path.read_bytes()
    manifest = transform(json.loads(original.decode("utf-8")))
    scratch = {Path(target): source for target, source in (scratch or {}).items()}
    displaced = {}
    try:
        write_manifest(path, manifest)
        for target, source in scratch.items():
            if target.exists():
                displaced[target] = target.read_bytes()
            _write_scratch(target, source)
        yield manifest
    finally:
        try:
            path.write_bytes(original)
            for target in scratch:
                if target in displaced:
                    target.write_bytes(displaced[target])
                elif target.exists():
                    target.unlink()
        except OSError as e:
            raise RestoreError(f"could not restore {path}") from e


def run_cycle(path, transform, action, *, success_format, failure_format,
              scratch=None, label=None):
    """Run `action(manifest)` with the mutated manifest on disk.

    Tool failures are reported and turned into a failed result; the
    manifest is restored either way. RestoreError is not caught.
    """
    name = transform(read_manifest(path)).get("name")
    if label:
        print(label.format(name=name))
    try:
        with mutated_manifest(path, transform, scratch) as manifest:
            action(manifest)
    except TOOL_ERRORS as e:
        describe_failure(e)
        return ItemResult(name, Outcome.FAILED, success_format, failure_format)
    return ItemResult(name, Outcome.SUCCEEDED, success_format, failure_format)
