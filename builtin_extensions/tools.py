import subprocess
from pathlib import Path

from . import paths

# Anything here means the external tool did not do its job
TOOL_ERRORS = (subprocess.CalledProcessError, OSError)


def run(command, args, cwd):
    """Run an external tool in `cwd` and return its stdout.

    Raises CalledProcessError on a non-zero exit.
    """
    result = subprocess.run(
        [str(command), *args],
        cwd=str(cwd),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        check=True,
    )
    return result.stdout


def vsce_path():
    """Locate the vsce binary installed by yarn in the root workspace."""
    bin_dir = run("yarn", ["bin"], paths.root()).strip()
    return Path(bin_dir) / "vsce"


def short_revision():
    return run("git", ["rev-parse", "--short", "HEAD"], paths.vscode()).strip()


def describe_failure(error):
    """Print a tool failure, including whatever it wrote to stderr."""
    print(f"Error: {error}")
    stderr = getattr(error, "stderr", None)
    if stderr:
        print(stderr.rstrip())
