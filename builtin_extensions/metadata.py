BUILTIN_SUFFIX = " (built-in)"
KEYWORDS = ["Built-in"]
REPOSITORY = {
    "type": "git",
    "url": "https://github.com/theia-ide/vscode-builtin-extensions",
}
LICENSE_FILE = "LICENSE-vscode.txt"
LICENSE = f"SEE LICENSE IN {LICENSE_FILE}"
SCOPE_PREFIX = "@theia/vscode-builtin-"


def _capitalize(word):
    return word[:1].upper() + word[1:]


def display_name(extension, nls):
    """Localized display name when available, else one made from the folder name."""
    if nls.get("displayName"):
        return nls["displayName"] + BUILTIN_SUFFIX
    words = extension.replace("-", " ").split()
    return " ".join(_capitalize(w) for w in words) + BUILTIN_SUFFIX


def description(manifest, nls):
    if nls.get("description"):
        return nls["description"]
    return ("Built-in extension that adds (potentially basic) support for "
            + _capitalize(manifest.get("name", "")))


def rewrite_for_packaging(manifest, nls, *, extension, version, tag):
    """Return the manifest vsce should see for a built-in extension.

    `name` and `publisher` are left alone: dependent extensions look
    this one up by them.
    """
    pck = dict(manifest)
    pck["displayName"] = display_name(extension, nls)
    pck["description"] = description(manifest, nls)
    pck["keywords"] = list(KEYWORDS)
    pck["repository"] = dict(REPOSITORY)
    pck["version"] = version
    pck["license"] = LICENSE
    if tag == "next":
        pck["preview"] = "true"
    # keep vsce from running hooks such as "vscode:prepublish"
    pck["scripts"] = {}
    return pck


def rewrite_for_republish(manifest, *, version):
    pck = dict(manifest)
    pck["name"] = SCOPE_PREFIX + manifest["name"]
    pck["version"] = version
    return pck


def generate_readme(extension):
    """A very basic README explaining what the packaged extension is."""
    return f"""# Built-in extension: {extension}

## Disclaimer

Microsoft does not endorse, build, test or publish this extension, nor are they involved with it in any other way. The only association is that they own the copyright of these extensions and the rest of vscode's [source code](https://github.com/microsoft/vscode/tree/master/extensions), which they released under the [MIT License](https://github.com/microsoft/vscode/blob/master/LICENSE.txt). A copy of the license is included in this extension. See {LICENSE_FILE}

    "Original VS Code sources are Copyright (c) 2015 - present Microsoft Corporation."


## What is this extension? Do I need it?

TL;DR: If you are running `VS Code`, `Code OSS` or derived product built from the VS Code repository, such as [VSCodium](https://github.com/VSCodium/vscodium), you do not need to install this extension since it's already present - "built-in".

Built-in extensions are built-along and included in `VS Code` and `Code OSS`. In consequence they may be expected to be present and used by other extensions. They are part of the [vscode GitHub repository](https://github.com/microsoft/vscode/tree/master/) and generally contribute basic functionality such as textmate grammars, used for syntax-highlighting, for some of the most popular programming languages. In some cases, more substantial features are contributed through built-in extensions (e.g. Typescript, Markdown, git, ...). Please see the description above to learn what this specific extension does.

To learn more about built-in extensions, including how they are built and packaged, please see [vscode-builtin-extensions](https://github.com/theia-ide/vscode-builtin-extensions).
"""
