"""Shared fixtures: on-disk restore layouts with package folders and nuspec files."""

import json
import os

import pytest

from constants import Constants

NUSPEC_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<package xmlns="http://schemas.microsoft.com/packaging/2013/05/nuspec.xsd">
  <metadata>
    <id>{id}</id>
    <version>{version}</version>
    <authors>Example</authors>
    <description>Test package</description>
{tags_element}  </metadata>
</package>
"""


def write_nuspec(folder_root, package_path, file_name, package_id, version, tags=None):
    """Write a nuspec under ``folder_root/package_path`` and return its path."""
    target_dir = os.path.join(str(folder_root), package_path)
    os.makedirs(target_dir, exist_ok=True)
    tags_element = f"    <tags>{tags}</tags>\n" if tags is not None else ""
    path = os.path.join(target_dir, file_name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(NUSPEC_TEMPLATE.format(id=package_id, version=version, tags_element=tags_element))
    return path


def library_entry(name, version, files=None, lib_type="package", path=None):
    """Build one ``libraries`` entry of project.assets.json."""
    if files is None and lib_type != "package":
        files = []
    if files is None:
        files = [
            f"{name.lower()}.{version}.nupkg.sha512",
            f"{name.lower()}.nuspec",
            f"lib/net8.0-android34.0/{name}.dll",
        ]
    entry = {"type": lib_type, "files": files}
    if lib_type == "package":
        entry["path"] = path or f"{name.lower()}/{version.lower()}"
    else:
        entry["path"] = path or f"../{name}/{name}.csproj"
    return entry


def write_assets(path, libraries, package_folders):
    """Write a minimal project.assets.json and return its path."""
    data = {
        "version": 3,
        "targets": {"net8.0-android34.0": {}},
        "libraries": libraries,
        "packageFolders": {folder: {} for folder in package_folders},
        "project": {"version": "1.0.0"},
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return str(path)


@pytest.fixture
def restore_layout(tmp_path):
    """Two package folder roots plus a writer for project.assets.json in tmp_path."""
    first = tmp_path / "packages"
    second = tmp_path / "fallback"
    first.mkdir()
    second.mkdir()

    def _write(libraries):
        return write_assets(
            tmp_path / Constants.RESTORE_INDEX_FILE, libraries, [str(first), str(second)]
        )

    return {"first": str(first), "second": str(second), "write": _write}


@pytest.fixture
def restore_constants():
    """Undo any Constants overrides a test applies."""
    saved = {k: v for k, v in vars(Constants).items() if k.isupper()}
    yield Constants
    for key, value in saved.items():
        setattr(Constants, key, value)
