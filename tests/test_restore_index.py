"""Tests for restore index loading and library lookup."""

import pytest

from conftest import library_entry, write_assets
from errors import IndexLoadError
from restore import load_restore_index, versions_equal


@pytest.fixture
def index(tmp_path):
    libraries = {
        "Xamarin.AndroidX.Core/1.9.0": library_entry("Xamarin.AndroidX.Core", "1.9.0"),
        "Xamarin.AndroidX.Core/1.10.0-beta1": library_entry("Xamarin.AndroidX.Core", "1.10.0-beta1"),
        "Newtonsoft.Json/13.0.1": library_entry("Newtonsoft.Json", "13.0.1", files=["lib/a.dll"]),
        "MyLib/1.0.0": library_entry("MyLib", "1.0.0", lib_type="project"),
    }
    path = write_assets(tmp_path / "project.assets.json", libraries, ["/b/packages/", "/a/fallback/"])
    return load_restore_index(path)


class TestLoadRestoreIndex:
    """Test loading project.assets.json."""

    def test_package_folder_roots_in_order(self, index):
        assert index.package_folder_roots() == ["/b/packages/", "/a/fallback/"]

    def test_records_parsed(self, index):
        record = index.get_library("Xamarin.AndroidX.Core", "1.9.0")
        assert record is not None
        assert record.path == "xamarin.androidx.core/1.9.0"
        assert record.files[1] == "xamarin.androidx.core.nuspec"

    def test_coordinates_skip_projects(self, index):
        coords = index.coordinates()
        assert ("Newtonsoft.Json", "13.0.1") in coords
        assert ("MyLib", "1.0.0") not in coords

    def test_missing_file(self, tmp_path):
        with pytest.raises(IndexLoadError) as exc:
            load_restore_index(str(tmp_path / "nope.json"))
        assert "nope.json" in exc.value.message

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "project.assets.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(IndexLoadError):
            load_restore_index(str(path))

    def test_bad_library_key(self, tmp_path):
        path = write_assets(tmp_path / "project.assets.json", {"NoVersion": {"type": "package"}}, [])
        with pytest.raises(IndexLoadError):
            load_restore_index(path)

    def test_non_object_top_level(self, tmp_path):
        path = tmp_path / "project.assets.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(IndexLoadError):
            load_restore_index(str(path))

    def test_utf8_bom(self, tmp_path):
        path = tmp_path / "project.assets.json"
        path.write_bytes(b'\xef\xbb\xbf{"libraries": {}, "packageFolders": {"/p/": {}}}')
        assert load_restore_index(str(path)).package_folder_roots() == ["/p/"]


class TestGetLibrary:
    """Test library lookup by coordinate."""

    def test_name_case_insensitive(self, index):
        assert index.get_library("xamarin.androidx.core", "1.9.0") is not None

    def test_semantically_equal_version(self, index):
        assert index.get_library("Newtonsoft.Json", "13.0.1.0") is not None
        assert index.get_library("Newtonsoft.Json", "13.0") is None

    def test_prerelease_significant(self, index):
        record = index.get_library("Xamarin.AndroidX.Core", "1.10.0-beta1")
        assert record.version == "1.10.0-beta1"
        assert index.get_library("Xamarin.AndroidX.Core", "1.10.0") is None

    def test_not_found(self, index):
        assert index.get_library("nonexistent.pkg", "9.9.9") is None

    def test_project_references_returned(self, index):
        record = index.get_library("MyLib", "1.0.0")
        assert record is not None
        assert record.type == "project"
        assert not record.is_package
        assert record.files == []


class TestVersionsEqual:
    """Test semantic version equality."""

    @pytest.mark.parametrize("left,right", [
        ("1.0.0", "1.0.0"),
        ("1.0", "1.0.0"),
        ("1.0.0.0", "1.0.0"),
        ("1.0.0.5", "1.0.0.5"),
        ("1.0.0.5-beta", "1.0.0.5-Beta"),
        ("1.0.0-Beta1", "1.0.0-beta1"),
        ("1.0.0+abc", "1.0.0+abc"),
    ])
    def test_equal(self, left, right):
        assert versions_equal(left, right)

    @pytest.mark.parametrize("left,right", [
        ("1.0.0", "1.0.1"),
        ("1.0.0-beta1", "1.0.0"),
        ("1.0.0+abc", "1.0.0+def"),
        ("1.0.0+abc", "1.0.0"),
        ("1.0.0.5", "1.0.0+5"),
        ("1.0.0.5", "1.0.0"),
        ("1.0.0.5", "1.0.0.6"),
    ])
    def test_not_equal(self, left, right):
        assert not versions_equal(left, right)

    def test_unparseable_falls_back_to_text(self):
        assert versions_equal("latest", "LATEST")
        assert not versions_equal("latest", "1.0.0")
