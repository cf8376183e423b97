import os
import shutil

import pytest

from image_release.errors import ManifestNotFoundError, VersionNotFoundError
from image_release.repositories.manifest_repository import ManifestRepository

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


@pytest.fixture
def manifest_file(tmp_path):
    dest_file = tmp_path / "Cargo.toml"
    shutil.copy(os.path.join(ASSETS_DIR, "Cargo.toml"), dest_file)
    return dest_file


def test_find_version(manifest_file):
    version = ManifestRepository(str(manifest_file)).find_version()
    assert version.number == "0.9.3"
    assert version.prerelease is False


def test_find_version_beta():
    version = ManifestRepository(os.path.join(ASSETS_DIR, "Cargo-beta.toml")).find_version()
    assert version.number == "2.0.1"
    assert version.prerelease is True


def test_first_match_wins(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nversion = "1.4.0"\nrust-version = "1.70"\n')
    assert ManifestRepository(str(manifest)).find_version().number == "1.4.0"


def test_only_prefix_is_scanned(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "app"\ndescription = "x"\nversion = "1.0.0"\n')
    with pytest.raises(VersionNotFoundError):
        ManifestRepository(str(manifest)).find_version()
    assert ManifestRepository(str(manifest), lines=4).find_version().number == "1.0.0"


def test_beta_marker_outside_prefix_is_ignored(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nversion = "3.1.0"\nname = "app"\n# beta channel\n')
    version = ManifestRepository(str(manifest)).find_version()
    assert version.prerelease is False


def test_marker_is_case_sensitive(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nversion = "3.1.0-BETA"\n')
    assert ManifestRepository(str(manifest)).find_version().prerelease is False


def test_dots_alone_are_not_a_version(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "app..."\nversion = "0.2.0"\n')
    assert ManifestRepository(str(manifest)).find_version().number == "0.2.0"


def test_missing_version(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "app"\n')
    with pytest.raises(VersionNotFoundError, match="No version found"):
        ManifestRepository(str(manifest)).find_version()


def test_missing_manifest(tmp_path):
    with pytest.raises(ManifestNotFoundError):
        ManifestRepository(str(tmp_path / "nope.toml")).find_version()


def test_marker_in_package_name_counts(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "alphabeta-node"\nversion = "1.0.0"\n')
    version = ManifestRepository(str(manifest)).find_version()
    assert version.number == "1.0.0"
    assert version.prerelease is True
