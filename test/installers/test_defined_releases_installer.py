import os
import zipfile
from unittest.mock import MagicMock

import pytest

from release_resolver.errors import UnknownVersionError
from release_resolver.installers.base import Installer
from release_resolver.installers.defined_releases_installer import DefinedReleasesInstaller
from release_resolver.models import Asset, InstallerDefinition, Release

COMMIT = "c" * 40


def make_release(tag: str, name: str | None = None, assets: list[str] | None = None) -> Release:
    return Release(
        tag_name=tag,
        name=name,
        assets=[Asset(name=a, browser_download_url=f"https://example.com/{tag}/{a}") for a in (assets or [])],
    )


@pytest.fixture
def definition():
    return InstallerDefinition(
        name="neovim",
        repository="neovim/neovim",
        asset_name_pattern=r"^nvim-linux64\.zip$",
        executable_name="nvim",
        bin_dir="nvim-linux64/bin",
    )


@pytest.fixture
def github():
    github = MagicMock()
    github.iter_releases.side_effect = lambda repo: iter([
        make_release("nightly", assets=["nvim-linux64.zip"]),
        make_release("stable", assets=["nvim-linux64.zip"]),
        make_release("v0.10.0", assets=["nvim-linux64.zip", "nvim-win64.zip"]),
    ])
    return github


@pytest.fixture
def fetcher():
    return MagicMock()


@pytest.fixture
def installer(definition, github, fetcher, tmp_path):
    return DefinedReleasesInstaller(definition, str(tmp_path / "tools"), github, fetcher)


def test_capabilities(installer, tmp_path):
    assert isinstance(installer, Installer)
    assert installer.repository == "neovim/neovim"
    assert installer.asset_name_pattern.pattern == r"^nvim-linux64\.zip$"
    assert installer.get_executable_name() == "nvim"
    assert installer.install_type == "download"
    assert installer.can_install("anything")
    assert installer.is_gui is False
    assert installer.get_path("v0.10.0") == os.path.join(str(tmp_path / "tools"), "neovim", "v0.10.0", "nvim-linux64/bin")


def test_get_path_without_bin_dir(github, fetcher, tmp_path):
    definition = InstallerDefinition(
        name="vim", repository="vim/vim-win32-installer", asset_name_pattern="gvim", executable_name="vim.exe",
    )
    installer = DefinedReleasesInstaller(definition, str(tmp_path), github, fetcher)
    assert installer.get_path("v9.1.0") == os.path.join(str(tmp_path), "vim", "v9.1.0")


def test_to_version_string_from_name(github, fetcher, tmp_path):
    definition = InstallerDefinition(
        name="vim", repository="vim/vim-win32-installer", asset_name_pattern="gvim",
        executable_name="vim.exe", version_source="name",
    )
    installer = DefinedReleasesInstaller(definition, str(tmp_path), github, fetcher)
    assert installer.to_version_string(make_release("tag-1", name="v9.1.0100")) == "v9.1.0100"
    assert installer.to_version_string(make_release("tag-1")) == "tag-1"


def test_head_resolves_floating_release_through_commit(installer, github):
    github.get_first_page_releases.return_value = [make_release("nightly"), make_release("v0.10.0")]
    github.resolve_tag_commit.side_effect = lambda repo, tag: {"nightly": COMMIT, "v0.10.0": "d" * 40}[tag]

    version = installer.resolve_version("head")
    assert version == COMMIT
    assert installer.releases.find_by_version(COMMIT).tag_name == "nightly"


def test_download_requires_resolution(installer, fetcher):
    with pytest.raises(UnknownVersionError):
        installer.download_asset("v0.10.0")
    fetcher.fetch.assert_not_called()


def test_resolve_then_download(installer, fetcher):
    fetcher.fetch.return_value = "/tmp/nvim-linux64.zip"
    version = installer.resolve_version("v0.10.0")
    assert version == "v0.10.0"
    assert installer.download_asset(version) == "/tmp/nvim-linux64.zip"
    fetcher.fetch.assert_called_once_with("https://example.com/v0.10.0/nvim-linux64.zip")


def test_install_unpacks_archive(installer, fetcher, tmp_path):
    archive = tmp_path / "nvim-linux64.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("nvim-linux64/bin/nvim", "#!/bin/sh\n")
    fetcher.fetch.return_value = str(archive)

    version = installer.resolve_version("v0.10.0")
    installer.install(version)

    assert os.path.isfile(os.path.join(installer.get_path(version), "nvim"))
