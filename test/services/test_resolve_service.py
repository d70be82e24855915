import json
import os
from unittest.mock import patch

import pytest

from release_resolver.errors import TargetReleaseNotFoundError
from release_resolver.models import Asset, Release
from release_resolver.services.resolve_service import ResolveService

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
INSTALLERS_FILE = os.path.join(ASSETS_DIR, "installers.yaml")


def make_release(tag: str) -> Release:
    return Release(tag_name=tag, assets=[
        Asset(name="nvim-linux64.tar.gz", browser_download_url=f"https://example.com/{tag}/nvim-linux64.tar.gz"),
    ])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("RUNNER_TOOL_CACHE", raising=False)
    monkeypatch.delenv("RUNNER_TEMP", raising=False)


@pytest.fixture
def mock_github():
    with patch("release_resolver.services.resolve_service.GitHubClient") as p:
        github = p.return_value
        github.iter_releases.side_effect = lambda repo: iter([make_release("v0.10.0"), make_release("v0.9.5")])
        yield github


@pytest.fixture
def mock_fetcher():
    with patch("release_resolver.services.resolve_service.DownloadClient") as p:
        yield p.return_value


def test_dry_run_resolves_without_download(mock_github, mock_fetcher, capsys):
    service = ResolveService(INSTALLERS_FILE, None, "neovim", "v0.9.0", install=True, dry_run=True)
    service.run()

    mock_fetcher.fetch.assert_not_called()
    output = json.loads(capsys.readouterr().out)
    assert output == {
        "installer": "neovim",
        "request": "v0.9.0",
        "version": "v0.9.5",
        "tag_name": "v0.9.5",
        "asset": "nvim-linux64.tar.gz",
        "path": None,
    }


def test_install_downloads_and_unpacks(mock_github, mock_fetcher, tmp_path):
    service = ResolveService(INSTALLERS_FILE, None, "neovim", "head", install=True)
    with patch("release_resolver.services.resolve_service.DefinedReleasesInstaller.install") as install:
        service.run()
        install.assert_called_once_with("v0.10.0")
    assert service.result.version == "v0.10.0"
    assert service.result.path.endswith(os.path.join("neovim", "v0.10.0", "nvim-linux64/bin"))


def test_install_dir_from_runner_env(monkeypatch, mock_github, mock_fetcher):
    monkeypatch.setenv("RUNNER_TOOL_CACHE", "/runner/tool-cache")
    service = ResolveService(INSTALLERS_FILE, None, "neovim", "head")
    installer = service.build_installer()
    assert installer.install_dir == "/runner/tool-cache"


def test_unknown_installer(mock_github, mock_fetcher):
    service = ResolveService(INSTALLERS_FILE, None, "emacs", "head")
    with pytest.raises(ValueError, match="Unknown installer: emacs"):
        service.run()


def test_resolution_errors_propagate(mock_github, mock_fetcher):
    service = ResolveService(INSTALLERS_FILE, None, "neovim", "v1.0.0")
    with pytest.raises(TargetReleaseNotFoundError):
        service.run()
