"""Unit tests for Chrome discovery."""

from pathlib import Path

import pytest

from folio.contexts.rendering import BrowserNotFoundError, find_chrome_path
from folio.contexts.rendering import browser


@pytest.fixture(autouse=True)
def no_chrome_env(monkeypatch):
    monkeypatch.delenv("CHROME_PATH", raising=False)
    monkeypatch.delenv("LOCALAPPDATA", raising=False)


@pytest.mark.unit
def test_env_variable_wins(monkeypatch, tmp_path):
    """Test that CHROME_PATH is used without checking other locations."""
    chrome = tmp_path / "custom-chrome"
    chrome.touch()
    monkeypatch.setenv("CHROME_PATH", str(chrome))
    monkeypatch.setattr(browser.shutil, "which", lambda command: "/usr/bin/chromium")

    assert find_chrome_path() == chrome


@pytest.mark.unit
def test_env_variable_missing_file(monkeypatch, tmp_path):
    """Test that a CHROME_PATH naming a missing file is reported, not passed on."""
    missing = tmp_path / "no-chrome"
    monkeypatch.setenv("CHROME_PATH", str(missing))
    monkeypatch.setattr(browser.shutil, "which", lambda command: "/usr/bin/chromium")

    with pytest.raises(BrowserNotFoundError) as exc_info:
        find_chrome_path()

    assert exc_info.value.chrome_path == missing
    assert str(missing) in str(exc_info.value)


@pytest.mark.unit
def test_known_install_path(monkeypatch, tmp_path):
    chrome = tmp_path / "google-chrome"
    chrome.touch()
    monkeypatch.setitem(browser.CHROME_PATHS, "linux", [str(tmp_path / "missing"), str(chrome)])

    assert find_chrome_path(platform="linux") == chrome


@pytest.mark.unit
def test_path_lookup(monkeypatch):
    """Test falling back to executables on PATH."""
    found = {"chromium": "/opt/bin/chromium"}
    monkeypatch.setattr(browser.shutil, "which", lambda command: found.get(command))

    assert find_chrome_path(platform="freebsd") == Path("/opt/bin/chromium")


@pytest.mark.unit
def test_windows_skips_path_lookup(monkeypatch):
    monkeypatch.setitem(browser.CHROME_PATHS, "win32", [])
    monkeypatch.setattr(browser.shutil, "which", lambda command: "C:\\chrome.exe")

    with pytest.raises(BrowserNotFoundError):
        find_chrome_path(platform="win32")


@pytest.mark.unit
def test_windows_local_app_data(monkeypatch, tmp_path):
    monkeypatch.setitem(browser.CHROME_PATHS, "win32", [])
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
    chrome = tmp_path / "Google" / "Chrome" / "Application" / "chrome.exe"
    chrome.parent.mkdir(parents=True)
    chrome.touch()

    assert find_chrome_path(platform="win32") == chrome


@pytest.mark.unit
def test_not_found(monkeypatch):
    monkeypatch.setattr(browser.shutil, "which", lambda command: None)

    with pytest.raises(BrowserNotFoundError) as exc_info:
        find_chrome_path(platform="freebsd")

    assert "CHROME_PATH" in str(exc_info.value)
