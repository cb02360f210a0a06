"""
Chrome Discovery

Locates a local Chrome/Chromium executable for Playwright to drive.
"""

import os
import shutil
import sys
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv

from folio.contexts.rendering.exceptions import BrowserNotFoundError

load_dotenv()

# Known install locations, keyed by sys.platform
CHROME_PATHS: Dict[str, List[str]] = {
    "darwin": [
        "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
        "/Applications/Chromium.app/Contents/MacOS/Chromium",
        "/Applications/Google Chrome Canary.app/Contents/MacOS/Google Chrome Canary",
    ],
    "linux": [
        "/usr/bin/google-chrome",
        "/usr/bin/google-chrome-stable",
        "/usr/bin/chromium",
        "/usr/bin/chromium-browser",
        "/snap/bin/chromium",
    ],
    "win32": [
        "C:\\Program Files\\Google\\Chrome\\Application\\chrome.exe",
        "C:\\Program Files (x86)\\Google\\Chrome\\Application\\chrome.exe",
    ],
}

# Executable names looked up on PATH as a last resort
CHROME_COMMANDS = ["google-chrome", "chromium", "chromium-browser"]

# Launch flags for headless printing in containers and CI
CHROME_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--font-render-hinting=none",
    "--disable-gpu",
]


def _platform_paths(platform: str) -> List[str]:
    paths = list(CHROME_PATHS.get(platform, []))
    if platform == "win32" and os.getenv("LOCALAPPDATA"):
        paths.append(os.path.join(os.environ["LOCALAPPDATA"], "Google", "Chrome", "Application", "chrome.exe"))
    return paths


def find_chrome_path(platform: str = None) -> Path:
    """
    Find a Chrome/Chromium executable.

    Lookup order: CHROME_PATH environment variable, known install paths for
    the platform, then the executables on PATH.

    Args:
        platform: sys.platform value to search for (defaults to the running platform)

    Returns:
        Path to the executable

    Raises:
        BrowserNotFoundError: If CHROME_PATH names a missing file, or nothing is found
    """
    env_path = os.getenv("CHROME_PATH")
    if env_path:
        chrome_path = Path(env_path)
        if not chrome_path.exists():
            raise BrowserNotFoundError(chrome_path)
        return chrome_path

    platform = platform or sys.platform
    for candidate in _platform_paths(platform):
        if Path(candidate).exists():
            return Path(candidate)

    if platform != "win32":
        for command in CHROME_COMMANDS:
            found = shutil.which(command)
            if found:
                return Path(found)

    raise BrowserNotFoundError()
