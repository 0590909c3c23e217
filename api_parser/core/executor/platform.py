"""
Platform Detection
==================

Host OS/CPU detection and OS-specific Go installation guidance.
"""

import os
import platform
from pathlib import Path

from api_parser.models.schemas import PlatformInfo

GO_DOWNLOAD_URL = "https://golang.org/dl/"

INSTALL_GUIDES = {
    "Darwin": [
        "macOS installation:",
        "1. Homebrew: brew install go",
        f"2. Download from {GO_DOWNLOAD_URL}",
        "3. MacPorts: sudo port install go",
    ],
    "Linux": [
        "Linux installation:",
        "1. Ubuntu/Debian: sudo apt-get install golang",
        "2. CentOS/RHEL: sudo yum install golang or sudo dnf install golang",
        "3. Arch Linux: sudo pacman -S go",
        f"4. Download from {GO_DOWNLOAD_URL}",
    ],
    "Windows": [
        "Windows installation:",
        f"1. Download the installer from {GO_DOWNLOAD_URL}",
        "2. Chocolatey: choco install golang",
        "3. Scoop: scoop install go",
    ],
}


def detect_platform() -> PlatformInfo:
    """Detect the running OS name and CPU architecture."""
    return PlatformInfo(system=platform.system(), machine=platform.machine())


def is_executable_file(path: Path) -> bool:
    """Whether path is an existing regular file the current user may execute."""
    return path.is_file() and os.access(path, os.X_OK)


def go_installation_message(host: PlatformInfo) -> str:
    """Build the error message shown when no parser is usable and Go is missing."""
    guide = INSTALL_GUIDES.get(
        host.system,
        [f"Download the Go release for your system from {GO_DOWNLOAD_URL}"],
    )
    lines = [
        "No usable API parser executable was found. Install the Go toolchain and try again.",
        "",
        f"Current system: {host.system} {host.machine}",
        "",
        "Go installation guide:",
        *guide,
        "",
        "Run the program again once the installation is complete.",
    ]
    return "\n".join(lines)
