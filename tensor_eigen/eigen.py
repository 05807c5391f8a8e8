"""Self-update: download the latest release binary into the cargo bin directory."""

from __future__ import annotations

import os
import platform
import subprocess
from pathlib import Path

# Where release binaries are published; override with EIGEN_RELEASE_URL.
DEFAULT_RELEASE_URL = "https://releases.example.com/eigen/latest/download"

_OS_NAMES = {"darwin": "macos", "macos": "macos", "linux": "linux", "windows": "windows"}
_ARCH_NAMES = {
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "x86_64": "x86_64",
    "amd64": "x86_64",
}
_SUPPORTED = {
    ("macos", "aarch64"): ("macos", "arm64"),
    ("macos", "x86_64"): ("macos", "x86_64"),
    ("linux", "x86_64"): ("linux", "x86_64"),
}


class EigenUpdateError(RuntimeError):
    """Raised when the self-update cannot proceed."""


def detect_os_and_arch(
    system: str | None = None, machine: str | None = None
) -> tuple[str, str]:
    """Map the running (or given) platform to release asset names."""
    system = platform.system() if system is None else system
    machine = platform.machine() if machine is None else machine
    os_name = _OS_NAMES.get(system.lower(), system.lower())
    arch = _ARCH_NAMES.get(machine.lower(), machine.lower())
    try:
        return _SUPPORTED[(os_name, arch)]
    except KeyError:
        raise EigenUpdateError(
            f"Unsupported OS/architecture combination: {os_name}/{arch}"
        ) from None


def _release_base_url() -> str:
    return os.environ.get("EIGEN_RELEASE_URL", DEFAULT_RELEASE_URL).rstrip("/")


def get_download_url(os_name: str, arch: str) -> str:
    """Return the URL of the release binary for a platform."""
    return f"{_release_base_url()}/eigen-{os_name}-{arch}"


def get_cargo_bin(home: str | os.PathLike | None = None) -> Path:
    """Return ~/.cargo/bin, which must already exist."""
    if home is None:
        home = os.environ.get("HOME")
        if home is None:
            raise EigenUpdateError("HOME environment variable not set")
    cargo_bin = Path(home) / ".cargo" / "bin"
    if not cargo_bin.exists():
        raise EigenUpdateError(f"Cargo bin directory not found: {cargo_bin}")
    return cargo_bin


def _run(args: list[str], failure: str) -> None:
    try:
        result = subprocess.run(args)
    except OSError as exc:
        raise EigenUpdateError(f"{failure}: {exc}") from exc
    if result.returncode != 0:
        raise EigenUpdateError(failure)


def update_eigen() -> Path:
    """Download the latest binary, make it executable and return its path."""
    os_name, arch = detect_os_and_arch()
    url = get_download_url(os_name, arch)
    eigen_path = get_cargo_bin() / "eigen"

    print(f"Downloading Eigen binary for {os_name}/{arch}")
    _run(["curl", "-L", "-o", str(eigen_path), url], "Failed to download Eigen binary")

    print("Making Eigen binary executable")
    _run(["chmod", "+x", str(eigen_path)], "Failed to make Eigen binary executable")

    print(f'Eigen update completed successfully. Installed to: "{eigen_path}"')
    return eigen_path