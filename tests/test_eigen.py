import subprocess
from unittest.mock import patch

import pytest

from tensor_eigen.eigen import (
    EigenUpdateError,
    detect_os_and_arch,
    get_cargo_bin,
    get_download_url,
    update_eigen,
)


@pytest.mark.parametrize(
    "system, machine, expected",
    [
        ("Darwin", "arm64", ("macos", "arm64")),
        ("Darwin", "x86_64", ("macos", "x86_64")),
        ("Linux", "x86_64", ("linux", "x86_64")),
        ("Linux", "AMD64", ("linux", "x86_64")),
    ],
)
def test_detect_supported(system, machine, expected):
    assert detect_os_and_arch(system, machine) == expected


@pytest.mark.parametrize("system, machine", [("Linux", "aarch64"), ("Windows", "AMD64")])
def test_detect_unsupported(system, machine):
    with pytest.raises(EigenUpdateError, match="Unsupported OS/architecture"):
        detect_os_and_arch(system, machine)


def test_download_url():
    url = get_download_url("linux", "x86_64")
    assert url.startswith("https://")
    assert "/releases/latest/download/" in url
    assert url.endswith("/eigen-linux-x86_64")


def test_download_url_names_platform():
    linux = get_download_url("linux", "x86_64")
    mac = get_download_url("macos", "arm64")
    assert mac.endswith("/eigen-macos-arm64")
    assert linux.rsplit("/", 1)[0] == mac.rsplit("/", 1)[0]


def test_cargo_bin_found(tmp_path):
    (tmp_path / ".cargo" / "bin").mkdir(parents=True)
    assert get_cargo_bin(tmp_path) == tmp_path / ".cargo" / "bin"


def test_cargo_bin_missing(tmp_path):
    with pytest.raises(EigenUpdateError, match="Cargo bin directory not found"):
        get_cargo_bin(tmp_path)


def test_cargo_bin_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(EigenUpdateError, match="HOME"):
        get_cargo_bin()


def _prepare_home(tmp_path, monkeypatch):
    bin_dir = tmp_path / ".cargo" / "bin"
    bin_dir.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(tmp_path))
    return bin_dir / "eigen"


@patch("tensor_eigen.eigen.platform.machine", return_value="x86_64")
@patch("tensor_eigen.eigen.platform.system", return_value="Linux")
def test_update_eigen_runs_commands(_system, _machine, tmp_path, monkeypatch):
    target = _prepare_home(tmp_path, monkeypatch)
    with patch("tensor_eigen.eigen.subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess([], 0)
        assert update_eigen() == target
    calls = [call.args[0] for call in run.call_args_list]
    assert calls == [
        ["curl", "-L", "-o", str(target), get_download_url("linux", "x86_64")],
        ["chmod", "+x", str(target)],
    ]


@patch("tensor_eigen.eigen.platform.machine", return_value="x86_64")
@patch("tensor_eigen.eigen.platform.system", return_value="Linux")
def test_update_eigen_download_failure(_system, _machine, tmp_path, monkeypatch):
    _prepare_home(tmp_path, monkeypatch)
    with patch("tensor_eigen.eigen.subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess([], 1)
        with pytest.raises(EigenUpdateError, match="Failed to download"):
            update_eigen()
    assert run.call_count == 1


@patch("tensor_eigen.eigen.platform.machine", return_value="arm64")
@patch("tensor_eigen.eigen.platform.system", return_value="Darwin")
def test_update_eigen_chmod_failure(_system, _machine, tmp_path, monkeypatch):
    _prepare_home(tmp_path, monkeypatch)
    with patch("tensor_eigen.eigen.subprocess.run") as run:
        run.side_effect = [
            subprocess.CompletedProcess([], 0),
            subprocess.CompletedProcess([], 1),
        ]
        with pytest.raises(EigenUpdateError, match="Failed to make"):
            update_eigen()
    assert run.call_count == 2