from __future__ import annotations

import os
from importlib import metadata
from pathlib import Path

from app.environment import is_docker_runtime

_DISTRIBUTION = "vlanpool"


def _package_version() -> str:
    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "dev"


def _detect_git_commit() -> str | None:
    git_dir = Path(__file__).resolve().parents[1] / ".git"
    head_path = git_dir / "HEAD"
    if not head_path.exists():
        return None

    head_value = head_path.read_text(encoding="utf-8").strip()
    if not head_value.startswith("ref: "):
        return head_value or None

    ref_path = git_dir / head_value[5:].strip()
    if not ref_path.exists():
        return None
    return ref_path.read_text(encoding="utf-8").strip() or None


def get_build_info() -> dict[str, str]:
    version = os.getenv("VLANPOOL_VERSION") or _package_version()
    commit = os.getenv("VLANPOOL_COMMIT") or _detect_git_commit() or "unknown"

    docker_tag = os.getenv("VLANPOOL_DOCKER_TAG")
    if docker_tag and is_docker_runtime():
        version = docker_tag

    return {
        "status": "ok",
        "service": _DISTRIBUTION,
        "version": version,
        "commit": commit,
        "build_time": os.getenv("VLANPOOL_BUILD_TIME") or "unknown",
    }
