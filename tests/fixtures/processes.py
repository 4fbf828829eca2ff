"""Stand-ins for ``subprocess`` used by the scaffolding tests."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Sequence

TEMPLATE_MANIFEST = {
    "name": "livepeer-boilerplate",
    "version": "0.1.0",
    "private": True,
    "scripts": {"dev": "next dev", "build": "next build"},
}


class FakeGitRunner:
    """Pretend to run ``git clone`` by writing a boilerplate project to disk."""

    def __init__(self, returncode: int = 0, stderr: str = "", manifest: Any = TEMPLATE_MANIFEST):
        self.returncode = returncode
        self.stderr = stderr
        self.manifest = manifest
        self.calls: list[list[str]] = []

    def __call__(self, command: Sequence[str]) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(command))
        if self.returncode == 0:
            destination = Path(command[-1])
            destination.mkdir(parents=True)
            manifest_path = destination / "package.json"
            if isinstance(self.manifest, bytes):
                manifest_path.write_bytes(self.manifest)
            elif self.manifest is not None:
                manifest_path.write_text(json.dumps(self.manifest), encoding="utf-8")
        return subprocess.CompletedProcess(command, self.returncode, stdout="", stderr=self.stderr)


class FakeProcess:
    def __init__(self, lines: Sequence[str], returncode: int):
        self.stdout = iter(f"{line}\n" for line in lines)
        self.returncode = returncode

    def wait(self) -> int:
        return self.returncode

    def __enter__(self) -> "FakeProcess":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


class FakePopen:
    """Callable replacing :class:`subprocess.Popen` for installer runs."""

    def __init__(self, lines: Sequence[str] = ("installed",), returncode: int = 0):
        self.lines = list(lines)
        self.returncode = returncode
        self.calls: list[tuple[list[str], dict[str, Any]]] = []

    def __call__(self, command: list[str], **kwargs: Any) -> FakeProcess:
        self.calls.append((command, kwargs))
        return FakeProcess(self.lines, self.returncode)


def probe_for(*installed: str):
    """Return a capability probe reporting only ``installed`` tools as present."""

    available = set(installed)
    probed: list[str] = []

    def probe(tool: str) -> bool:
        probed.append(tool)
        return tool in available

    probe.probed = probed  # type: ignore[attr-defined]
    return probe
