"""Shared fixtures for sdtgen tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from sdtgen.models import UnitOptions


@pytest.fixture
def executable(tmp_path: Path) -> Path:
    """An existing executable file outside the output directory."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    path = bin_dir / "worker"
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    path.chmod(0o755)
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "units"
    path.mkdir()
    return path


@pytest.fixture
def make_options(
    executable: Path,
    output_dir: Path,
) -> Callable[..., UnitOptions]:
    """Factory for UnitOptions with a valid executable and output dir."""

    def _make(**overrides: Any) -> UnitOptions:
        fields: dict[str, Any] = {
            "name": "foo",
            "exec_start": executable,
            "output_dir": output_dir,
        }
        fields.update(overrides)
        return UnitOptions(**fields)

    return _make
