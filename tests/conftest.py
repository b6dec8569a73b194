from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from openclaw_sandbox.config import SandboxConfig
from openclaw_sandbox.models import ExecutionResult


@pytest.fixture
def sandbox_config(tmp_path: Path) -> SandboxConfig:
    return SandboxConfig(
        scratch_dir=tmp_path / "scratch",
        working_dir=tmp_path,
        enable_audit_logging=False,
    )


@pytest.fixture
def scratch_dir(sandbox_config: SandboxConfig) -> Path:
    return sandbox_config.scratch_dir


@pytest.fixture
def mock_runtime() -> Any:
    mock = MagicMock()
    mock.start = AsyncMock()
    mock.terminate = AsyncMock()
    mock.execute = AsyncMock(
        return_value=ExecutionResult(
            success=True, output="out", exit_code=0, elapsed=12, truncated=False, language="python"
        )
    )
    return mock
