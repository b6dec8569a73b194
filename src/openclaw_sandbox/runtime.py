# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

from abc import ABC, abstractmethod

from openclaw_sandbox.languages import LanguageStrategy
from openclaw_sandbox.models import ExecutionResult


class SandboxRuntime(ABC):
    """
    Abstract base class for sandbox runtimes.
    Follows the Strategy Pattern.
    """

    @abstractmethod
    async def start(self) -> None:
        """Prepare the environment.

        Raises:
            RuntimeError: If the environment cannot be used safely.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def execute(self, code: str, strategy: LanguageStrategy, language: str) -> ExecutionResult:
        """Run script and capture output.

        The caller has already validated ``code`` and resolved ``strategy``.
        A failing program is reported through the result, never raised.

        Args:
            code: The source code to execute.
            strategy: The resolved language strategy.
            language: The language id as requested, echoed in the result.

        Returns:
            ExecutionResult: Merged output, exit code, timing and truncation flag.
        """
        pass  # pragma: no cover

    @abstractmethod
    async def terminate(self) -> None:
        """Release anything held by the runtime."""
        pass  # pragma: no cover
