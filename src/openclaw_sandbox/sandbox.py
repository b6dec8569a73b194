# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

from typing import cast

import anyio

from openclaw_sandbox.config import SandboxConfig
from openclaw_sandbox.exceptions import MissingSourceCodeError
from openclaw_sandbox.factory import SandboxFactory
from openclaw_sandbox.languages import LanguageRegistry, LanguageStrategy, build_default_registry
from openclaw_sandbox.models import ExecutionResult
from openclaw_sandbox.runtime import SandboxRuntime
from openclaw_sandbox.utils.audit import AuditLogger
from openclaw_sandbox.utils.logger import logger


class SandboxAsync:
    """Async-native Sandbox Service (The Core).

    Validates requests, resolves the language strategy and hands the run to
    the configured runtime.
    """

    def __init__(
        self,
        config: SandboxConfig | None = None,
        registry: LanguageRegistry | None = None,
    ):
        """Initializes the SandboxAsync service.

        Args:
            config: Configuration for the sandbox.
            registry: Language registry; the built-in table is used when omitted.
        """
        self.config = config or SandboxConfig()
        self.registry = registry or build_default_registry()
        self.runtime: SandboxRuntime = SandboxFactory.get_runtime(self.config)
        self.audit = AuditLogger(enabled=self.config.enable_audit_logging)
        self._started = False

    async def start(self) -> None:
        if not self._started:
            await self.runtime.start()
            self._started = True

    async def terminate(self) -> None:
        if self._started:
            await self.runtime.terminate()
            self._started = False

    async def __aenter__(self) -> "SandboxAsync":
        """Starts the sandbox environment."""
        await self.start()
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Terminates the sandbox environment."""
        await self.terminate()

    def validate(self, code: str | None, language: str | None) -> tuple[str, LanguageStrategy]:
        """Check a request without touching the filesystem.

        Args:
            code: The submitted source code.
            language: The declared language; the configured default applies when empty.

        Returns:
            tuple[str, LanguageStrategy]: The effective language id and its strategy.

        Raises:
            MissingSourceCodeError: If ``code`` is empty or blank.
            UnsupportedLanguageError: If the language is not registered.
        """
        if not code or not code.strip():
            raise MissingSourceCodeError()
        language_id = language or self.config.default_language
        return language_id, self.registry.resolve(language_id)

    async def execute(self, code: str | None, language: str | None = None) -> ExecutionResult:
        """Executes code in the sandbox.

        Args:
            code: The source code to execute.
            language: The programming language (default: bash).

        Returns:
            ExecutionResult: The result of the execution.

        Raises:
            SandboxValidationError: If the request is rejected before running.
        """
        language_id, strategy = self.validate(code, language)
        await self.start()

        code = cast(str, code)
        self.audit.log_pre_execution(code, strategy.name)
        logger.info(f"Executing code in sandbox (language={language_id}, strategy={strategy.name})")
        return await self.runtime.execute(code, strategy, language_id)

    def supported_languages(self) -> list[str]:
        return self.registry.supported()


class Sandbox:
    """Sync Facade for SandboxAsync (The Facade).

    Wraps SandboxAsync and executes methods via anyio.run.
    """

    def __init__(
        self,
        config: SandboxConfig | None = None,
        registry: LanguageRegistry | None = None,
    ):
        self._async = SandboxAsync(config, registry)

    def __enter__(self) -> "Sandbox":
        """Context entry point."""
        anyio.run(self._async.__aenter__)
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context exit point."""
        anyio.run(self._async.__aexit__, exc_type, exc_val, exc_tb)

    def execute(self, code: str | None, language: str | None = None) -> ExecutionResult:
        """Executes code in the sandbox synchronously.

        Args:
            code: The source code to execute.
            language: The programming language.

        Returns:
            ExecutionResult: The result of the execution.
        """
        return anyio.run(self._async.execute, code, language)

    def supported_languages(self) -> list[str]:
        return self._async.supported_languages()
