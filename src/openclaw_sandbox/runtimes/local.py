import os
import re
import time
from pathlib import Path
from uuid import uuid4

from openclaw_sandbox.config import SandboxConfig
from openclaw_sandbox.languages import LanguageStrategy
from openclaw_sandbox.models import ExecutionResult
from openclaw_sandbox.process import ProcessOutcome, run_shell
from openclaw_sandbox.runtime import SandboxRuntime
from openclaw_sandbox.utils.logger import logger

TRUNCATION_MARKER = "\n... (output truncated)"

# Commands are built by interpolating generated paths, so they may only use
# characters the shell treats literally.
_SAFE_PATH = re.compile(r"^[A-Za-z0-9_\-./]+$")


def is_safe_path(path: str) -> bool:
    return bool(_SAFE_PATH.match(path))


def new_token() -> str:
    return uuid4().hex[:8]


def merge_output(outcome: ProcessOutcome) -> str:
    output = outcome.stdout
    if outcome.stderr:
        output += "\n" + outcome.stderr
    return output.strip()


def cap_output(output: str, limit: int) -> tuple[str, bool]:
    if len(output) > limit:
        return output[:limit] + TRUNCATION_MARKER, True
    return output, False


class LocalRuntime(SandboxRuntime):
    """
    Runs snippets as child processes on the host.

    Each run owns one scratch file named ``run_<token>.<ext>`` which is
    removed, together with any build artifacts, when the run ends.
    """

    def __init__(self, config: SandboxConfig | None = None):
        self.config = config or SandboxConfig()
        self.scratch_dir = Path(self.config.scratch_dir)
        self.working_dir = Path(self.config.working_dir)

    async def start(self) -> None:
        """
        Create the scratch directory and check it is safe to interpolate.
        """
        scratch = str(self.scratch_dir.resolve())
        if not is_safe_path(scratch):
            raise RuntimeError(f"Scratch directory contains characters that require shell quoting: {scratch}")
        self.scratch_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Local sandbox ready. Scratch directory: {scratch}")

    def build_env(self) -> dict[str, str]:
        env = dict(os.environ)
        env["PYTHONUNBUFFERED"] = "1"
        parts = [*self.config.path_prepend, env.get("PATH", ""), *self.config.path_append]
        env["PATH"] = os.pathsep.join(p for p in parts if p)
        return env

    def _allocate(self, code: str, extension: str) -> tuple[str, Path]:
        """Write ``code`` to a fresh scratch file and return its token and path."""
        self.scratch_dir.mkdir(parents=True, exist_ok=True)
        while True:
            token = new_token()
            path = self.scratch_dir.resolve() / f"run_{token}.{extension}"
            if not is_safe_path(str(path)):
                raise RuntimeError(f"Generated path requires shell quoting: {path}")
            try:
                # Exclusive create: a file is never shared between runs
                f = open(path, "x", encoding="utf-8", errors="replace")
            except FileExistsError:
                logger.debug(f"Scratch token collision on {token}, drawing again")
                continue
            try:
                with f:
                    f.write(code)
            except Exception:
                self._cleanup([str(path)])
                raise
            return token, path

    def _cleanup(self, paths: list[str]) -> None:
        for path in paths:
            try:
                os.unlink(path)
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.warning(f"Failed to remove scratch file {path}: {e}")

    async def execute(self, code: str, strategy: LanguageStrategy, language: str) -> ExecutionResult:
        """
        Run script and capture output.
        """
        token, path = self._allocate(code, strategy.extension)
        file_path = str(path)
        command = strategy.run_command(file_path)
        logger.info(f"Executing {strategy.name} snippet run_{token} ({len(code)} chars)")

        start_time = time.time()
        try:
            outcome = await run_shell(
                command,
                timeout=self.config.execution_timeout,
                max_buffer=self.config.max_buffer_bytes,
                cwd=self.working_dir,
                env=self.build_env(),
            )
            elapsed = int((time.time() - start_time) * 1000)
        finally:
            self._cleanup([file_path, *strategy.artifact_paths(file_path)])

        output, truncated = cap_output(merge_output(outcome), self.config.max_output_chars)

        logger.info(f"Finished run_{token}: exit code {outcome.exit_code} in {elapsed}ms")

        return ExecutionResult(
            success=outcome.exit_code == 0,
            output=output,
            exit_code=outcome.exit_code,
            elapsed=elapsed,
            truncated=truncated,
            language=language,
        )

    async def terminate(self) -> None:
        """
        Nothing outlives a run, so there is nothing to release.
        """
        logger.info("Local sandbox terminated")
