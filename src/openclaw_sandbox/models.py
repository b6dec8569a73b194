# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

from pydantic import BaseModel


class ExecutionRequest(BaseModel):
    """A snippet submitted for execution.

    Both fields are optional on the wire; the sandbox validates them so that
    a missing field is reported as a client error rather than a schema error.

    Attributes:
        code: The source code to run.
        language: The declared language id or alias (defaults to bash when absent).
    """

    code: str | None = None
    language: str | None = None


class ExecutionResult(BaseModel):
    """Represents the result of a single sandboxed run.

    Attributes:
        success: True when the process exited with code 0.
        output: Merged stdout and stderr, trimmed and capped.
        exit_code: The exit code of the process (1 if it could not report one).
        elapsed: Wall-clock duration of the run in milliseconds.
        truncated: Whether the output was cut at the configured cap.
        language: The language id the caller asked for.
    """

    success: bool
    output: str
    exit_code: int
    elapsed: int
    truncated: bool
    language: str


class RunResponse(BaseModel):
    """JSON body returned by ``POST /api/run``."""

    success: bool
    output: str
    exitCode: int
    elapsed: int
    truncated: bool
    language: str

    @classmethod
    def from_result(cls, result: ExecutionResult) -> "RunResponse":
        return cls(
            success=result.success,
            output=result.output,
            exitCode=result.exit_code,
            elapsed=result.elapsed,
            truncated=result.truncated,
            language=result.language,
        )


class ErrorResponse(BaseModel):
    error: str


class LanguagesResponse(BaseModel):
    languages: list[str]
    aliases: dict[str, str]


class HealthResponse(BaseModel):
    status: str
    version: str
