# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

import asyncio
import os
import signal
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from openclaw_sandbox.utils.logger import logger

READ_CHUNK = 64 * 1024


@dataclass
class ProcessOutcome:
    exit_code: int
    stdout: str
    stderr: str


def _normalize_exit_code(returncode: int | None) -> int:
    # Killed by a signal (negative) or never reaped: the process reported nothing
    if returncode is None or returncode < 0:
        return 1
    return returncode


def _kill_group(proc: asyncio.subprocess.Process) -> None:
    """Kill the shell and everything it spawned."""
    try:
        if hasattr(os, "killpg"):
            os.killpg(proc.pid, signal.SIGKILL)
        else:  # pragma: no cover
            proc.kill()
    except ProcessLookupError:
        pass


async def _read_capped(stream: asyncio.StreamReader, buffer: bytearray, limit: int) -> bool:
    """Read ``stream`` into ``buffer`` until EOF.

    Returns True if more than ``limit`` bytes were produced; the buffer then
    holds exactly ``limit`` bytes.
    """
    while True:
        chunk = await stream.read(READ_CHUNK)
        if not chunk:
            return False
        room = limit - len(buffer)
        if len(chunk) > room:
            buffer.extend(chunk[:room])
            return True
        buffer.extend(chunk)


def _decode(buffer: bytearray) -> str:
    return bytes(buffer).decode("utf-8", errors="replace")


async def run_shell(
    command: str,
    *,
    timeout: float,
    max_buffer: int,
    cwd: Path | str | None = None,
    env: dict[str, str] | None = None,
) -> ProcessOutcome:
    """Run ``command`` through the shell and capture its output.

    stderr is merged into stdout, so ``ProcessOutcome.stdout`` holds the
    interleaved stream. ``ProcessOutcome.stderr`` only carries messages about
    the run itself (spawn failure, timeout, overflow). None of these raise:
    every failure comes back as an outcome with a non-zero exit code.

    Args:
        command: Shell command line.
        timeout: Wall-clock limit in seconds; the process group is killed when it expires.
        max_buffer: Maximum number of output bytes kept before the process group is killed.
        cwd: Working directory for the child.
        env: Full environment for the child.

    Returns:
        ProcessOutcome: exit code, captured output and runner messages.
    """
    try:
        proc = await asyncio.create_subprocess_shell(
            command,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
            cwd=cwd,
            env=env,
            start_new_session=True,
        )
    except OSError as e:
        logger.warning(f"Failed to spawn process: {e}")
        return ProcessOutcome(exit_code=1, stdout="", stderr=str(e))

    stdout = cast(asyncio.StreamReader, proc.stdout)
    buffer = bytearray()

    async def collect() -> bool:
        overflowed = await _read_capped(stdout, buffer, max_buffer)
        if not overflowed:
            await proc.wait()
        return overflowed

    try:
        overflowed = await asyncio.wait_for(collect(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Process {proc.pid} exceeded {timeout:g}s. Killing process group.")
        _kill_group(proc)
        await proc.wait()
        return ProcessOutcome(
            exit_code=1,
            stdout=_decode(buffer),
            stderr=f"Execution timed out after {timeout:g} seconds",
        )

    if overflowed:
        logger.warning(f"Process {proc.pid} exceeded {max_buffer} output bytes. Killing process group.")
        _kill_group(proc)
        await proc.wait()
        return ProcessOutcome(
            exit_code=1,
            stdout=_decode(buffer),
            stderr=f"Output exceeded {max_buffer} bytes",
        )

    return ProcessOutcome(
        exit_code=_normalize_exit_code(proc.returncode),
        stdout=_decode(buffer),
        stderr="",
    )
