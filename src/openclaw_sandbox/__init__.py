# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

"""
openclaw-sandbox
"""

__version__ = "0.1.0"

from .config import SandboxConfig
from .exceptions import MissingSourceCodeError, SandboxValidationError, UnsupportedLanguageError
from .languages import CompiledStrategy, InterpretedStrategy, LanguageRegistry, build_default_registry
from .models import ExecutionRequest, ExecutionResult
from .runtime import SandboxRuntime
from .runtimes.local import LocalRuntime
from .sandbox import Sandbox, SandboxAsync

__all__ = [
    "SandboxRuntime",
    "LocalRuntime",
    "ExecutionRequest",
    "ExecutionResult",
    "SandboxConfig",
    "Sandbox",
    "SandboxAsync",
    "LanguageRegistry",
    "InterpretedStrategy",
    "CompiledStrategy",
    "build_default_registry",
    "SandboxValidationError",
    "MissingSourceCodeError",
    "UnsupportedLanguageError",
]
