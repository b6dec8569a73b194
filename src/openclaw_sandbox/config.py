from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_scratch_dir() -> Path:
    return Path.home() / ".openclaw" / "tmp" / "run"


class SandboxConfig(BaseSettings):
    """
    Configuration for the code execution sandbox.
    """

    execution_timeout: float = 30.0
    max_output_chars: int = 10_000
    max_buffer_bytes: int = 1024 * 1024

    scratch_dir: Path = Field(default_factory=_default_scratch_dir)
    working_dir: Path = Field(default_factory=Path.home)
    default_language: str = "bash"

    # Toolchain locations that are not always on a login PATH
    path_prepend: list[str] = [
        "/usr/local/opt/openjdk/bin",
        "/usr/local/opt/php/bin",
        "/usr/local/opt/rust/bin",
        "/usr/local/opt/kotlin/bin",
    ]
    path_append: list[str] = Field(
        default_factory=lambda: [
            "/usr/local/bin",
            "/opt/homebrew/bin",
            "/usr/local/go/bin",
            str(Path.home() / ".cargo" / "bin"),
        ]
    )

    enable_audit_logging: bool = True

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 3001

    model_config = SettingsConfigDict(
        env_prefix="OPENCLAW_SANDBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
