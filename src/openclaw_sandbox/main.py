# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from openclaw_sandbox.sandbox import SandboxAsync

# Initialize Sandbox Logic
sandbox = SandboxAsync()

# Initialize MCP Server
mcp = FastMCP("openclaw-sandbox")


@mcp.tool()  # type: ignore[misc]
async def execute_code(language: str, code: str) -> list[TextContent]:
    """
    Execute a code snippet on the host.
    Returns the merged output, exit code and duration.
    """
    try:
        result = await sandbox.execute(code, language)
    except Exception as e:
        return [TextContent(type="text", text=f"Error executing code: {e!s}")]

    output: list[TextContent] = []

    if result.output:
        output.append(TextContent(type="text", text=f"OUTPUT:\n{result.output}"))

    output.append(TextContent(type="text", text=f"Exit Code: {result.exit_code}"))
    output.append(TextContent(type="text", text=f"Duration: {result.elapsed}ms"))

    if result.truncated:
        output.append(
            TextContent(type="text", text=f"Output truncated to {sandbox.config.max_output_chars} characters")
        )

    return output


@mcp.tool()  # type: ignore[misc]
async def list_languages() -> list[str]:
    """
    List the languages the sandbox can run.
    """
    return sandbox.supported_languages()


def main() -> None:
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
