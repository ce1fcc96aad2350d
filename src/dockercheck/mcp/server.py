"""FastMCP server exposing the Dockerfile validator as MCP tools.

Run via::

    dockercheck-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http dockercheck-mcp    # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  dockercheck-mcp    # legacy SSE on port 9000

Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import ValidationError

from dockercheck import __version__
from dockercheck.document import TextDocument
from dockercheck.keywords import DEFAULT_KEYWORDS
from dockercheck.models.diagnostics import Diagnostic, DiagnosticSeverity
from dockercheck.models.settings import ValidatorSettings
from dockercheck.settings import Settings
from dockercheck.validation import Validator

# ---------------------------------------------------------------------------
# Server + shared state
# ---------------------------------------------------------------------------

logger = logging.getLogger("dockercheck.mcp")

mcp = FastMCP("dockercheck")
_settings: Settings | None = None


def _get_settings() -> Settings:
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def _format_diagnostic(document: TextDocument, diagnostic: Diagnostic) -> str:
    start = diagnostic.range.start
    kind = "error" if diagnostic.severity == DiagnosticSeverity.ERROR else "warning"
    line = document.line_text(start.line) if start.line < document.line_count else ""
    return (
        f"  {start.line + 1}:{start.character + 1} {kind} "
        f"[{diagnostic.code.name}] {diagnostic.message}\n      | {line}"
    )


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool
def validate_dockerfile(content: str, deprecated_maintainer: str | None = None) -> str:
    """Validate Dockerfile text and report syntax and structure problems.

    Each problem is listed with its 1-based line:column, severity, code and
    message, followed by the offending source line.

    Args:
        content: Complete Dockerfile text.
        deprecated_maintainer: Severity for MAINTAINER usage:
            ``ignore``, ``warning`` (default) or ``error``.
    """
    settings = _get_settings()
    logger.info("validate_dockerfile called (length=%d)", len(content))
    if len(content) > settings.max_document_chars:
        raise ToolError(
            f"Document too large ({len(content):,} chars > "
            f"{settings.max_document_chars:,} limit)"
        )

    validator_settings = settings.validator_settings()
    if deprecated_maintainer is not None:
        try:
            validator_settings = ValidatorSettings(deprecated_maintainer=deprecated_maintainer)
        except ValidationError as exc:
            raise ToolError(
                f"Invalid deprecated_maintainer '{deprecated_maintainer}'. "
                "Use one of: ignore, warning, error"
            ) from exc

    document = TextDocument(content)
    diagnostics = Validator(validator_settings).validate(DEFAULT_KEYWORDS, document)
    if not diagnostics:
        return "No problems found."

    errors = sum(1 for d in diagnostics if d.severity == DiagnosticSeverity.ERROR)
    lines = [f"Found {errors} error(s) and {len(diagnostics) - errors} warning(s):"]
    lines.extend(_format_diagnostic(document, d) for d in diagnostics)
    return "\n".join(lines)


@mcp.tool
def list_keywords() -> str:
    """List the Dockerfile instruction keywords the validator recognizes."""
    return "\n".join(DEFAULT_KEYWORDS)


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = _get_settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "dockercheck MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
