"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "MCBACKUP"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ MCBACKUP",
    "     // Minecraft Bedrock world backups over adb",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} world backup tool"))
