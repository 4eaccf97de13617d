"""mcbackup: Minecraft Bedrock world backups over adb."""

__version__ = "1.1.0"
