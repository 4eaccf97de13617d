"""Constants for the adb device bridge and on-device world layout."""

from __future__ import annotations

DEFAULT_ADB_BIN: str = "adb"
ADB_DEVICE_STATE: str = "device"

PRIMARY_WORLDS_PATH: str = (
    "/storage/emulated/0/Android/data/com.mojang.minecraftpe/files/games/com.mojang/minecraftWorlds"
)
ALTERNATIVE_WORLDS_PATH: str = "/sdcard/Android/data/com.mojang.minecraftpe/files/games/com.mojang/minecraftWorlds"
DEFAULT_WORLD_ROOTS: tuple[str, ...] = (PRIMARY_WORLDS_PATH, ALTERNATIVE_WORLDS_PATH)

LEVELNAME_FILENAME: str = "levelname.txt"
WORLD_ICON_FILENAME: str = "world_icon.jpeg"

# Listing lines carrying remote shell error text instead of a directory name.
LISTING_ERROR_MARKERS: tuple[str, ...] = ("No such file", "Permission denied")
