"""Version information for nvr_check."""

VERSION = "0.1.0"
