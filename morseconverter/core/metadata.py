"""Application identity constants."""

APP_NAME = "MorseConverter"
APP_VERSION = "1.0.0"
ORGANIZATION_NAME = "MorseConverter"
