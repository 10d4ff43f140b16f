"""Runtime defaults and the environment variables that override them."""

from __future__ import annotations


DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_LOG_LEVEL = "WARN"

ENV_TIMEOUT = "PROFILE_CARD_TIMEOUT"
ENV_MAX_REDIRECTS = "PROFILE_CARD_MAX_REDIRECTS"
ENV_LOG_LEVEL = "PROFILE_CARD_LOG_LEVEL"
ENV_HOME = "PROFILE_CARD_HOME"

LOG_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
