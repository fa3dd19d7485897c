"""
Constants and configuration for the correlation translation service.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


CORRELATE_KORREL8R_URL = os.getenv("CORRELATE_KORREL8R_URL", "http://korrel8r:8080").rstrip("/")
CORRELATE_KORREL8R_TIMEOUT = int(os.getenv("CORRELATE_KORREL8R_TIMEOUT", "30"))
CORRELATE_STARTUP_TIMEOUT = int(os.getenv("CORRELATE_STARTUP_TIMEOUT", "120"))

KORREL8R_API_PREFIX = "/api/v1alpha1"
KORREL8R_DOMAINS_PATH = "/domains"
KORREL8R_NEIGHBOURS_PATH = "/graphs/neighbours"
KORREL8R_GOALS_PATH = "/graphs/goals"

# titles used for failed searches, depending on whether korrel8r itself reported the error
KORREL8R_ERROR_TITLE = "Korrel8r Error"
REQUEST_FAILED_TITLE = "Request Failed"
UNKNOWN_ERROR_MESSAGE = "Unknown Error"


class Settings(BaseSettings):
    korrel8r_url: str = CORRELATE_KORREL8R_URL
    korrel8r_timeout: int = CORRELATE_KORREL8R_TIMEOUT
    startup_timeout: int = CORRELATE_STARTUP_TIMEOUT

    # neighbourhood search depth
    default_depth: int = 3
    min_depth: int = 1
    max_depth: int = 10

    # only the start of long error messages is shown to avoid repeated errors
    message_limit: int = 400

    host: str = "0.0.0.0"
    port: int = 4323
    log_level: str = "info"

    model_config = {
        "env_prefix": "CORRELATE_",
        "extra": "ignore",
    }


settings = Settings()
