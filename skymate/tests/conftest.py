"""Shared pytest setup."""

import os

# Keep test runs from writing skymate.log into the working directory
os.environ.setdefault("LOG_FILE", "")
