"""Root conftest: shared test configuration."""

import os

# Ensure tests don't accidentally use real API keys or the working data dir
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault("SUMMARY_PROVIDER", "anthropic")
os.environ.setdefault("LOG_FORMAT", "text")
