"""Tests for logging setup."""

import logging
import sys
from unittest.mock import MagicMock, patch

import pytest

from shared.logging_utils import DiscoveryLogger, setup_logging


class TestSetupLogging:
    def test_logs_to_stderr(self):
        with patch("shared.logging_utils.logging.basicConfig") as basic_config:
            setup_logging("INFO")
        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.INFO
        assert kwargs["stream"] is sys.stderr

    def test_suppresses_aws_loggers(self):
        with patch("shared.logging_utils.logging.basicConfig"):
            setup_logging("INFO", suppress_modules=["botocore"])
        assert logging.getLogger("botocore").level == logging.WARNING


class TestDiscoveryLogger:
    def test_success(self):
        logger = MagicMock()
        with DiscoveryLogger(logger, "MSK discovery"):
            pass
        logger.info.assert_any_call("Starting %s", "MSK discovery")
        logger.info.assert_any_call("Completed %s successfully", "MSK discovery")

    def test_failure_propagates(self):
        logger = MagicMock()
        with pytest.raises(RuntimeError):
            with DiscoveryLogger(logger, "MSK discovery"):
                raise RuntimeError("boom")
        logger.debug.assert_called_once()
