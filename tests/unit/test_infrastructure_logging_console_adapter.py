"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("rental_created", rental_id="123")

            getattr(mock_logger, level).assert_called_once_with(
                "rental_created", rental_id="123"
            )

    def test_error_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("db_failed", error=ConnectionError("refused"), attempt=2)

            mock_logger.error.assert_called_once_with(
                "db_failed",
                attempt=2,
                error_type="ConnectionError",
                error_message="refused",
            )

    def test_error_without_exception(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().error("request_failed", path="/api/rentals")

            mock_logger.error.assert_called_once_with("request_failed", path="/api/rentals")

    def test_critical_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter(use_json=True).critical("startup_failed", error=RuntimeError("boom"))

            mock_logger.critical.assert_called_once_with(
                "startup_failed", error_type="RuntimeError", error_message="boom"
            )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="abc")
            bound.info("handled")

            mock_logger.bind.assert_called_once_with(trace_id="abc")
            bound_logger.info.assert_called_once_with("handled")
            assert bound is not adapter

    def test_with_context_is_bind(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(member_id="m1")

            mock_logger.bind.assert_called_once_with(member_id="m1")
