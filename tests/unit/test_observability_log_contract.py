import json
import logging

from user_dashboard.app.infrastructure.logging.logger import get_logger, log_action


class CaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def test_log_action_contains_required_fields() -> None:
    logger = logging.getLogger("user_dashboard.test.obs")
    logger.handlers = []
    logger.setLevel(logging.INFO)
    handler = CaptureHandler()
    logger.addHandler(handler)

    log_action(
        logger=logger,
        module="users",
        action="fetch_users",
        outcome="error",
        request_id=3,
        status_code=500,
        error_code="HTTP_ERROR",
        duration_ms=12,
        level=logging.WARNING,
    )

    assert len(handler.messages) == 1
    payload = json.loads(handler.messages[0])
    for key in ["ts", "level", "module", "action", "outcome", "request_id", "status_code", "error_code", "duration_ms"]:
        assert key in payload
    assert payload["level"] == "WARNING"
    assert payload["status_code"] == 500


def test_get_logger_adds_a_single_handler() -> None:
    name = "user_dashboard.test.single_handler"
    logging.getLogger(name).handlers = []

    first = get_logger(name, "DEBUG")
    second = get_logger(name)

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
