#!/usr/bin/env python3
import logging
import unittest
from unittest.mock import Mock, patch

import requests

from slacklog import Logger, LogLevel, WebhookHandler
from slacklog import std


def _ok():
    return Mock(status_code=200, text="ok")


@patch("slacklog.services.requests.post")
class TestWebhookHandler(unittest.TestCase):
    def setUp(self):
        self.target = Logger("https://example/webhook", level=LogLevel.INFO)
        self.handler = WebhookHandler(self.target)
        self.log = logging.getLogger("test_handler.app")
        self.log.setLevel(logging.DEBUG)
        self.log.propagate = False
        self.log.addHandler(self.handler)

    def tearDown(self):
        self.log.removeHandler(self.handler)

    def test_records_map_to_tags(self, mock_post):
        mock_post.return_value = _ok()
        self.log.error("db down")
        self.log.warning("slow query")
        self.log.info("started %s", "worker")

        texts = [c.kwargs["json"]["text"] for c in mock_post.call_args_list]
        self.assertEqual(texts, ["ERRO: db down", "WARN: slow query", "INFO: started worker"])

    def test_threshold_still_applies(self, mock_post):
        self.log.debug("noise")
        mock_post.assert_not_called()

    def test_formatter_is_used(self, mock_post):
        mock_post.return_value = _ok()
        self.handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
        self.log.critical("boom")
        self.assertEqual(mock_post.call_args.kwargs["json"], {"text": "ERRO: test_handler.app - boom"})

    def test_internal_records_are_dropped(self, mock_post):
        internal = logging.getLogger("slacklog.logger")
        internal.addHandler(self.handler)
        try:
            internal.warning("Falha ao enviar mensagem ao webhook")
        finally:
            internal.removeHandler(self.handler)
        mock_post.assert_not_called()

    def test_transport_failure_goes_to_handle_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("refused")
        with patch.object(self.handler, "handleError") as handle_error:
            self.log.error("x")
        handle_error.assert_called_once()

    def test_transport_failure_with_raise_errors_goes_to_handle_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("refused")
        self.target.raise_errors = True
        with patch.object(self.handler, "handleError") as handle_error:
            self.log.error("x")
        handle_error.assert_called_once()

    def test_successful_record_does_not_call_handle_error(self, mock_post):
        mock_post.return_value = _ok()
        with patch.object(self.handler, "handleError") as handle_error:
            self.log.warning("fine")
        handle_error.assert_not_called()

    def test_without_logger_uses_current_default(self, mock_post):
        mock_post.return_value = _ok()
        previous = std.set_default(Logger("https://default/webhook"))
        handler = WebhookHandler()
        self.log.addHandler(handler)
        try:
            self.log.removeHandler(self.handler)
            self.log.info("via default")
        finally:
            self.log.removeHandler(handler)
            std.set_default(previous)
        mock_post.assert_called_once_with("https://default/webhook", json={"text": "INFO: via default"}, timeout=None)


if __name__ == '__main__':
    unittest.main()
