#!/usr/bin/env python3
import unittest
from unittest.mock import Mock, patch

import requests

from slacklog.errors import TransportError
from slacklog.services import post_webhook


class TestPostWebhook(unittest.TestCase):
    @patch("slacklog.services.requests.post")
    def test_posts_json_text_payload(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text="ok")

        written = post_webhook("https://example/webhook", "INFO: hello")

        mock_post.assert_called_once_with(
            "https://example/webhook", json={"text": "INFO: hello"}, timeout=None
        )
        self.assertEqual(written, len("INFO: hello"))

    @patch("slacklog.services.requests.post")
    def test_returns_utf8_byte_count_of_input(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text="ok")
        self.assertEqual(post_webhook("https://example/webhook", "ação"), len("ação".encode("utf-8")))

    @patch("slacklog.services.requests.post")
    def test_http_status_is_not_an_error(self, mock_post):
        mock_post.return_value = Mock(status_code=500, text="boom")
        self.assertEqual(post_webhook("https://example/webhook", "x"), 1)

    @patch("slacklog.services.requests.post")
    def test_connection_failure_becomes_transport_error(self, mock_post):
        cause = requests.ConnectionError("connection refused")
        mock_post.side_effect = cause

        with self.assertRaises(TransportError) as ctx:
            post_webhook("https://example/webhook", "x")

        self.assertEqual(ctx.exception.url, "https://example/webhook")
        self.assertIs(ctx.exception.__cause__, cause)

    @patch("slacklog.services.requests.post")
    def test_explicit_timeout_and_session(self, mock_post):
        session = Mock()
        session.post.return_value = Mock(status_code=200, text="ok")

        post_webhook("https://example/webhook", "x", timeout=2.5, session=session)

        session.post.assert_called_once_with("https://example/webhook", json={"text": "x"}, timeout=2.5)
        mock_post.assert_not_called()

    def test_empty_destination_fails(self):
        # URL vazia falha no requests antes de qualquer acesso à rede
        with self.assertRaises(TransportError):
            post_webhook("", "x")


if __name__ == '__main__':
    unittest.main()
