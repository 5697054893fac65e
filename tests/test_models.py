#!/usr/bin/env python3
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
"""
Unit tests for the request and response model types.
"""
import json
import unittest
from unittest.mock import patch

from models import (
    Article,
    ArticleListResult,
    ArticleQuery,
    DetailType,
    MissingAccessTokenError,
    MissingConsumerKeyError,
    PocketListError,
    RequestSerializationError,
    Sort,
    State,
)


class TestEnumerations(unittest.TestCase):
    def test_state_parse_known_values(self):
        self.assertEqual(State.parse("unread"), State.UNREAD)
        self.assertEqual(State.parse("archive"), State.ARCHIVE)
        self.assertEqual(State.parse("all"), State.ALL)

    def test_state_parse_falls_back_to_unread(self):
        for value in (None, "", "ARCHIVE", "deleted", " all"):
            self.assertEqual(State.parse(value), State.UNREAD, value)

    def test_sort_parse_known_values(self):
        for value in ("newest", "oldest", "title", "site"):
            self.assertEqual(Sort.parse(value).value, value)

    def test_sort_parse_falls_back_to_newest(self):
        for value in (None, "", "Title", "random"):
            self.assertEqual(Sort.parse(value), Sort.NEWEST, value)

    def test_detail_type_from_flag(self):
        self.assertEqual(DetailType.from_flag(True), DetailType.COMPLETE)
        self.assertEqual(DetailType.from_flag(False), DetailType.SIMPLE)


class TestArticleQuery(unittest.TestCase):
    def test_required_fields_only(self):
        query = ArticleQuery(consumer_key="k", access_token="t")
        self.assertEqual(
            query.to_payload(),
            {"consumer_key": "k", "access_token": "t", "detailType": "simple"},
        )

    def test_absent_optional_fields_are_omitted(self):
        query = ArticleQuery(
            consumer_key="k",
            access_token="t",
            state=State.ARCHIVE,
            sort=Sort.TITLE,
            detail_type=DetailType.COMPLETE,
        )
        payload = json.loads(query.to_json())
        self.assertNotIn("tag", payload)
        self.assertNotIn("search", payload)
        self.assertEqual(payload["state"], "archive")
        self.assertEqual(payload["sort"], "title")
        self.assertEqual(payload["detailType"], "complete")

    def test_empty_tag_is_sent(self):
        query = ArticleQuery(consumer_key="k", access_token="t", tag="", search="rust")
        payload = query.to_payload()
        self.assertEqual(payload["tag"], "")
        self.assertEqual(payload["search"], "rust")

    def test_missing_access_token_fails_fast(self):
        with self.assertRaises(MissingAccessTokenError):
            ArticleQuery(consumer_key="k", access_token=None)
        with self.assertRaises(MissingAccessTokenError):
            ArticleQuery(consumer_key="k", access_token="")

    def test_missing_consumer_key_fails_fast(self):
        with self.assertRaises(MissingConsumerKeyError):
            ArticleQuery(consumer_key="", access_token="t")

    def test_credential_errors_are_list_errors(self):
        self.assertTrue(issubclass(MissingAccessTokenError, PocketListError))

    def test_serialization_failure_is_surfaced(self):
        query = ArticleQuery(consumer_key="k", access_token="t")
        with patch("models.json.dumps", side_effect=TypeError("not serializable")):
            with self.assertRaises(RequestSerializationError):
                query.to_json()

    def test_describe_hides_credentials(self):
        query = ArticleQuery(consumer_key="secret-key", access_token="secret-token", tag="python")
        described = query.describe()
        self.assertNotIn("consumer_key", described)
        self.assertNotIn("access_token", described)
        self.assertEqual(described["tag"], "python")


class TestResponseTypes(unittest.TestCase):
    def test_article_format_line(self):
        article = Article(item_id="42", resolved_title="Title", resolved_url="https://example.com")
        self.assertEqual(article.format_line(), "42: 'Title', https://example.com")

    def test_article_format_line_empty_title(self):
        article = Article(item_id="7", resolved_url="https://example.com")
        self.assertEqual(article.format_line(), "7: '', https://example.com")

    def test_result_succeeded(self):
        self.assertTrue(ArticleListResult(status=1, complete=1).succeeded)
        self.assertFalse(ArticleListResult(status=0, complete=1).succeeded)
        self.assertFalse(ArticleListResult(status=2, complete=1).succeeded)


if __name__ == "__main__":
    unittest.main()
