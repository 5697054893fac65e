import json
from typing import Dict, Any
from models import Article, ArticleListResult, ResponseParseError


def parse_article(key: str, raw: Dict[str, Any]) -> Article:
    """
    Parse one entry of the response "list" into an Article.
    Missing or null title/url become empty strings; the mapping key stands
    in for a missing item_id. Other fields are ignored.
    """

    def get_str(field, default=""):
        val = raw.get(field)
        return str(val) if val is not None else default

    return Article(
        item_id=get_str("item_id", key),
        resolved_title=get_str("resolved_title"),
        resolved_url=get_str("resolved_url"),
    )


def parse_list_result(text: str) -> ArticleListResult:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"JSON parsing failed: {e}") from e

    if not isinstance(data, dict):
        raise ResponseParseError("JSON parsing failed: response is not an object")

    try:
        status = int(data["status"])
        complete = int(data["complete"])
    except KeyError as e:
        raise ResponseParseError(f"JSON parsing failed: missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ResponseParseError(f"JSON parsing failed: {e}") from e

    # Pocket sends an empty array instead of an object when nothing matches
    raw_list = data.get("list")
    if raw_list is None or raw_list == []:
        raw_list = {}
    if not isinstance(raw_list, dict):
        raise ResponseParseError("JSON parsing failed: 'list' is not an object")

    articles = {}
    for key, raw in raw_list.items():
        if not isinstance(raw, dict):
            raise ResponseParseError(f"JSON parsing failed: article {key} is not an object")
        articles[key] = parse_article(key, raw)

    return ArticleListResult(status=status, complete=complete, articles=articles)
