from typing import Optional
from models import ArticleQuery, DetailType, Sort, State


def build_query(
    consumer_key: str,
    access_token: Optional[str],
    state: Optional[str] = None,
    tag: Optional[str] = None,
    sort: Optional[str] = None,
    details: bool = False,
    search: Optional[str] = None,
) -> ArticleQuery:
    """
    Map raw command-line values onto an ArticleQuery.

    Unknown state/sort values fall back to unread/newest. Tag and search
    are only sent when supplied; an empty string still counts as supplied.
    Raises MissingAccessTokenError when the access token is not set.
    """
    return ArticleQuery(
        consumer_key=consumer_key,
        access_token=access_token,
        state=State.parse(state),
        tag=tag,
        sort=Sort.parse(sort),
        detail_type=DetailType.from_flag(bool(details)),
        search=search,
    )
