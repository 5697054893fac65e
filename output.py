import sys
from enum import Enum
from typing import Optional, TextIO

from data_parser import parse_list_result
from models import ArticleListResult, ListOutcome, ListSuccess, RemoteFailure


class OutputFormat(str, Enum):
    HUMAN = "human"
    JSON = "json"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown output format '{value}' (expected one of: {choices})")


def classify(result: ArticleListResult) -> ListOutcome:
    if result.succeeded:
        return ListSuccess(articles=result.articles)
    return RemoteFailure(status=result.status)


def output_as_json(raw: bytes, stream: TextIO) -> None:
    """Write the response exactly as received."""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(raw.decode("utf-8"))
        stream.flush()
        return
    stream.flush()
    buffer.write(raw)
    buffer.flush()


def write_line(stream: TextIO, line: str) -> None:
    # characters the stream cannot encode are replaced, not raised
    encoding = getattr(stream, "encoding", None) or "utf-8"
    print(line.encode(encoding, "replace").decode(encoding), file=stream)


def output_human(raw: bytes, stream: TextIO) -> None:
    result = parse_list_result(raw.decode("utf-8"))
    outcome = classify(result)

    if isinstance(outcome, RemoteFailure):
        write_line(stream, "Receiving articles failed.")
        return

    write_line(stream, f"Received {len(outcome.articles)} articles.")
    for article in outcome.articles.values():
        write_line(stream, article.format_line())
    stream.flush()


def output(raw: bytes, output_format: OutputFormat, stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stdout
    if output_format is OutputFormat.JSON:
        output_as_json(raw, stream)
    else:
        output_human(raw, stream)
