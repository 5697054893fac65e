import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import dotenv_values

from output import OutputFormat

CONSUMER_KEY_VAR = "POCKET_CONSUMER_KEY"
ACCESS_TOKEN_VAR = "POCKET_ACCESS_TOKEN"
OUTPUT_FORMAT_VAR = "POCKET_OUTPUT_FORMAT"


class ConfigError(Exception):
    pass


@dataclass
class Config:
    consumer_key: Optional[str] = None
    access_token: Optional[str] = None
    output_format: OutputFormat = OutputFormat.HUMAN


def load_config(
    environ: Optional[Mapping[str, str]] = None, env_file: Optional[str] = None
) -> Config:
    """
    Load Pocket credentials and the output format.

    Values from the process environment win over the .env file. Blank
    values are treated as missing. A missing access token is not an error
    here; the list call refuses to run without one.
    """
    values = {}
    if env_file and os.path.exists(env_file):
        values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    values.update(os.environ if environ is None else environ)

    def get(name):
        val = values.get(name)
        if val is None or val.strip() == "":
            return None
        return val.strip()

    output_format = OutputFormat.HUMAN
    raw_format = get(OUTPUT_FORMAT_VAR)
    if raw_format:
        try:
            output_format = OutputFormat.parse(raw_format)
        except ValueError as e:
            raise ConfigError(f"{OUTPUT_FORMAT_VAR}: {e}") from e

    return Config(
        consumer_key=get(CONSUMER_KEY_VAR),
        access_token=get(ACCESS_TOKEN_VAR),
        output_format=output_format,
    )
