"""Jinja2 environment used to render the TypeScript fragments."""

import json
import re
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def ts_json(value: Any) -> str:
    """Encode a value the way JSON.stringify would."""
    return json.dumps(value, ensure_ascii=False)


def ts_key(key: str) -> str:
    """Object-literal key, quoted when it is not a plain identifier."""
    if _IDENTIFIER.match(key):
        return key
    return ts_json(key)


def create_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("gql_hookgen", "templates"),
        autoescape=select_autoescape(),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["json"] = ts_json
    env.filters["ts_key"] = ts_key
    return env


_env: Environment | None = None


def render(template_name: str, **context: Any) -> str:
    """Render a template from gql_hookgen/templates."""
    global _env
    if _env is None:
        _env = create_environment()
    return _env.get_template(template_name).render(context)
