"""Pure rendering functions: structured data -> text.

All renderers follow the same pattern:
  - Input: pydantic models from ``city_forecast.schemas``
  - Output: str (a block of plain text for the terminal)
  - No side effects, no I/O, no clock reads

Used by cli.py to print lookup results.

Public API:
  - report: render_current, digest_cards, render_digest, render_report
  - conditions: condition_asset, condition_symbol
  - weather_utils: format_temperature, format_speed
  - date_utils: weekday_name, clock_time, long_date

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a render function that prepares rows
   of display strings and hands them to ``render_template``.
2. Create a Jinja2 template in ``templates/{name}.txt.j2``.
3. Add tests: call your render function with sample models and assert the
   returned text contains the expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers (plain text, so no autoescape)
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
