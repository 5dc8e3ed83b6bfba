from pathlib import Path

from starlette.templating import Jinja2Templates


def format_quality(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


_templates = Jinja2Templates(Path(__file__).parent)
_templates.env.filters["quality"] = format_quality

TemplateResponse = _templates.TemplateResponse
