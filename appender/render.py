from pathlib import Path

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from appender.errors import RenderError


def render_page(template_path: Path, names: list[str]) -> bytes:
    """Render the file selector page listing names.

    The template is loaded from disk on every call.
    """
    templates = Jinja2Templates(directory=str(template_path.parent))
    try:
        template = templates.get_template(template_path.name)
        html = template.render(files=names)
    except (TemplateError, OSError) as e:
        raise RenderError(str(e)) from e
    return html.encode("utf-8")
