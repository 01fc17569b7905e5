"""
Template rendering utilities
"""
from pathlib import Path
from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_template(template_name: str, context: dict, request: Request, status_code: int = 200):
    """Render template with context"""
    return templates.TemplateResponse(request, template_name, context, status_code=status_code)
