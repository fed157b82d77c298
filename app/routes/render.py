"""Answer rendering endpoint."""
from fastapi import APIRouter

from core.models.session import RenderRequest
from core.services.errors import ChatError
from core.services.markdown import render_answer_html
from core.services.markdown.renderer import THEMES

router = APIRouter()


@router.post("/render")
async def render(request: RenderRequest):
    """Render any answer value (string, text, table or other JSON) to HTML."""
    if request.theme not in THEMES:
        raise ChatError(f"theme must be one of: {', '.join(THEMES)}", status_code=400)
    return {"html": render_answer_html(request.answer, theme=request.theme)}
