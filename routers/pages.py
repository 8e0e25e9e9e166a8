import logging
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Request, Depends, Form, HTTPException, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from core.config import settings
from core.exceptions import PoemGenerationError, UnexpectedError, ValidationError
from services.poem_service import PoemService, DEFAULT_STYLE
from services.session_service import PoemSession
from dependencies.services import get_poem_service, get_session
from routers.poems import error_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["pages"])

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)

POEM_STYLES = [
    {"value": "free verse", "label": "Free Verse", "description": "Natural rhythm, no strict rules"},
    {"value": "haiku", "label": "Haiku", "description": "5-7-5 syllable pattern"},
    {"value": "sonnet", "label": "Sonnet", "description": "14 lines with rhyme scheme"},
    {"value": "limerick", "label": "Limerick", "description": "Humorous 5-line poem"},
    {"value": "tanka", "label": "Tanka", "description": "5-7-5-7-7 syllable pattern"},
    {"value": "cinquain", "label": "Cinquain", "description": "5 lines with syllable pattern"},
    {"value": "ballad", "label": "Ballad", "description": "Narrative song-like poem"},
    {"value": "acrostic", "label": "Acrostic", "description": "First letters spell a word"},
]

POEM_MOODS = [
    "joyful", "melancholy", "romantic", "inspirational",
    "peaceful", "mysterious", "nostalgic", "dramatic",
]

THEME_EXAMPLES = [
    "Autumn forest", "First love", "City at night", "Ocean waves",
    "Childhood memories", "Mountain sunrise", "Rainy afternoon", "Dancing stars",
]

THEME_PROMPT = "Please enter a theme or topic for your poem."

def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)

@router.get("/", response_class=HTMLResponse)
async def read_root(request: Request, session: PoemSession = Depends(get_session)):
    poem = session.current_poem
    context = {
        "poem": poem,
        "poem_lines": PoemService.format_lines(poem.content) if poem else [],
        "share_title": PoemService.share_title(poem) if poem else "",
        "share_text": PoemService.share_text(poem) if poem else "",
        "is_saved": session.is_current_saved(),
        "is_generating": session.is_generating,
        "error": session.error,
        "saved_poems": session.store.list(),
        "styles": POEM_STYLES,
        "moods": POEM_MOODS,
        "theme_examples": THEME_EXAMPLES,
        "truncate": PoemService.truncate_text,
        "format_date": PoemService.format_date,
    }
    return templates.TemplateResponse(request, "index.html", context)

@router.get("/health")
def health():
    return {"ok": True}

@router.post("/generate")
async def generate_post(
    theme: Optional[str] = Form(None),
    style: str = Form(DEFAULT_STYLE),
    mood: str = Form("peaceful"),
    session: PoemSession = Depends(get_session),
    poem_service: PoemService = Depends(get_poem_service),
):
    token = session.begin_generation()
    try:
        poem = await poem_service.generate(theme, style, mood)
    except ValidationError:
        session.fail_generation(token, THEME_PROMPT)
        return _redirect_home()
    except PoemGenerationError as e:
        _, payload = error_payload(e)
        session.fail_generation(token, payload["error"])
        return _redirect_home()
    except Exception as e:
        logger.exception("Error generating poem: %s", e)
        _, payload = error_payload(UnexpectedError(str(e)))
        session.fail_generation(token, payload["error"])
        return _redirect_home()
    else:
        session.complete_generation(token, poem)
        return _redirect_home()
    finally:
        # Отмена запроса (BaseException) не должна оставить страницу в состоянии генерации
        session.finish_generation(token)

@router.post("/toggle_save")
async def toggle_save(session: PoemSession = Depends(get_session)):
    try:
        action = session.toggle_save()
    except LookupError:
        raise HTTPException(status_code=400, detail="No poem to save") from None
    logger.info("Poem %s: %s", session.current_poem.id, action)
    return _redirect_home()

@router.post("/saved/clear")
async def clear_saved(session: PoemSession = Depends(get_session)):
    session.store.clear()
    return _redirect_home()

@router.post("/saved/{poem_id}/view")
async def view_saved(poem_id: str, session: PoemSession = Depends(get_session)):
    poem = session.store.get(poem_id)
    if poem is None:
        raise HTTPException(status_code=404, detail="Poem not found")
    session.select_poem(poem)
    return _redirect_home()

@router.post("/saved/{poem_id}/delete")
async def delete_saved(poem_id: str, session: PoemSession = Depends(get_session)):
    session.store.remove(poem_id)
    return _redirect_home()

@router.get("/download/{poem_id}", response_class=PlainTextResponse)
async def download_poem(poem_id: str, session: PoemSession = Depends(get_session)):
    poem = session.current_poem
    if poem is None or poem.id != poem_id:
        poem = session.store.get(poem_id)
    if poem is None:
        raise HTTPException(status_code=404, detail="Poem not found")

    filename = PoemService.download_filename(poem)
    return PlainTextResponse(
        PoemService.format_download_text(poem),
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
