from fastapi import APIRouter, Depends

from schemas import Poem, SavedPoemsResponse
from services.store_service import PoemStore
from dependencies.services import get_poem_store

router = APIRouter(prefix="/api/saved", tags=["saved"])

@router.get("", response_model=SavedPoemsResponse)
async def list_saved_poems(store: PoemStore = Depends(get_poem_store)):
    return {"poems": store.list()}

@router.get("/{poem_id}")
async def is_poem_saved(poem_id: str, store: PoemStore = Depends(get_poem_store)):
    return {"saved": store.is_saved(poem_id)}

@router.post("")
async def save_poem(poem: Poem, store: PoemStore = Depends(get_poem_store)):
    poems = store.save(poem)
    return {"success": True, "poems": [p.model_dump(mode="json", by_alias=True) for p in poems]}

@router.delete("/{poem_id}")
async def remove_poem(poem_id: str, store: PoemStore = Depends(get_poem_store)):
    poems = store.remove(poem_id)
    return {"success": True, "poems": [p.model_dump(mode="json", by_alias=True) for p in poems]}

@router.delete("")
async def clear_saved_poems(store: PoemStore = Depends(get_poem_store)):
    store.clear()
    return {"success": True}
