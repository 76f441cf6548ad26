from __future__ import annotations

import asyncio
import os
import uuid
from typing import Any, Sequence

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError
import uvicorn

from comparison_page_builder.assembler import PageAssembler
from comparison_page_builder.content_store import InMemoryContentStore, InMemorySectionStore
from comparison_page_builder.errors import StorageError
from comparison_page_builder.firestore_content_store import FirestoreContentStore, FirestoreSectionStore
from comparison_page_builder.logging_config import set_request_id, setup_logging
from comparison_page_builder.models.content import ContentItem, StoredSection
from comparison_page_builder.models.page import AssemblyRequest, AssemblyResult, SeoMeta
from comparison_page_builder.models.profiles import BrandProfile
from comparison_page_builder.models.sections import SectionId, SectionResult
from comparison_page_builder.sections.registry import generate_section


class CreateItemRequest(BaseModel):
    title: str | None = None
    item_id: str | None = None


class AssembleStoredRequest(BaseModel):
    page_title: str
    seo: SeoMeta
    brand: BrandProfile
    competitor_name: str
    custom: Sequence[str] = Field(default_factory=list)
    theme_switcher: bool = False
    footer_html: str | None = None
    include_footer: bool = False


# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
CONTENT_COLLECTION = os.getenv("CONTENT_COLLECTION", "content_items")
SECTIONS_COLLECTION = os.getenv("SECTIONS_COLLECTION", "content_item_sections")

setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)

app = FastAPI(title="Comparison Page Builder API", version="0.1.0")

# Use Firestore in production, in-memory for dev
if ENVIRONMENT == "dev":
    content_store = InMemoryContentStore()
    section_store = InMemorySectionStore()
else:
    content_store = FirestoreContentStore(project_id=PROJECT_ID, collection_name=CONTENT_COLLECTION)
    section_store = FirestoreSectionStore(project_id=PROJECT_ID, collection_name=SECTIONS_COLLECTION)

assembler = PageAssembler(content_store, section_store=section_store)


@app.middleware("http")
async def bind_request_id(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        set_request_id(None)
    response.headers["x-request-id"] = request_id
    return response


def _assembly_response(result: AssemblyResult) -> JSONResponse:
    if result.success:
        status_code = 200
    elif result.html is not None:
        # Page was composed but could not be saved.
        status_code = 502
    else:
        status_code = 422
    return JSONResponse(result.model_dump(mode="json", exclude_none=True), status_code=status_code)


@app.post("/v1/sections/{section_id}:generate", response_model=SectionResult)
async def generate_section_endpoint(section_id: SectionId, payload: dict[str, Any] = Body(...)) -> SectionResult:
    item_id = payload.pop("item_id", None)
    try:
        result = generate_section(section_id, payload)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False)) from exc

    if item_id:
        try:
            await asyncio.to_thread(
                section_store.save_section, item_id, result.section_id, result.html, result.metadata
            )
        except StorageError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
    return result


@app.post("/v1/pages:assemble")
async def assemble_page(request: AssemblyRequest) -> JSONResponse:
    result = await asyncio.to_thread(assembler.assemble, request)
    return _assembly_response(result)


@app.post("/v1/items/{item_id}/pages:assemble-stored")
async def assemble_stored_page(item_id: str, request: AssembleStoredRequest) -> JSONResponse:
    result = await asyncio.to_thread(
        assembler.assemble_from_store,
        item_id,
        page_title=request.page_title,
        seo=request.seo,
        brand=request.brand,
        competitor_name=request.competitor_name,
        custom=request.custom,
        theme_switcher=request.theme_switcher,
        footer_html=request.footer_html,
        include_footer=request.include_footer,
    )
    return _assembly_response(result)


@app.post("/v1/items", response_model=ContentItem, status_code=201)
async def create_item(request: CreateItemRequest) -> ContentItem:
    return await asyncio.to_thread(content_store.create_item, title=request.title, item_id=request.item_id)


@app.get("/v1/items/{item_id}", response_model=ContentItem)
async def get_item(item_id: str) -> ContentItem:
    item = await asyncio.to_thread(content_store.get_item, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Content item not found")
    return item


@app.get("/v1/items/{item_id}/sections", response_model=list[StoredSection])
async def list_sections(item_id: str) -> list[StoredSection]:
    return await asyncio.to_thread(section_store.get_sections, item_id)


@app.delete("/v1/items/{item_id}/sections")
async def clear_sections(item_id: str) -> JSONResponse:
    removed = await asyncio.to_thread(section_store.clear_sections, item_id)
    return JSONResponse({"removed": removed})


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok"})


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8080")))
