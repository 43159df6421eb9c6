from typing import Awaitable, Callable, Dict, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from comment_client.core.config import Settings
from comment_client.core.exceptions import TransportError
from comment_client.schemas.ui import (
    ActionResponse,
    CreateCommentRequest,
    CustomStatsRequest,
    DeleteCommentRequest,
    SearchCommentRequest,
    UpdateCommentRequest,
)
from comment_client.ui import controls
from comment_client.ui.orchestrator import UIOrchestrator
from comment_client.ui.ports import MappingInputSource, NoticeCollector, RegionStore

router = APIRouter(prefix="/v1/ui", tags=["Comments, Sentiment statistics"])

OrchestratorFactory = Callable[..., UIOrchestrator]
Action = Callable[[UIOrchestrator], Awaitable[Optional[str]]]


def get_orchestrator_factory(request: Request) -> OrchestratorFactory:
    return request.app.container.orchestrator


def get_region_store(request: Request) -> RegionStore:
    return request.app.container.region_store()


def get_settings(request: Request) -> Settings:
    return request.app.container.config()


async def _run_action(
    factory: OrchestratorFactory,
    store: RegionStore,
    values: Dict[str, object],
    action: Action,
) -> ActionResponse:
    notifier = NoticeCollector()
    orchestrator = factory(source=MappingInputSource(values), notifier=notifier)
    try:
        region = await action(orchestrator)
    except TransportError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ActionResponse(
        region=region,
        content=store.get(region) if region else None,
        notices=notifier.messages
    )


@router.post("/comments", response_model=ActionResponse)
async def create_comment(
    request: CreateCommentRequest,
    factory: OrchestratorFactory = Depends(get_orchestrator_factory),
    store: RegionStore = Depends(get_region_store)
) -> ActionResponse:
    """
    Submit a comment and show its prediction
    """
    return await _run_action(
        factory, store, request.model_dump(by_alias=True), lambda o: o.create()
    )


@router.post("/comments/search", response_model=ActionResponse)
async def search_comment(
    request: SearchCommentRequest,
    factory: OrchestratorFactory = Depends(get_orchestrator_factory),
    store: RegionStore = Depends(get_region_store)
) -> ActionResponse:
    """
    Fetch a comment by id
    """
    return await _run_action(
        factory, store, request.model_dump(by_alias=True), lambda o: o.search()
    )


@router.put("/comments", response_model=ActionResponse)
async def update_comment(
    request: UpdateCommentRequest,
    factory: OrchestratorFactory = Depends(get_orchestrator_factory),
    store: RegionStore = Depends(get_region_store)
) -> ActionResponse:
    """
    Replace a comment's text and show the new prediction
    """
    return await _run_action(
        factory, store, request.model_dump(by_alias=True), lambda o: o.update()
    )


@router.delete("/comments", response_model=ActionResponse)
async def delete_comment(
    request: DeleteCommentRequest,
    factory: OrchestratorFactory = Depends(get_orchestrator_factory),
    store: RegionStore = Depends(get_region_store)
) -> ActionResponse:
    """
    Remove a comment and confirm it
    """
    return await _run_action(
        factory, store, request.model_dump(by_alias=True), lambda o: o.delete()
    )


@router.post("/comments/batch", response_model=ActionResponse)
async def upload_batch(
    file: Optional[UploadFile] = File(None),
    factory: OrchestratorFactory = Depends(get_orchestrator_factory),
    store: RegionStore = Depends(get_region_store)
) -> ActionResponse:
    """
    Upload a CSV of comments for bulk classification
    """
    selected = None
    if file is not None and file.filename:
        selected = (file.filename, await file.read(), file.content_type)

    return await _run_action(
        factory, store, {controls.BATCH_FILE: selected}, lambda o: o.upload_batch()
    )


@router.post("/stats/quick/{size}", response_model=ActionResponse)
async def quick_stats(
    size: int,
    factory: OrchestratorFactory = Depends(get_orchestrator_factory),
    store: RegionStore = Depends(get_region_store),
    settings: Settings = Depends(get_settings)
) -> ActionResponse:
    """
    Statistics over one of the preset sample sizes
    """
    if size not in settings.QUICK_STATS_SIZES:
        raise HTTPException(status_code=404, detail=f"No quick stats trigger for {size}")

    return await _run_action(factory, store, {}, lambda o: o.quick_stats(size))


@router.post("/stats", response_model=ActionResponse)
async def custom_stats(
    request: CustomStatsRequest,
    factory: OrchestratorFactory = Depends(get_orchestrator_factory),
    store: RegionStore = Depends(get_region_store)
) -> ActionResponse:
    """
    Statistics over a user-chosen sample size
    """
    return await _run_action(
        factory, store, request.model_dump(by_alias=True), lambda o: o.custom_stats()
    )


@router.get("/regions", response_model=Dict[str, str])
async def list_regions(store: RegionStore = Depends(get_region_store)) -> Dict[str, str]:
    """
    Current content of every written region
    """
    return store.snapshot()


@router.get("/regions/{region_id}", response_model=ActionResponse)
async def read_region(
    region_id: str,
    store: RegionStore = Depends(get_region_store)
) -> ActionResponse:
    """
    Current content of one region
    """
    content = store.get(region_id)
    if content is None:
        raise HTTPException(status_code=404, detail=f"Region {region_id} has no content")
    return ActionResponse(region=region_id, content=content)
