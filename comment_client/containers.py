import httpx
from dependency_injector import containers, providers

from comment_client.core.config import Settings
from comment_client.services import CommentClient, StatisticsClient
from comment_client.transport import HttpTransport
from comment_client.ui import RegionSequencer, RegionStore, TextAnimator, UIOrchestrator


class Container(containers.DeclarativeContainer):
    # Config
    config = providers.Singleton(Settings)

    # Transport
    http_client = providers.Singleton(
        httpx.AsyncClient,
        base_url=config.provided.API_URL,
        timeout=config.provided.REQUEST_TIMEOUT
    )

    transport = providers.Singleton(
        HttpTransport,
        client=http_client,
        raise_for_status=config.provided.RAISE_FOR_STATUS
    )

    # Clients
    comment_client = providers.Singleton(CommentClient, transport=transport)
    stats_client = providers.Singleton(StatisticsClient, transport=transport)

    # Page state shared by every action
    region_store = providers.Singleton(RegionStore)
    region_sequencer = providers.Singleton(RegionSequencer)

    # One orchestrator per action; source and notifier are given by the caller
    orchestrator = providers.Factory(
        UIOrchestrator,
        comment_client=comment_client,
        stats_client=stats_client,
        sink=region_store,
        quick_stats_sizes=config.provided.QUICK_STATS_SIZES,
        sequencer=providers.Callable(
            lambda enabled, sequencer: sequencer if enabled else None,
            enabled=config.provided.DISCARD_STALE_RESPONSES,
            sequencer=region_sequencer
        )
    )

    animator = providers.Singleton(
        TextAnimator,
        words=config.provided.TYPEWRITER_WORDS,
        sink=region_store
    )
