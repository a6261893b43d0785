# workshop_sdk/client.py
"""
Entry point for SDK users.

    client = await create_client()
    posts = await client.posts.get_posts({"only_approved": True, "page": 1, "limit": 20})
"""
import logging

import httpx

from workshop_sdk.api_client import ApiClient, ClientConfig
from workshop_sdk.auth_store import AuthStore
from workshop_sdk.comments import CommentsAPI
from workshop_sdk.posts import PostsAPI
from workshop_sdk.settings import Settings, load_settings

logger = logging.getLogger(__name__)


class WorkshopClient:
    """Posts and comments operations sharing one ApiClient (and its config)"""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api = ApiClient(config, transport=transport)
        self.posts = PostsAPI(self.api)
        self.comments = CommentsAPI(self.api)

    @property
    def config(self) -> ClientConfig:
        return self.api.config


async def create_client(
    settings: Settings | None = None,
    store: AuthStore | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WorkshopClient:
    """
    Startup sequence: read settings, read the persisted identity, configure.

    Args:
        settings: Defaults to load_settings().
        store: Auth store to read. When omitted one is opened from
            settings.auth_db_url and closed again after reading.
        transport: Optional httpx transport for every request.

    Returns:
        A WorkshopClient whose config must not be changed once calls start.
    """
    settings = settings or load_settings()

    own_store = store is None
    if store is None:
        store = AuthStore(settings.auth_db_url)
    try:
        await store.init_store()
        auth = await store.load_auth()
    finally:
        if own_store:
            await store.dispose()

    config = ClientConfig()
    if auth.user_id:
        config.set_debug_auth(auth.user_id, auth.user_roles)
        logger.info(
            f"Debug identity: {auth.user_id} roles={','.join(auth.user_roles) or '-'}"
        )
    config.set_api_base(settings.api_base)
    logger.info(f"Workshop API base: {config.base_url}")

    return WorkshopClient(config, transport=transport)
