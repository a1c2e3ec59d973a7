"""Shared fixtures for the tagshelf tests."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from tagshelf.database import init_db
from tagshelf.services import (
    Bookmark,
    Folder,
    FolderStore,
    MemoryFolderPersistence,
    SqlBookmarkPersistence,
    SqlFolderPersistence,
    build_forest,
    get_bookmark_persistence,
    get_folder_store,
    make_root,
)


def folder(id, tag, parent=None, tag_groups=(), color="ff9986b1"):
    return Folder(id=id, tag=tag, parent=parent, tag_groups=tuple(tag_groups), color=color)


def bookmark(id, *tags, title="", description="", url=None):
    return Bookmark(id=id, title=title or id, description=description, url=url, tags=tuple(tags))


CRAFT_RECORDS = [
    folder("crochet", "crochet", tag_groups=["hobby", "craft"]),
    folder("crochet-mittens", "mittens", parent="crochet", tag_groups=["winter", "accessories"]),
    folder("crochet-scarf", "scarf", parent="crochet", tag_groups=["winter", "accessories"]),
    folder("knitting", "knitting", tag_groups=["craft", "hobby"]),
    folder("knitting-mittens", "mittens", parent="knitting", tag_groups=["winter", "accessories"]),
    folder("knitting-sweater", "Sweater", parent="knitting", tag_groups=["winter", "clothing"]),
]


@pytest.fixture
def craft_root():
    """Synthetic root over crochet/{mittens,scarf} and knitting/{mittens,Sweater}."""
    return make_root(build_forest(CRAFT_RECORDS))


@pytest.fixture
def memory_store():
    return FolderStore(MemoryFolderPersistence(), default_color="ff000000")


@pytest.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tagshelf.db'}", poolclass=NullPool)
    await init_db(engine)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture(params=["memory", "sql"])
async def store(request, session_factory):
    """Folder store over each persistence backend."""
    if request.param == "memory":
        persistence = MemoryFolderPersistence()
    else:
        persistence = SqlFolderPersistence(session_factory)
    return FolderStore(persistence, default_color="ff000000")


@pytest.fixture
async def client(session_factory):
    from main import app

    folders = FolderStore(SqlFolderPersistence(session_factory), default_color="ff000000")
    bookmarks = SqlBookmarkPersistence(session_factory)
    app.dependency_overrides[get_folder_store] = lambda: folders
    app.dependency_overrides[get_bookmark_persistence] = lambda: bookmarks
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
