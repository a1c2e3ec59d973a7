"""Unit tests for tagshelf.services.folder_store module."""

from tagshelf.config import DEFAULT_FOLDER_COLOR, Settings
from tagshelf.services.folder_store import (
    DEMO_FOLDERS,
    FolderError,
    FolderResult,
    parse_tag_groups,
    seed_demo_folders,
)
from tagshelf.services.models import Folder
from tagshelf.services.tree import find_folder
from conftest import folder


async def add_craft_tree(store):
    for record in [
        folder("knitting", "knitting", tag_groups=["craft"]),
        folder("mittens", "mittens", parent="knitting"),
        folder("sweater", "sweater", parent="knitting"),
    ]:
        result = await store.create(record)
        assert result.ok


class TestCreate:
    """Test FolderStore.create."""

    async def test_create_and_get(self, store):
        """Should persist the record and derive it into the tree."""
        result = await store.create(folder("a", "alpha", tag_groups=["g1"]))
        assert result.ok
        assert result.folder.id == "a"

        assert (await store.get_by_id("a")).tag == "alpha"
        forest = await store.get_root_folders()
        assert [f.tag for f in forest] == ["alpha"]
        assert forest[0].tag_groups == ("g1",)

    async def test_normalizes_fields(self, store):
        """Should trim the tag and tag groups and fill in the default color."""
        result = await store.create(folder("a", "  alpha ", tag_groups=[" g1 ", "", "  "], color=""))
        assert result.folder.tag == "alpha"
        assert result.folder.tag_groups == ("g1",)
        assert result.folder.color == "ff000000"

    async def test_blank_tag(self, store):
        """Should reject a blank tag."""
        result = await store.create(folder("a", "   "))
        assert not result.ok
        assert result.error is FolderError.INVALID_TAG
        assert await store.get_by_id("a") is None

    async def test_duplicate_id(self, store):
        """Should reject an id that is already taken."""
        await store.create(folder("a", "alpha"))
        result = await store.create(folder("a", "other"))
        assert result.error is FolderError.DUPLICATE_ID
        assert (await store.get_by_id("a")).tag == "alpha"

    async def test_dangling_parent_is_root(self, store):
        """Should accept an unknown parent and show the folder as a root."""
        await store.create(folder("a", "alpha", parent="missing"))
        forest = await store.get_root_folders()
        assert [f.id for f in forest] == ["a"]

    async def test_own_parent_rejected(self, store):
        """Should refuse a folder that is its own parent."""
        result = await store.create(folder("a", "alpha", parent="a"))
        assert result.error is FolderError.CYCLE
        assert await store.get_by_id("a") is None

    async def test_parent_pointing_back_rejected(self, store):
        """Should refuse a parent whose dangling chain leads back to the new id."""
        await store.create(folder("b", "beta", parent="a"))
        result = await store.create(folder("a", "alpha", parent="b"))
        assert result.error is FolderError.CYCLE

        result = await store.create(folder("a", "alpha"))
        assert result.ok
        assert (await store.delete("b")).ok
        assert (await store.delete("a")).ok


class TestUpdate:
    """Test FolderStore.update."""

    async def test_update(self, store):
        await add_craft_tree(store)
        result = await store.update(folder("sweater", "jumper", parent="knitting"))
        assert result.ok
        knitting = (await store.get_root_folders())[0]
        assert [c.tag for c in knitting.children] == ["mittens", "jumper"]

    async def test_missing(self, store):
        result = await store.update(folder("nope", "nope"))
        assert result.error is FolderError.NOT_FOUND

    async def test_cycle(self, store):
        """Should refuse to move a folder below its own descendant."""
        await add_craft_tree(store)
        result = await store.update(folder("knitting", "knitting", parent="mittens"))
        assert result.error is FolderError.CYCLE
        assert (await store.get_by_id("knitting")).parent is None

    async def test_reparent(self, store):
        await add_craft_tree(store)
        await store.update(folder("mittens", "mittens", parent="sweater"))
        root = await store.get_root()
        assert find_folder(root, "/knitting/sweater/mittens").id == "mittens"


class TestDelete:
    """Test FolderStore.delete."""

    async def test_delete_leaf(self, store):
        await add_craft_tree(store)
        result = await store.delete("mittens")
        assert result.ok
        assert result.folder.tag == "mittens"
        assert await store.get_by_id("mittens") is None

    async def test_delete_with_children_rejected(self, store):
        """Should keep a folder that has children, and its children."""
        await add_craft_tree(store)
        result = await store.delete("knitting")
        assert not result.ok
        assert result.error is FolderError.HAS_CHILDREN
        assert await store.get_by_id("knitting") is not None
        assert await store.get_by_id("mittens") is not None

    async def test_delete_missing(self, store):
        result = await store.delete("nope")
        assert result.error is FolderError.NOT_FOUND


class TestLookups:
    """Test FolderStore lookup helpers."""

    async def test_get_by_tag_first_match(self, store):
        await store.create(folder("a", "dup"))
        await store.create(folder("b", "dup"))
        assert (await store.get_by_tag("dup")).id == "a"
        assert await store.get_by_tag("none") is None

    async def test_get_child_folders(self, store):
        await add_craft_tree(store)
        assert [c.id for c in await store.get_child_folders("knitting")] == ["mittens", "sweater"]
        assert await store.get_child_folders("mittens") == []
        assert await store.get_child_folders("nope") == []

    async def test_resolve_parent_id(self, store):
        await add_craft_tree(store)
        assert await store.resolve_parent_id("/knitting/mittens") == "mittens"
        assert await store.resolve_parent_id("/") is None
        assert await store.resolve_parent_id("/nope") is None

    async def test_get_root_is_synthetic(self, store):
        await add_craft_tree(store)
        root = await store.get_root()
        assert root.is_synthetic
        assert [f.id for f in root.children] == ["knitting"]


class TestObservers:
    """Test forest publication."""

    async def test_subscribe_receives_changes(self, memory_store):
        seen = []
        unsubscribe = memory_store.subscribe(seen.append)
        await memory_store.create(folder("a", "alpha"))
        await memory_store.create(folder("b", "beta", parent="a"))
        assert len(seen) == 2
        assert [f.tag for f in seen[-1]] == ["alpha"]
        assert [c.tag for c in seen[-1][0].children] == ["beta"]

        unsubscribe()
        await memory_store.delete("b")
        assert len(seen) == 2

    async def test_failed_mutation_not_published(self, memory_store):
        seen = []
        memory_store.subscribe(seen.append)
        await memory_store.create(folder("a", " "))
        await memory_store.delete("missing")
        assert seen == []

    async def test_failing_listener(self, memory_store):
        """Should keep the mutation and still notify the other listeners."""
        def broken(forest):
            raise RuntimeError("boom")

        seen = []
        memory_store.subscribe(broken)
        memory_store.subscribe(seen.append)

        result = await memory_store.create(folder("a", "alpha"))
        assert result.ok
        assert len(seen) == 1
        assert (await memory_store.get_by_id("a")).tag == "alpha"

    async def test_observe_tree(self, memory_store):
        """Should start with the current forest and follow changes."""
        await memory_store.create(folder("a", "alpha"))
        stream = memory_store.observe_tree()

        first = await stream.__anext__()
        assert [f.tag for f in first] == ["alpha"]

        await memory_store.create(folder("b", "beta"))
        second = await stream.__anext__()
        assert [f.tag for f in second] == ["alpha", "beta"]

        await stream.aclose()
        assert memory_store._listeners == []


class TestSeed:
    """Test demo data."""

    async def test_seed_demo_folders(self, memory_store):
        created = await seed_demo_folders(memory_store)
        assert created == 6
        root = await memory_store.get_root()
        assert [f.tag for f in root.children] == [tag for tag, _, _ in DEMO_FOLDERS]
        assert find_folder(root, "/knitting/sweater").tag_groups == ("winter", "clothing")


def test_parse_tag_groups():
    assert parse_tag_groups("winter, accessories,, ") == ["winter", "accessories"]
    assert parse_tag_groups("") == []


def test_folder_result():
    assert FolderResult().ok
    failure = FolderResult.failure(FolderError.NOT_FOUND, "gone")
    assert not failure.ok
    assert failure.message == "gone"


def test_default_color_matches_settings():
    assert Settings().default_folder_color == DEFAULT_FOLDER_COLOR
    assert Folder(id="a", tag="alpha").color == DEFAULT_FOLDER_COLOR
