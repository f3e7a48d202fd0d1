from slugkit.config import SlugOverrides, SlugSettings
from slugkit.hooks.record_hook import SlugRecordHook
from slugkit.services.slug_service import SlugService
from slugkit.services.unique_slug_service import UniqueSlugService


def _hook(repo, **kw):
    settings = SlugSettings(preserve_original=False, use_intl=False, **kw)
    return SlugRecordHook(UniqueSlugService(repo, SlugService(settings), settings))


def test_before_create_fills_slug(memory_repo):
    memory_repo.add("posts", "slug", "first-post", key=1)
    record = {"name": "First Post!"}
    out = _hook(memory_repo).before_create(record, "posts")
    assert out is record
    assert record["slug"] == "first-post-1"


def test_before_create_skips_empty_source(memory_repo):
    record = {"name": "  "}
    _hook(memory_repo).before_create(record, "posts")
    assert "slug" not in record


def test_overrides_take_precedence(memory_repo):
    memory_repo.add("posts", "handle", "my_title", key=1)
    record = {"title": "My Title"}
    overrides = SlugOverrides(source_field="title", separator="_", column="handle")
    _hook(memory_repo).before_create(record, "posts", overrides)
    assert record == {"title": "My Title", "handle": "my_title_1"}


def test_before_update_regenerates_when_source_changed(memory_repo):
    memory_repo.add("posts", "slug", "old-name", key=5)
    record = {"name": "New Name", "slug": "old-name"}
    _hook(memory_repo).before_update(record, {"name": "Old Name"}, "posts", key=5)
    assert record["slug"] == "new-name"


def test_before_update_keeps_own_slug(memory_repo):
    memory_repo.add("posts", "slug", "same-title", key=5)
    record = {"name": "Same  Title", "slug": "same-title"}
    _hook(memory_repo).before_update(record, {"name": "Same Title"}, "posts", key=5)
    assert record["slug"] == "same-title"


def test_before_update_ignores_unchanged_source(memory_repo):
    record = {"name": "Title", "slug": "custom"}
    _hook(memory_repo).before_update(record, {"name": "Title"}, "posts", key=1)
    assert record["slug"] == "custom"


def test_before_update_respects_regenerate_flag(memory_repo):
    record = {"name": "New", "slug": "old"}
    _hook(memory_repo, regenerate_on_update=False).before_update(record, {"name": "Old"}, "posts", key=1)
    assert record["slug"] == "old"

    overrides = SlugOverrides(regenerate_on_update=True)
    _hook(memory_repo, regenerate_on_update=False).before_update(record, {"name": "Old"}, "posts", 1, overrides)
    assert record["slug"] == "new"


def test_regenerate_forces_new_slug(memory_repo):
    record = {"name": "Fresh Start", "slug": "stale"}
    _hook(memory_repo).regenerate(record, "posts", key=3)
    assert record["slug"] == "fresh-start"
