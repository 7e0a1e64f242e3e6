"""Tests for the favorites store."""

from pathlib import Path

from cheatfinder.data_models import CheatSheetItem
from cheatfinder.storage import FavoritesStore


def _item(command: str, source: str = "cheat.sh", **kwargs) -> CheatSheetItem:
    return CheatSheetItem(
        title=kwargs.pop("title", command),
        command=command,
        source_name=source,
        **kwargs,
    )


class TestFavoritesStore:
    def test_add_is_most_recent_first(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json")
        store.add(_item("git status"))
        store.add(_item("docker ps"))

        assert [f.command for f in store.all()] == ["docker ps", "git status"]

    def test_add_ignores_duplicates(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json")
        store.add(_item("git status"))
        store.add(_item("git status", score=99))
        assert len(store) == 1

    def test_identity_includes_source(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json")
        store.add(_item("ls -la", source="cheat.sh"))

        assert store.is_favorite(_item("ls -la", source="cheat.sh"))
        assert not store.is_favorite(_item("ls -la", source="tldr (common)"))

    def test_capped_at_limit(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json", limit=3)
        for i in range(5):
            store.add(_item(f"cmd{i}"))

        assert [f.command for f in store.all()] == ["cmd4", "cmd3", "cmd2"]

    def test_toggle(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json")
        item = _item("git log")

        assert store.toggle(item) is True
        assert store.is_favorite(item)
        assert store.toggle(item) is False
        assert not store.is_favorite(item)

    def test_persists_between_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "favorites.json"
        FavoritesStore(path).add(_item("git push", description="Push commits"))

        reloaded = FavoritesStore(path)
        assert len(reloaded) == 1
        assert reloaded.all()[0].description == "Push commits"

    def test_remove_persists(self, tmp_path: Path) -> None:
        path = tmp_path / "favorites.json"
        store = FavoritesStore(path)
        store.add(_item("a"))
        store.add(_item("b"))
        store.remove(_item("a"))

        assert [f.command for f in FavoritesStore(path).all()] == ["b"]

    def test_corrupt_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "favorites.json"
        path.write_text("{not json")

        store = FavoritesStore(path)
        assert len(store) == 0

        store.add(_item("git status"))
        assert len(FavoritesStore(path)) == 1

    def test_stored_items_are_copies(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json")
        store.add(_item("git status"))

        listed = store.all()
        listed.clear()
        assert len(store) == 1


class TestFavoritesSearch:
    def test_empty_term_returns_all(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json")
        store.add(_item("git status"))
        store.add(_item("docker ps"))
        assert len(store.search("  ")) == 2

    def test_matches_command_title_and_description(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json")
        store.add(_item("tar xf a.tar", description="Extract archive"))
        store.add(_item("kubectl get pods", title="List pods"))
        store.add(_item("terraform plan"))

        assert [f.command for f in store.search("extract")] == ["tar xf a.tar"]
        assert [f.command for f in store.search("list pods")] == ["kubectl get pods"]

    def test_ordered_by_command_match(self, tmp_path: Path) -> None:
        store = FavoritesStore(tmp_path / "favorites.json")
        store.add(_item("legit tool"))
        store.add(_item("git"))
        store.add(_item("git status"))

        assert [f.command for f in store.search("git")] == [
            "git",
            "git status",
            "legit tool",
        ]
