"""Tests for shared/repository.py."""

from typing import Optional

from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_defaults_to_empty_dict_store(self):
        """Should start empty when no store is given."""
        repo = BaseRepository[str]()
        assert len(repo) == 0
        assert repo.get("missing") is None

    def test_uses_injected_store(self):
        """Should read and write through an injected mapping."""
        store = {"a": "alpha"}
        repo = BaseRepository[str](store)
        assert repo.get("a") == "alpha"

        repo.save("b", "beta")
        assert store["b"] == "beta"

    def test_save_replaces_existing(self):
        """Saving under an existing key should replace the entity."""
        repo = BaseRepository[str]()
        repo.save("a", "first")
        repo.save("a", "second")
        assert repo.get("a") == "second"
        assert len(repo) == 1

    def test_exists(self):
        """exists should reflect stored keys."""
        repo = BaseRepository[str]()
        repo.save("a", "alpha")
        assert repo.exists("a")
        assert not repo.exists("b")

    def test_delete(self):
        """delete should report whether something was removed."""
        repo = BaseRepository[str]()
        repo.save("a", "alpha")
        assert repo.delete("a") is True
        assert repo.delete("a") is False
        assert repo.get("a") is None

    def test_values_is_a_snapshot(self):
        """Deleting while iterating values should be safe."""
        repo = BaseRepository[str]()
        repo.save("alpha", "alpha")
        repo.save("beta", "beta")
        for value in repo.values():
            repo.delete(value)
        assert len(repo) == 0

    def test_subclass_adds_lookups(self):
        """Subclasses should build domain queries on the primitives."""

        class NameRepository(BaseRepository[str]):
            def find_starting_with(self, prefix: str) -> Optional[str]:
                return next((v for v in self.values() if v.startswith(prefix)), None)

        repo = NameRepository()
        repo.save("1", "alpha")
        repo.save("2", "beta")
        assert repo.find_starting_with("be") == "beta"
        assert repo.find_starting_with("z") is None
