import pytest

from LogViewer.storage.recent_files import RecentFiles


@pytest.fixture
def recent(tmp_path):
    return RecentFiles(tmp_path / "logviewer.db", limit=3)


class TestRecentFiles:

    def test_empty(self, recent):
        assert recent.load() == []

    def test_most_recent_first(self, recent):
        recent.add("/a.log")
        recent.add("/b.log")
        assert recent.load() == ["/b.log", "/a.log"]

    def test_add_returns_list(self, recent):
        recent.add("/a.log")
        assert recent.add("/b.log") == ["/b.log", "/a.log"]

    def test_readd_moves_to_front(self, recent):
        recent.add("/a.log")
        recent.add("/b.log")
        recent.add("/a.log")
        assert recent.load() == ["/a.log", "/b.log"]

    def test_dedupe_is_exact_string(self, recent):
        recent.add("/a.log")
        recent.add("/A.log")
        assert recent.load() == ["/A.log", "/a.log"]

    def test_limit(self, recent):
        for name in ["1", "2", "3", "4", "5"]:
            recent.add(f"/{name}.log")
        assert recent.load() == ["/5.log", "/4.log", "/3.log"]

    def test_remove(self, recent):
        recent.add("/a.log")
        recent.add("/b.log")
        recent.remove("/a.log")
        assert recent.load() == ["/b.log"]

    def test_clear(self, recent):
        recent.add("/a.log")
        recent.clear()
        assert recent.load() == []

    def test_persisted(self, tmp_path, recent):
        recent.add("/a.log")
        assert RecentFiles(tmp_path / "logviewer.db", limit=3).load() == ["/a.log"]
