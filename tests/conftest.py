import pytest

from LogViewer.config import ViewerConfig

SAMPLE_LOG = (
    "LEVEL MSG\n"
    "ERROR boom\n"
    "INFO ok\n"
    "ERROR retry\n"
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    # Keep config, database and logs out of the real home directory
    home = tmp_path / "home"
    monkeypatch.setenv("LOGVIEWER_HOME", str(home))
    return home


@pytest.fixture
def config(tmp_path):
    return ViewerConfig(data_dir=tmp_path / "data", auto_reload=False)


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "app.log"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path
