"""
Integration tests for the full catalog flow.

Covers the load -> create -> insert -> save -> reload path and the
process entry point with its exit codes.
"""

import io

import pytest
from rich.console import Console

from movie_catalog import main as main_module
from movie_catalog.errors import OutOfMemoryError
from movie_catalog.main import main
from movie_catalog.storage import RecordStore, crud, load_movies, save_movies


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    """Point the app at a catalog file inside tmp_path."""
    path = tmp_path / "movies.txt"
    monkeypatch.setenv("MOVIE_CATALOG_FILE", str(path))
    monkeypatch.delenv("MOVIE_CATALOG_CAPACITY", raising=False)
    monkeypatch.delenv("MOVIE_CATALOG_MAX_CAPACITY", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    return path


def make_console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


class TestEndToEnd:
    """Store and codec working together."""

    def test_first_run_then_reload(self, tmp_path):
        """Empty file loads nothing; a saved movie reloads intact."""
        path = tmp_path / "movies.txt"
        path.write_text("", encoding="utf-8")

        store = RecordStore()
        load_movies(path, store)
        assert store.count == 0

        movie = crud.create_movie("Dune", "Villeneuve", 2021)
        crud.insert_movie(store, movie)
        save_movies(path, store)

        fresh = RecordStore()
        load_movies(path, fresh)

        assert fresh.count == 1
        assert fresh[0].title == "Dune"
        assert fresh[0].director == "Villeneuve"
        assert fresh[0].year == 2021

    def test_large_catalog_round_trip(self, tmp_path):
        path = tmp_path / "movies.txt"
        store = RecordStore(capacity=1)
        for i in range(50):
            movie = crud.add_movie(store, f"Movie {i:02d}", f"Director {i}", 1901 + i)
            crud.rate_movie(movie, str(i % 5 + 1))
        crud.delete_movie(store, 10, "y")
        save_movies(path, store)

        fresh = RecordStore(capacity=1)
        load_movies(path, fresh)

        assert fresh.count == 49
        assert [(m.title, m.year, m.rating) for m in fresh] == [
            (m.title, m.year, m.rating) for m in store
        ]


class TestMain:
    """Tests for the process entry point."""

    def test_main_runs_session(self, data_file):
        console = make_console()
        stream = io.StringIO("1\nDune\nVilleneuve\n2021\n6\n")

        code = main(stream=stream, console=console)

        assert code == 0
        assert data_file.read_text(encoding="utf-8") == "Dune|Villeneuve|2021|0.0\n"
        assert "Exiting Program..." in console.file.getvalue()

    def test_main_loads_existing_catalog(self, data_file):
        data_file.write_text("Alien|Scott|1979|5.0\n", encoding="utf-8")
        console = make_console()

        code = main(stream=io.StringIO("2\nq\n6\n"), console=console)

        assert code == 0
        assert "Alien" in console.file.getvalue()
        assert data_file.read_text(encoding="utf-8") == "Alien|Scott|1979|5.0\n"

    def test_main_allocation_failure(self, data_file, monkeypatch):
        def fail(*args, **kwargs):
            raise OutOfMemoryError("no memory")

        monkeypatch.setattr(main_module, "RecordStore", fail)
        console = make_console()

        assert main(stream=io.StringIO(""), console=console) == 1
        assert "Failed to allocate memory." in console.file.getvalue()
        assert not data_file.exists()

    def test_main_invalid_capacity(self, data_file, monkeypatch):
        monkeypatch.setenv("MOVIE_CATALOG_CAPACITY", "0")

        assert main(stream=io.StringIO(""), console=make_console()) == 1

    def test_main_partial_load_keeps_file(self, data_file, monkeypatch):
        """A catalog too large for the store is reported and not overwritten."""
        original = "".join(f"Movie {i}|Director|{1950 + i}|1.0\n" for i in range(3))
        data_file.write_text(original, encoding="utf-8")
        monkeypatch.setenv("MOVIE_CATALOG_CAPACITY", "1")
        monkeypatch.setenv("MOVIE_CATALOG_MAX_CAPACITY", "2")
        console = make_console()

        code = main(stream=io.StringIO("6\n"), console=console)

        assert code == 0
        assert "Catalog only partly loaded" in console.file.getvalue()
        assert data_file.read_text(encoding="utf-8") == original

    def test_main_undecodable_catalog_is_not_overwritten(self, data_file):
        """A latin-1 catalog is reported and left byte-for-byte intact."""
        original = "Am\xe9lie|Jeunet|2001|4.0\nDune|Villeneuve|2021|5.0\n".encode("latin-1")
        data_file.write_bytes(original)
        console = make_console()

        code = main(stream=io.StringIO("6\n"), console=console)

        assert code == 0
        assert "Catalog only partly loaded" in console.file.getvalue()
        assert data_file.read_bytes() == original

    def test_main_unknown_log_level(self, data_file, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        assert main(stream=io.StringIO("6\n"), console=make_console()) == 0
