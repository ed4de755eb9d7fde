import asyncio
import threading
import time

from textual.widgets import ListView

from LogViewer.UI.app import LogViewerApp
from LogViewer.UI.views.log_viewer import (
    ColumnCheckbox,
    EmptyState,
    LogStatsPanel,
    LogViewerScreen,
    LogViewerTable,
    RowDetailsPanel,
)
from LogViewer.UI.views.welcome import RecentFileItem, WelcomeScreen
from LogViewer.UI.views.log_viewer.log_table import MATCH_STYLE, spans_to_text
from LogViewer.core.highlighter import highlight
from LogViewer.storage.theme import Theme


def run(scenario):
    asyncio.run(scenario())


class TestWelcomeScreen:

    def test_starts_on_welcome(self, config):
        async def scenario():
            app = LogViewerApp(config=config)
            async with app.run_test() as pilot:
                await pilot.pause()
                assert isinstance(app.screen, WelcomeScreen)
                assert not app.screen.query_one("#recent-files-panel").display

        run(scenario)

    def test_lists_recent_files(self, config, log_file):
        async def scenario():
            app = LogViewerApp(config=config)
            app.recent_files.add(str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                items = list(app.screen.query(RecentFileItem))
                assert [item.path for item in items] == [str(log_file)]

                app.screen.handle_clear_history()
                await pilot.pause()
                assert app.recent_files.load() == []
                assert len(app.screen.query_one("#recent-files-list", ListView).children) == 0

        run(scenario)

    def test_cycle_theme(self, config):
        async def scenario():
            app = LogViewerApp(config=config)
            async with app.run_test() as pilot:
                await pilot.pause()
                app.action_cycle_theme()
                await pilot.pause()
                assert app.theme_store.get_theme() is Theme.DARK
                assert app.theme == "textual-dark"

                app.action_cycle_theme()
                await pilot.pause()
                assert app.theme == "textual-light"

        run(scenario)

    def test_missing_initial_file_stays_on_welcome(self, config, tmp_path):
        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(tmp_path / "missing.log"))
            async with app.run_test() as pilot:
                await pilot.pause()
                assert isinstance(app.screen, WelcomeScreen)
                assert app.recent_files.load() == []

        run(scenario)


class TestLogViewerScreen:

    def test_opens_initial_file(self, config, log_file):
        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                assert isinstance(screen, LogViewerScreen)
                assert screen.title == "Log Viewer - app_log"

                table = screen.query_one(LogViewerTable)
                assert table.row_count == 3
                assert len(table.columns) == 2
                assert screen.query_one(LogStatsPanel).error_count == 2
                assert len(screen.query(ColumnCheckbox)) == 2
                assert app.recent_files.load() == [str(log_file)]
                assert app.channel.pending() == []

        run(scenario)

    def test_search_filters_rows(self, config, log_file):
        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                table = screen.query_one(LogViewerTable)

                screen._perform_search("ERROR")
                await pilot.pause()
                assert table.row_count == 2
                assert screen.query_one(LogStatsPanel).visible_rows == 2

                screen._perform_search("zzz")
                await pilot.pause()
                assert not table.display
                assert screen.query_one(EmptyState).display

                screen.handle_clear_search()
                await pilot.pause()
                assert table.row_count == 3
                assert table.display

        run(scenario)

    def test_sort_and_hide_column(self, config, log_file):
        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                table = screen.query_one(LogViewerTable)

                screen.session.click_header(1)
                screen._refresh_table()
                await pilot.pause()
                assert [row[1] for row in table.shown_rows] == ["boom", "ok", "retry"]

                screen.session.layout.toggle_visibility(0)
                screen._refresh_table()
                await pilot.pause()
                assert table.column_indices == [1]
                assert len(table.columns) == 1

        run(scenario)

    def test_row_details(self, config, log_file):
        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                panel = screen.query_one(RowDetailsPanel)
                assert not panel.display

                screen.session.click_row(2)
                screen._update_details()
                await pilot.pause()
                assert panel.display

                screen.session.click_row(2)
                screen._update_details()
                await pilot.pause()
                assert not panel.display

        run(scenario)

    def test_widen_column(self, config, log_file):
        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                table = screen.query_one(LogViewerTable)
                column_index = table.cursor_column_index()
                before = table.column_width(column_index)

                screen.action_widen_column()
                await pilot.pause()
                assert screen.session.layout.width_of(column_index) == before + config.width_step

        run(scenario)

    def test_close_returns_to_welcome(self, config, log_file):
        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                app.screen.action_close()
                await pilot.pause()
                assert isinstance(app.screen, WelcomeScreen)
                assert [item.path for item in app.screen.query(RecentFileItem)] == [str(log_file)]

        run(scenario)

    def test_open_from_viewer_reuses_screen(self, config, log_file, tmp_path):
        other = tmp_path / "other.log"
        other.write_text("A B C\n1 2 3\n", encoding="utf-8")

        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                viewer = app.screen
                app.open_log_file(str(other))
                await pilot.pause()
                assert app.screen is viewer
                assert viewer.session.table.headers == ("A", "B", "C")
                assert viewer.query_one(LogViewerTable).row_count == 1

        run(scenario)

    def test_file_event_does_not_wait_for_event_loop(self, config, log_file):
        async def scenario():
            app = LogViewerApp(config=config, initial_path=str(log_file))
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                table = screen.query_one(LogViewerTable)
                with open(log_file, "a", encoding="utf-8") as f:
                    f.write("DEBUG appended\n")

                # The loop is blocked in join() here, as it is when the
                # watcher is stopped while an event is being delivered
                thread = threading.Thread(
                    target=screen._on_file_event, args=("modified", str(log_file))
                )
                thread.start()
                thread.join(timeout=2)
                assert not thread.is_alive()

                for _ in range(40):
                    await pilot.pause(0.05)
                    if table.row_count == 4:
                        break
                assert table.row_count == 4

        run(scenario)

    def test_missing_handoff_does_not_wait(self, config):
        async def scenario():
            app = LogViewerApp(config=config)
            async with app.run_test() as pilot:
                await pilot.pause()
                start = time.monotonic()
                app.push_screen(LogViewerScreen("never-sent"))
                await pilot.pause()
                assert time.monotonic() - start < 2
                screen = app.screen
                assert isinstance(screen, LogViewerScreen)
                assert screen.query_one(EmptyState).display
                assert not screen.query_one(LogViewerTable).display

        run(scenario)


class TestSpansToText:

    def test_no_match_is_plain(self):
        text = spans_to_text(highlight("boom", "zzz"), "red")
        assert text.plain == "boom"
        assert text.spans == []
        assert text.style == "red"

    def test_matches_styled(self):
        text = spans_to_text(highlight("boom", "oo"))
        assert text.plain == "boom"
        assert [(s.start, s.end, s.style) for s in text.spans] == [(1, 3, MATCH_STYLE)]
