"""Tests for the Textual TUI and chart rendering."""
import pytest
from rich.table import Table

from floatchat.chat import ChatSession, ManualScheduler
from floatchat.ui import QUICK_QUESTIONS, FloatChatApp, LogLevel
from floatchat.ui.charts import build_figure, chart_style, chart_table, render_chart
from floatchat.ui.widgets import (
    ChartCard,
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    MessageView,
    PlotPanel,
    ThinkingIndicator,
)
from floatchat.visualization import KeywordVisualizationSelector, VisualizationKind

SCREEN_SIZE = (160, 50)


@pytest.fixture
def ui_session():
    """Return a session on a virtual clock plus its scheduler."""
    scheduler = ManualScheduler()
    session = ChatSession(scheduler=scheduler, selector=KeywordVisualizationSelector(seed=4))
    return scheduler, session


def input_text(app) -> str:
    return app.query_one("#chat-input-bar", ChatInputBar).text


class TestFloatChatApp:
    """Pilot-driven tests for the app."""

    @pytest.mark.asyncio
    async def test_starts_with_welcome_message(self, ui_session):
        _, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            await pilot.pause()
            views = list(app.query(MessageView))
            assert len(views) == 1
            assert views[0].message.id == 1
            assert not app.query(ThinkingIndicator)
            assert app.title == "FloatChat"

    @pytest.mark.asyncio
    async def test_quick_question_fills_input_without_sending(self, ui_session):
        _, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            await pilot.click("#question-1")
            await pilot.pause()
            assert input_text(app) == QUICK_QUESTIONS[1]
            assert len(session.messages) == 1

    @pytest.mark.asyncio
    async def test_submit_shows_thinking_then_reply(self, ui_session):
        scheduler, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            await pilot.click("#question-0")
            await pilot.click("#send-btn")
            await pilot.pause()

            assert len(session.messages) == 2
            assert session.pending
            assert input_text(app) == ""
            assert len(app.query(ThinkingIndicator)) == 1
            assert app.query_one("#chat-history", ChatHistoryWidget).is_thinking
            assert app.query_one("#send-btn").disabled

            scheduler.advance(session.response_delay)
            await pilot.pause()

            assert len(app.query(MessageView)) == 3
            assert not app.query(ThinkingIndicator)
            cards = list(app.query(ChartCard))
            assert len(cards) == 1
            assert cards[0].payload.kind == VisualizationKind.TEMPERATURE
            assert cards[0].has_class("chart-temperature")
            assert not app.query_one("#send-btn").disabled

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["enter", "ctrl+j"])
    async def test_key_submits_typed_text(self, ui_session, key):
        _, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            app.query_one("#chat-input-bar", ChatInputBar).set_text("temperature")
            await pilot.press(key)
            await pilot.pause()

            assert len(session.messages) == 2
            assert session.messages[1].text == "temperature"
            assert input_text(app) == ""

    @pytest.mark.asyncio
    async def test_history_scrolls_to_newest_message(self, ui_session):
        scheduler, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            chat = app.query_one("#chat-history", ChatHistoryWidget)
            for query in ("temperature", "salinity", "current", "temperature", "salinity"):
                session.submit(query)
                scheduler.advance(session.response_delay)
                await pilot.pause()
            await pilot.pause()

            assert chat.max_scroll_y > 0
            assert chat.scroll_y == chat.max_scroll_y

    @pytest.mark.asyncio
    async def test_charts_rendered_into_plot_panel(self, ui_session):
        scheduler, session = ui_session
        app = FloatChatApp(session=session)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            plot_panel = app.query_one("#plot-panel", PlotPanel)
            assert not plot_panel.display

            for query in ("temperature", "salinity", "current"):
                session.submit(query)
                scheduler.advance(session.response_delay)
                await pilot.pause()

            names = [path.name for path in plot_panel.images]
            assert names == ["003-temperature.png", "005-salinity.png", "007-currents.png"]
            assert plot_panel.display
            chart_dir = plot_panel.images[0].parent

            await pilot.press("ctrl+k")
            await pilot.pause()
            assert plot_panel.images == []
            assert not plot_panel.display

        assert not chart_dir.exists()

    @pytest.mark.asyncio
    async def test_submit_while_pending_keeps_input(self, ui_session):
        scheduler, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            input_bar = app.query_one("#chat-input-bar", ChatInputBar)
            input_bar.set_text("salinity")
            await pilot.click("#send-btn")
            await pilot.pause()
            input_bar.set_text("currents")
            await pilot.click("#send-btn")
            await pilot.pause()

            assert len(session.messages) == 2
            assert input_text(app) == "currents"

            scheduler.advance(session.response_delay)
            await pilot.pause()
            assert len(session.messages) == 3

    @pytest.mark.asyncio
    async def test_blank_submit_ignored(self, ui_session):
        _, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            await pilot.click("#send-btn")
            await pilot.pause()
            assert len(session.messages) == 1
            assert len(app.query(MessageView)) == 1

    @pytest.mark.asyncio
    async def test_clear_chat_resets_session(self, ui_session):
        scheduler, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            session.submit("temperature")
            scheduler.advance(session.response_delay)
            await pilot.pause()
            assert len(app.query(MessageView)) == 3

            await pilot.press("ctrl+k")
            await pilot.pause()
            assert len(session.messages) == 1
            assert len(app.query(MessageView)) == 1
            assert app.query_one("#chat-history", ChatHistoryWidget).rendered_count == 1

    @pytest.mark.asyncio
    async def test_escape_cancels_pending(self, ui_session):
        scheduler, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            session.submit("temperature")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert not session.pending
            scheduler.advance(session.response_delay)
            await pilot.pause()
            assert len(app.query(MessageView)) == 2
            assert not app.query(ThinkingIndicator)

    @pytest.mark.asyncio
    async def test_log_panel_shows_session_trace(self, ui_session):
        _, session = ui_session
        app = FloatChatApp(session=session, render_charts=False, log_level="info")
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            log_panel = app.query_one("#debug-panel", DebugPanel)
            assert log_panel.display
            assert log_panel.log_level == LogLevel.INFO
            lines_before = len(log_panel.lines)
            session.submit("temperature")
            await pilot.pause()
            assert len(log_panel.lines) > lines_before

    @pytest.mark.asyncio
    async def test_toggle_debug_panel(self, ui_session):
        _, session = ui_session
        app = FloatChatApp(session=session, render_charts=False)
        async with app.run_test(size=SCREEN_SIZE) as pilot:
            log_panel = app.query_one("#debug-panel", DebugPanel)
            assert not log_panel.display
            await pilot.press("ctrl+d")
            await pilot.pause()
            assert log_panel.display


class TestCharts:
    """Tests for chart rendering."""

    def test_chart_styles(self):
        assert chart_style(VisualizationKind.TEMPERATURE) == "line"
        assert chart_style(VisualizationKind.SALINITY) == "area"
        assert chart_style(VisualizationKind.CURRENTS) == "scatter"

    @pytest.mark.parametrize("query", ["temperature", "salinity", "current"])
    def test_render_chart_writes_png(self, tmp_path, query):
        payload = KeywordVisualizationSelector(seed=2).select(query)
        path = render_chart(payload, tmp_path, f"001-{payload.kind.value}")
        assert path.exists()
        assert path.read_bytes().startswith(b"\x89PNG")

    def test_month_axis_uses_labels(self):
        payload = KeywordVisualizationSelector().select("temperature")
        figure = build_figure(payload)
        axes = figure.axes[0]
        labels = [label.get_text() for label in axes.get_xticklabels()]
        assert labels[0] == "Jan"
        assert axes.get_title() == "Ocean Temperature Trends"

    def test_chart_table(self):
        payload = KeywordVisualizationSelector(seed=2).select("current")
        table = chart_table(payload)
        assert isinstance(table, Table)
        assert table.row_count == 12
        assert len(table.columns) == 4
