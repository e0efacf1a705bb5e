"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.

Layout: sidebar | chat history | charts, with the input bar spanning the
bottom row.
"""

APP_CSS = """
Screen {
    layout: grid;
    grid-size: 3 2;
    grid-columns: 1fr 3fr 2fr;
    grid-rows: 1fr auto;
    background: $background;
}

/* Sidebar: quick questions over data source status */
#sidebar {
    height: 100%;
    padding: 0 1;
    background: $panel;
    border: round $border;
}

.sidebar-heading {
    height: auto;
    margin: 1 0;
    text-style: bold;
}

QuickQuestions {
    height: auto;
}

QuickQuestions Button {
    width: 100%;
    height: auto;
    min-height: 3;
    margin-bottom: 1;
    border: none;
    text-align: left;
    background: $surface;
}

QuickQuestions Button:hover {
    color: $primary;
    background: $primary 20%;
}

#data-sources {
    height: auto;
    padding-top: 1;
    border-top: solid $border;
    color: $text-muted;
}

/* Conversation */
#chat-history {
    height: 100%;
    padding: 0 1;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    scrollbar-gutter: stable;

    &.-maximized {
        column-span: 2;
    }
}

.chat-message {
    height: auto;
    margin-bottom: 1;
    padding: 1 2;
}

.user-message {
    border-left: tall $primary;
    background: $primary 10%;
}

.bot-message {
    border-left: tall $secondary;
    background: $secondary 8%;
}

.message-header {
    height: auto;
    text-style: bold;
}

.user-message .message-header {
    color: $primary;
}

.bot-message .message-header {
    color: $secondary;
}

.message-content, .message-time {
    height: auto;
}

.message-time {
    color: $text-muted;
    text-align: right;
}

ChartCard {
    height: auto;
    margin-top: 1;
    padding: 0 1;

    &.chart-temperature { border: round $primary; }
    &.chart-salinity { border: round $secondary; }
    &.chart-currents { border: round $accent; }
}

.chart-title {
    text-style: bold;
}

.chart-description {
    color: $text-muted;
}

ThinkingIndicator {
    height: auto;
    padding: 0 2;
    color: $text-muted;
    text-style: italic;
}

/* Right column: rendered charts over the trace log */
#right-panel {
    height: 100%;
}

#plot-panel {
    height: 1fr;
    min-height: 10;
    padding: 0 1;
    background: $panel;
    border: round $accent 60%;
    border-subtitle-align: right;

    &:focus {
        border: round $accent;
    }
}

#debug-panel {
    height: auto;
    max-height: 14;
    margin-top: 1;
    padding: 0 1;
    background: $panel;
    border: round $warning 60%;
    border-subtitle-align: right;
}

/* Input row */
#bottom-bar {
    column-span: 3;
    height: auto;
    padding: 1;
    background: $panel;
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin-left: 1;

    &:disabled {
        opacity: 50%;
    }
}
"""
