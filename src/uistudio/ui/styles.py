"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - chat left, output right
   ============================================ */
Screen {
    layout: grid;
    grid-size: 2 1;
    grid-columns: 2fr 3fr;
    grid-rows: 1fr;
    background: $background;
}

#left-panel,
#right-panel {
    height: 100%;
    padding: 0;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    background: transparent;
}

.user-message {
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
        text-style: bold;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.message-header,
.message-content {
    height: auto;
    padding: 0;
    margin: 0;
}

/* ============================================
   Prompt Bar - TextArea + buttons
   ============================================ */
PromptBar {
    height: auto;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#prompt-input {
    height: 5;
    border: none;
    padding: 0 1;
    background: transparent;
}

#prompt-buttons {
    height: 3;
    width: 100%;
}

#prompt-buttons Button {
    margin: 0 1 0 0;
}

#error-line {
    height: auto;
    padding: 0 1;
    color: $error;
    text-style: bold;
    border: round $error;
}

#guardrail-note,
#example-hint {
    height: auto;
    padding: 0 1;
    color: $text-muted;
}

/* ============================================
   Output Tabs - Preview / Code
   ============================================ */
#output-tabs {
    height: 1fr;
}

#preview-panel,
#code-panel {
    height: 1fr;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;

    &:focus {
        border: round $secondary;
    }
}

.section-title {
    margin-top: 1;
    color: $accent;
    text-style: bold;
}

#code-note {
    margin-top: 1;
    color: $text-muted;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 14;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;
    margin-top: 1;
}

/* ============================================
   Header / Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
    dock: top;
    height: 1;
}

Footer {
    background: $panel;
    height: auto;
}
"""
