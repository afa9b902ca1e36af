"""Tests for Rich Console factory and theme."""

from io import StringIO

from budgetgraph.output.console import BUDGET_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_styles_resolve(self) -> None:
        console = create_console(no_color=True)
        console.print("[bg.node]7[/bg.node] [bg.cycle]cycle[/bg.cycle]")
        assert get_output(console).strip() == "7 cycle"


class TestTheme:
    def test_styles_present(self) -> None:
        for name in ("bg.ok", "bg.error", "bg.node", "bg.cycle", "bg.amount"):
            assert name in BUDGET_THEME.styles


class TestGetOutput:
    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""
