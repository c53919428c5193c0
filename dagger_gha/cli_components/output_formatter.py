from abc import ABC, abstractmethod
from pathlib import Path

from dagger_gha.globals.errors import CheckError, DaggerGhaError


class OutputFormatter(ABC):
    """Interface for formatting CLI output."""

    @abstractmethod
    def format_written_file(self, file: Path) -> str:
        pass

    @abstractmethod
    def format_check_passed(self, n_pipelines: int) -> str:
        pass

    @abstractmethod
    def format_check_failure(self, error: CheckError) -> str:
        pass

    @abstractmethod
    def format_error(self, error: DaggerGhaError) -> str:
        pass

    @abstractmethod
    def format_summary(self, n_files: int, n_errors: int) -> str:
        pass


class ColoredFormatter(OutputFormatter):
    """
    Colored console output formatter.

    Formats CLI output with ANSI color codes and consistent spacing.
    Used as the default formatter for interactive terminal sessions.
    """

    STYLE = {
        "ok": {"color_bold": "\033[1;92m", "color": "\033[92m", "sign": "✓"},
        "error": {"color_bold": "\033[1;31m", "color": "\033[31m", "sign": "✗"},
    }

    DEF_STYLE = {
        "format_end": "\033[0m",
        "neutral": "\033[2m",
        "underline": "\033[4m",
    }

    def format_written_file(self, file: Path) -> str:
        return f'  {self.STYLE["ok"]["color"]}{self.STYLE["ok"]["sign"]}{self.DEF_STYLE["format_end"]} {file}'

    def format_check_passed(self, n_pipelines: int) -> str:
        return (
            f'  {self.DEF_STYLE["neutral"]}{self.STYLE["ok"]["sign"]} '
            f'{n_pipelines} pipelines checked{self.DEF_STYLE["format_end"]}'
        )

    def format_check_failure(self, error: CheckError) -> str:
        header = (
            f'\n{self.DEF_STYLE["underline"]}{error.pipeline}{self.DEF_STYLE["format_end"]}\n'
            f'  {self.STYLE["error"]["color"]}check failed{self.DEF_STYLE["format_end"]}'
        )
        if error.returncode is not None:
            header += f'  {self.DEF_STYLE["neutral"]}(exit {error.returncode}){self.DEF_STYLE["format_end"]}'
        return header + "\n" + error.output.rstrip()

    def format_error(self, error: DaggerGhaError) -> str:
        return f'{self.STYLE["error"]["color"]}error{self.DEF_STYLE["format_end"]}  {error}'

    def format_summary(self, n_files: int, n_errors: int) -> str:
        style = self.STYLE["error"] if n_errors else self.STYLE["ok"]
        return (
            f'\n{style["color_bold"]}{style["sign"]} {n_files} workflows generated '
            f'({n_errors} errors){self.DEF_STYLE["format_end"]}\n'
        )
