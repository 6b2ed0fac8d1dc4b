from enum import Enum


class Color(str, Enum):
    SUCCESS = "\033[92m"
    ERROR = "\033[91m"
    INFO = "\033[94m"
    WARNING = "\033[93m"
    RESET = "\033[0m"


class RenderMode(str, Enum):
    HTML = "html"
    PDF = "pdf"

    @staticmethod
    def from_string(mode_str: str) -> "RenderMode":
        try:
            return RenderMode(mode_str.lower())
        except ValueError as exc:
            raise UnsupportedModeError(mode_str) from exc


def colored(text: str, color: Color) -> str:
    return f"{color.value}{text}{Color.RESET.value}"


def echo(text: str, color: Color = Color.INFO) -> None:
    print(colored(text, color))


class ResumeMakerError(Exception):
    exit_code = 1


class ResumeValidationError(ResumeMakerError):
    exit_code = 3

    def __init__(self, path: str, issues: list | None = None):
        self.path = path
        self.issues = list(issues or [])
        super().__init__(
            f"{path} is not a valid resume.json file by the jsonresume schema"
        )


class ResumeParseError(ResumeMakerError):
    exit_code = 4

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not parse {path}: {reason}")


class ThemeLoadError(ResumeMakerError):
    exit_code = 5

    def __init__(self, theme: str, reason: str = "module could not be imported"):
        super().__init__(
            f"Theme '{theme}' could not be loaded ({reason}). Make sure it is installed"
        )


class RenderError(ResumeMakerError):
    exit_code = 6

    def __init__(self, theme: str, reason: str):
        super().__init__(f"Theme '{theme}' failed to render: {reason}")


class UnsupportedModeError(ResumeMakerError):
    exit_code = 7

    def __init__(self, mode: str):
        super().__init__(
            f"Invalid render mode: {mode}. Valid modes: {[m.value for m in RenderMode]}"
        )


class BrowserError(ResumeMakerError):
    exit_code = 8

    def __init__(self, reason: str):
        super().__init__(f"Headless browser failed: {reason}")


class ResumeIOError(ResumeMakerError):
    exit_code = 9

    def __init__(self, path: str, reason: str):
        super().__init__(f"File error for {path}: {reason}")


class ConfigError(ResumeMakerError):
    exit_code = 10

    def __init__(self, reason: str):
        super().__init__(f"Invalid configuration: {reason}")
