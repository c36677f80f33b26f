from pathlib import Path


class RestrictedImportsError(Exception):
    """Base user-facing application error."""


class InvalidPatternError(RestrictedImportsError):
    def __init__(self, pattern: object, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid pattern {pattern!r} ({detail})")


class InvalidRestrictionError(RestrictedImportsError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid restriction ({detail})")


class ConfigFileError(RestrictedImportsError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(ConfigFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required file")


class InvalidConfigFormatError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config format ({detail})")


class InvalidConfigSchemaError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")
