"""Exceptions raised by the hook generator."""


class HookgenError(Exception):
    """Base class for generator errors."""


class ConfigurationError(HookgenError):
    """Raised when the plugin configuration cannot be decoded."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class UnsupportedExtensionError(ConfigurationError):
    """Raised when the target output file is not a TypeScript source file."""

    def __init__(self, output_file: str):
        self.output_file = output_file
        super().__init__(
            f'Plugin "typescript-react-query" requires extension to be ".ts" or ".tsx"! '
            f"Got: {output_file}"
        )
