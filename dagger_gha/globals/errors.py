from typing import Optional


class DaggerGhaError(Exception):
    """Base class for every error raised while generating workflows."""


class ConfigurationError(DaggerGhaError):
    """The declarative input cannot be turned into a valid workflow."""


class InvalidSecretNameError(ConfigurationError):
    def __init__(self, secret_name: str) -> None:
        self.secret_name = secret_name
        super().__init__(
            f"invalid secret name: '{secret_name}' must contain only "
            "alphanumeric characters and underscores"
        )


class PipelineNotFoundError(ConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"pipeline not found: '{name}'")


class CheckError(DaggerGhaError):
    """
    Raised when validating a pipeline against a repository fails.

    Attributes:
        pipeline: Name of the pipeline that was checked
        output: Output of the failed call, unmodified
    """

    def __init__(self, pipeline: str, output: str, returncode: Optional[int] = None) -> None:
        self.pipeline = pipeline
        self.output = output
        self.returncode = returncode
        super().__init__(f"check failed for pipeline '{pipeline}': {output}")
