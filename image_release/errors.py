class PipelineError(Exception):
    kind: str = "pipeline" #stage that failed, reported by the entry point


class ConfigError(PipelineError):
    kind = "config"


class ManifestNotFoundError(PipelineError):
    kind = "manifest"


class VersionNotFoundError(PipelineError):
    kind = "version"


class CommandError(PipelineError):
    def __init__(self, message: str, returncode: int):
        super().__init__(f"{message} (exit code {returncode})")
        self.returncode: int = returncode


class BuildError(CommandError):
    kind = "build"


class AuthenticationError(CommandError):
    kind = "authentication"


class TagError(CommandError):
    kind = "tag"


class PushError(CommandError):
    kind = "push"
