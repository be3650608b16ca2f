class BuildError(RuntimeError):
    pass


class UsageError(BuildError):
    pass


class DirectoryError(BuildError):
    pass


class ConfigError(BuildError):
    pass


class CompilerError(BuildError):

    def __init__(self, message, returncode=None):
        super().__init__(message)
        self.returncode = returncode
