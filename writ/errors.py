class WritError(RuntimeError):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class RecursionLimitExceededError(WritError):
    pass


class OutputPathCollisionError(WritError):
    pass


class ConfigurationError(WritError):
    pass


class NoInputFilesError(ConfigurationError):
    pass


class OutputDirectoryNotFoundError(ConfigurationError):
    pass


class SourceReadError(WritError):
    pass


class OutputWriteError(WritError):
    pass
