class TpchLoadError(Exception):
    """
    Base class for the fatal errors raised while generating and loading data.
    None of these errors are retried.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    def message(self) -> str:
        return self._message


class UsageError(TpchLoadError):
    pass


class InvalidScaleFactor(TpchLoadError):
    pass


class InvalidSplitCount(TpchLoadError):
    pass


class InvalidZipfFactor(TpchLoadError):
    pass


class MissingHostList(TpchLoadError):
    pass


class InvalidHostCount(TpchLoadError):
    pass


class RemoteDirExists(TpchLoadError):
    pass


class StagingFailure(TpchLoadError):
    """
    Used when the local working directory cannot be created or a staged file
    cannot be copied into it.
    """


class RemoteDirCreationFailure(TpchLoadError):
    pass


class InvalidConfigFile(TpchLoadError):
    """
    Used when the configuration file cannot be read or is not a YAML mapping.
    """
