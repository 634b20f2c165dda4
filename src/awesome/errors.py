"""Error taxonomy shared by the plugin registrar and report aggregator."""


class AwesomeError(Exception):
    """Base class for all awesome errors."""


class DirectoryUnreadable(AwesomeError):
    """A directory could not be listed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read directory {path}: {reason}")


class DecodeFailure(AwesomeError):
    """A report file could not be read or parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to decode {path}: {reason}")


class SinkWriteFailure(AwesomeError):
    """An output sink could not write the aggregate."""

    def __init__(self, sink: str, path, reason: str):
        self.sink = sink
        self.path = path
        self.reason = reason
        super().__init__(f"{sink} output to {path} failed: {reason}")


class PluginLaunchFailure(AwesomeError):
    """A plugin executable could not be started."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error executing plugin {path}: {reason}")
