from ...domain.exceptions import ExchangeError


class ExchangeInfrastructureError(ExchangeError):
    pass


class ExportWriteError(ExchangeInfrastructureError):
    pass


class ExportFormatError(ExchangeInfrastructureError):
    pass


class FormatVersionMismatchError(ExportFormatError):
    def __init__(self, found: str | None, expected: str) -> None:
        super().__init__(
            f'Export format version "{found}" is not supported, expected "{expected}"'
        )
        self.found = found
        self.expected = expected


class SnapshotError(ExchangeInfrastructureError):
    pass
