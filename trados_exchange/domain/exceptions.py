class ExchangeError(Exception):
    pass


class ContentNotFoundError(ExchangeError):
    pass


class SiteNotFoundError(ContentNotFoundError):
    def __init__(self, node_name: str) -> None:
        super().__init__(f'No site found for node name "{node_name}"')
        self.node_name = node_name


class NodeNotFoundError(ContentNotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(f'No node found at path "{path}"')
        self.path = path
