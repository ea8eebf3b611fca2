"""Application request object, found through a root-directory strategy."""


class Request:

    def __init__(self, path: str = "/"):
        self.path = path
