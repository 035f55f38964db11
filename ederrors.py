class EditorError(Exception):
    ...


class TagsFileError(EditorError, OSError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read tags file {path}: {reason}")
        self.path = path
        self.reason = reason


class HostError(EditorError):
    ...
