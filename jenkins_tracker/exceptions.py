class BaseJenkinsTrackerException(Exception):
    pass


class JenkinsClientException(BaseJenkinsTrackerException):
    pass


class ClientClosedException(JenkinsClientException):
    def __init__(self) -> None:
        super().__init__("Jenkins client is closed, create a new one to send requests")


class InvalidParameterException(BaseJenkinsTrackerException, ValueError):
    def __init__(self, raw: str):
        super().__init__(f"Invalid build parameter {raw!r}, expected KEY=VALUE")
        self.raw = raw
