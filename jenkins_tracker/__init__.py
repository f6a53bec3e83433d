from .client import JenkinsClient
from .config import JenkinsSettings
from .types import Action, Build, BuildStatus, Job, Param, Queue, QueueItem, Task
from .version import __version__

__all__ = [
    "JenkinsClient",
    "JenkinsSettings",
    "Action",
    "Build",
    "BuildStatus",
    "Job",
    "Param",
    "Queue",
    "QueueItem",
    "Task",
    "__version__",
]
