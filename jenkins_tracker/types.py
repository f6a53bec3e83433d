from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SUCCESS_RESULT = "SUCCESS"
# queued builds have not run yet, so their duration is unknown
UNKNOWN_DURATION = -1


class JenkinsModel(BaseModel):
    """
    Immutable snapshot of a Jenkins API entity.

    Attributes are snake_case, the Jenkins camelCase names are kept as aliases
    so `model_dump(by_alias=True)` gives back the wire shape.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Task(JenkinsModel):
    name: str
    url: str


class Build(JenkinsModel):
    number: int
    url: str


def newest_first(build: Build) -> int:
    return -build.number


def sort_builds(builds: Iterable[Build]) -> list[Build]:
    return sorted(builds, key=newest_first)


class Param(JenkinsModel):
    name: str
    # password parameters never carry a value
    value: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def value_as_string(cls, value: Any) -> Any:
        # boolean and numeric parameters are compared in their query form
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def __str__(self) -> str:
        return f"{self.name} -> {self.value}"


class Action(JenkinsModel):
    parameters: Optional[list[Param]] = None

    def __str__(self) -> str:
        return f"Parameters({', '.join(str(p) for p in self.parameters or [])})"


class BuildStatus(JenkinsModel):
    number: int
    result: Optional[str] = None
    building: bool
    duration: Union[int, float, str, None]
    actions: list[Action] = Field(default_factory=list)
    url: str
    queued: bool = Field(default=False, exclude=True)

    @model_validator(mode="after")
    def check_building_or_queued(self) -> "BuildStatus":
        if self.building and self.queued:
            raise ValueError("Cannot both be building and queued.")
        return self

    @property
    def is_success(self) -> bool:
        return not self.building and self.result == SUCCESS_RESULT

    @property
    def friendly_duration(self) -> str:
        try:
            seconds = int(int(str(self.duration)) / 1000)
        except ValueError:
            seconds = 0

        if seconds <= 90:
            return f"Took {seconds} s."
        return f"Took {seconds // 60} min."

    def __str__(self) -> str:
        state = "BUILDING" if self.building else self.result
        return f"Build {self.number}: {state} {self.friendly_duration} ({self.url})."


class QueueItem(JenkinsModel):
    actions: list[Action] = Field(default_factory=list)
    task: Task
    id: int

    @property
    def job_name(self) -> str:
        return self.task.name

    def to_status(self) -> BuildStatus:
        # the url is fake but has to be unique per queued build
        return BuildStatus(
            number=0,
            result=f"Queued build for {self.task.name} id: {self.id}",
            building=False,
            duration=UNKNOWN_DURATION,
            actions=self.actions,
            url=f"{self.task.url}/queued/{self.id}",
            queued=True,
        )


class Queue(JenkinsModel):
    items: list[QueueItem] = Field(default_factory=list)


class Job(JenkinsModel):
    name: str
    description: Optional[str] = None
    next_build_number: int = Field(alias="nextBuildNumber")
    builds: list[Build] = Field(default_factory=list)
    queue_item: Optional[QueueItem] = Field(default=None, alias="queueItem")
    last_build: Optional[Build] = Field(default=None, alias="lastBuild")
    first_build: Optional[Build] = Field(default=None, alias="firstBuild")
