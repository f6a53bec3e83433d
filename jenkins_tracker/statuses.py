import asyncio
from typing import Awaitable, Callable, Mapping

from loguru import logger

from jenkins_tracker.types import BuildStatus, Job, Queue, sort_builds

FetchBuildStatus = Callable[[str, int], Awaitable[BuildStatus]]


def queued_statuses(queue: Queue, job_name: str) -> list[BuildStatus]:
    """
    Synthetic statuses for the queue items of `job_name`, in queue order.

    Jenkins lists the most recently enqueued item first, so the relative order
    of the queue is kept as is.
    """
    return [item.to_status() for item in queue.items if item.job_name == job_name]


async def reported_statuses(
    job: Job, job_name: str, fetch_status: FetchBuildStatus
) -> list[BuildStatus]:
    """
    Fetch the status of every recorded build of the job, newest build first.

    All requests run concurrently; `asyncio.gather` keeps the results in the
    order the builds were sorted in and fails as soon as any fetch fails.
    """
    builds = sort_builds(job.builds)
    logger.debug(f"Fetching status of {len(builds)} builds of job {job_name}")
    return list(
        await asyncio.gather(
            *(fetch_status(job_name, build.number) for build in builds)
        )
    )


def observed_parameters(
    status: BuildStatus, expected_params: Mapping[str, str]
) -> dict[str, str]:
    """
    The parameters of `status` that can be compared with `expected_params`.

    Hidden values never match. With no expected parameters every parameter
    carrying a value is observed, so an empty expectation only admits builds
    without visible parameters.
    """
    return {
        param.name: param.value
        for action in status.actions
        for param in action.parameters or []
        if param.value is not None
        and (not expected_params or param.name in expected_params)
    }


def matches_parameters(status: BuildStatus, expected_params: Mapping[str, str]) -> bool:
    return observed_parameters(status, expected_params) == dict(expected_params)
