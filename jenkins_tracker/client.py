import asyncio
from itertools import chain
from typing import Any, Iterator, Mapping, Optional

import httpx
from loguru import logger

from jenkins_tracker.config import JenkinsSettings
from jenkins_tracker.exceptions import ClientClosedException
from jenkins_tracker.statuses import (
    matches_parameters,
    queued_statuses,
    reported_statuses,
)
from jenkins_tracker.types import BuildStatus, Job, Queue


class JenkinsClient:
    def __init__(
        self,
        jenkins_base_url: str,
        jenkins_user: str,
        jenkins_token: str,
        timeout: float = 60,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.jenkins_base_url = jenkins_base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            auth=httpx.BasicAuth(jenkins_user, jenkins_token),
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: JenkinsSettings) -> "JenkinsClient":
        return cls(
            settings.host,
            settings.user,
            settings.token,
            timeout=settings.client_timeout,
        )

    async def __aenter__(self) -> "JenkinsClient":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def _send_api_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Common method for making API requests to Jenkins.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API path relative to the Jenkins base URL
            params: Query parameters
        """
        if self.client.is_closed:
            raise ClientClosedException()

        url = f"{self.jenkins_base_url}/{endpoint.lstrip('/')}"
        logger.debug(f"Making {method} request to {url} with params {params}")

        try:
            response = await self.client.request(method=method, url=url, params=params)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error with status code: {e.response.status_code} for {method} request to {endpoint}"
            )
            raise

        except httpx.HTTPError as e:
            logger.error(f"HTTP error for {method} request to {endpoint}: {e}")
            raise

    async def build_job(
        self, job_name: str, params: Optional[Mapping[str, str]] = None
    ) -> str:
        if params:
            endpoint = f"job/{job_name}/buildWithParameters"
        else:
            endpoint = f"job/{job_name}/build"

        logger.info(f"Triggering build of job {job_name}")
        response = await self._send_api_request(
            "POST", endpoint, params=dict(params) if params else None
        )
        return response.text

    async def get_queue(self) -> Queue:
        response = await self._send_api_request("GET", "queue/api/json")
        return Queue.model_validate(response.json())

    async def get_job(self, job_name: str) -> Job:
        response = await self._send_api_request("GET", f"job/{job_name}/api/json")
        return Job.model_validate(response.json())

    async def get_build_status(self, job_name: str, build_number: int) -> BuildStatus:
        response = await self._send_api_request(
            "GET", f"job/{job_name}/{build_number}/api/json"
        )
        return BuildStatus.model_validate(response.json())

    async def _get_queued_statuses(self, job_name: str) -> list[BuildStatus]:
        return queued_statuses(await self.get_queue(), job_name)

    async def _get_reported_statuses(self, job_name: str) -> list[BuildStatus]:
        job = await self.get_job(job_name)
        return await reported_statuses(job, job_name, self.get_build_status)

    async def get_build_statuses_for_job(
        self, job_name: str, expected_params: Mapping[str, str]
    ) -> Iterator[BuildStatus]:
        """
        Statuses of the queued and recorded builds of `job_name` that were
        triggered with exactly `expected_params`.

        Queued builds come first, they have been added more recently or they
        wouldn't still be queued. Recorded builds follow, newest first. Every
        request has to succeed, a single failure fails the whole lookup.

        Returns a one-shot iterator, call again to poll again.
        """
        expected = dict(expected_params)
        queued, reported = await asyncio.gather(
            self._get_queued_statuses(job_name),
            self._get_reported_statuses(job_name),
        )
        logger.info(
            f"Found {len(queued)} queued and {len(reported)} recorded builds of job {job_name}"
        )

        return (
            status
            for status in chain(queued, reported)
            if matches_parameters(status, expected)
        )
