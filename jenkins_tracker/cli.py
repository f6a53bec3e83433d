import asyncio
from itertools import islice
from typing import Any, Coroutine, Optional, TypeVar

import click
import httpx
from pydantic import ValidationError
from rich.console import Console

from jenkins_tracker import __version__
from jenkins_tracker.client import JenkinsClient
from jenkins_tracker.config import JenkinsSettings, LogLevelType
from jenkins_tracker.exceptions import InvalidParameterException
from jenkins_tracker.log import setup_logger

console = Console()

T = TypeVar("T")


def parse_build_parameters(raw_params: tuple[str, ...]) -> dict[str, str]:
    params = {}
    for raw in raw_params:
        name, sep, value = raw.partition("=")
        if not sep or not name:
            raise InvalidParameterException(raw)
        params[name] = value
    return params


def _build_parameters_callback(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> dict[str, str]:
    try:
        return parse_build_parameters(value)
    except InvalidParameterException as e:
        raise click.BadParameter(str(e)) from e


def _load_settings(log_level: Optional[LogLevelType]) -> JenkinsSettings:
    try:
        settings = JenkinsSettings()  # type: ignore[call-arg]
    except ValidationError as e:
        missing = ", ".join(
            f"JENKINS_{str(error['loc'][0]).upper()}" for error in e.errors()
        )
        raise click.ClickException(f"Invalid Jenkins configuration: {missing}") from e

    setup_logger(log_level or settings.log_level, settings.token)
    return settings


def _run_against_jenkins(coroutine: Coroutine[Any, Any, T]) -> T:
    try:
        return asyncio.run(coroutine)
    except httpx.HTTPStatusError as e:
        raise click.ClickException(
            f"Jenkins answered {e.response.status_code} for {e.request.url}"
        ) from e
    except httpx.HTTPError as e:
        raise click.ClickException(
            f"Request to {e.request.url} failed: {e!r}"
        ) from e
    except ValidationError as e:
        raise click.ClickException(
            f"Unexpected {e.title} payload from Jenkins: {e.error_count()} invalid fields"
        ) from e


build_parameters_option = click.option(
    "-p",
    "--param",
    "params",
    multiple=True,
    callback=_build_parameters_callback,
    help="Build parameter as KEY=VALUE, can be repeated.",
)


@click.group()
@click.option(
    "-l",
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="""Set the logging level. If not specified, the JENKINS_LOG_LEVEL
            environment variable is used, and INFO when it is not set.""",
)
@click.pass_context
def cli_start(ctx: click.Context, log_level: Optional[LogLevelType]) -> None:
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@cli_start.command()
@click.argument("job")
@build_parameters_option
@click.pass_context
def trigger(ctx: click.Context, job: str, params: dict[str, str]) -> None:
    """
    Triggers a build of JOB with the given parameters.
    """
    settings = _load_settings(ctx.obj["log_level"])

    async def _trigger() -> str:
        async with JenkinsClient.from_settings(settings) as client:
            return await client.build_job(job, params)

    response = _run_against_jenkins(_trigger())
    console.print(f"Triggered build of {job}", highlight=False)
    if response.strip():
        console.print(response, markup=False, highlight=False, soft_wrap=True)


@cli_start.command()
@click.argument("job")
@build_parameters_option
@click.option(
    "-n",
    "--limit",
    "limit",
    type=click.IntRange(min=1),
    default=None,
    help="Show at most this many builds.",
)
@click.pass_context
def status(
    ctx: click.Context, job: str, params: dict[str, str], limit: Optional[int]
) -> None:
    """
    Lists the queued and recorded builds of JOB that were triggered with
    exactly the given parameters, newest first.
    """
    settings = _load_settings(ctx.obj["log_level"])

    async def _status() -> list[str]:
        async with JenkinsClient.from_settings(settings) as client:
            statuses = await client.get_build_statuses_for_job(job, params)
            return [
                ("✅ " if s.is_success else "   ") + str(s)
                for s in islice(statuses, limit)
            ]

    lines = _run_against_jenkins(_status())
    if not lines:
        console.print(f"No builds of {job} match the given parameters", highlight=False)
        return

    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


@cli_start.command()
def version() -> None:
    """
    Displays the version of the package.
    """
    console.print(__version__)
