from typing import Any


JENKINS_URL = "http://jenkins.example.com"


def build_status_payload(
    number: int,
    params: dict[str, Any] | None = None,
    result: str | None = "SUCCESS",
    building: bool = False,
    job: str = "build-a",
) -> dict[str, Any]:
    parameters = [
        {"_class": "hudson.model.StringParameterValue", "name": name, "value": value}
        if value is not None
        else {"_class": "hudson.model.PasswordParameterValue", "name": name}
        for name, value in (params or {}).items()
    ]
    return {
        "_class": "hudson.model.FreeStyleBuild",
        "actions": [
            {"_class": "hudson.model.ParametersAction", "parameters": parameters},
            {"_class": "hudson.model.CauseAction"},
            {},
        ],
        "building": building,
        "duration": 45000,
        "number": number,
        "result": result,
        "url": f"{JENKINS_URL}/job/{job}/{number}/",
    }


def job_payload(numbers: list[int], name: str = "build-a") -> dict[str, Any]:
    builds = [
        {"_class": "hudson.model.FreeStyleBuild", "number": n, "url": f"{JENKINS_URL}/job/{name}/{n}/"}
        for n in numbers
    ]
    return {
        "_class": "hudson.model.FreeStyleProject",
        "name": name,
        "description": "",
        "nextBuildNumber": max(numbers, default=0) + 1,
        "builds": builds,
        "queueItem": None,
        "lastBuild": builds[0] if builds else None,
        "firstBuild": builds[-1] if builds else None,
    }


def queue_payload(*items: tuple[int, str, dict[str, Any]]) -> dict[str, Any]:
    return {
        "_class": "hudson.model.Queue",
        "items": [
            {
                "_class": "hudson.model.Queue$WaitingItem",
                "id": item_id,
                "actions": [
                    {
                        "_class": "hudson.model.ParametersAction",
                        "parameters": [
                            {"name": name, "value": value}
                            for name, value in params.items()
                        ],
                    }
                ],
                "task": {
                    "_class": "hudson.model.FreeStyleProject",
                    "name": job,
                    "url": f"{JENKINS_URL}/job/{job}",
                    "color": "blue",
                },
            }
            for item_id, job, params in items
        ],
    }


