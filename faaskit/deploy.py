"""Outcome checks for function deployments."""

from __future__ import annotations

from collections.abc import Mapping

_OK = 200
_ACCEPTED = 202


class DeployFailedError(Exception):
    """One or more functions failed to deploy."""

    def __init__(self, status: Mapping[str, int]) -> None:
        self.status = dict(status)
        message = "\n".join(
            f"Function '{name}' failed to deploy with status code: {code}"
            for name, code in self.status.items()
        )
        super().__init__(message)


def deploy_failed(status: Mapping[str, int]) -> None:
    """Raise ``DeployFailedError`` if ``status`` records any failed function."""
    if status:
        raise DeployFailedError(status)


def bad_status_code(status_code: int) -> bool:
    """Tell whether a gateway status code means the deployment failed."""
    return status_code not in (_OK, _ACCEPTED)


def language_exists_not_dockerfile(language: str) -> bool:
    """Tell whether ``language`` names a language template other than Dockerfile."""
    return bool(language) and language.lower() != "dockerfile"