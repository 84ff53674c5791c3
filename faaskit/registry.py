"""Docker client configuration and registry credentials for images."""

from __future__ import annotations

import base64
import json
import os
import subprocess
from dataclasses import dataclass, field

from faaskit.execution import CommandError

CONFIG_FILE_NAME = "config.json"
CONFIG_FILE_DIR = ".docker"
DEFAULT_DOCKER_REGISTRY = "https://index.docker.io/v1/"


@dataclass
class AuthConfig:
    """Credentials stored for one registry, as a base64 ``user:secret`` string."""

    auth: str = ""


@dataclass
class DockerConfig:
    """The parts of the Docker client configuration used for registry auth."""

    auth_configs: dict[str, AuthConfig] = field(default_factory=dict)
    credentials_store: str = ""

    @classmethod
    def from_dict(cls, document: dict) -> DockerConfig:
        """Build a configuration from a decoded ``config.json`` document."""
        auths = document.get("auths") or {}
        if not isinstance(auths, dict):
            raise ValueError("docker config: 'auths' must be an object")
        configs: dict[str, AuthConfig] = {}
        for registry, entry in auths.items():
            entry = entry or {}
            if not isinstance(entry, dict):
                raise ValueError(f"docker config: entry for {registry} must be an object")
            auth = entry.get("auth") or ""
            if not isinstance(auth, str):
                raise ValueError(f"docker config: auth for {registry} must be a string")
            configs[registry] = AuthConfig(auth=auth)
        store = document.get("credsStore") or ""
        if not isinstance(store, str):
            raise ValueError("docker config: 'credsStore' must be a string")
        return cls(auth_configs=configs, credentials_store=store)


def _default_config_dir() -> str:
    configured = os.environ.get("DOCKER_CONFIG", "")
    if configured:
        return configured
    return os.path.join(os.path.expanduser("~"), CONFIG_FILE_DIR)


def _helper_credentials(store: str, server: str) -> tuple[str, str]:
    command = [f"docker-credential-{store}", "get"]
    try:
        result = subprocess.run(
            command,
            input=server.encode("utf-8"),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"cannot run credential helper {command[0]}: {exc}") from exc
    output = result.stdout.decode("utf-8", errors="replace").strip()
    if result.returncode != 0:
        raise CommandError(output or f"credential helper {command[0]} failed")
    try:
        document = json.loads(output)
    except json.JSONDecodeError as exc:
        raise CommandError(f"credential helper {command[0]} returned invalid output") from exc
    return str(document.get("Username", "")), str(document.get("Secret", ""))


def read_docker_config(config_dir: str | os.PathLike | None = None) -> DockerConfig:
    """Read ``config.json`` from ``config_dir`` (default ``$DOCKER_CONFIG`` or ``~/.docker``).

    When a credentials store is configured, registries without an inline
    ``auth`` value get one built from the store's helper program. Raises
    ``OSError`` when the file cannot be read, ``ValueError`` when it is not
    valid, and ``CommandError`` when the helper fails.
    """
    directory = os.fspath(config_dir) if config_dir else _default_config_dir()
    filename = os.path.join(directory, CONFIG_FILE_NAME)
    with open(filename, encoding="utf-8") as handle:
        document = json.load(handle)
    if not isinstance(document, dict):
        raise ValueError(f"docker config {filename} must hold a JSON object")
    config = DockerConfig.from_dict(document)

    if config.credentials_store:
        for registry, entry in config.auth_configs.items():
            username, secret = _helper_credentials(config.credentials_store, registry)
            if not entry.auth:
                raw = f"{username}:{secret}".encode("utf-8")
                entry.auth = base64.b64encode(raw).decode("ascii")
    return config


def registry_auth(config: DockerConfig, image: str) -> str:
    """Return the stored auth string for the registry ``image`` is pulled from.

    Images without a ``/`` are local and need none. An image of the form
    ``registry/user/image`` or ``registry.host/image`` uses that registry;
    any other falls back to Docker Hub.
    """
    if "/" not in image:
        return ""
    if not config.auth_configs:
        return ""

    parts = image.split("/")
    registry = ""
    if len(parts) > 2:
        registry = parts[0]
    elif "." in parts[0] or ":" in parts[0]:
        registry = parts[0]

    if registry:
        return config.auth_configs.get(registry, AuthConfig()).auth
    hub = config.auth_configs.get(DEFAULT_DOCKER_REGISTRY, AuthConfig()).auth
    return hub