"""Docker container listing and the interactive selection menu."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

DEFAULT_DOCKER_HOST = "unix:///var/run/docker.sock"


@dataclass(frozen=True)
class Container:
    """A running container as reported by the Docker engine."""

    id: str
    names: tuple[str, ...] = ()

    def display_name(self) -> str:
        """The first name if there is one, otherwise the short id."""
        return self.names[0] if self.names else self.id[:12]


def parse_containers(payload: Iterable[Mapping[str, Any]]) -> list[Container]:
    """Build containers from the engine's JSON list."""
    return [
        Container(id=entry.get("Id", ""), names=tuple(entry.get("Names") or ()))
        for entry in payload
    ]


def docker_host_from_env(environ: Mapping[str, str] | None = None) -> str:
    """The engine address from DOCKER_HOST, or the local socket."""
    env = os.environ if environ is None else environ
    return env.get("DOCKER_HOST") or DEFAULT_DOCKER_HOST


def _client(docker_host: str) -> httpx.Client:
    if docker_host.startswith("unix://"):
        transport = httpx.HTTPTransport(uds=docker_host[len("unix://"):])
        return httpx.Client(transport=transport, base_url="http://docker")
    if docker_host.startswith("tcp://"):
        return httpx.Client(base_url="http://" + docker_host[len("tcp://"):])
    if docker_host.startswith(("http://", "https://")):
        return httpx.Client(base_url=docker_host)
    raise ValueError(f"unsupported docker host: {docker_host}")


def list_containers(docker_host: str | None = None) -> list[Container]:
    """List running containers; any failure yields an empty list."""
    host = docker_host or docker_host_from_env()
    try:
        with _client(host) as client:
            response = client.get("/containers/json")
            response.raise_for_status()
            payload = response.json()
    except (httpx.HTTPError, ValueError, OSError):
        return []
    if not isinstance(payload, list):
        return []
    return parse_containers(payload)


@dataclass
class ContainerMenu:
    """Cursor-driven checklist over a list of containers."""

    choices: list[Container] = field(default_factory=list)
    cursor: int = 0
    selected: set[int] = field(default_factory=set)

    def update(self, key: str) -> bool:
        """Handle a key press; return True when the menu should close."""
        if key in ("ctrl+c", "q"):
            return True
        if key in ("up", "k"):
            if self.cursor > 0:
                self.cursor -= 1
        elif key in ("down", "j"):
            if self.cursor < len(self.choices) - 1:
                self.cursor += 1
        elif key in ("enter", " "):
            self.selected ^= {self.cursor}
        return False

    def view(self) -> str:
        rows = []
        for index, choice in enumerate(self.choices):
            cursor = ">" if index == self.cursor else " "
            checked = "✓" if index in self.selected else " "
            rows.append(f"{cursor} [{checked}] {choice.display_name()}\n")
        return "Docker Containers:\n\n" + "".join(rows) + "\nPress q to quit.\n"