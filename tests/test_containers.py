import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from ehrplus.containers import (
    DEFAULT_DOCKER_HOST,
    Container,
    ContainerMenu,
    docker_host_from_env,
    list_containers,
    parse_containers,
)

PAYLOAD = [
    {"Id": "0123456789abcdef0123456789abcdef", "Names": ["/web"]},
    {"Id": "fedcba9876543210fedcba9876543210", "Names": []},
]


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path.startswith("/containers/json"):
            body = json.dumps(PAYLOAD).encode()
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        else:
            self.send_response(404)
            self.end_headers()

    def log_message(self, *args):
        pass


@pytest.fixture
def engine():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"tcp://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_display_name_prefers_first_name():
    assert Container(id="0123456789abcdef", names=("/web", "/alias")).display_name() == "/web"


def test_display_name_falls_back_to_short_id():
    assert Container(id="0123456789abcdef").display_name() == "0123456789ab"


def test_parse_containers():
    containers = parse_containers(PAYLOAD)
    assert [c.id for c in containers] == [p["Id"] for p in PAYLOAD]
    assert containers[0].names == ("/web",)
    assert containers[1].names == ()


def test_docker_host_from_env():
    assert docker_host_from_env({}) == DEFAULT_DOCKER_HOST
    assert docker_host_from_env({"DOCKER_HOST": "tcp://localhost:2375"}) == "tcp://localhost:2375"


def test_list_containers_from_engine(engine):
    containers = list_containers(engine)
    assert containers == parse_containers(PAYLOAD)


def test_list_containers_unreachable_is_empty(tmp_path):
    assert list_containers(f"unix://{tmp_path / 'missing.sock'}") == []


def test_list_containers_unsupported_scheme_is_empty():
    assert list_containers("npipe:////./pipe/docker_engine") == []


def test_menu_navigation_is_bounded():
    menu = ContainerMenu(choices=parse_containers(PAYLOAD))
    menu.update("up")
    assert menu.cursor == 0
    menu.update("j")
    menu.update("down")
    assert menu.cursor == 1
    menu.update("k")
    assert menu.cursor == 0


def test_menu_toggle_selection():
    menu = ContainerMenu(choices=parse_containers(PAYLOAD))
    assert menu.update("enter") is False
    assert menu.selected == {0}
    menu.update(" ")
    assert menu.selected == set()


@pytest.mark.parametrize("key", ["q", "ctrl+c"])
def test_menu_quit_keys(key):
    assert ContainerMenu().update(key) is True


def test_menu_view():
    menu = ContainerMenu(choices=parse_containers(PAYLOAD))
    menu.update("enter")
    view = menu.view()
    lines = view.splitlines()
    assert lines[0] == "Docker Containers:"
    assert lines[2] == "> [✓] /web"
    assert lines[3] == "  [ ] fedcba987654"
    assert view.endswith("\nPress q to quit.\n")