# ehrplus

`ehrplus` provides the `ehrplus-cli` command. It is a small terminal tool that does three things:

- **Loads configuration.** Settings come from an optional YAML file. Environment variables override them.
- **Picks containers.** It shows a checklist of the running Docker containers.
- **Runs an interactive demo.** A short form comes first, then a menu of demo actions. One action writes a row to a SQLite database.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Usage

```
ehrplus-cli --help
```

If you run `ehrplus-cli` without a sub-command, it prints the help text.

### Global options

- `--config PATH`
  - Reads configuration from PATH. The file must end in `.yaml`, `.yml` or `.json`.
  - If you leave the option out, the tool looks in your home directory for the first of these that exists: `.ehrplus-cli.yaml`, `.ehrplus-cli.yml`, `.ehrplus-cli.json`, `.ehrplus-cli`.
  - When a file is read, `Using config file: <path>` goes to standard error.
  - A file that is missing or cannot be parsed is ignored without an error.
- `-t`, `--toggle`: a boolean flag accepted by the root command.

### Commands

#### `ehrplus-cli system`

Prints `system called`.

#### `ehrplus-cli version`

Asks the Docker engine for its running containers (`GET /containers/json`) and shows them as a checklist.

- **Engine address.** It is taken from `DOCKER_HOST`, which may be `unix://`, `tcp://`, `http://` or `https://`. If `DOCKER_HOST` is not set, the tool uses `unix:///var/run/docker.sock`.
- **Unreachable engine.** If the engine cannot be reached, the list is empty.
- **Entry names.** Each container is shown by its first name. If it has no name, the first 12 characters of its ID are shown instead.

| Key | Action |
| --- | --- |
| `up` or `k` | move up |
| `down` or `j` | move down |
| `enter` or space | mark or unmark the entry |
| `q` or `ctrl+c` | quit |

#### `ehrplus-cli demo`

1. **The form.** It asks three things:
   - your name;
   - an environment: `dev`, `staging` or `prod`, default `dev`;
   - whether to continue, default no.
2. **The reply.** If you confirm, it prints `Hello <name>! Running demo in <environment> environment.` If you do not, it prints `Demo cancelled.` The menu opens either way.
3. **The menu.** It lists four entries:
   - **Database Demo**: creates a `users` table in `demo.db` in the current directory, if the table is missing, and inserts a row named `Demo User`.
   - **SSH Demo**: logs a message that a connection was simulated.
   - **Form Demo**: logs a message that the form demo completed.
   - **Styling Demo**: has no action.

Menu keys:

| Key | Action |
| --- | --- |
| `up`/`k`, `down`/`j` | move the highlight |
| `home`/`g`, `end`/`G` | jump to the first or last entry |
| `enter` | run the highlighted entry |
| `q` or `esc` | leave the menu |
| `ctrl+c` | show `Goodbye!` and leave |

After `enter`, the screen shows that the chosen entry completed. The action itself runs in the background about two seconds later. Its log lines go to standard error with a timestamp.

## Library use

Each module can be used on its own:

- **`ehrplus.config`**:
  - `load_config(config_file, environ, home)` returns a `Settings`.
  - `Settings.get(key, default)` looks up a dotted, case-insensitive key. An environment variable named after the upper-cased key takes precedence.
  - `default_config_path(home)` finds the config file in a directory.
- **`ehrplus.containers`**:
  - `Container` is one container. `Container.display_name()` gives the name shown in the list.
  - `parse_containers(payload)` builds containers from the engine's JSON.
  - `docker_host_from_env(environ)` works out the engine address.
  - `list_containers(docker_host)` asks the engine for the containers.
  - `ContainerMenu` holds the checklist state. Use `update(key)` and `view()`.
- **`ehrplus.demo`**:
  - `MenuItem` and `demo_items()` describe the menu entries.
  - `DemoMenu` holds the menu state. Use `update(key)`, `finish_action()` and `view()`.
  - `FormAnswers` and `greeting(answers)` cover the form and its reply.
  - `perform_action(action, db_path)` runs an action and returns the message it logged.

## What it does not do

- **No full-screen interface.** The menus are plain text. They are redrawn after each key press, with no colours or styled layout, and the Styling Demo entry shows nothing.
- **No real SSH connection.** The SSH Demo only logs a message.
- **No action on stored settings.** Configuration is loaded, and the file that was used is reported, but no command acts on its values.
- **No action on marked containers.** The `version` command only marks entries in its list and does nothing with them.