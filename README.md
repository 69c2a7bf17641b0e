# bwhdesk

`bwhdesk` is a console tool for watching and controlling VPS servers through
the provider's HTTP API (`https://api.64clouds.com/v1/`). It keeps a list of
servers, each identified by a VEID and an API key, in a JSON file. It shows
each server's status and resource usage, and it can start, stop, restart or
kill a server.

## Installation

```
pip install .
```

With the test dependencies (pytest, responses):

```
pip install .[test]
```

## Command line

```
bwhdesk --help
```

The global option `--config PATH` chooses the server-list file. It defaults
to `config.json` in the current directory. The sub-commands are:

- `bwhdesk list` prints the saved servers as `index: title`.
- `bwhdesk add VEID API_KEY` asks the API for the server's live service
  information and saves a new entry if the API accepts the credentials. The
  entry's title is `hostname [plan] vm_type`. The command prints that title.
  A VEID/API-key pair that is already saved is refused.
- `bwhdesk remove INDEX [INDEX ...]` drops the entries at those positions.
  Indexes that are out of range are ignored. It then prints what is left.
- `bwhdesk export PATH` copies the server-list file to `PATH` byte for byte.
- `bwhdesk import PATH` replaces the server-list file with the contents of
  `PATH` and prints the entries it holds.
- `bwhdesk show [INDEX]` prints a dashboard for the server at `INDEX`
  (default 0). The dashboard gives the hostname, status, node location and
  IDs, public IP address, SSH port, operating system, RAM, swap, disk and
  bandwidth usage with percentages, and the date the bandwidth counter resets
  in local time. With `--watch` it refreshes every 15 seconds until
  interrupted.
- `bwhdesk start|stop|restart|kill [INDEX]` sends that power action to the
  server at `INDEX` (default 0) and prints a confirmation.

Errors are printed to standard error, and the command exits with status 1.
Such errors are network failures, non-200 replies, duplicate entries,
rejected credentials, a missing index and file errors.

## Library use

- `bwhdesk.api.BwhClient(session=None, timeout=30.0)` makes the API calls
  `get_live_service_info`, `start`, `stop`, `restart` and `kill`. Each takes a
  VEID and an API key and returns the decoded JSON object. A call raises
  `bwhdesk.api.ApiError` when the request fails or the status is not 200.
  `build_url(call, veid, api_key)` builds a request URL.
- `bwhdesk.config.ConfigStore(path="config.json")` reads and writes the
  server list as an indented JSON array. Its methods are `load`, `save`,
  `contains`, `add`, `remove`, `export_to` and `import_from`. `add` raises
  `DuplicateEntryError` when the entry is already saved, and
  `InvalidCredentialsError` when the API reports an error. `make_entry`
  builds an entry from live service information.
- `bwhdesk.vps.parse_vps` turns an API reply into a `Vps` record. Missing or
  mistyped fields get default values.
- `bwhdesk.dashboard.build_dashboard(vps, tz=None)` formats a `Vps` as a
  `Dashboard`, and `Dashboard.render()` returns the text the `show` command
  prints.
- `bwhdesk.vpsinfo.VpsInfo` is one saved entry, with `to_json()`.
  `vps_info_from_json` builds one from a dict.
- `bwhdesk.tablemodel.VpsTableModel` is a table of entries in which each row
  can be checked. It can return the checked rows, the unchecked rows or all
  rows. `CheckBoxHeader` toggles all rows at once and shows the combined
  check state.

```python
from bwhdesk.api import BwhClient
from bwhdesk.vps import parse_vps
from bwhdesk.dashboard import build_dashboard

client = BwhClient()
reply = client.get_live_service_info("123456", api_key="placeholder")
print(build_dashboard(parse_vps(reply)).render())
```

## What it does not do

`bwhdesk` has no graphical window. Everything is done on the command line or
from Python. The table model and header classes keep state only and draw
nothing.