# ncurtab

A small two-panel file manager for the terminal, with tabs. Each tab shows
two directory listings side by side. You can browse, copy or move entries
from one panel to the other, rename them and delete them.

## Installation

```
pip install .
```

The interface uses the standard `curses` module, so it needs a POSIX
terminal. There are no other dependencies.

## Usage

```
ncurtab
```

The first tab opens in your home directory, with both panels showing it.

| Key        | Action                                     |
|------------|--------------------------------------------|
| `q`        | Quit                                       |
| `t`        | New tab at the left panel's path           |
| `Tab`      | Switch to the next tab                     |
| Up / Down  | Move the cursor                            |
| `Enter`    | Enter the selected directory               |
| `F1`       | Switch the active panel                    |
| `d`        | Delete the selected entry                  |
| `r`        | Rename the selected entry                  |
| `c`        | Copy the selected entry to the other panel |
| `m`        | Move the selected entry to the other panel |
| `h`        | Show the help window                       |

Every directory other than `/` is listed with a `..` entry first; choosing it
with Enter goes to the parent directory. Delete, rename, copy and move do
nothing when the cursor is on `..`.

Deleting asks for confirmation (`y` or `n`). Renaming opens a prompt; press
Enter to confirm or Esc to cancel, and an empty name cancels too. Copy and
move place the entry, under the same name, in the directory shown by the
other panel. Directories are copied and deleted recursively; copying into an
existing directory merges into it. A move that cannot be done by renaming
(for example across file systems) is done as a copy followed by a delete.
Symbolic links are removed, not followed, when deleting.

At most 10 tabs can be open, and a panel lists at most 256 entries,
`..` included. Failed operations leave the panels unchanged; no error
message is shown.

## Using it from Python

The file operations and the tab model work without a terminal:

```python
from ncurtab.filesystem import get_directory_contents, copy_entity
from ncurtab.tabs import TabManager

for entry in get_directory_contents("/tmp"):
    print(entry.name, entry.is_dir)

manager = TabManager()
manager.add_tab("/tmp")
tab = manager.active()
tab.move_cursor(1, screen_height=24)
print(tab.current().selected())
```

- `ncurtab.filesystem`: `FileEntry`, `get_directory_contents`,
  `remove_entity`, `rename_entity`, `copy_entity` and `move_entity`. The
  last four raise `OSError` on failure.
- `ncurtab.tabs`: `Panel` (a directory, its listing, cursor and scroll
  offset), `Tab` (two panels and the actions on them, each returning `True`
  when something changed) and `TabManager`.
- `ncurtab.ui`: the curses `UI` class, plus `format_entry_name` and
  `truncate_path` for laying out text.
- `ncurtab.app`: `handle_key`, which applies one key press to a
  `TabManager`, `run`, the main loop on a curses screen, and `main`, the
  command's entry point.

## Tests

```
pip install .[test]
pytest
```