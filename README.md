# navipanel

The logic behind a keyboard-driven file manager panel, with no GUI
toolkit. It keeps a cursor over a directory listing, tracks marked
files, searches and filters names, and runs copy, cut, paste, delete,
rename, chmod, link and trash operations on the file system. It also
keeps bookmarks, reads `.desktop` entries, filters completion lists and
describes file properties.

It uses only the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `navipanel.panel`

`FilePanel(path="~", cycle=True)` shows one directory and ties the
other modules together.

- Movement: `next_item`, `prev_item` (wrapping round when `cycle` is
  true), `next_page`, `prev_page` (ten rows), `goto_first`, `goto_last`,
  `goto_item(number)`. Each returns the path now highlighted, and
  `current_item()` returns it at any time (None in an empty directory).
- Directories: `set_current_dir(path)` (`~` is expanded),
  `up_directory()` (highlights the directory just left),
  `home_directory()`, `previous_directory()`, `current_dir()`.
- Listing: `toggle_hidden_files(state=None)`, `filter(pattern)` with
  space separated glob patterns, `reset_filter()`.
- Marks: `mark_item`, `unmark_item`, `toggle_mark_item` act on the rows
  selected in visual line mode, or on the highlighted item;
  `mark_all`, `mark_inverse`, `mark_regex(pattern)`,
  `unmark_regex(pattern)`, `local_marks()`, `global_marks()`,
  `toggle_visual_line(state=None)`.
- Search: `search(text, regex=False)` (case-insensitive),
  `search_next()`, `search_prev()`, wrapping at either end.
- Operations that act on the local marks when there are any and on the
  highlighted item otherwise: `copy_dwim`, `cut_dwim`, `delete_dwim`,
  `chmod_dwim(permission)`. `paste(dest_dir=None)` copies or moves the
  registered files. `rename_item(new_name)`, `new_files(names)` and
  `new_folders(names)` work in the current directory.
- `add_hook(name, callback)` runs a callback when the panel fires
  `directory_loaded`, `directory_up`, `filter_mode_on`,
  `filter_mode_off`, `visual_line_mode_on` or `visual_line_mode_off`.
- `messages()` returns the status messages so far as `(level, text)`
  pairs, with levels `"info"`, `"warning"` and `"error"`.

### Other modules

- `navipanel.listing`: `list_directory(path, show_hidden=False,
  name_filters=None)`, `DirectoryListing` with `refresh()` and
  `index_of(name)`, the `Entry` dataclass, and `expand_home`.
- `navipanel.marks`: `MarkSet`, a set of marked paths that can also be
  read per directory (`local`, `local_count`, `clear_local`).
- `navipanel.search`: `match_names(names, text, regex=False)` and
  `SearchState`; `next` and `prev` raise `LookupError` when nothing
  matched.
- `navipanel.file_ops`: `create_files`, `create_folders`,
  `delete_paths`, `link_items` and `transfer(paths, dest_dir,
  operation)` with `OperationType.COPY` or `OperationType.CUT`. When
  some items of such a batch fail they raise `FileOperationError`,
  whose `failures` and `completed` tell which items failed and which
  succeeded. `rename_item(path, new_name, directory=None)` raises
  `ValueError` for an empty or unchanged name and `FileExistsError`
  when the name is taken. `trash_item(path, trash_root=None)` moves an
  item into a freedesktop trash directory (by default under
  `$XDG_DATA_HOME/Trash`) and writes its `.trashinfo` record.
- `navipanel.permissions`: `is_valid_permission_string`,
  `permission_mode` (turns `"755"` into a mode, `ValueError` otherwise)
  and `set_permissions`.
- `navipanel.bulk_rename`: `write_rename_list(paths, stream)` writes a
  commented `path -> ` list, `parse_rename_list(lines)` reads back the
  filled-in lines, and `apply_renames(pairs)` renames them, returning a
  `RenameOutcome` for each.
- `navipanel.bookmarks`: `BookmarkManager` holding `Bookmark`s by name,
  with `subscribe(callback)` for change notifications and
  `has_unsaved_changes()` / `mark_saved()`. `add` raises `ValueError`
  for a name in use; `remove`, `set_file` and `rename` raise `KeyError`
  for an unknown name.
- `navipanel.desktop_file`: `parse_desktop_entry(text, group)` and
  `load_desktop_file(path)`, which returns a `DesktopFile`.
- `navipanel.completion`: `CompletionList`, a substring-filtered
  completion list with a movable selection, and `apply_completion`,
  which replaces the last word of a line.
- `navipanel.properties`: `format_data_size`, `item_property`,
  `folder_info` and `describe_item`, which returns labelled rows such as
  `Name`, `Type`, `Size`, `Last modified`, `Permissions` and
  `Mime Type`.

## Example

```python
from navipanel.panel import FilePanel

panel = FilePanel("~/Documents", cycle=True)
panel.mark_item()
panel.next_item()
panel.mark_item()
print(panel.local_marks())

panel.copy_dwim()
panel.paste("/tmp")
for level, text in panel.messages():
    print(level, text)
```

## What it does not do

- There is no window, screen or command-line program; the package is a
  library to build one on.
- Bookmarks live in memory only; nothing reads or writes a bookmark
  file.
- Bulk renaming does not open an editor: the caller writes the list,
  lets the user edit it, and passes the lines back.
- Nothing opens files with other applications, mounts drives or handles
  drag and drop.