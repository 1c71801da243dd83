# aifilesorter

A library for sorting the contents of a folder into category folders. You
analyse a folder, get a category and a subcategory for each entry, and then
move every entry into `<folder>/<category>/<subcategory>/` (or just
`<folder>/<category>/`).

## Modules

- `aifilesorter.models` holds the data types. `FileType` is `FILE` (`"F"`) or
  `DIRECTORY` (`"D"`). `FileScanOptions` is a flag with `NONE`, `FILES` and
  `DIRECTORIES`. `FileEntry` and `CategorizedFile` are frozen dataclasses.
  The module also has these helpers:
  - `update_scan_options` switches one scan option on or off.
  - `extract_file_names` collects the names of categorized files.
  - `find_files_to_categorize` keeps the entries whose names are not already
    known.
  - `compute_files_to_sort` matches the current entries to their category
    data by name and type.
- `aifilesorter.categorize` gets the category of a single entry.
  - `categorize_file` first asks a lookup function that you supply. If the
    lookup has no answer, it asks a categorizer function that you supply.
    The categorizer runs in a background thread and has a time limit, 10
    seconds by default. If the categorizer fails or runs out of time, the
    result is `("", "")`.
  - `categorize_with_timeout` raises `CategorizationTimeout` when the time
    runs out.
  - `split_category_subcategory` splits an answer of the form
    `"Category : Subcategory"` into its two parts.
- `aifilesorter.analysis.AnalysisSession` runs one analysis of a folder.
  - It reports the entries that are already categorized and the entries that
    still need a category.
  - It categorizes the new entries one at a time, and it stops at the first
    error.
  - It then returns the category data for every entry still in the folder.
  - `stop()` asks a running analysis to finish early. A stopped run returns
    an empty list.
- `aifilesorter.movable.MovableCategorizedFile` creates the category folders
  (`create_cat_dirs`) and moves one entry into them (`move_file`). It never
  overwrites: `move_file` returns `False` if the source is missing or if the
  destination already exists. All of `dir_path`, `category`, `subcategory`
  and `file_name` must be non-empty; otherwise `ValueError` is raised.
- `aifilesorter.settings.Settings` stores the user's preferences in the
  `[Settings]` section of an INI file. The preferences are:
  - use subcategories
  - categorize files
  - categorize directories
  - sort folder
  - skipped version

  The file is kept at the path given by `define_config_path()`:
  - `~/.config/AIFileSorter/config.ini` on Linux
  - `~/Library/Application Support/AIFileSorter/config.ini` on macOS
  - `%APPDATA%\AIFileSorter\config.ini` on Windows

  You can also give a path of your own. `load()` returns `False` and keeps
  the defaults when the file cannot be read. `default_sort_folder()` returns
  the user's download folder, or the home folder if there is none.
- `aifilesorter.updater.Updater` fetches a JSON update description with
  `requests` and compares it with the running version. The description looks
  like this:

  ```json
  {"update": {"current_version": "...", "min_version": "...", "download_url": "..."}}
  ```

  - If no URL is given, it is read from the `UPDATE_SPEC_FILE_URL`
    environment variable.
  - HTTP errors and JSON that cannot be parsed raise `UpdateError`.
  - `is_update_available`, `is_update_required` and `is_update_skipped`
    report on the update that was found.
  - `skip_current_update` records the offered version in the settings and
    saves them.

  `parse_update_spec` does the parsing without any network access.
- `aifilesorter.version.Version` compares versions segment by segment.
- `aifilesorter.utils` holds small helpers:
  - `is_network_available` pings a host once.
  - `get_executable_path` returns the path of the running program.
  - `is_valid_directory` checks that a path is an existing directory.
  - `hex_to_bytes` decodes a string of hexadecimal digits.
  - `ensure_directory_exists` creates a directory if it is missing.
  - `add_to_path` appends a directory to this process's `PATH`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
import os

from aifilesorter.analysis import AnalysisSession
from aifilesorter.categorize import categorize_file
from aifilesorter.models import FileEntry, FileScanOptions, FileType
from aifilesorter.movable import MovableCategorizedFile


def scan(directory, options):
    for item in os.scandir(directory):
        kind = FileType.DIRECTORY if item.is_dir() else FileType.FILE
        wanted = FileScanOptions.DIRECTORIES if kind is FileType.DIRECTORY else FileScanOptions.FILES
        if wanted in options:
            yield FileEntry(item.path, item.name, kind)


def ask_model(name, file_type):
    return "Documents : Invoices"   # call your categorizer here


def categorize(name, file_type, report):
    return categorize_file(lambda n, t: None, ask_model, name, file_type, report)


session = AnalysisSession("/home/me/Downloads", scan, categorize=categorize,
                          report=lambda text: print(text, end=""))
for item in session.run():
    movable = MovableCategorizedFile(item.file_path, item.category, item.subcategory,
                                     item.file_name, item.type.value)
    movable.create_cat_dirs(True)
    movable.move_file(True)
```

Checking for an update:

```python
from aifilesorter.settings import Settings
from aifilesorter.updater import Updater

updater = Updater(Settings(), "1.0.0", url="https://updates.example.com/update.json")
if updater.is_update_available() and not updater.is_update_skipped():
    print(updater.update_info.download_url)
```

## Versions

A missing segment counts as zero, so `1.2` and `1.2.0` are equal:

```python
from aifilesorter.version import Version

assert Version.parse("1.2") == Version(1, 2, 0)
assert Version.parse("1.10.0") > Version.parse("1.9.9")
assert str(Version()) == "0"
```

## What the package does not do

- It has no user interface and no command to run. Dialogs, progress windows
  and menus are left to the application that uses it.
- It does not list folders by itself. `AnalysisSession` calls the `scan`
  function that you give it.
- It has no categorizer and no store of earlier results. `categorize_file`
  calls the categorizer and the lookup function that you supply.
- `Updater` only reports what it finds. It does not show a prompt, open the
  download URL or install anything.