# astroprompt

A library of building blocks for a shell prompt. It finds out what is going
on in a directory (which language toolchains are in use, which operation a
repository is in the middle of, which Kubernetes context is active) and
formats the answers as short strings and ANSI-styled segments.

## Installation

```
pip install astroprompt
```

To run the test suite:

```
pip install "astroprompt[test]"
pytest
```

## Modules

- `astroprompt.segment`: `Style`, a frozen dataclass of foreground and
  background colours (names, 0–255 fixed colours or RGB tuples) and text
  effects, whose `paint(text)` wraps text in escape sequences; and `Segment`,
  a named value with an optional style, with `ansi_string()` and `is_empty()`.
- `astroprompt.utils`: `read_file(path)`, and `exec_cmd(cmd, args)`, which
  runs a command and returns a `CommandOutput` (`stdout`, `stderr`), or `None`
  when the command cannot start or exits non-zero.
- `astroprompt.paths`: `truncate(dir_string, length)` keeps the last
  `length` components of a path (0 keeps it whole).
- `astroprompt.branch`: grapheme-aware `get_graphemes`, `graphemes_len` and
  `truncate_branch`; `get_hg_branch_name` and `get_hg_current_bookmark` read
  Mercurial's `.hg` files.
- `astroprompt.java_version`: `parse_jre_version`, `format_java_version` and
  `get_java_version` (which runs `java -Xinternalversion`, from `$JAVA_HOME`
  when set).
- `astroprompt.versions`: formatters for Go, Haskell, PHP, Ruby, Python and
  Terraform version output, `get_python_version`, `get_python_virtual_env`
  and `get_terraform_workspace`.
- `astroprompt.rust_toolchain`: resolves a rustup toolchain override
  (`$RUSTUP_TOOLCHAIN`, `rustup override list`, a `rust-toolchain` file) and
  `detect_rust_version(current_dir)`.
- `astroprompt.dotnet`: finds .NET project files and estimates the SDK in use
  from `global.json` pinning or the `dotnet` CLI (`estimate_dotnet_version`).
- `astroprompt.package`: `get_package_version(base_dir)` reads the version
  from `Cargo.toml`, `package.json`, `pyproject.toml` (Poetry) or
  `composer.json`, whichever is found first.
- `astroprompt.kubernetes`: `get_kube_context`, `parse_kubectl_file` and
  `find_kube_context` (from `$KUBECONFIG` or `~/.kube/config`).
- `astroprompt.gitinfo`: `RepositoryState`, `get_state_description` and
  `describe_rebase` (rebase progress from the files under `.git`), and
  `id_to_hex_abbrev`.
- `astroprompt.clock`: `format_time`, `create_offset_time_string` (raises
  `ValueError` for an offset outside -24..24 hours) and `current_time_string`.
- `astroprompt.environment`: `get_env_value`, `nix_shell_label`,
  `trim_hostname`, `parse_jobs`, `get_uid`, `should_show_username`,
  `format_kib` and `format_percent`.
- `astroprompt.catalog`: `description(module)`, `filter_prompt_order`,
  `count_wide_chars` and `display_width`.

## Examples

```python
from datetime import datetime, timezone

from astroprompt.clock import create_offset_time_string
from astroprompt.package import format_version
from astroprompt.paths import truncate

truncate("~/projects/engines/booster/rocket", 3)    # 'engines/booster/rocket'
format_version(' "0.1.0" ')                          # 'v0.1.0'

now = datetime(2014, 7, 8, 15, 36, 47, tzinfo=timezone.utc)
create_offset_time_string(now, "+9.5", "%r")         # '01:06:47 AM'
```

```python
from astroprompt.segment import Segment, Style

Segment("version", "v1.2.3", Style(foreground="green", bold=True)).ansi_string()
# '\x1b[1;32mv1.2.3\x1b[0m'
```

## What it does not do

astroprompt is a library only. It has no command to install or run, it does
not assemble or print a complete prompt, and it reads no configuration file.
It does not read Git branches, working-tree status or commit ids from a
repository itself: `gitinfo` works from a `RepositoryState` and raw commit
bytes that you supply. It does not look up the host name or system memory
figures; `trim_hostname` and `format_kib` only format values you pass in.