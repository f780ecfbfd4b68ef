# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. The second command writes to an output file. It does the same
thing as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

You can also run it as `python -m pipex.cli infile "cmd1" "cmd2" outfile`.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

Behaviour:

- Each command string is split on spaces, and empty pieces are dropped.
  Quoting, escaping and globbing are not supported.
- A command name that contains a `/` is used as given. Any other name is
  looked up in each directory of `PATH`, in order, and the first executable
  match is used.
- The output file is created if it does not exist, and truncated if it does.
  A new file gets mode `0644`.
- The exit status is the exit status of the second command. A second command
  killed by a signal gives status 0.
- If a command cannot be found, `pipex: <name>: command not found` is written
  to standard error and that stage gives status 127.
- If the input or output file cannot be opened, the error is reported as
  `pipex: <file>: <reason>`. The stage that needs that file is not started.
  If the output file is the one that failed, the exit status is 1.
- If `PATH` is missing from the environment, `Error: No path found` is
  written to standard error.
- If the number of arguments is not exactly four, a usage message is written
  and the exit status is 22.

## Library use

```python
import os

from pipex.cli import run_pipeline
from pipex.paths import find_path, path_cmd, split_words

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", os.environ)

print(split_words("  ls   -l ", " "))          # ['ls', '-l']
print(find_path({"PATH": "/usr/bin:/bin"}))    # ['/usr/bin', '/bin']
print(path_cmd("ls", {"PATH": "/usr/bin:/bin"}))
```

- `run_pipeline(infile, cmd1, cmd2, outfile, env=None)` runs the pipeline and
  returns the second command's exit status. If `env` is `None`, it uses
  `os.environ`.
- `path_cmd(cmd, env)` returns the resolved path, or `None` if the command
  cannot be found.
- `report_error(name, exc)` writes `pipex: <name>: <reason>` to standard
  error for an `OSError`.

## Limitations

- Exactly two commands are supported. Longer pipelines are not.
- There is no here-document input mode and no append mode for the output
  file.

## Running the tests

```sh
pip install ".[test]"
pytest
```