# pipex

`pipex` does what this shell construct does:

```sh
< infile cmd1 | cmd2 > outfile
```

but as a single command:

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The first command reads `infile` on its standard input. Its standard output
goes through a pipe into the second command. The second command writes to
`outfile`. `outfile` is created with mode `0777`, subject to the umask, or
truncated if it exists.

## Installing

```sh
pip install .
```

## Usage

```sh
pipex input.txt "grep hello" "wc -l" output.txt
```

Each command string is split on spaces. Quotes group words:

- text inside single or double quotes stays one word;
- the quote characters themselves are removed.

So `"awk '{print $1}'"` passes `{print $1}` to `awk` as one argument.

Each command name is looked up in this order:

1. A name that starts with `/` or `./` is used as given, if it exists and is executable.
2. Otherwise the directories in the environment's `PATH` are tried in order.

Errors are reported on standard error:

- A command that cannot be found is reported as `Command not found: <name>`.
- An input or output file that cannot be opened is reported as `Input file: <reason>` or `Output file: <reason>`.

When one side fails, the other side still runs.

`pipex` exits with status 1 if it is not given exactly four arguments.
Otherwise it exits with status 0, whatever the commands return.

## Using it from Python

```python
import os

from pipex.pipeline import run_pipeline
from pipex.resolve import CommandNotFoundError, resolve_command

status1, status2 = run_pipeline("input.txt", "grep hello", "wc -l", "output.txt", os.environ)

path, argv = resolve_command("ls -l", os.environ)
```

`run_pipeline` returns the exit status of each command. A side that could not
be started gets:

- 127 when its command was not found;
- 1 for any other failure.

`pipex.resolve` has three functions:

- `parse_command` splits a command string into words.
- `find_command` returns the path of an executable, or `None`.
- `resolve_command` returns a `(path, argv)` pair. It raises `CommandNotFoundError`, a subclass of `PipexError`, when no executable is found.

The package also has small helper modules:

- `pipex.splitting`: `split_words` and `count_words`, which split on a separator and handle quotes.
- `pipex.formatting`: `format_string` and `printf`, which support the `%c %s %d %i %u %x %X %p %%` conversions.
- `pipex.textutil`: string helpers.
- `pipex.memory`: bytearray helpers.
- `pipex.chars`: ASCII character tests and case conversion.
- `pipex.output`: writes to raw file descriptors.
- `pipex.linkedlist`: a `LinkedList` of `Node` objects.

## What it does not do

`pipex` runs exactly two commands. It has no support for:

- longer pipelines;
- here-documents;
- appending to the output file;
- shell features beyond quote grouping, such as variable expansion, globbing or escapes.

## Running the tests

```sh
pip install ".[test]"
pytest
```