# shellpp

Building blocks for a small Unix shell on Linux. The package offers four
modules:

- `shellpp.wildcard`: `*` and `?` filename matching and expansion
- `shellpp.procinfo`: process statistics read from a `/proc` filesystem
- `shellpp.history`: a command history persisted to a text file
- `shellpp.jobs`: a table of background jobs that reports finished ones

## Installation

```
pip install .
```

## Wildcards

```python
from shellpp.wildcard import match, contains_wildcard, matching_filenames, substitute

match("*.py", "setup.py")        # True
match("a?c", "abc")              # True
contains_wildcard("*.txt")       # True

matching_filenames("*.txt", ".") # entries of "." whose names match
substitute("notes.txt")          # ['notes.txt'], no wildcard, unchanged
substitute("*.nothing")          # [] if nothing matches
```

`?` matches exactly one character and `*` matches any run of characters.
The directory listing used by `matching_filenames` includes `.` and `..`,
and an unreadable directory raises `OSError`.

## Process statistics

```python
from shellpp.procinfo import read_stat, read_uptime, cpu_utilization, child_pids, heuristic

stat = read_stat(1234)           # ProcStat(pid, comm, state, ppid, tty, utime, stime, start_time)
read_uptime()                    # uptime in whole seconds
cpu_utilization(1234)            # lifetime CPU use in whole percent
child_pids(1234)                 # children of every thread of the process
heuristic(1234)                  # sum of the children's CPU use
```

Every function takes a `proc_root` argument (default `/proc`), so it can be
pointed at a copied or synthetic directory tree. `heuristic` writes one
line per child (`child <pid> utilization <n>%`) to `out` (standard output
by default); if a thread's children file cannot be read it writes an error
to standard error and returns 2.

## History

```python
from shellpp.history import History

history = History(".history")
history.load()                   # creates the file if missing
history.add("ls -l")             # True
history.add("ls -l")             # False: repeats the latest entry
history.save()
list(history)                    # entries in order
```

## Background jobs

```python
import subprocess
from shellpp.jobs import JobTable

jobs = JobTable()
number = jobs.add(subprocess.Popen(["sleep", "1"]), "sleep 1")
jobs.reap()                      # prints "[1] Done\t\tsleep 1" once it has finished
```

Any object with a `pid` attribute and a `poll()` method can be tracked.
Finished jobs at the end of the table are dropped so their numbers can be
reused.

## What this package does not do

There is no interactive shell here and no command to run: the package does
not read or split command lines, run pipelines, set up redirection, or
provide `cd`, `pwd`, `exit` or other built-in commands. It supplies the
pieces listed above for a program that does.

## Running the tests

```
pip install .[test]
pytest
```